# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Report normalizer: widget-facing access to every report view.

Each method fetches the scan document through the render's
:class:`~sitecheck.scanner.orchestrator.ScanOrchestrator` and projects it.
However many methods a page calls, the orchestrator issues at most one
scan request; when the scan fails every method returns its default view.
"""

from __future__ import annotations

import logging

from sitecheck.models.document import ScanDocument
from sitecheck.report.blacklist import build_blacklist_status
from sitecheck.report.details import build_details
from sitecheck.report.malware import build_malware_findings
from sitecheck.report.recommendations import build_recommendations
from sitecheck.report.resources import BUILDERS, build_iframes, build_links, build_scripts
from sitecheck.report.views import (
    BlacklistView,
    DetailsView,
    MalwareView,
    RecommendationsView,
    ResourceInventory,
    ResourceKind,
    SiteCheckReport,
)
from sitecheck.scanner.orchestrator import ScanOrchestrator

logger = logging.getLogger("sitecheck.report.normalizer")


class ReportNormalizer:
    def __init__(self, orchestrator: ScanOrchestrator) -> None:
        self._orchestrator = orchestrator

    @property
    def orchestrator(self) -> ScanOrchestrator:
        return self._orchestrator

    async def _document(self) -> ScanDocument | None:
        return await self._orchestrator.scan_and_collect()

    async def details(self) -> DetailsView:
        document = await self._document()
        return build_details(document, self._orchestrator.site.platform_version())

    async def malware(self) -> MalwareView:
        return build_malware_findings(await self._document())

    async def blacklist(self) -> BlacklistView:
        return build_blacklist_status(await self._document())

    async def recommendations(self) -> RecommendationsView:
        return build_recommendations(await self._document())

    async def iframes(self) -> ResourceInventory:
        return build_iframes(await self._document())

    async def links(self) -> ResourceInventory:
        return build_links(await self._document())

    async def scripts(self) -> ResourceInventory:
        return build_scripts(await self._document())

    async def resources(self, kind: ResourceKind) -> ResourceInventory:
        return BUILDERS[kind](await self._document())

    async def full_report(self, errors: list[str] | None = None) -> SiteCheckReport:
        """Build every view in one go, the way the dashboard page does."""
        details = await self.details()
        report = SiteCheckReport(
            target=self._orchestrator.target,
            scanned=await self._document() is not None,
            details=details,
            malware=await self.malware(),
            blacklist=await self.blacklist(),
            recommendations=await self.recommendations(),
            iframes=await self.iframes(),
            links=await self.links(),
            scripts=await self.scripts(),
            errors=list(errors or []),
        )
        logger.debug(
            "Built report for %s (scanned=%s, state=%s)",
            report.target,
            report.scanned,
            self._orchestrator.state,
        )
        return report
