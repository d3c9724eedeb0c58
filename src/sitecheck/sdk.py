# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding sitecheck in other tools.

Usage::

    from sitecheck import collect_report, collect_report_sync

    # Synchronous (blocking)
    report = collect_report_sync("example.com")
    print(report.malware.title, report.blacklist.title)

    # Async, scanning the configured site domain
    report = await collect_report()
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from sitecheck.core.config import Settings, get_settings

if TYPE_CHECKING:
    from sitecheck.cache.manager import CacheStore
    from sitecheck.report.views import SiteCheckReport

logger = logging.getLogger("sitecheck.sdk")


async def collect_report(
    domain: str | None = None,
    *,
    settings: Settings | None = None,
    cache: CacheStore | None = None,
) -> SiteCheckReport:
    """Run one render's worth of report collection.

    Parameters
    ----------
    domain:
        Scan this domain instead of the configured site domain.  Bypasses
        the cached result of the site domain.
    settings:
        Optional ``Settings`` override; falls back to ``get_settings()``.
    cache:
        Cache store; defaults to the process-wide singleton.
    """
    from sitecheck.report.normalizer import ReportNormalizer
    from sitecheck.scanner.collaborators import CollectingErrorReporter
    from sitecheck.scanner.orchestrator import ScanOrchestrator

    settings = settings or get_settings()
    reporter = CollectingErrorReporter()
    orchestrator = ScanOrchestrator(
        settings=settings,
        cache=cache,
        reporter=reporter,
        override_domain=domain,
    )
    report = await ReportNormalizer(orchestrator).full_report()
    report.errors = list(reporter.messages)
    return report


def collect_report_sync(
    domain: str | None = None,
    *,
    settings: Settings | None = None,
) -> SiteCheckReport:
    """Synchronous wrapper around :func:`collect_report`."""
    return asyncio.run(collect_report(domain, settings=settings))
