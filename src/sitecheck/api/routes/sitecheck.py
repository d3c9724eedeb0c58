# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SiteCheck report endpoints.

Every request is one render: it gets its own orchestrator, so a request
triggers at most one scan however many views it asks for.  Scan failures
never surface as HTTP errors; the views fall back to their defaults and
the failure message is returned in ``errors``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from sitecheck.api.auth import require_api_key
from sitecheck.report.normalizer import ReportNormalizer
from sitecheck.report.views import ResourceKind, SiteCheckReport
from sitecheck.scanner.collaborators import CollectingErrorReporter
from sitecheck.scanner.orchestrator import ScanOrchestrator

router = APIRouter()


class ReportView(StrEnum):
    DETAILS = "details"
    MALWARE = "malware"
    BLACKLIST = "blacklist"
    RECOMMENDATIONS = "recommendations"
    IFRAMES = "iframes"
    LINKS = "links"
    SCRIPTS = "scripts"


class ViewResponse(BaseModel):
    view: ReportView
    target: str
    data: dict[str, Any]
    errors: list[str] = Field(default_factory=list)


@dataclass
class Render:
    normalizer: ReportNormalizer
    reporter: CollectingErrorReporter


async def get_render(
    s: Annotated[
        str | None,
        Query(description="Scan this domain instead of the site's own; bypasses the cache"),
    ] = None,
) -> Render:
    reporter = CollectingErrorReporter()
    orchestrator = ScanOrchestrator(reporter=reporter, override_domain=s)
    return Render(normalizer=ReportNormalizer(orchestrator), reporter=reporter)


async def _project(normalizer: ReportNormalizer, view: ReportView) -> BaseModel:
    if view is ReportView.DETAILS:
        return await normalizer.details()
    if view is ReportView.MALWARE:
        return await normalizer.malware()
    if view is ReportView.BLACKLIST:
        return await normalizer.blacklist()
    if view is ReportView.RECOMMENDATIONS:
        return await normalizer.recommendations()
    return await normalizer.resources(ResourceKind(view.value))


@router.get("/sitecheck", response_model=SiteCheckReport)
async def full_report(
    render: Render = Depends(get_render),
    _auth: str = Depends(require_api_key),
) -> SiteCheckReport:
    """Return every report view for the site (or the ``s`` override domain)."""
    report = await render.normalizer.full_report()
    report.errors = list(render.reporter.messages)
    return report


@router.get("/sitecheck/{view}", response_model=ViewResponse)
async def report_view(
    view: ReportView,
    render: Render = Depends(get_render),
    _auth: str = Depends(require_api_key),
) -> ViewResponse:
    """Return a single report view."""
    projected = await _project(render.normalizer, view)
    return ViewResponse(
        view=view,
        target=render.normalizer.orchestrator.target,
        data=projected.model_dump(mode="json"),
        errors=list(render.reporter.messages),
    )
