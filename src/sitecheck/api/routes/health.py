# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Liveness probe."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from sitecheck import __version__
from sitecheck.core.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    cache_backend: str
    scan_service: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report the running version and which cache and scan service it uses.

    Never contacts the scan service itself.
    """
    settings = get_settings()
    return HealthResponse(
        status="ok",
        service="sitecheck",
        version=__version__,
        cache_backend=settings.cache_backend,
        scan_service=settings.scan_service_url,
    )
