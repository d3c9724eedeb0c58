# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Endpoints for inspecting and dropping cached scan results."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from sitecheck.api.auth import require_api_key
from sitecheck.cache.manager import get_cache_store
from sitecheck.core.constants import CACHE_NAMESPACE
from sitecheck.scanner.orchestrator import scan_cache_key

router = APIRouter(dependencies=[Depends(require_api_key)])


class CacheClearResponse(BaseModel):
    cleared: int
    message: str


class CacheStatsResponse(BaseModel):
    hits: int
    misses: int
    total: int
    hit_rate: float
    size: int


@router.post("/cache/clear", response_model=CacheClearResponse)
async def clear_cache(
    s: Annotated[
        str | None,
        Query(description="Only forget the cached scan of this override domain"),
    ] = None,
) -> CacheClearResponse:
    """Forget cached scans so the next render asks the scan service again."""
    store = get_cache_store()
    if s:
        key = scan_cache_key(s)
        cleared = int(await store.delete(CACHE_NAMESPACE, key))
        return CacheClearResponse(cleared=cleared, message=f"Forgot cached scan {key}")

    cleared = await store.clear(CACHE_NAMESPACE)
    return CacheClearResponse(cleared=cleared, message=f"Forgot {cleared} cached scans")


@router.get("/cache/stats", response_model=CacheStatsResponse)
async def cache_stats() -> CacheStatsResponse:
    store = get_cache_store()
    return CacheStatsResponse(**store.stats.to_dict(), size=await store.size())
