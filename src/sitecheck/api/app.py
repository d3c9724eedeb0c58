# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sitecheck import __version__
from sitecheck.api.middleware import RequestMiddleware
from sitecheck.api.routes import cache, health, sitecheck


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    from sitecheck.cache.manager import get_cache_store, reset_cache_store

    yield

    await get_cache_store().close()
    reset_cache_store()


def create_app() -> FastAPI:
    app = FastAPI(
        title="sitecheck",
        description="Remote malware-scan reports for the site security dashboard",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.include_router(health.router, prefix="/api/v1", tags=["health"])
    app.include_router(sitecheck.router, prefix="/api/v1", tags=["sitecheck"])
    app.include_router(cache.router, prefix="/api/v1", tags=["cache"])
    app.add_middleware(RequestMiddleware)

    return app
