# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from sitecheck.cache.manager import CacheStore
from sitecheck.cache.memory import MemoryCacheBackend
from sitecheck.core.config import Settings

SAMPLE_SCAN: dict[str, Any] = {
    "SCAN": {
        "SITE": ["http://example.com"],
        "DOMAIN": ["example.com"],
        "IP": ["192.0.2.10"],
        "HOSTING": ["ExampleHost"],
        "CMS": ["WordPress"],
    },
    "SYSTEM": {
        "NOTICE": ["Firewall: not detected"],
        "INFO": ["Redirects to: https://example.com/"],
    },
    "WEBAPP": {
        "VERSION": ["WordPress version: 4.7.2"],
        "WARN": ["WordPress outdated: update to 4.9"],
    },
    "OUTDATEDSCAN": [
        ["WordPress", "4.7.2", "Update to 4.9.8"],
        ["incomplete"],
    ],
    "MALWARE": {
        "WARN": [
            [
                "XSS attack: http://evil.example/page",
                "Type-A. Details: http://docs.example/a\npayload-blob",
            ],
        ],
    },
    "BLACKLIST": {
        "INFO": [
            [
                "Domain clean by Google Safe Browsing: example.com",
                "https://safebrowsing.example/?site=example.com",
            ],
            [
                "Domain clean on the Norton Safe Web: example.com",
                "https://safeweb.example/report?url=example.com",
            ],
        ],
        "WARN": [
            [
                "Domain blacklisted by McAfee SiteAdvisor: example.com",
                "https://siteadvisor.example/sites/example.com",
            ],
        ],
    },
    "LINKS": {
        "URL": ["http://example.com/about", "http://example.com/contact"],
        "IFRAME": ["http://ads.example/frame"],
        "JSLOCAL": ["http://example.com/app.js", "http://example.com/vendor.js"],
        "JSEXTERNAL": ["https://cdn.example/lib.js"],
    },
    "RECOMMENDATIONS": [
        ["Security headers", "Missing X-Frame-Options", "https://docs.example/xfo"],
        ["Incomplete", "entry"],
    ],
}


class FakeClock:
    """Settable wall clock for cache expiry tests."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSiteCheckClient:
    """Stands in for :class:`SiteCheckClient`; records every scan request."""

    def __init__(self, result: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.result = result if result is not None else copy.deepcopy(SAMPLE_SCAN)
        self.error = error
        self.calls: list[tuple[str, bool]] = []

    async def request_scan(self, domain: str, force_fresh: bool = True) -> dict[str, Any]:
        self.calls.append((domain, force_fresh))
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.result)


@pytest.fixture
def scan_data() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_SCAN)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        site_domain="example.com",
        platform_version="6.4.2",
        cache_backend="memory",
        cache_lifetime=1200,
        _env_file=None,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache_store(clock: FakeClock) -> CacheStore:
    return CacheStore(backend=MemoryCacheBackend(max_size=128), clock=clock)


@pytest.fixture(autouse=True)
def _clear_cache():
    """Reset the cache store singleton between tests."""
    from sitecheck.cache.manager import reset_cache_store

    reset_cache_store()
    yield
    reset_cache_store()


@pytest.fixture
def make_client():
    """Factory for fake scan-service clients."""
    return FakeSiteCheckClient
