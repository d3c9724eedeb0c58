# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Scan orchestrator: the single entry point to scan data during a render.

Every report widget on the dashboard asks the orchestrator for the scan
document.  The orchestrator answers from the cache when it can and
otherwise issues at most ``max_scan_attempts`` requests to the scan
service per render.  When the first request fails the remaining widgets
get ``None`` straight away instead of each waiting for its own timeout.

Build a new orchestrator for every render (page load or API request);
the attempt counter lives on the instance.
"""

from __future__ import annotations

import logging
from typing import Any

from sitecheck.cache.manager import CacheStore, get_cache_store
from sitecheck.core.config import Settings, get_settings
from sitecheck.core.constants import CACHE_KEY, CACHE_NAMESPACE, ERROR_PREFIX, ScanState
from sitecheck.core.exceptions import ScanServiceError
from sitecheck.gateway.client import SiteCheckClient
from sitecheck.models.document import ScanDocument
from sitecheck.scanner.collaborators import (
    ErrorReporter,
    LoggingErrorReporter,
    SettingsSiteIdentity,
    SiteIdentity,
    normalize_domain,
)

logger = logging.getLogger("sitecheck.scanner.orchestrator")


def scan_cache_key(override_domain: str | None = None) -> str:
    """Cache key for the site's own scan, or for a scan of *override_domain*."""
    domain = normalize_domain(override_domain)
    return f"{CACHE_KEY}:{domain}" if domain else CACHE_KEY


class ScanOrchestrator:
    """Decides between cached results, a fresh scan, or an early failure.

    Parameters
    ----------
    settings:
        Optional ``Settings`` override; falls back to ``get_settings()``.
    cache:
        Cache store; defaults to the process-wide singleton.
    client:
        Scan-service client; built from settings when omitted.
    reporter:
        Receives one message per failed scan attempt.
    site:
        Supplies the site's own domain.
    override_domain:
        Scan this domain instead of the site's own.  Skips the cache read;
        the result is cached under a key of its own.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        cache: CacheStore | None = None,
        client: SiteCheckClient | None = None,
        reporter: ErrorReporter | None = None,
        site: SiteIdentity | None = None,
        override_domain: str | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._cache = cache or get_cache_store()
        self._client = client or SiteCheckClient(
            base_url=self._settings.scan_service_url,
            timeout=self._settings.scan_timeout,
        )
        self._reporter = reporter or LoggingErrorReporter()
        self._site = site or SettingsSiteIdentity(self._settings)
        self._override = normalize_domain(override_domain)
        self._result: ScanDocument | None = None

        self.attempts = 0
        self.state = ScanState.IDLE
        self.last_error: str | None = None

    @property
    def site(self) -> SiteIdentity:
        return self._site

    @property
    def is_override(self) -> bool:
        return bool(self._override)

    @property
    def target(self) -> str:
        return self._override or normalize_domain(self._site.domain())

    @property
    def cache_key(self) -> str:
        return scan_cache_key(self._override)

    async def scan_and_collect(self) -> ScanDocument | None:
        """Return the scan document for this render, or ``None`` on failure.

        Never raises: transport and service errors are reported once
        through the error reporter and turn into ``None``.
        """
        if self._result is not None:
            return self._result

        if not self._override:
            self.state = ScanState.CACHE_CHECK
            cached = await self._read_cache()
            if cached:
                self.state = ScanState.CACHE_HIT
                self._result = ScanDocument.from_raw(cached)
                return self._result

        if self.attempts >= self._settings.max_scan_attempts:
            self.state = ScanState.FAILED
            logger.debug("Scan attempt limit reached for this render; skipping request")
            return None

        self.attempts += 1
        self.state = ScanState.REQUESTING
        target = self.target

        try:
            raw = await self._client.request_scan(target, force_fresh=self._settings.scan_force_fresh)
        except ScanServiceError as exc:
            self.state = ScanState.FAILED
            self.last_error = str(exc)
            logger.warning(
                "SiteCheck scan of %r failed: %s", target, exc, extra={"target": target}
            )
            self._reporter.report_error(f"{ERROR_PREFIX}{exc}")
            return None

        await self._write_cache(raw)
        self.state = ScanState.SUCCESS
        self._result = ScanDocument.from_raw(raw)
        return self._result

    async def _read_cache(self) -> dict[str, Any] | None:
        try:
            return await self._cache.get(
                CACHE_NAMESPACE,
                self.cache_key,
                self._settings.cache_lifetime,
                dict[str, Any],
            )
        except Exception:
            logger.debug("Cache lookup failed, proceeding with scan", exc_info=True)
            return None

    async def _write_cache(self, raw: dict[str, Any]) -> None:
        try:
            await self._cache.set(CACHE_NAMESPACE, self.cache_key, raw)
        except Exception:
            logger.warning("Could not cache scan results for %s", self.target, exc_info=True)
