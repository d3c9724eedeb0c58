# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Async HTTP client for the SiteCheck remote malware scanner.

SiteCheck reads the source of a website's home page and linked sub-pages,
matches it against malware signatures, and checks a list of blacklist
services.  A scan usually takes around twenty seconds, so the client
allows a generous timeout.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from sitecheck import __version__
from sitecheck.core.constants import FROM_PLUGIN_MARKER, Section
from sitecheck.core.exceptions import ApplicationError, InvalidTargetError, TransportError

logger = logging.getLogger("sitecheck.gateway.client")

BASE_URL = "https://sitecheck.sucuri.net/"
_TIMEOUT = 60.0
_USER_AGENT = f"sitecheck/{__version__}"


def _service_error(body: object) -> str | None:
    """Return the joined ``SYSTEM.ERROR`` text, or ``None`` if there is none."""
    if not isinstance(body, dict):
        return None
    system = body.get(Section.SYSTEM.value)
    if not isinstance(system, dict) or "ERROR" not in system:
        return None
    errors = system["ERROR"]
    if errors is None:
        return None
    if isinstance(errors, list):
        return " ".join(str(e) for e in errors)
    return str(errors)


def _decode(resp: httpx.Response) -> dict[str, Any]:
    """Decode a scan response body or raise :class:`ApplicationError`."""
    if not resp.is_success:
        msg = f"HTTP {resp.status_code}"
        body = resp.text[:200]
        if body:
            msg = f"{msg}: {body}"
        raise ApplicationError(msg, status_code=resp.status_code)

    try:
        body = resp.json()
    except ValueError:
        # The service answers some failures with plain text.
        raise ApplicationError(resp.text.strip() or "empty response") from None

    if isinstance(body, str):
        raise ApplicationError(body)
    if not isinstance(body, dict):
        logger.debug("Scan response is a %s, not an object; treating it as empty",
                     type(body).__name__)
        return {}

    if (error := _service_error(body)) is not None:
        raise ApplicationError(error)
    return body


class SiteCheckClient:
    """Async client for the SiteCheck scan endpoint.

    Parameters
    ----------
    base_url:
        Override the service URL (useful for testing).
    timeout:
        HTTP timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = _TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            headers={"User-Agent": _USER_AGENT, "Accept": "application/json"},
        )

    @staticmethod
    def build_params(domain: str, force_fresh: bool) -> dict[str, str | int]:
        params: dict[str, str | int] = {
            "scan": domain,
            "fromwp": FROM_PLUGIN_MARKER,
            "json": 1,
        }
        if force_fresh:
            params["clear"] = 1
        return params

    async def request_scan(self, domain: str, force_fresh: bool = True) -> dict[str, Any]:
        """Run a scan of *domain* and return the decoded response document.

        Parameters
        ----------
        domain:
            Bare domain name of the site to scan.
        force_fresh:
            Ask the service to discard its own cached results.

        Raises
        ------
        InvalidTargetError
            *domain* is empty.
        TransportError
            The service could not be reached or did not answer in time.
        ApplicationError
            The service answered with an error message.
        """
        if not domain:
            raise InvalidTargetError("no domain to scan")

        params = self.build_params(domain, force_fresh)
        logger.info("Requesting SiteCheck scan for %s (fresh=%s)", domain, force_fresh)

        try:
            async with self._client() as client:
                resp = await client.get(self.base_url, params=params)
        except httpx.TimeoutException as exc:
            raise TransportError(f"scan of {domain} timed out after {self.timeout:g}s") from exc
        except httpx.TransportError as exc:
            raise TransportError(f"could not reach the scan service: {exc}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # redirect loops, bad content encoding, malformed service URL
            raise TransportError(f"scan request failed: {exc}") from exc

        return _decode(resp)
