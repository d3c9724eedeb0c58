# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""API key gate for the report and cache endpoints."""

from __future__ import annotations

import hmac
from typing import Annotated

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from sitecheck.core.config import get_settings

ANONYMOUS = "anonymous"

_api_key_header = APIKeyHeader(
    name="X-API-Key",
    auto_error=False,
    description="One of the keys listed in SITECHECK_API_KEYS",
)


def _is_known_key(candidate: str, keys: list[str]) -> bool:
    return any(hmac.compare_digest(candidate.encode(), key.encode()) for key in keys)


async def require_api_key(
    api_key: Annotated[str | None, Security(_api_key_header)] = None,
) -> str:
    """Return the caller's key, or ``"anonymous"`` when no keys are configured.

    Raises 401 when a key is required but missing and 403 when it is not
    one of ``SITECHECK_API_KEYS``.
    """
    keys = get_settings().api_keys
    if not keys:
        return ANONYMOUS

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-API-Key header",
            headers={"WWW-Authenticate": "APIKey"},
        )
    if not _is_known_key(api_key, keys):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid API key")
    return api_key
