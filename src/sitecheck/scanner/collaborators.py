# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Narrow interfaces to the host dashboard: error banners and site identity."""

from __future__ import annotations

import logging
import re
from typing import Protocol, runtime_checkable

from sitecheck.core.config import Settings

logger = logging.getLogger("sitecheck.scanner.collaborators")

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")


def normalize_domain(value: str | None) -> str:
    """Reduce a user-supplied site address to a bare host name.

    ``"https://Example.com/blog"`` becomes ``"example.com"``.  Returns an
    empty string for blank input.
    """
    if not value:
        return ""
    host = _SCHEME.sub("", value.strip())
    host = host.split("/", 1)[0].split("?", 1)[0].split("#", 1)[0]
    return host.strip().lower()


@runtime_checkable
class ErrorReporter(Protocol):
    def report_error(self, message: str) -> None: ...


@runtime_checkable
class SiteIdentity(Protocol):
    def domain(self) -> str: ...

    def platform_version(self) -> str: ...


class LoggingErrorReporter:
    """Sends error banners to the log only."""

    def report_error(self, message: str) -> None:
        logger.error(message)


class CollectingErrorReporter:
    """Keeps reported errors so the UI layer can show them after the render."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def report_error(self, message: str) -> None:
        logger.warning(message)
        self.messages.append(message)


class SettingsSiteIdentity:
    """Site identity read from application settings."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def domain(self) -> str:
        return normalize_domain(self._settings.site_domain)

    def platform_version(self) -> str:
        return self._settings.platform_version
