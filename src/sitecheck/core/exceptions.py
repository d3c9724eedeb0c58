# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for sitecheck."""


class SiteCheckError(Exception):
    """Base exception for all sitecheck errors."""


class ConfigurationError(SiteCheckError):
    """Invalid or missing configuration."""


class ScanServiceError(SiteCheckError):
    """A scan request did not produce a usable result."""


class TransportError(ScanServiceError):
    """The scan service could not be reached (DNS, connect, timeout)."""


class ApplicationError(ScanServiceError):
    """The scan service answered but reported its own failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidTargetError(ScanServiceError):
    """No scannable domain was supplied."""


class CacheCoercionError(SiteCheckError):
    """A cached value does not match the shape the reader expects."""


class MalformedEntryError(SiteCheckError):
    """A single report entry does not have the expected shape."""
