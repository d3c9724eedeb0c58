# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, cache keys, and scan-service constants."""

from enum import StrEnum


class Section(StrEnum):
    """Top-level sections of a scan-service response document."""

    SCAN = "SCAN"
    SYSTEM = "SYSTEM"
    WEBAPP = "WEBAPP"
    MALWARE = "MALWARE"
    BLACKLIST = "BLACKLIST"
    LINKS = "LINKS"
    RECOMMENDATIONS = "RECOMMENDATIONS"
    OUTDATEDSCAN = "OUTDATEDSCAN"


class ScanState(StrEnum):
    IDLE = "idle"
    CACHE_CHECK = "cache_check"
    CACHE_HIT = "cache_hit"
    REQUESTING = "requesting"
    SUCCESS = "success"
    FAILED = "failed"


class StatusColor(StrEnum):
    CLEAN = "green"
    ALERT = "red"


CACHE_NAMESPACE = "sitecheck"
CACHE_KEY = "scan_results"

# Identifies the caller to the scan service as the dashboard plugin.
FROM_PLUGIN_MARKER = 2

UNKNOWN = "(unknown)"
ERROR_PREFIX = "SiteCheck error: "
