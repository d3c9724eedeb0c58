# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""sitecheck - Remote malware-scan result pipeline for site security dashboards."""

__version__ = "1.8.3"

from sitecheck.sdk import collect_report, collect_report_sync

__all__ = [
    "__version__",
    "collect_report",
    "collect_report_sync",
]
