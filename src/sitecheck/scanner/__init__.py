# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-render scan orchestration."""

from sitecheck.scanner.orchestrator import ScanOrchestrator, scan_cache_key

__all__ = ["ScanOrchestrator", "scan_cache_key"]
