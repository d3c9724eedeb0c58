# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typed models for scan-service responses."""

from sitecheck.models.document import (
    LinksSection,
    MalwareSection,
    ScanDocument,
    ScanSection,
    SystemSection,
    WebAppSection,
)

__all__ = [
    "LinksSection",
    "MalwareSection",
    "ScanDocument",
    "ScanSection",
    "SystemSection",
    "WebAppSection",
]
