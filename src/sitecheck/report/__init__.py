# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Projection of scan documents into render-ready report views."""

from sitecheck.report.blacklist import build_blacklist_status
from sitecheck.report.details import build_details
from sitecheck.report.malware import build_malware_findings, parse_malware_entry
from sitecheck.report.normalizer import ReportNormalizer
from sitecheck.report.recommendations import build_recommendations
from sitecheck.report.resources import build_iframes, build_links, build_scripts

__all__ = [
    "ReportNormalizer",
    "build_blacklist_status",
    "build_details",
    "build_iframes",
    "build_links",
    "build_malware_findings",
    "build_recommendations",
    "build_scripts",
    "parse_malware_entry",
]
