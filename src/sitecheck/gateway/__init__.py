# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Outbound access to the remote SiteCheck scanning service."""

from sitecheck.gateway.client import SiteCheckClient

__all__ = ["SiteCheckClient"]
