# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Namespaced, time-expiring cache for scan results."""

from sitecheck.cache.manager import CacheStore, get_cache_store

__all__ = ["CacheStore", "get_cache_store"]
