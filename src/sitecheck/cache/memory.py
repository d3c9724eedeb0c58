# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""In-memory cache backend.

This is the default backend and requires no external services.  Entries
live for the lifetime of the process; a bounded ``OrderedDict`` keeps the
most recently written entries when the size limit is reached.
"""

from __future__ import annotations

from collections import OrderedDict

from sitecheck.cache.base import CacheBackend, CacheEntry

# Default maximum number of entries before eviction kicks in.
_DEFAULT_MAX_SIZE = 1024


class MemoryCacheBackend(CacheBackend):
    """Process-local cache keyed by ``(namespace, key)``.

    Args:
        max_size: Maximum number of entries.  When exceeded the oldest
            entry is evicted.
    """

    def __init__(self, max_size: int = _DEFAULT_MAX_SIZE) -> None:
        self._store: OrderedDict[tuple[str, str], CacheEntry] = OrderedDict()
        self._max_size = max_size

    # ------------------------------------------------------------------
    # CacheBackend interface
    # ------------------------------------------------------------------

    async def read(self, namespace: str, key: str) -> CacheEntry | None:
        return self._store.get((namespace, key))

    async def write(self, namespace: str, key: str, entry: CacheEntry) -> None:
        slot = (namespace, key)
        if slot in self._store:
            self._store.move_to_end(slot)
        self._store[slot] = entry
        while len(self._store) > self._max_size:
            self._store.popitem(last=False)

    async def delete(self, namespace: str, key: str) -> bool:
        try:
            del self._store[(namespace, key)]
        except KeyError:
            return False
        return True

    async def clear(self, namespace: str | None = None) -> int:
        if namespace is None:
            count = len(self._store)
            self._store.clear()
            return count
        doomed = [slot for slot in self._store if slot[0] == namespace]
        for slot in doomed:
            del self._store[slot]
        return len(doomed)

    async def size(self) -> int:
        return len(self._store)

    async def close(self) -> None:
        self._store.clear()
