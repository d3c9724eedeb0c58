# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Abstract cache backend interface for namespaced, timestamped entries."""

from __future__ import annotations

import abc
import json
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A serialised value together with the wall-clock time it was stored."""

    value: str
    stored_at: float

    def age(self, now: float) -> float:
        return now - self.stored_at

    def to_json(self) -> str:
        return json.dumps({"value": self.value, "stored_at": self.stored_at})

    @classmethod
    def from_json(cls, raw: str | bytes) -> CacheEntry:
        data = json.loads(raw)
        return cls(value=str(data["value"]), stored_at=float(data["stored_at"]))


class CacheBackend(abc.ABC):
    """Abstract base class for cache backends.

    Backends only move entries in and out of a storage medium; expiry and
    type coercion are decided by :class:`~sitecheck.cache.manager.CacheStore`
    at read time.  Writes are unconditional overwrites, so concurrent
    writers of the same namespace/key resolve as last-write-wins.
    """

    @abc.abstractmethod
    async def read(self, namespace: str, key: str) -> CacheEntry | None:
        """Retrieve the raw entry stored under *namespace*/*key*.

        Returns:
            The entry, or ``None`` if nothing is stored.
        """

    @abc.abstractmethod
    async def write(self, namespace: str, key: str, entry: CacheEntry) -> None:
        """Store *entry*, replacing whatever was there before."""

    @abc.abstractmethod
    async def delete(self, namespace: str, key: str) -> bool:
        """Delete a single entry.

        Returns:
            ``True`` if the entry existed and was deleted, ``False`` otherwise.
        """

    @abc.abstractmethod
    async def clear(self, namespace: str | None = None) -> int:
        """Remove every entry of *namespace*, or of all namespaces.

        Returns:
            The number of entries removed.
        """

    @abc.abstractmethod
    async def size(self) -> int:
        """Return the number of stored entries, expired ones included."""

    async def close(self) -> None:
        """Release any resources held by the backend."""
