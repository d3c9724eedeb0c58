# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Cache store that layers expiry and type coercion over a backend.

The :class:`CacheStore` is the primary public interface for the caching
layer.  It serialises values to JSON, stamps them with the write time,
and on read treats stale entries and entries that do not coerce to the
requested type as absent.  It also tracks hit/miss statistics.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from sitecheck.cache.base import CacheBackend, CacheEntry
from sitecheck.cache.memory import MemoryCacheBackend
from sitecheck.core.exceptions import CacheCoercionError, ConfigurationError

logger = logging.getLogger("sitecheck.cache.manager")

# Module-level singleton
_store: CacheStore | None = None


class CacheStats:
    """Simple hit/miss counter."""

    __slots__ = ("hits", "misses")

    def __init__(self) -> None:
        self.hits: int = 0
        self.misses: int = 0

    @property
    def total(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        return self.hits / self.total if self.total else 0.0

    def to_dict(self) -> dict[str, object]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "total": self.total,
            "hit_rate": round(self.hit_rate, 4),
        }


def _coerce(raw: str, expected_type: Any) -> Any:
    try:
        return TypeAdapter(expected_type).validate_python(json.loads(raw))
    except (ValueError, TypeError, ValidationError) as exc:
        raise CacheCoercionError(str(exc)) from exc


class CacheStore:
    """Namespaced key/value store with lazy, read-time expiry.

    Args:
        backend: The cache backend to use.
        clock: Returns the current wall-clock time in seconds.  Entries
            are shared between processes, so this must not be monotonic.
    """

    def __init__(
        self,
        backend: CacheBackend | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._backend = backend or MemoryCacheBackend()
        self._clock = clock
        self._stats = CacheStats()

    async def get(
        self,
        namespace: str,
        key: str,
        max_age: float,
        expected_type: Any = Any,
    ) -> Any | None:
        """Return the value under *namespace*/*key*, or ``None``.

        ``None`` is returned when nothing is stored, when the entry is
        ``max_age`` seconds old or older, or when the stored value does not
        coerce to *expected_type*.  Never raises for any of these.
        """
        entry = await self._backend.read(namespace, key)
        if entry is None:
            self._stats.misses += 1
            logger.debug("Cache MISS for %s/%s", namespace, key)
            return None

        if entry.age(self._clock()) >= max_age:
            self._stats.misses += 1
            logger.debug("Cache EXPIRED for %s/%s", namespace, key)
            return None

        try:
            value = _coerce(entry.value, expected_type)
        except CacheCoercionError:
            self._stats.misses += 1
            return None

        self._stats.hits += 1
        logger.debug("Cache HIT for %s/%s", namespace, key)
        return value

    async def set(self, namespace: str, key: str, value: Any) -> None:
        """Store *value*, overwriting any previous entry unconditionally."""
        entry = CacheEntry(value=json.dumps(value), stored_at=self._clock())
        await self._backend.write(namespace, key, entry)
        logger.debug("Cached %s/%s", namespace, key)

    async def delete(self, namespace: str, key: str) -> bool:
        return await self._backend.delete(namespace, key)

    async def clear(self, namespace: str | None = None) -> int:
        """Flush one namespace, or the whole cache.

        Returns:
            Number of entries removed.
        """
        count = await self._backend.clear(namespace)
        logger.info("Cache cleared: %d entries removed", count)
        return count

    async def size(self) -> int:
        return await self._backend.size()

    @property
    def stats(self) -> CacheStats:
        """Return the hit/miss statistics object."""
        return self._stats

    @property
    def backend(self) -> CacheBackend:
        """Return the underlying cache backend."""
        return self._backend

    async def close(self) -> None:
        """Release resources held by the backend."""
        await self._backend.close()


def _create_backend_from_settings() -> CacheBackend:
    """Instantiate the cache backend based on application settings."""
    from sitecheck.core.config import get_settings

    settings = get_settings()
    backend_type = settings.cache_backend

    if backend_type == "memory":
        return MemoryCacheBackend()

    if backend_type == "file":
        from sitecheck.cache.file import FileCacheBackend

        return FileCacheBackend(settings.cache_dir)

    if backend_type == "redis":
        from sitecheck.cache.redis import RedisCacheBackend, redis_available

        if not redis_available():
            logger.warning(
                "Redis cache backend requested but redis package not installed. "
                "Falling back to in-memory cache."
            )
            return MemoryCacheBackend()
        return RedisCacheBackend(redis_url=settings.redis_url)

    raise ConfigurationError(f"Unknown cache backend: {backend_type!r}")


def get_cache_store() -> CacheStore:
    """Return the module-level :class:`CacheStore` singleton.

    Creates a new instance on first call using application settings.
    """
    global _store
    if _store is None:
        _store = CacheStore(backend=_create_backend_from_settings())
    return _store


def reset_cache_store() -> None:
    """Reset the singleton (useful for testing)."""
    global _store
    _store = None
