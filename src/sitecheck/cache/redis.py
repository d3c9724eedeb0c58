# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Redis cache backend, shared by every dashboard process pointing at one server.

Each namespace is a Redis hash (``sitecheck:cache:<namespace>``) whose
fields are cache keys and whose values are JSON-encoded
:class:`~sitecheck.cache.base.CacheEntry` records.  ``HSET`` replaces a
field atomically, so concurrent writers resolve as last-write-wins.

Needs the ``redis`` extra; without it the module still imports and the
store falls back to the in-memory backend.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sitecheck.cache.base import CacheBackend, CacheEntry

if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = logging.getLogger("sitecheck.cache.redis")

_KEY_PREFIX = "sitecheck:cache:"

try:
    import redis.asyncio as aioredis

    _REDIS_AVAILABLE = True
except ImportError:  # pragma: no cover
    aioredis = None  # type: ignore[assignment]
    _REDIS_AVAILABLE = False


def redis_available() -> bool:
    """Return ``True`` if the ``redis`` package is installed."""
    return _REDIS_AVAILABLE


class RedisCacheBackend(CacheBackend):
    """Scan-result cache kept in Redis hashes.

    Args:
        redis_url: Connection URL, ``SITECHECK_REDIS_URL`` in settings.
    """

    def __init__(self, redis_url: str = "redis://localhost:6379/0") -> None:
        if not _REDIS_AVAILABLE:
            raise RuntimeError(
                "RedisCacheBackend needs the redis package: pip install 'sitecheck[redis]'"
            )
        self._client: Redis = aioredis.from_url(redis_url, decode_responses=True)

    # ------------------------------------------------------------------
    # CacheBackend interface
    # ------------------------------------------------------------------

    async def read(self, namespace: str, key: str) -> CacheEntry | None:
        raw = await self._client.hget(self._hash_name(namespace), key)
        if raw is None:
            return None
        try:
            return CacheEntry.from_json(raw)
        except (KeyError, TypeError, ValueError):
            logger.debug("Ignoring undecodable entry %s/%s", namespace, key)
            return None

    async def write(self, namespace: str, key: str, entry: CacheEntry) -> None:
        await self._client.hset(self._hash_name(namespace), key, entry.to_json())

    async def delete(self, namespace: str, key: str) -> bool:
        result = await self._client.hdel(self._hash_name(namespace), key)
        return bool(result)

    async def clear(self, namespace: str | None = None) -> int:
        """Delete one namespace hash, or every hash with the cache prefix.

        Uses SCAN to avoid blocking Redis with a KEYS command.
        """
        if namespace is not None:
            names = [self._hash_name(namespace)]
        else:
            names = [name async for name in self._client.scan_iter(match=f"{_KEY_PREFIX}*")]

        count = 0
        for name in names:
            count += await self._client.hlen(name)
            await self._client.delete(name)
        return count

    async def size(self) -> int:
        count = 0
        async for name in self._client.scan_iter(match=f"{_KEY_PREFIX}*"):
            count += await self._client.hlen(name)
        return count

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _hash_name(namespace: str) -> str:
        return f"{_KEY_PREFIX}{namespace}"
