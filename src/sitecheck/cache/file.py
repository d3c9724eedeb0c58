# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""File cache backend: one JSON document per namespace.

Each namespace is stored in ``<cache_dir>/sitecheck-<namespace>.json`` as a
mapping of key to ``{"value": ..., "stored_at": ...}``.  Files are replaced
atomically, so concurrent writers never leave a half-written document
behind; the last writer wins.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import re
import tempfile
from pathlib import Path

from sitecheck.cache.base import CacheBackend, CacheEntry

logger = logging.getLogger("sitecheck.cache.file")

_FILE_PREFIX = "sitecheck-"
_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_\-]")


class FileCacheBackend(CacheBackend):
    """Cache entries persisted as JSON files under *cache_dir*.

    Args:
        cache_dir: Directory holding one file per namespace.  Created on
            first write.
    """

    def __init__(self, cache_dir: Path | str) -> None:
        self._dir = Path(cache_dir)

    # ------------------------------------------------------------------
    # CacheBackend interface
    # ------------------------------------------------------------------

    async def read(self, namespace: str, key: str) -> CacheEntry | None:
        document = await asyncio.to_thread(self._load, namespace)
        raw = document.get(key)
        if not isinstance(raw, dict):
            return None
        try:
            return CacheEntry(value=str(raw["value"]), stored_at=float(raw["stored_at"]))
        except (KeyError, TypeError, ValueError):
            return None

    async def write(self, namespace: str, key: str, entry: CacheEntry) -> None:
        await asyncio.to_thread(self._write_sync, namespace, key, entry)

    async def delete(self, namespace: str, key: str) -> bool:
        return await asyncio.to_thread(self._delete_sync, namespace, key)

    async def clear(self, namespace: str | None = None) -> int:
        return await asyncio.to_thread(self._clear_sync, namespace)

    async def size(self) -> int:
        return await asyncio.to_thread(self._size_sync)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def path_for(self, namespace: str) -> Path:
        return self._dir / f"{_FILE_PREFIX}{_UNSAFE_CHARS.sub('_', namespace)}.json"

    def _load(self, namespace: str) -> dict[str, object]:
        path = self.path_for(namespace)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Discarding unreadable cache file %s", path)
            return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, namespace: str, document: dict[str, object]) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(namespace)
        fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=path.stem, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _write_sync(self, namespace: str, key: str, entry: CacheEntry) -> None:
        document = self._load(namespace)
        document[key] = {"value": entry.value, "stored_at": entry.stored_at}
        self._dump(namespace, document)

    def _delete_sync(self, namespace: str, key: str) -> bool:
        document = self._load(namespace)
        if key not in document:
            return False
        del document[key]
        self._dump(namespace, document)
        return True

    def _clear_sync(self, namespace: str | None) -> int:
        if namespace is not None:
            paths = [self.path_for(namespace)]
        elif self._dir.is_dir():
            paths = sorted(self._dir.glob(f"{_FILE_PREFIX}*.json"))
        else:
            paths = []

        count = 0
        for path in paths:
            if not path.exists():
                continue
            count += len(self._load_path(path))
            path.unlink(missing_ok=True)
        return count

    def _size_sync(self) -> int:
        if not self._dir.is_dir():
            return 0
        return sum(len(self._load_path(p)) for p in self._dir.glob(f"{_FILE_PREFIX}*.json"))

    @staticmethod
    def _load_path(path: Path) -> dict[str, object]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}
