"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/inmemory.py.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from threading import Lock

from .base import CacheEntry, CacheTier


class LocalCacheTier(CacheTier):
    """
    Process-local fallback tier used when the shared tier is unreachable.

    Rows are guarded by a lock so concurrent coroutines and worker threads can
    share one instance. Expired rows are never returned and are dropped lazily
    on read or by `purge_expired`.
    """

    tier_id = "local"

    def __init__(self, *, clock: Callable[[], float] = time.time) -> None:
        self._rows: dict[str, CacheEntry] = {}
        self._lock = Lock()
        self._clock = clock

    async def get(self, key: str) -> str | None:
        with self._lock:
            row = self._rows.get(key)
            if row is None:
                return None
            if row.expires_at_s <= self._clock():
                self._rows.pop(key, None)
                return None
            return row.value

    async def set(self, key: str, value: str, *, ttl_s: float) -> None:
        expires_at_s = self._clock() + ttl_s
        with self._lock:
            self._rows[key] = CacheEntry(value=value, expires_at_s=expires_at_s)

    async def delete(self, key: str) -> None:
        with self._lock:
            self._rows.pop(key, None)

    async def delete_suffix(self, suffix: str) -> int:
        with self._lock:
            doomed = [key for key in self._rows if key.endswith(suffix)]
            for key in doomed:
                del self._rows[key]
        return len(doomed)

    async def clear(self) -> None:
        with self._lock:
            self._rows.clear()

    async def ping(self) -> bool:
        return True

    def size(self) -> int:
        """Count live rows without evicting anything."""
        now = self._clock()
        with self._lock:
            return sum(1 for row in self._rows.values() if row.expires_at_s > now)

    def purge_expired(self) -> int:
        """Drop expired rows and return how many were removed."""
        now = self._clock()
        with self._lock:
            doomed = [key for key, row in self._rows.items() if row.expires_at_s <= now]
            for key in doomed:
                del self._rows[key]
        return len(doomed)
