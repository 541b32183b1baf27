"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/redis.py.
"""

from __future__ import annotations

from typing import Any

from .base import CacheTier

_SCAN_BATCH = 500
_GLOB_SPECIAL = "\\*?[]"


def _glob_escape(value: str) -> str:
    """Escape Redis ``MATCH`` glob metacharacters in a literal value."""
    return "".join(f"\\{ch}" if ch in _GLOB_SPECIAL else ch for ch in value)


def _decode(raw: Any) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8")
    return str(raw)


class RedisCacheTier(CacheTier):
    """
    Shared cache tier backed by Redis for multi-process deployments.

    Requires ``redis.asyncio`` (``pip install redis``).

    Args:
        redis: An ``redis.asyncio.Redis`` client instance.
        prefix: Optional namespace prepended as ``{prefix}:{key}``. When set,
            `clear` only removes namespaced keys instead of flushing the DB.
    """

    tier_id = "redis"

    def __init__(self, redis: Any, *, prefix: str = "") -> None:
        self._redis = redis
        self._prefix = prefix.strip().rstrip(":")

    def _full_key(self, key: str) -> str:
        if not self._prefix:
            return key
        return f"{self._prefix}:{key}"

    def _namespace_pattern(self) -> str:
        if not self._prefix:
            return "*"
        return f"{_glob_escape(self._prefix)}:*"

    async def get(self, key: str) -> str | None:
        raw = await self._redis.get(self._full_key(key))
        if raw is None:
            return None
        return _decode(raw)

    async def set(self, key: str, value: str, *, ttl_s: float) -> None:
        await self._redis.setex(self._full_key(key), int(max(1, ttl_s)), value)

    async def delete(self, key: str) -> None:
        await self._redis.delete(self._full_key(key))

    async def delete_suffix(self, suffix: str) -> int:
        """Delete every key ending with `suffix` using incremental ``SCAN``."""
        return await self._delete_matching(
            self._namespace_pattern() + _glob_escape(suffix)
        )

    async def clear(self) -> None:
        if not self._prefix:
            await self._redis.flushdb()
            return
        await self._delete_matching(self._namespace_pattern())

    async def ping(self) -> bool:
        return bool(await self._redis.ping())

    async def aclose(self) -> None:
        close = getattr(self._redis, "aclose", None)
        if callable(close):
            await close()

    async def _delete_matching(self, pattern: str) -> int:
        removed = 0
        batch: list[Any] = []
        async for key in self._redis.scan_iter(match=pattern, count=_SCAN_BATCH):
            batch.append(key)
            if len(batch) >= _SCAN_BATCH:
                removed += int(await self._redis.delete(*batch))
                batch = []
        if batch:
            removed += int(await self._redis.delete(*batch))
        return removed
