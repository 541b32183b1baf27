"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/base.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """One cached translation value with expiration metadata."""

    value: str
    expires_at_s: float


class SharedTierState(str, Enum):
    """Health of the shared cache tier as seen by this process."""

    UNCONNECTED = "unconnected"
    CONNECTED = "connected"
    DEGRADED = "degraded"


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Read-only snapshot returned by `LayeredTranslationCache.stats`."""

    shared_available: bool
    local_entry_count: int
    state: SharedTierState


class CacheTier(Protocol):
    """Protocol implemented by the shared and local cache tiers."""

    tier_id: str

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, *, ttl_s: float) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def delete_suffix(self, suffix: str) -> int: ...

    async def clear(self) -> None: ...

    async def ping(self) -> bool: ...
