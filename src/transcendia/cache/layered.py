"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Two-tier translation cache: a shared tier (Redis) fronted by a process-local
fallback tier.

Shared-tier failures never reach callers. Any error or timeout moves the
shared tier to ``DEGRADED`` and the operation continues on the local tier.
Recovery happens only out of band, through `connect` or the background
reconnect loop, never inside a lookup.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import TypeVar

from ..settings import DEFAULT_CACHE_TTL_S
from .base import CacheStats, CacheTier, SharedTierState
from .inmemory import LocalCacheTier

logger = logging.getLogger("transcendia.cache")

T = TypeVar("T")

_PENDING_DELETE = "delete"
_PENDING_SUFFIX = "suffix"
_PENDING_CLEAR = "clear"


def composite_key(key: str, lang: str) -> str:
    """Return the cache key for one (semantic key, language) pair."""
    return f"{key}:{lang}"


async def _bounded(awaitable: Awaitable[T], timeout_s: float | None) -> T:
    """
    Await one shared-tier call, failing fast after `timeout_s`.

    A hung Redis connection surfaces as `asyncio.TimeoutError`, which the
    caller treats like any other shared-tier failure.
    """
    if timeout_s is None:
        return await awaitable
    return await asyncio.wait_for(awaitable, timeout=timeout_s)


class LayeredTranslationCache:
    """
    Cache for (key, language) → translation lookups.

    Args:
        shared: Shared tier, usually a `RedisCacheTier`. ``None`` runs on the
            local tier only.
        local: Local fallback tier; a fresh `LocalCacheTier` by default.
        ttl_s: Lifetime of every entry in both tiers.
        operation_timeout_s: Upper bound for one shared-tier call so a hung
            connection fails fast and the local tier is tried instead.
    """

    def __init__(
        self,
        *,
        shared: CacheTier | None = None,
        local: LocalCacheTier | None = None,
        ttl_s: float = DEFAULT_CACHE_TTL_S,
        operation_timeout_s: float | None = 0.25,
    ) -> None:
        if ttl_s <= 0:
            raise ValueError("ttl_s must be > 0")
        if operation_timeout_s is not None and operation_timeout_s <= 0:
            raise ValueError("operation_timeout_s must be > 0 when set")
        self._shared = shared
        self._local = local if local is not None else LocalCacheTier()
        self._ttl_s = ttl_s
        self._operation_timeout_s = operation_timeout_s
        self._state = SharedTierState.UNCONNECTED
        # Invalidations the shared tier missed while degraded, replayed on reconnect.
        self._pending: list[tuple[str, str]] = []
        self._connect_lock = asyncio.Lock()
        self._reconnect_task: asyncio.Task[None] | None = None

    @property
    def state(self) -> SharedTierState:
        """Current shared-tier state."""
        return self._state

    @property
    def ttl_s(self) -> float:
        return self._ttl_s

    async def get(self, key: str, lang: str) -> str | None:
        """Return a live cached value, trying the shared tier first."""
        cache_key = composite_key(key, lang)
        ok, value = await self._try_shared("get", lambda tier: tier.get(cache_key))
        if ok and value is not None:
            return value
        return await self._local.get(cache_key)

    async def set(self, key: str, lang: str, value: str) -> None:
        """
        Store one value.

        The shared tier is authoritative when reachable; the local tier is
        written only when the shared write fails or is skipped.
        """
        cache_key = composite_key(key, lang)
        ok, _ = await self._try_shared(
            "set", lambda tier: tier.set(cache_key, value, ttl_s=self._ttl_s)
        )
        if ok:
            return
        await self._local.set(cache_key, value, ttl_s=self._ttl_s)

    async def delete(self, key: str, lang: str) -> None:
        """Remove one entry from both tiers. Missing entries are ignored."""
        cache_key = composite_key(key, lang)
        ok, _ = await self._try_shared("delete", lambda tier: tier.delete(cache_key))
        if not ok:
            self._remember(_PENDING_DELETE, cache_key)
        await self._local.delete(cache_key)

    async def clear_language(self, lang: str) -> None:
        """Remove every entry for `lang` from both tiers."""
        suffix = f":{lang}"
        ok, removed = await self._try_shared(
            "clear_language", lambda tier: tier.delete_suffix(suffix)
        )
        if not ok:
            self._remember(_PENDING_SUFFIX, suffix)
        local_removed = await self._local.delete_suffix(suffix)
        logger.info(
            "Cleared cache for language %s (shared=%s, local=%d)",
            lang,
            removed if ok else "skipped",
            local_removed,
        )

    async def clear_all(self) -> None:
        """Flush both tiers."""
        ok, _ = await self._try_shared("clear_all", lambda tier: tier.clear())
        if not ok:
            self._remember(_PENDING_CLEAR, "")
        await self._local.clear()

    def stats(self) -> CacheStats:
        """Return a side-effect free snapshot of cache health."""
        return CacheStats(
            shared_available=(
                self._shared is not None and self._state is SharedTierState.CONNECTED
            ),
            local_entry_count=self._local.size(),
            state=self._state,
        )

    async def connect(self) -> bool:
        """
        Probe the shared tier and move to ``CONNECTED`` on success.

        Invalidations missed while degraded are replayed before the tier is
        used for lookups again. Returns whether the shared tier is usable.
        """
        shared = self._shared
        if shared is None:
            return False
        async with self._connect_lock:
            try:
                alive = await _bounded(shared.ping(), self._operation_timeout_s)
                if not alive:
                    raise ConnectionError("shared cache tier did not answer PING")
                await self._replay_pending(shared)
            except Exception as exc:
                self._mark_degraded("connect", exc)
                return False
            self._mark_connected()
            return True

    def start_reconnect_loop(self, *, interval_s: float = 5.0) -> asyncio.Task[None]:
        """
        Start a background task that re-probes a degraded shared tier.

        Each tick also drops expired rows from the local tier.
        """
        if interval_s <= 0:
            raise ValueError("interval_s must be > 0")
        if self._reconnect_task is not None and not self._reconnect_task.done():
            return self._reconnect_task
        self._reconnect_task = asyncio.create_task(self._reconnect_loop(interval_s))
        return self._reconnect_task

    async def aclose(self) -> None:
        """Stop the reconnect loop and release the shared-tier client."""
        task = self._reconnect_task
        self._reconnect_task = None
        if task is not None:
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
        close = getattr(self._shared, "aclose", None)
        if callable(close):
            await close()

    async def _reconnect_loop(self, interval_s: float) -> None:
        while True:
            await asyncio.sleep(interval_s)
            self._local.purge_expired()
            if self._state is not SharedTierState.CONNECTED:
                await self.connect()

    async def _try_shared(
        self,
        operation: str,
        call: Callable[[CacheTier], Awaitable[T]],
    ) -> tuple[bool, T | None]:
        """
        Run one shared-tier call if the tier is usable.

        Returns ``(True, result)`` on success and ``(False, None)`` when the
        tier is absent, degraded, or the call failed.
        """
        shared = self._shared
        if shared is None or self._state is SharedTierState.DEGRADED:
            return False, None
        started = time.monotonic()
        try:
            result = await _bounded(call(shared), self._operation_timeout_s)
        except Exception as exc:
            self._mark_degraded(operation, exc, elapsed_s=time.monotonic() - started)
            return False, None
        if self._state is SharedTierState.DEGRADED:
            # The tier failed while this call was in flight. Only `connect`
            # may leave DEGRADED, after replaying missed invalidations.
            return False, None
        if not self._pending:
            self._mark_connected()
        return True, result

    def _mark_connected(self) -> None:
        if self._state is SharedTierState.CONNECTED:
            return
        logger.info("Shared cache tier %s -> connected", self._state.value)
        self._state = SharedTierState.CONNECTED

    def _mark_degraded(
        self,
        operation: str,
        exc: BaseException,
        *,
        elapsed_s: float | None = None,
    ) -> None:
        logger.warning(
            "Shared cache %s failed, falling back to local tier: %s%s",
            operation,
            str(exc) or type(exc).__name__,
            "" if elapsed_s is None else f" (after {elapsed_s:.3f}s)",
        )
        self._state = SharedTierState.DEGRADED

    def _remember(self, kind: str, target: str) -> None:
        if self._shared is None:
            return
        if kind == _PENDING_CLEAR:
            self._pending = [(kind, target)]
            return
        if (_PENDING_CLEAR, "") in self._pending or (kind, target) in self._pending:
            return
        self._pending.append((kind, target))

    async def _replay_pending(self, shared: CacheTier) -> None:
        if not self._pending:
            return
        replayed = 0
        while self._pending:
            kind, target = self._pending[0]
            if kind == _PENDING_CLEAR:
                call = shared.clear()
            elif kind == _PENDING_SUFFIX:
                call = shared.delete_suffix(target)
            else:
                call = shared.delete(target)
            await _bounded(call, self._operation_timeout_s)
            self._pending.pop(0)
            replayed += 1
        logger.info("Replayed %d pending shared-tier invalidation(s)", replayed)
