"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Factory helpers for building the translation cache from settings.
"""

from __future__ import annotations

from typing import Any

from ..errors import CacheConfigError
from ..settings import TranscendiaSettings
from .layered import LayeredTranslationCache
from .redis import RedisCacheTier

_MEMORY_BACKENDS = ("mem", "memory", "inmemory", "in_memory", "local")


def create_translation_cache_from_env(
    *,
    redis_client: Any | None = None,
    settings: TranscendiaSettings | None = None,
) -> LayeredTranslationCache:
    """
    Create a translation cache from `TRANSCENDIA_CACHE_*` settings.

    Backends:
    - `redis` (default): Redis shared tier with local fallback
    - `memory`: local tier only

    Redis resolution:
    - Uses the provided `redis_client` when supplied.
    - Otherwise builds a client from `settings.redis_url`.

    The returned cache starts ``UNCONNECTED``; call `connect()` at startup to
    probe the shared tier eagerly.
    """
    settings = settings or TranscendiaSettings.from_env()
    backend = settings.cache_backend.strip().lower()

    if backend in _MEMORY_BACKENDS:
        return LayeredTranslationCache(
            ttl_s=settings.cache_ttl_s,
            operation_timeout_s=settings.cache_op_timeout_s,
        )

    if backend in ("redis",):
        client = redis_client
        if client is None:
            try:
                import redis.asyncio as redis
            except ModuleNotFoundError as exc:  # pragma: no cover
                raise CacheConfigError(
                    "Redis cache backend requires `redis` to be installed."
                ) from exc

            timeout_s = settings.cache_op_timeout_s
            client = redis.Redis.from_url(
                settings.redis_url,
                socket_timeout=timeout_s,
                socket_connect_timeout=timeout_s,
            )

        return LayeredTranslationCache(
            shared=RedisCacheTier(client, prefix=settings.cache_prefix),
            ttl_s=settings.cache_ttl_s,
            operation_timeout_s=settings.cache_op_timeout_s,
        )

    raise CacheConfigError(f"Unknown TRANSCENDIA_CACHE_BACKEND: {backend}")
