"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Translation service settings and explicit config loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_CACHE_TTL_S = 3600
DEFAULT_REDIS_URL = "redis://localhost:6379/0"


def _env_first(*names: str, default: str | None = None) -> str | None:
    """
    Return the first non-empty environment variable in `names`.

    Args:
        *names: Environment variable names to check in order.
        default: Value returned if no non-empty variable is found.
    """
    for name in names:
        raw = os.getenv(name)
        if raw is None:
            continue
        value = raw.strip()
        if value:
            return value
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = _env_first(name)
    if raw is None:
        return default
    return raw.lower() in ("1", "true", "yes", "on")


def _redis_url_from_env() -> str:
    url = _env_first("TRANSCENDIA_REDIS_URL", "REDIS_URL")
    if url:
        return url
    host = _env_first("TRANSCENDIA_REDIS_HOST", default="localhost") or "localhost"
    port = _env_first("TRANSCENDIA_REDIS_PORT", default="6379") or "6379"
    db = _env_first("TRANSCENDIA_REDIS_DB", default="0") or "0"
    password = _env_first("TRANSCENDIA_REDIS_PASSWORD", default="") or ""
    if password:
        return f"redis://:{password}@{host}:{port}/{db}"
    return f"redis://{host}:{port}/{db}"


@dataclass(frozen=True, slots=True)
class TranscendiaSettings:
    """Explicit settings used by the cache and translation service."""

    cache_backend: str = "redis"
    redis_url: str = DEFAULT_REDIS_URL
    cache_prefix: str = ""
    cache_ttl_s: int = DEFAULT_CACHE_TTL_S
    cache_op_timeout_s: float | None = 0.25

    fuzzy_fallback: bool = False
    fuzzy_min_score: int = 10

    def __post_init__(self) -> None:
        if self.cache_ttl_s <= 0:
            raise ValueError("cache_ttl_s must be > 0")
        if self.cache_op_timeout_s is not None and self.cache_op_timeout_s <= 0:
            raise ValueError("cache_op_timeout_s must be > 0 when set")
        if self.fuzzy_min_score < 1:
            raise ValueError("fuzzy_min_score must be >= 1")

    @staticmethod
    def from_env() -> "TranscendiaSettings":
        """Load settings from `TRANSCENDIA_*` environment variables."""
        timeout_raw = _env_first("TRANSCENDIA_CACHE_OP_TIMEOUT_S", default="0.25")
        timeout_s = float(timeout_raw) if timeout_raw else None
        return TranscendiaSettings(
            cache_backend=(
                _env_first("TRANSCENDIA_CACHE_BACKEND", default="redis") or "redis"
            ).lower(),
            redis_url=_redis_url_from_env(),
            cache_prefix=_env_first("TRANSCENDIA_CACHE_PREFIX", default="") or "",
            cache_ttl_s=int(
                _env_first("TRANSCENDIA_CACHE_TTL_S", default=str(DEFAULT_CACHE_TTL_S))
                or DEFAULT_CACHE_TTL_S
            ),
            cache_op_timeout_s=timeout_s if timeout_s and timeout_s > 0 else None,
            fuzzy_fallback=_env_bool("TRANSCENDIA_FUZZY_FALLBACK", False),
            fuzzy_min_score=int(
                _env_first("TRANSCENDIA_FUZZY_MIN_SCORE", default="10") or "10"
            ),
        )
