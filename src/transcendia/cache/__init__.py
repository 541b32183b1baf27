"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/__init__.py.
"""

from .base import CacheEntry, CacheStats, CacheTier, SharedTierState
from .factory import create_translation_cache_from_env
from .inmemory import LocalCacheTier
from .layered import LayeredTranslationCache, composite_key
from .redis import RedisCacheTier

__all__ = [
    "CacheEntry",
    "CacheStats",
    "CacheTier",
    "SharedTierState",
    "LocalCacheTier",
    "RedisCacheTier",
    "LayeredTranslationCache",
    "composite_key",
    "create_translation_cache_from_env",
]
