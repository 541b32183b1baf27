"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Explicit construction of the resolver, cache, and services.

Build once at process start and hand the result to the request-handling
layer; nothing here keeps module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .cache import LayeredTranslationCache, create_translation_cache_from_env
from .semantic import SemanticKeyResolver
from .service import ContributionService, TranslationService
from .settings import TranscendiaSettings
from .store import TranslationStore


@dataclass(frozen=True, slots=True)
class TranscendiaServices:
    """Process-wide handles injected into request handlers."""

    settings: TranscendiaSettings
    resolver: SemanticKeyResolver
    cache: LayeredTranslationCache
    store: TranslationStore
    translations: TranslationService
    contributions: ContributionService


def build_services(
    *,
    store: TranslationStore,
    settings: TranscendiaSettings | None = None,
    cache: LayeredTranslationCache | None = None,
    redis_client: Any | None = None,
) -> TranscendiaServices:
    """
    Wire every component around `store`.

    Args:
        store: Durable translation store.
        settings: Explicit settings; loaded from the environment when omitted.
        cache: Pre-built cache, e.g. a test double. Built from `settings`
            otherwise.
        redis_client: Optional ``redis.asyncio`` client for the shared tier.
    """
    settings = settings or TranscendiaSettings.from_env()
    resolver = SemanticKeyResolver()
    if cache is None:
        cache = create_translation_cache_from_env(
            redis_client=redis_client, settings=settings
        )
    return TranscendiaServices(
        settings=settings,
        resolver=resolver,
        cache=cache,
        store=store,
        translations=TranslationService(
            resolver=resolver, cache=cache, store=store, settings=settings
        ),
        contributions=ContributionService(resolver=resolver, cache=cache, store=store),
    )
