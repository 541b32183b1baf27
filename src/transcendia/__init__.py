"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Transcendia: semantic translation lookup with a two-tier cache.

Quick start::

    from transcendia import InMemoryTranslationStore, build_services

    services = build_services(store=InMemoryTranslationStore())
    await services.cache.connect()
    result = await services.translations.translate(
        "intent:greeting+context:app_entry", "tr"
    )
"""

from .cache import LayeredTranslationCache, SharedTierState
from .errors import (
    CacheConfigError,
    ContributionNotFoundError,
    InvalidRequestError,
    LanguageExistsError,
    LanguageNotFoundError,
    TranscendiaError,
    TranslationStoreError,
)
from .semantic import SemanticKey, SemanticKeyResolver
from .service import ContributionService, TranslationResult, TranslationService
from .settings import TranscendiaSettings
from .store import InMemoryTranslationStore, TranslationStore
from .wiring import TranscendiaServices, build_services

__all__ = [
    "SemanticKey",
    "SemanticKeyResolver",
    "LayeredTranslationCache",
    "SharedTierState",
    "TranslationStore",
    "InMemoryTranslationStore",
    "TranslationService",
    "TranslationResult",
    "ContributionService",
    "TranscendiaSettings",
    "TranscendiaServices",
    "build_services",
    "TranscendiaError",
    "InvalidRequestError",
    "CacheConfigError",
    "TranslationStoreError",
    "LanguageNotFoundError",
    "LanguageExistsError",
    "ContributionNotFoundError",
]
