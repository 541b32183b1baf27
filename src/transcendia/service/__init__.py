"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Request-handling services composed from the resolver, cache, and store.
"""

from .contributions import ContributionService
from .translation import TranslationService, validate_lookup
from .types import (
    BatchTranslationItem,
    ContributionPage,
    ContributionRequest,
    TranslationResult,
)

__all__ = [
    "TranslationService",
    "ContributionService",
    "validate_lookup",
    "TranslationResult",
    "BatchTranslationItem",
    "ContributionPage",
    "ContributionRequest",
]
