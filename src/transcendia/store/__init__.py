"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Durable translation store contracts and the in-memory implementation.
"""

from .base import TranslationStore
from .memory import InMemoryTranslationStore
from .types import (
    APPROVED,
    Contribution,
    ContributionStatus,
    Language,
    Translation,
    TranslationKey,
    TranslationStatus,
)

__all__ = [
    "TranslationStore",
    "InMemoryTranslationStore",
    "APPROVED",
    "Contribution",
    "ContributionStatus",
    "Language",
    "Translation",
    "TranslationKey",
    "TranslationStatus",
]
