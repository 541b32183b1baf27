"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Result and request types for the translation and contribution services.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from ..store import Contribution

MIN_LANG_LENGTH = 2
MAX_LANG_LENGTH = 10


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """
    One resolved translation.

    Attributes:
        key: Raw key as requested.
        value: Approved translation text.
        lang: Target language code.
        context: Context the value was resolved for.
        cached: Whether the value came from the cache.
    """

    key: str
    value: str
    lang: str
    context: str
    cached: bool


@dataclass(frozen=True, slots=True)
class BatchTranslationItem:
    """Per-key outcome of a batch lookup."""

    key: str
    value: str | None
    found: bool
    cached: bool = False


@dataclass(frozen=True, slots=True)
class ContributionPage:
    """One page of contributions plus the unpaged total."""

    contributions: list[Contribution] = field(default_factory=list)
    total: int = 0
    limit: int = 20
    offset: int = 0


class ContributionRequest(BaseModel):
    key: str = Field(min_length=1)
    lang: str = Field(min_length=MIN_LANG_LENGTH, max_length=MAX_LANG_LENGTH)
    value: str = Field(min_length=1)
    comment: str | None = None
    contributor_id: str | None = None
