"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Record types exchanged with the durable translation store.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Literal

TranslationStatus = Literal["APPROVED", "PENDING", "REJECTED"]
ContributionStatus = Literal["OPEN", "APPROVED", "REJECTED"]

APPROVED: TranslationStatus = "APPROVED"


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Language:
    """A target language the service can translate into."""

    code: str
    name: str
    native_name: str
    is_active: bool = True


@dataclass(frozen=True, slots=True)
class TranslationKey:
    """A translatable concept, stored once per raw key."""

    key: str
    intent: str
    context: str
    id: str = field(default_factory=_new_id)


@dataclass(slots=True)
class Translation:
    """One translated value of a key in one language."""

    key_id: str
    language_code: str
    value: str
    status: TranslationStatus = APPROVED
    id: str = field(default_factory=_new_id)
    updated_at: float = field(default_factory=time.time)


@dataclass(slots=True)
class Contribution:
    """
    A community-submitted translation awaiting moderation.

    Attributes:
        key_id: Translation key the suggestion belongs to.
        language_code: Target language of the suggestion.
        suggested_value: Proposed translation text.
        submitted_key: Raw key the contributor used, kept for cache invalidation.
        comment: Optional free-form note from the contributor.
        contributor_id: Optional opaque contributor identifier.
        status: Moderation status.
        created_at: Unix timestamp of submission.
    """

    key_id: str
    language_code: str
    suggested_value: str
    submitted_key: str
    comment: str | None = None
    contributor_id: str | None = None
    status: ContributionStatus = "OPEN"
    id: str = field(default_factory=_new_id)
    created_at: float = field(default_factory=time.time)
