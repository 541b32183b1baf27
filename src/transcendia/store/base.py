"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Query and mutation contract for the durable translation store.

Implementations raise `TranslationStoreError` when the backing store cannot
answer; ``None`` results always mean "not found".
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..semantic import SemanticKey
from .types import (
    APPROVED,
    Contribution,
    ContributionStatus,
    Language,
    Translation,
    TranslationKey,
    TranslationStatus,
)


@runtime_checkable
class TranslationStore(Protocol):
    """Durable store consumed by the translation and contribution services."""

    async def find_by_exact_key(
        self,
        key: str,
        language_code: str,
        *,
        status: TranslationStatus = APPROVED,
    ) -> str | None: ...

    async def find_by_intent(
        self,
        intent: str,
        context: str,
        language_code: str,
        *,
        status: TranslationStatus = APPROVED,
    ) -> str | None: ...

    async def list_keys(self, language_code: str) -> list[SemanticKey]: ...

    async def find_translation_key(
        self, key: str, intent: str, context: str
    ) -> TranslationKey | None: ...

    async def get_translation_key(self, key_id: str) -> TranslationKey | None: ...

    async def create_translation_key(
        self, key: str, intent: str, context: str
    ) -> TranslationKey: ...

    async def get_language(self, code: str) -> Language | None: ...

    async def list_languages(self) -> list[Language]: ...

    async def add_language(self, language: Language) -> Language: ...

    async def create_contribution(self, contribution: Contribution) -> Contribution: ...

    async def get_contribution(self, contribution_id: str) -> Contribution | None: ...

    async def list_contributions(
        self,
        *,
        status: ContributionStatus | None = None,
        language_code: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Contribution]: ...

    async def count_contributions(
        self,
        *,
        status: ContributionStatus | None = None,
        language_code: str | None = None,
    ) -> int: ...

    async def update_contribution_status(
        self, contribution_id: str, status: ContributionStatus
    ) -> Contribution: ...

    async def upsert_translation(
        self,
        key_id: str,
        language_code: str,
        value: str,
        *,
        status: TranslationStatus = APPROVED,
    ) -> Translation: ...
