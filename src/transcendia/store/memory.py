"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

In-memory translation store implementation.
"""

from __future__ import annotations

import asyncio
import dataclasses
import time
from collections.abc import Iterable

from ..errors import ContributionNotFoundError, LanguageExistsError
from ..semantic import SemanticKey
from .base import TranslationStore
from .types import (
    APPROVED,
    Contribution,
    ContributionStatus,
    Language,
    Translation,
    TranslationKey,
    TranslationStatus,
)


class InMemoryTranslationStore(TranslationStore):
    """
    In-process store using dict-based tracking.

    Suitable for single-process systems and testing. Data is lost on process
    restart. Rows are scanned in insertion order, so "first match" is stable.
    """

    def __init__(self, languages: Iterable[Language] = ()) -> None:
        self._lock = asyncio.Lock()
        self._languages: dict[str, Language] = {row.code: row for row in languages}
        self._keys: dict[str, TranslationKey] = {}
        self._translations: dict[tuple[str, str], Translation] = {}
        self._contributions: dict[str, Contribution] = {}

    async def find_by_exact_key(
        self,
        key: str,
        language_code: str,
        *,
        status: TranslationStatus = APPROVED,
    ) -> str | None:
        return self._first_value(
            (row for row in self._keys.values() if row.key == key),
            language_code,
            status,
        )

    async def find_by_intent(
        self,
        intent: str,
        context: str,
        language_code: str,
        *,
        status: TranslationStatus = APPROVED,
    ) -> str | None:
        return self._first_value(
            (
                row
                for row in self._keys.values()
                if row.intent == intent and row.context == context
            ),
            language_code,
            status,
        )

    async def list_keys(self, language_code: str) -> list[SemanticKey]:
        """Return keys that have an approved translation in `language_code`."""
        return [
            SemanticKey(intent=row.intent, context=row.context, raw=row.key)
            for row in self._keys.values()
            if self._translation_for(row.id, language_code, APPROVED) is not None
        ]

    async def find_translation_key(
        self, key: str, intent: str, context: str
    ) -> TranslationKey | None:
        for row in self._keys.values():
            if row.key == key:
                return row
        for row in self._keys.values():
            if row.intent == intent and row.context == context:
                return row
        return None

    async def get_translation_key(self, key_id: str) -> TranslationKey | None:
        return self._keys.get(key_id)

    async def create_translation_key(
        self, key: str, intent: str, context: str
    ) -> TranslationKey:
        row = TranslationKey(key=key, intent=intent, context=context)
        async with self._lock:
            self._keys[row.id] = row
        return row

    async def get_language(self, code: str) -> Language | None:
        return self._languages.get(code)

    async def list_languages(self) -> list[Language]:
        """Return active languages ordered by name."""
        rows = [row for row in self._languages.values() if row.is_active]
        return sorted(rows, key=lambda row: row.name)

    async def add_language(self, language: Language) -> Language:
        row = dataclasses.replace(language, code=language.code.lower())
        async with self._lock:
            if row.code in self._languages:
                raise LanguageExistsError(f"Language code already exists: {row.code}")
            self._languages[row.code] = row
        return row

    async def create_contribution(self, contribution: Contribution) -> Contribution:
        async with self._lock:
            self._contributions[contribution.id] = contribution
        return contribution

    async def get_contribution(self, contribution_id: str) -> Contribution | None:
        return self._contributions.get(contribution_id)

    async def list_contributions(
        self,
        *,
        status: ContributionStatus | None = None,
        language_code: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Contribution]:
        """Return matching contributions, newest first."""
        rows = list(reversed(self._filter_contributions(status, language_code)))
        rows.sort(key=lambda row: row.created_at, reverse=True)
        return rows[offset : offset + limit]

    async def count_contributions(
        self,
        *,
        status: ContributionStatus | None = None,
        language_code: str | None = None,
    ) -> int:
        return len(self._filter_contributions(status, language_code))

    async def update_contribution_status(
        self, contribution_id: str, status: ContributionStatus
    ) -> Contribution:
        async with self._lock:
            row = self._contributions.get(contribution_id)
            if row is None:
                raise ContributionNotFoundError(
                    f"Contribution '{contribution_id}' not found"
                )
            row.status = status
        return row

    async def upsert_translation(
        self,
        key_id: str,
        language_code: str,
        value: str,
        *,
        status: TranslationStatus = APPROVED,
    ) -> Translation:
        async with self._lock:
            row = self._translations.get((key_id, language_code))
            if row is None:
                row = Translation(
                    key_id=key_id,
                    language_code=language_code,
                    value=value,
                    status=status,
                )
                self._translations[(key_id, language_code)] = row
            else:
                row.value = value
                row.status = status
                row.updated_at = time.time()
        return row

    def _translation_for(
        self, key_id: str, language_code: str, status: TranslationStatus
    ) -> Translation | None:
        row = self._translations.get((key_id, language_code))
        if row is None or row.status != status:
            return None
        return row

    def _first_value(
        self,
        keys: Iterable[TranslationKey],
        language_code: str,
        status: TranslationStatus,
    ) -> str | None:
        for key in keys:
            row = self._translation_for(key.id, language_code, status)
            if row is not None:
                return row.value
        return None

    def _filter_contributions(
        self,
        status: ContributionStatus | None,
        language_code: str | None,
    ) -> list[Contribution]:
        return [
            row
            for row in self._contributions.values()
            if (status is None or row.status == status)
            and (language_code is None or row.language_code == language_code)
        ]
