"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Community contribution workflow: submit, list, approve, reject.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..cache import LayeredTranslationCache
from ..errors import (
    ContributionNotFoundError,
    InvalidRequestError,
    LanguageNotFoundError,
)
from ..semantic import DEFAULT_CONTEXT, SemanticKeyResolver
from ..store import (
    APPROVED,
    Contribution,
    ContributionStatus,
    Translation,
    TranslationStore,
)
from .types import ContributionPage, ContributionRequest

logger = logging.getLogger("transcendia.service")

_CONTRIBUTION_STATUSES = ("OPEN", "APPROVED", "REJECTED")


class ContributionService:
    """
    Moderate community-submitted translations.

    Approving a contribution always invalidates the cached value for the
    affected key so the new translation is served on the next lookup.
    """

    def __init__(
        self,
        *,
        resolver: SemanticKeyResolver,
        cache: LayeredTranslationCache,
        store: TranslationStore,
    ) -> None:
        self._resolver = resolver
        self._cache = cache
        self._store = store

    async def submit(
        self, request: ContributionRequest | Mapping[str, Any]
    ) -> Contribution:
        """Validate and store a new ``OPEN`` contribution."""
        if not isinstance(request, ContributionRequest):
            try:
                request = ContributionRequest.model_validate(dict(request))
            except ValidationError as exc:
                raise InvalidRequestError(str(exc)) from exc

        language = await self._store.get_language(request.lang)
        if language is None:
            raise LanguageNotFoundError(f"Language not found: {request.lang}")

        parsed = self._resolver.parse(request.key)
        key_row = await self._store.find_translation_key(
            request.key, parsed.intent, parsed.context
        )
        if key_row is None:
            key_row = await self._store.create_translation_key(
                request.key, parsed.intent, parsed.context
            )

        contribution = await self._store.create_contribution(
            Contribution(
                key_id=key_row.id,
                language_code=language.code,
                suggested_value=request.value,
                submitted_key=request.key,
                comment=request.comment,
                contributor_id=request.contributor_id,
            )
        )
        logger.info(
            "Contribution %s submitted for %s (%s)",
            contribution.id[:8],
            request.key,
            language.code,
        )
        return contribution

    async def list_contributions(
        self,
        *,
        status: str | None = None,
        lang: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> ContributionPage:
        """Return one page of contributions, newest first."""
        if limit < 1:
            raise InvalidRequestError("limit must be >= 1")
        if offset < 0:
            raise InvalidRequestError("offset must be >= 0")
        normalized = _normalize_status(status)
        rows = await self._store.list_contributions(
            status=normalized, language_code=lang, limit=limit, offset=offset
        )
        total = await self._store.count_contributions(
            status=normalized, language_code=lang
        )
        return ContributionPage(
            contributions=rows, total=total, limit=limit, offset=offset
        )

    async def approve(self, contribution_id: str) -> Translation:
        """
        Approve a contribution, publish its value, and invalidate the cache.

        Raises:
            ContributionNotFoundError: When `contribution_id` is unknown.
        """
        contribution = await self._store.get_contribution(contribution_id)
        if contribution is None:
            raise ContributionNotFoundError(f"Contribution '{contribution_id}' not found")

        await self._store.update_contribution_status(contribution_id, "APPROVED")
        translation = await self._store.upsert_translation(
            contribution.key_id,
            contribution.language_code,
            contribution.suggested_value,
            status=APPROVED,
        )
        aliases = await self._cache_aliases(contribution)
        for alias in aliases:
            await self._cache.delete(alias, contribution.language_code)
        logger.info(
            "Contribution %s approved; invalidated %d cache key(s) for %s",
            contribution_id[:8],
            len(aliases),
            contribution.language_code,
        )
        return translation

    async def reject(
        self, contribution_id: str, *, reason: str | None = None
    ) -> Contribution:
        """Mark a contribution ``REJECTED``."""
        contribution = await self._store.update_contribution_status(
            contribution_id, "REJECTED"
        )
        logger.info(
            "Contribution %s rejected%s",
            contribution_id[:8],
            f": {reason}" if reason else "",
        )
        return contribution

    async def _cache_aliases(self, contribution: Contribution) -> list[str]:
        """Raw keys under which the approved value may already be cached."""
        aliases = [contribution.submitted_key]
        key_row = await self._store.get_translation_key(contribution.key_id)
        if key_row is not None:
            aliases.append(key_row.key)
            aliases.append(self._resolver.generate(key_row.intent, key_row.context))
            if key_row.context == DEFAULT_CONTEXT:
                aliases.append(key_row.intent)
                aliases.append(self._resolver.generate(key_row.intent))
        return list(dict.fromkeys(aliases))


def _normalize_status(status: str | None) -> ContributionStatus | None:
    if status is None:
        return None
    normalized = status.strip().upper()
    if normalized not in _CONTRIBUTION_STATUSES:
        raise InvalidRequestError(f"Unknown contribution status: {status}")
    return normalized  # type: ignore[return-value]
