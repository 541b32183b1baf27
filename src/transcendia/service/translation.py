"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Request-handling layer for translation lookups.

Flow per key: parse → cache → durable store → populate cache. A ``None``
result means no approved translation exists; store failures raise
`TranslationStoreError` so callers can tell the two apart.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from ..cache import LayeredTranslationCache
from ..errors import InvalidRequestError, TranslationStoreError
from ..semantic import SemanticKey, SemanticKeyResolver
from ..settings import TranscendiaSettings
from ..store import TranslationStore
from .types import (
    MAX_LANG_LENGTH,
    MIN_LANG_LENGTH,
    BatchTranslationItem,
    TranslationResult,
)

logger = logging.getLogger("transcendia.service")


def validate_lookup(key: str, lang: str) -> None:
    """Reject empty keys and out-of-range language codes."""
    if not key:
        raise InvalidRequestError("Translation key must be non-empty")
    if not MIN_LANG_LENGTH <= len(lang) <= MAX_LANG_LENGTH:
        raise InvalidRequestError(
            f"Language code must be {MIN_LANG_LENGTH}-{MAX_LANG_LENGTH} characters: {lang!r}"
        )


class TranslationService:
    """
    Resolve (key, language) pairs to approved translations.

    Args:
        resolver: Semantic key parser/matcher.
        cache: Layered cache fronting the store.
        store: Durable translation store.
        settings: Optional settings; controls the fuzzy fallback.
    """

    def __init__(
        self,
        *,
        resolver: SemanticKeyResolver,
        cache: LayeredTranslationCache,
        store: TranslationStore,
        settings: TranscendiaSettings | None = None,
    ) -> None:
        self._resolver = resolver
        self._cache = cache
        self._store = store
        self._settings = settings or TranscendiaSettings()

    async def translate(self, key: str, lang: str) -> TranslationResult | None:
        """
        Return the translation for `key` in `lang`, or `None` if absent.

        Exact and structural store hits are cached under `key`. Values found
        through the fuzzy fallback are returned but never cached.
        """
        validate_lookup(key, lang)
        parsed = self._resolver.parse(key)

        cached = await self._cache.get(key, lang)
        if cached is not None:
            return TranslationResult(
                key=key, value=cached, lang=lang, context=parsed.context, cached=True
            )

        value = await self._lookup(parsed, lang)
        context = parsed.context
        fuzzy = False
        if value is None and self._settings.fuzzy_fallback:
            match = await self._fuzzy_match(parsed, lang)
            if match is not None:
                value = await self._lookup(match, lang)
                context = match.context
                fuzzy = True
        if value is None:
            logger.debug("No approved translation for %s (%s)", key, lang)
            return None

        # Fuzzy aliases stay out of the cache.
        if not fuzzy:
            await self._cache.set(key, lang, value)
        return TranslationResult(
            key=key, value=value, lang=lang, context=context, cached=False
        )

    async def translate_batch(
        self, keys: Sequence[str], lang: str
    ) -> list[BatchTranslationItem]:
        """Resolve many keys concurrently; one item per key, in input order."""
        for key in keys:
            validate_lookup(key, lang)
        results = await asyncio.gather(*(self.translate(key, lang) for key in keys))
        return [
            BatchTranslationItem(key=key, value=None, found=False)
            if result is None
            else BatchTranslationItem(
                key=key, value=result.value, found=True, cached=result.cached
            )
            for key, result in zip(keys, results)
        ]

    async def _lookup(self, parsed: SemanticKey, lang: str) -> str | None:
        """
        Query the store by exact raw key and by (intent, context) concurrently.

        When both predicates match with different values the exact key wins.
        """
        try:
            exact, structural = await asyncio.gather(
                self._store.find_by_exact_key(parsed.raw, lang),
                self._store.find_by_intent(parsed.intent, parsed.context, lang),
            )
        except TranslationStoreError:
            raise
        except Exception as exc:
            raise TranslationStoreError(
                f"Translation lookup failed for '{parsed.raw}' ({lang})"
            ) from exc
        return exact if exact is not None else structural

    async def _fuzzy_match(self, parsed: SemanticKey, lang: str) -> SemanticKey | None:
        try:
            candidates = await self._store.list_keys(lang)
        except TranslationStoreError:
            raise
        except Exception as exc:
            raise TranslationStoreError(
                f"Listing translation keys failed for language {lang}"
            ) from exc

        best = self._resolver.find_best_match(candidates, parsed.intent, parsed.context)
        if best is None:
            return None
        score = self._resolver.score(best, parsed.intent, parsed.context)
        if score < self._settings.fuzzy_min_score:
            return None
        logger.debug(
            "Fuzzy match %s -> %s (score=%d, lang=%s)", parsed.raw, best.raw, score, lang
        )
        return best
