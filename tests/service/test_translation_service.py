from __future__ import annotations

import asyncio

import pytest

from transcendia import (
    InMemoryTranslationStore,
    InvalidRequestError,
    LayeredTranslationCache,
    SemanticKeyResolver,
    TranscendiaSettings,
    TranslationService,
    TranslationStoreError,
)
from transcendia.store import Language


def run_async(coro):
    return asyncio.run(coro)


class _FailingStore(InMemoryTranslationStore):
    async def find_by_exact_key(self, key, language_code, *, status="APPROVED"):
        raise OSError("database unavailable")


async def _seed(store: InMemoryTranslationStore, key: str, intent: str, context: str, lang: str, value: str):
    row = await store.create_translation_key(key, intent, context)
    await store.upsert_translation(row.id, lang, value)
    return row


def _service(store, *, cache=None, settings=None) -> tuple[TranslationService, LayeredTranslationCache]:
    cache = cache or LayeredTranslationCache()
    service = TranslationService(
        resolver=SemanticKeyResolver(),
        cache=cache,
        store=store,
        settings=settings,
    )
    return service, cache


def test_translate_reads_through_the_cache():
    async def scenario() -> None:
        store = InMemoryTranslationStore([Language("tr", "Turkish", "Türkçe")])
        await _seed(store, "intent:greeting+context:app_entry", "greeting", "app_entry", "tr", "Merhaba")
        service, cache = _service(store)
        key = "intent:greeting+context:app_entry"

        assert await cache.get(key, "tr") is None

        first = await service.translate(key, "tr")
        assert first is not None
        assert first.value == "Merhaba"
        assert first.context == "app_entry"
        assert first.cached is False

        second = await service.translate(key, "tr")
        assert second is not None
        assert second.value == "Merhaba"
        assert second.cached is True
        assert await cache.get(key, "tr") == "Merhaba"

    run_async(scenario())


def test_translate_matches_alias_by_intent_and_context():
    async def scenario() -> None:
        store = InMemoryTranslationStore()
        await _seed(store, "intent:greeting+context:app_entry", "greeting", "app_entry", "tr", "Merhaba")
        service, _ = _service(store)

        result = await service.translate("greeting:app_entry", "tr")

        assert result is not None
        assert result.value == "Merhaba"

    run_async(scenario())


def test_exact_key_wins_over_intent_and_context_match():
    async def scenario() -> None:
        store = InMemoryTranslationStore()
        # Structural match created first so insertion order cannot decide.
        await _seed(store, "greeting:app_entry", "greeting", "app_entry", "tr", "Selam")
        await _seed(store, "intent:greeting+context:app_entry", "welcome", "home", "tr", "Merhaba")
        service, _ = _service(store)

        result = await service.translate("intent:greeting+context:app_entry", "tr")

        assert result is not None
        assert result.value == "Merhaba"

    run_async(scenario())


def test_translate_returns_none_when_absent():
    async def scenario() -> None:
        store = InMemoryTranslationStore()
        await _seed(store, "intent:greeting", "greeting", "default", "de", "Hallo")
        service, cache = _service(store)

        assert await service.translate("intent:greeting", "tr") is None
        assert cache.stats().local_entry_count == 0

    run_async(scenario())


def test_store_failure_is_distinct_from_absent():
    async def scenario() -> None:
        service, _ = _service(_FailingStore())

        with pytest.raises(TranslationStoreError, match="lookup failed"):
            await service.translate("intent:greeting", "tr")

    run_async(scenario())


def test_translate_validates_inputs():
    async def scenario() -> None:
        service, _ = _service(InMemoryTranslationStore())

        with pytest.raises(InvalidRequestError):
            await service.translate("", "tr")
        with pytest.raises(InvalidRequestError):
            await service.translate("intent:greeting", "t")
        with pytest.raises(InvalidRequestError):
            await service.translate("intent:greeting", "x" * 11)

    run_async(scenario())


def test_fuzzy_fallback_requires_intent_match():
    async def scenario() -> None:
        store = InMemoryTranslationStore()
        await _seed(store, "intent:greeting", "greeting", "default", "tr", "Merhaba")
        await _seed(store, "intent:farewell+context:checkout", "farewell", "checkout", "tr", "Hoscakal")
        settings = TranscendiaSettings(cache_backend="memory", fuzzy_fallback=True)
        service, _ = _service(store, settings=settings)

        result = await service.translate("intent:greeting+context:checkout", "tr")
        assert result is not None
        assert result.value == "Merhaba"
        assert result.context == "default"

        # Context-only similarity (score 5) stays below the threshold.
        assert await service.translate("intent:thanks+context:checkout", "tr") is None

    run_async(scenario())


def test_fuzzy_hits_are_not_cached_under_the_requested_key():
    async def scenario() -> None:
        store = InMemoryTranslationStore()
        await _seed(store, "intent:greeting", "greeting", "default", "tr", "Merhaba")
        settings = TranscendiaSettings(cache_backend="memory", fuzzy_fallback=True)
        service, cache = _service(store, settings=settings)
        key = "intent:greeting+context:checkout"

        first = await service.translate(key, "tr")
        assert first is not None
        assert first.value == "Merhaba"
        assert await cache.get(key, "tr") is None

        second = await service.translate(key, "tr")
        assert second is not None
        assert second.cached is False

    run_async(scenario())


def test_fuzzy_fallback_disabled_by_default():
    async def scenario() -> None:
        store = InMemoryTranslationStore()
        await _seed(store, "intent:greeting", "greeting", "default", "tr", "Merhaba")
        service, _ = _service(store)

        assert await service.translate("intent:greeting+context:checkout", "tr") is None

    run_async(scenario())


def test_translate_batch_reports_each_key():
    async def scenario() -> None:
        store = InMemoryTranslationStore()
        await _seed(store, "intent:greeting", "greeting", "default", "tr", "Merhaba")
        await _seed(store, "intent:farewell", "farewell", "default", "tr", "Hoscakal")
        service, cache = _service(store)
        await cache.set("intent:farewell", "tr", "Gule gule")

        items = await service.translate_batch(
            ["intent:greeting", "intent:farewell", "intent:missing"], "tr"
        )

        assert [(item.key, item.value, item.found, item.cached) for item in items] == [
            ("intent:greeting", "Merhaba", True, False),
            ("intent:farewell", "Gule gule", True, True),
            ("intent:missing", None, False, False),
        ]

    run_async(scenario())
