from __future__ import annotations

import pytest

from transcendia.semantic import DEFAULT_CONTEXT, SemanticKey, SemanticKeyResolver


@pytest.fixture
def resolver() -> SemanticKeyResolver:
    return SemanticKeyResolver()


def test_parse_canonical_key_with_context(resolver: SemanticKeyResolver):
    parsed = resolver.parse("intent:greeting+context:app_entry")

    assert parsed.intent == "greeting"
    assert parsed.context == "app_entry"
    assert parsed.raw == "intent:greeting+context:app_entry"


def test_parse_canonical_key_is_case_insensitive(resolver: SemanticKeyResolver):
    parsed = resolver.parse("Intent:Greeting+Context:App_Entry")

    assert parsed.intent == "greeting"
    assert parsed.context == "app_entry"
    assert parsed.raw == "Intent:Greeting+Context:App_Entry"


def test_parse_canonical_key_without_context_defaults(resolver: SemanticKeyResolver):
    parsed = resolver.parse("intent:farewell")

    assert parsed == SemanticKey(intent="farewell", context=DEFAULT_CONTEXT, raw="intent:farewell")


@pytest.mark.parametrize("raw", ["greeting", "Hello World", "", "ÇAY"])
def test_parse_without_separator_uses_whole_string_as_intent(
    resolver: SemanticKeyResolver, raw: str
):
    parsed = resolver.parse(raw)

    assert parsed.intent == raw.lower()
    assert parsed.context == DEFAULT_CONTEXT


def test_parse_falls_back_to_first_separator(resolver: SemanticKeyResolver):
    parsed = resolver.parse("error:validation_failed+field:email")

    assert parsed.intent == "error"
    assert parsed.context == "validation_failed+field:email"


def test_parse_pair_form_and_trailing_separator(resolver: SemanticKeyResolver):
    assert resolver.parse("Greeting:App_Entry").pair == ("greeting", "app_entry")
    assert resolver.parse("greeting:").pair == ("greeting", DEFAULT_CONTEXT)


def test_generate_round_trips_through_parse(resolver: SemanticKeyResolver):
    raw = resolver.generate("greeting", "app_entry")

    assert raw == "intent:greeting+context:app_entry"
    assert resolver.parse(raw).pair == ("greeting", "app_entry")
    assert resolver.generate("greeting") == "intent:greeting"
    assert resolver.parse(resolver.generate("greeting")).pair == ("greeting", "default")


def test_is_valid_key_is_permissive_about_separators(resolver: SemanticKeyResolver):
    assert resolver.is_valid_key("intent:greeting+context:app_entry")
    assert resolver.is_valid_key("anything goes: here")
    assert not resolver.is_valid_key("greeting")
    assert not resolver.is_canonical("anything goes: here")
    assert resolver.is_canonical("intent:greeting")


def test_score_terms(resolver: SemanticKeyResolver):
    def key(intent: str, context: str) -> SemanticKey:
        return SemanticKey(intent=intent, context=context)

    assert resolver.score(key("greeting", "app_entry"), "greeting", "app_entry") == 15
    assert resolver.score(key("greeting", "default"), "greeting", "app_entry") == 11
    assert resolver.score(key("greeting", "app"), "greeting", "app_entry") == 12
    assert resolver.score(key("greeting", "entry"), "greeting", "app_entry") == 12
    assert resolver.score(key("greeting", "checkout"), "greeting", "app_entry") == 10
    assert resolver.score(key("farewell", "app_entry"), "greeting", "app_entry") == 5
    assert resolver.score(key("farewell", "checkout"), "greeting", "app_entry") == 0


def test_default_context_takes_precedence_over_related(resolver: SemanticKeyResolver):
    # "default" is also a substring of the target; the default credit wins.
    candidate = SemanticKey(intent="greeting", context="default")

    assert resolver.score(candidate, "greeting", "default_screen") == 11


def test_find_best_match_prefers_exact_context(resolver: SemanticKeyResolver):
    candidates = [
        SemanticKey(intent="greeting", context="default"),
        SemanticKey(intent="greeting", context="app_entry"),
        SemanticKey(intent="farewell", context="app_entry"),
    ]
    target = resolver.parse("greeting")

    best = resolver.find_best_match(candidates, target.intent, "app_entry")

    assert best == SemanticKey(intent="greeting", context="app_entry")


def test_find_best_match_ties_keep_first_seen(resolver: SemanticKeyResolver):
    first = SemanticKey(intent="greeting", context="app", raw="first")
    second = SemanticKey(intent="greeting", context="entry", raw="second")

    for _ in range(5):
        best = resolver.find_best_match([first, second], "greeting", "app_entry")
        assert best is first


def test_find_best_match_returns_none_when_nothing_scores(resolver: SemanticKeyResolver):
    candidates = [SemanticKey(intent="farewell", context="checkout")]

    assert resolver.find_best_match(candidates, "greeting", "app_entry") is None
    assert resolver.find_best_match([], "greeting", "app_entry") is None


def test_exact_intent_and_context_outranks_any_other_intent(resolver: SemanticKeyResolver):
    exact = SemanticKey(intent="greeting", context="app_entry")
    others = [
        SemanticKey(intent="welcome", context=context)
        for context in ("app_entry", "app", "default", "unrelated")
    ]

    best = resolver.find_best_match([*others, exact], "greeting", "app_entry")

    assert best is exact


def test_rank_orders_by_score_and_drops_zero(resolver: SemanticKeyResolver):
    candidates = [
        SemanticKey(intent="farewell", context="checkout"),
        SemanticKey(intent="greeting", context="default"),
        SemanticKey(intent="greeting", context="app_entry"),
        SemanticKey(intent="farewell", context="app_entry"),
    ]

    ranked = resolver.rank(candidates, "greeting", "app_entry")

    assert [row.score for row in ranked] == [15, 11, 5]
    assert ranked[0].key.context == "app_entry"


def test_extract_intents_deduplicates(resolver: SemanticKeyResolver):
    intents = resolver.extract_intents(
        [
            "intent:greeting+context:app_entry",
            "intent:greeting",
            "farewell",
            "Farewell:checkout",
        ]
    )

    assert intents == {"greeting", "farewell"}


def test_group_by_intent_preserves_order(resolver: SemanticKeyResolver):
    keys = [
        resolver.parse("intent:greeting+context:app_entry"),
        resolver.parse("farewell"),
        resolver.parse("intent:greeting"),
    ]

    groups = resolver.group_by_intent(keys)

    assert list(groups) == ["greeting", "farewell"]
    assert [key.context for key in groups["greeting"]] == ["app_entry", "default"]
    assert groups["farewell"] == [keys[1]]
