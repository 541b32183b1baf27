"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Semantic key parsing and fuzzy matching.

Keys look like ``intent:greeting+context:app_entry``. Only the literal
``intent`` label is canonical: ``action:submit+context:login`` goes through
the first-colon fallback and parses to intent ``action``. Anything else is
parsed best-effort so lookups never fail on malformed input.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .types import DEFAULT_CONTEXT, MatchCandidate, SemanticKey

INTENT_EXACT_SCORE = 10
CONTEXT_EXACT_SCORE = 5
CONTEXT_RELATED_SCORE = 2
CONTEXT_DEFAULT_SCORE = 1

_CANONICAL_PATTERN = re.compile(
    r"intent:([a-z_]+)(?:\+context:([a-z_]+))?",
    re.IGNORECASE,
)
_SEPARATOR = ":"


class SemanticKeyResolver:
    """
    Stateless parser/matcher for semantic translation keys.

    Safe to share across concurrent requests; no method mutates state.
    """

    def parse(self, raw: str) -> SemanticKey:
        """
        Parse `raw` into a `SemanticKey`.

        Canonical keys yield their intent and context. Other strings are split
        on the first ``:`` (left is intent, right is context). Strings with no
        separator become an intent with the ``default`` context.
        """
        match = _CANONICAL_PATTERN.fullmatch(raw)
        if match is not None:
            return SemanticKey(
                intent=match.group(1).lower(),
                context=(match.group(2) or DEFAULT_CONTEXT).lower(),
                raw=raw,
            )

        intent, _, context = raw.partition(_SEPARATOR)
        return SemanticKey(
            intent=intent.lower(),
            context=context.lower() or DEFAULT_CONTEXT,
            raw=raw,
        )

    def generate(self, intent: str, context: str | None = None) -> str:
        """Build the canonical raw form for `intent` and optional `context`."""
        if context:
            return f"intent:{intent}+context:{context}"
        return f"intent:{intent}"

    def is_canonical(self, raw: str) -> bool:
        """Return whether `raw` is in strict canonical form."""
        return _CANONICAL_PATTERN.fullmatch(raw) is not None

    def is_valid_key(self, raw: str) -> bool:
        """
        Return whether `raw` is acceptable for resolution.

        Permissive: any string containing ``:`` passes, mirroring the
        fallback branch of `parse`. Use `is_canonical` for strict checks.
        """
        return self.is_canonical(raw) or _SEPARATOR in raw

    def score(
        self,
        candidate: SemanticKey,
        target_intent: str,
        target_context: str,
    ) -> int:
        """Score one candidate against a target intent/context pair."""
        score = 0
        if candidate.intent == target_intent:
            score += INTENT_EXACT_SCORE

        # Context terms are mutually exclusive, checked in priority order.
        if candidate.context == target_context:
            score += CONTEXT_EXACT_SCORE
        elif candidate.context == DEFAULT_CONTEXT:
            score += CONTEXT_DEFAULT_SCORE
        elif _contexts_related(candidate.context, target_context):
            score += CONTEXT_RELATED_SCORE
        return score

    def find_best_match(
        self,
        candidates: Iterable[SemanticKey],
        target_intent: str,
        target_context: str,
    ) -> SemanticKey | None:
        """
        Return the highest-scoring candidate, or `None` if none scores above 0.

        Ties keep the first-seen candidate.
        """
        best: SemanticKey | None = None
        highest = 0
        for candidate in candidates:
            value = self.score(candidate, target_intent, target_context)
            if value > highest:
                highest = value
                best = candidate
        return best

    def rank(
        self,
        candidates: Iterable[SemanticKey],
        target_intent: str,
        target_context: str,
    ) -> list[MatchCandidate]:
        """Return all candidates scoring above zero, best first, stable on ties."""
        scored: list[MatchCandidate] = []
        for candidate in candidates:
            value = self.score(candidate, target_intent, target_context)
            if value > 0:
                scored.append(MatchCandidate(key=candidate, score=value))
        scored.sort(key=lambda row: row.score, reverse=True)
        return scored

    def extract_intents(self, raws: Iterable[str]) -> set[str]:
        """Return the distinct intents found in a batch of raw keys."""
        return {self.parse(raw).intent for raw in raws}

    def group_by_intent(
        self,
        keys: Sequence[SemanticKey],
    ) -> dict[str, list[SemanticKey]]:
        """Group keys by intent, preserving input order within each group."""
        groups: dict[str, list[SemanticKey]] = {}
        for key in keys:
            groups.setdefault(key.intent, []).append(key)
        return groups


def _contexts_related(left: str, right: str) -> bool:
    # Substring containment also covers prefixes in either direction.
    return left in right or right in left
