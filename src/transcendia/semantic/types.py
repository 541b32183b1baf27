"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Value types for semantic translation keys.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CONTEXT = "default"


@dataclass(frozen=True, slots=True)
class SemanticKey:
    """
    Structured form of a raw translation key.

    Attributes:
        intent: Lowercase topic of the phrase, e.g. ``greeting``.
        context: Lowercase qualifier, ``default`` when the raw key has none.
        raw: The original input string, untouched.
    """

    intent: str
    context: str = DEFAULT_CONTEXT
    raw: str = ""

    @property
    def pair(self) -> tuple[str, str]:
        """Return the language-independent ``(intent, context)`` identity."""
        return (self.intent, self.context)


@dataclass(frozen=True, slots=True)
class MatchCandidate:
    """One scored candidate produced while resolving a fuzzy match."""

    key: SemanticKey
    score: int
