"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Semantic key resolver package.
"""

from .resolver import (
    CONTEXT_DEFAULT_SCORE,
    CONTEXT_EXACT_SCORE,
    CONTEXT_RELATED_SCORE,
    INTENT_EXACT_SCORE,
    SemanticKeyResolver,
)
from .types import DEFAULT_CONTEXT, MatchCandidate, SemanticKey

__all__ = [
    "SemanticKey",
    "MatchCandidate",
    "DEFAULT_CONTEXT",
    "SemanticKeyResolver",
    "INTENT_EXACT_SCORE",
    "CONTEXT_EXACT_SCORE",
    "CONTEXT_RELATED_SCORE",
    "CONTEXT_DEFAULT_SCORE",
]
