"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Error taxonomy shared by the resolver, cache, store, and service layers.
"""

from __future__ import annotations


class TranscendiaError(RuntimeError):
    """Base error for translation lookup failures."""


class InvalidRequestError(TranscendiaError, ValueError):
    """Raised when a service call receives malformed input."""


class CacheConfigError(TranscendiaError):
    """Raised when cache backend resolution fails."""


class TranslationStoreError(TranscendiaError):
    """
    Raised when the durable store cannot answer a query.

    Distinct from a ``None`` lookup result, which means "no approved
    translation exists".
    """


class LanguageNotFoundError(TranscendiaError, LookupError):
    """Raised when a language code is not registered in the store."""


class ContributionNotFoundError(TranscendiaError, LookupError):
    """Raised when a contribution id does not exist."""


class LanguageExistsError(TranscendiaError, ValueError):
    """Raised when registering a language code that already exists."""
