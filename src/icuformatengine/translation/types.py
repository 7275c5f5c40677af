"""Type aliases for the translation layer.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "Catalog",
    "CatalogEntry",
    "Domain",
    "LocaleCode",
    "MessageKey",
]

type MessageKey = str
"""Translation key, optionally dot-separated (e.g., 'cart.items')."""

type LocaleCode = str
"""Locale code (e.g., 'en', 'ru_RU', 'pt-BR')."""

type Domain = str
"""Message namespace (e.g., 'messages', 'errors')."""

type CatalogEntry = str | Mapping[str, CatalogEntry]
"""Template string, nested keys, or plural-category-to-template mapping."""

type Catalog = Mapping[str, CatalogEntry]
"""Messages for one (locale, domain) pair."""
