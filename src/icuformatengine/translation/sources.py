"""Message sources consumed by Translator.

A message source returns the catalog for a (locale, domain) pair: a mapping
from key to either a template string, a nested mapping of further keys, or
a mapping from plural category name to template (the pre-pluralized form).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol

from icuformatengine.translation.types import Catalog, Domain, LocaleCode

__all__ = ["ChainMessageSource", "DictMessageSource", "MessageSource"]


class MessageSource(Protocol):
    """Protocol for message sources (structural typing).

    Example:
        >>> class ApiSource:
        ...     def load(self, locale: str, domain: str) -> Catalog:
        ...         return fetch_catalog(locale, domain)
        ...     def exists(self, locale: str, domain: str) -> bool:
        ...         return True
    """

    def load(self, locale: LocaleCode, domain: Domain) -> Catalog:
        """Load the catalog for a locale and domain (empty if absent)."""
        ...

    def exists(self, locale: LocaleCode, domain: Domain) -> bool:
        """Check whether a catalog exists for a locale and domain."""
        ...


class DictMessageSource:
    """In-memory source keyed by locale, then domain.

    Example:
        >>> source = DictMessageSource({"en": {"messages": {"hello": "Hello, {name}!"}}})
        >>> source.load("en", "messages")["hello"]
        'Hello, {name}!'
    """

    __slots__ = ("_catalogs",)

    def __init__(self, catalogs: Mapping[LocaleCode, Mapping[Domain, Catalog]]) -> None:
        self._catalogs = catalogs

    def load(self, locale: LocaleCode, domain: Domain) -> Catalog:
        return self._catalogs.get(locale, {}).get(domain, {})

    def exists(self, locale: LocaleCode, domain: Domain) -> bool:
        return domain in self._catalogs.get(locale, {})


class ChainMessageSource:
    """Combines sources; the first source that has a catalog wins."""

    __slots__ = ("_sources",)

    def __init__(self, sources: Iterable[MessageSource] = ()) -> None:
        self._sources: list[MessageSource] = list(sources)

    def add_source(self, source: MessageSource) -> ChainMessageSource:
        """Append a source to the chain. Returns self for chaining."""
        self._sources.append(source)
        return self

    def load(self, locale: LocaleCode, domain: Domain) -> Catalog:
        for source in self._sources:
            if source.exists(locale, domain):
                return source.load(locale, domain)
        return {}

    def exists(self, locale: LocaleCode, domain: Domain) -> bool:
        return any(source.exists(locale, domain) for source in self._sources)
