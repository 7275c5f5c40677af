"""Key-based translation with locale fallback.

Translator looks a key up in a MessageSource, formats the template with
IcuMessageFormatter and falls back to a secondary locale, then to the last
segment of the key, when the key is missing.

Key lookup:
    1. Exact key in the (locale, domain) catalog
    2. Dot path into nested mappings ("cart.items" -> catalog["cart"]["items"])

Thread Safety:
    Cycle detection uses a visited set created per top-level call and passed
    down explicitly, so concurrent calls never share recursion state. Loaded
    catalogs are memoized per instance; concurrent first loads of the same
    catalog are idempotent.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from icuformatengine.constants import COUNT_KEY, DEFAULT_DOMAIN, LOCALE_KEY
from icuformatengine.diagnostics import ErrorTemplate, TranslationNotFoundError
from icuformatengine.enums import PluralCategory
from icuformatengine.formatting import IcuMessageFormatter, MessageFormatter, Parameters
from icuformatengine.plural import PluralRuleProvider, get_default_provider
from icuformatengine.translation.sources import MessageSource
from icuformatengine.translation.types import (
    Catalog,
    CatalogEntry,
    Domain,
    LocaleCode,
    MessageKey,
)

__all__ = ["Translator"]

logger = logging.getLogger(__name__)

type _Visited = set[tuple[LocaleCode, Domain, MessageKey]]


class Translator:
    """Translates keys into formatted, localized strings.

    Example:
        >>> from icuformatengine.translation import DictMessageSource
        >>> source = DictMessageSource({
        ...     "en": {"messages": {"cart": {"items": "{count, plural, one{# item} other{# items}}"}}},
        ... })
        >>> translator = Translator("ru", "en", source)
        >>> translator.translate_plural("cart.items", 3)
        '3 items'
        >>> translator.translate("cart.missing")
        'missing'
    """

    __slots__ = (
        "_fallback_locale",
        "_formatter",
        "_loaded",
        "_locale",
        "_locale_key",
        "_provider",
        "_source",
    )

    def __init__(
        self,
        locale: LocaleCode,
        fallback_locale: LocaleCode | None,
        source: MessageSource,
        *,
        formatter: MessageFormatter | None = None,
        provider: PluralRuleProvider | None = None,
        locale_key: str = LOCALE_KEY,
    ) -> None:
        """Initialize translator.

        Args:
            locale: Primary locale
            fallback_locale: Locale consulted when a key is missing (or None)
            source: Message source
            formatter: Template formatter (default: IcuMessageFormatter)
            provider: Plural rule provider for pre-pluralized entries
            locale_key: Parameter key the active locale is injected under
        """
        self._locale = locale
        self._fallback_locale = fallback_locale
        self._source = source
        self._provider = provider if provider is not None else get_default_provider()
        self._formatter = formatter if formatter is not None else IcuMessageFormatter(self._provider)
        self._locale_key = locale_key
        self._loaded: dict[tuple[LocaleCode, Domain], Catalog] = {}

    def __repr__(self) -> str:
        return f"Translator(locale={self._locale!r}, fallback_locale={self._fallback_locale!r})"

    @property
    def locale(self) -> LocaleCode:
        return self._locale

    @locale.setter
    def locale(self, value: LocaleCode) -> None:
        self._locale = value

    @property
    def fallback_locale(self) -> LocaleCode | None:
        return self._fallback_locale

    @fallback_locale.setter
    def fallback_locale(self, value: LocaleCode | None) -> None:
        self._fallback_locale = value or None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def translate(
        self,
        key: MessageKey,
        parameters: Parameters | None = None,
        domain: Domain | None = None,
        locale: LocaleCode | None = None,
    ) -> str:
        """Translate a key.

        A pre-pluralized entry (category mapping) renders its ``other`` form,
        or its first form when ``other`` is absent.

        Args:
            key: Translation key
            parameters: Template parameters
            domain: Message domain (default: "messages")
            locale: Target locale (default: the translator's locale)

        Returns:
            Formatted message, or the last key segment if no locale has it

        Raises:
            RuleNotFoundError: If a plural clause needs a missing plural rule
        """
        return self._translate(
            key,
            parameters or {},
            domain or DEFAULT_DOMAIN,
            locale or self._locale,
            set(),
        )

    def translate_plural(
        self,
        key: MessageKey,
        count: int,
        parameters: Parameters | None = None,
        domain: Domain | None = None,
        locale: LocaleCode | None = None,
    ) -> str:
        """Translate a key whose form depends on a count.

        ``count`` is added to the parameters. A string entry is formatted
        directly (it usually holds a plural clause); a category mapping is
        indexed by the locale's plural category, then ``other``, then its
        first form.

        Raises:
            RuleNotFoundError: If the locale has no plural rule
        """
        params = {**(parameters or {}), COUNT_KEY: count}
        return self._translate_plural(
            key,
            count,
            params,
            domain or DEFAULT_DOMAIN,
            locale or self._locale,
            set(),
        )

    def t(
        self, key: MessageKey, parameters: Parameters | None = None, domain: Domain | None = None
    ) -> str:
        """Shorthand for translate()."""
        return self.translate(key, parameters, domain)

    def tp(
        self,
        key: MessageKey,
        count: int,
        parameters: Parameters | None = None,
        domain: Domain | None = None,
    ) -> str:
        """Shorthand for translate_plural()."""
        return self.translate_plural(key, count, parameters, domain)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _translate(
        self,
        key: MessageKey,
        parameters: Parameters,
        domain: Domain,
        locale: LocaleCode,
        visited: _Visited,
    ) -> str:
        if not self._visit(key, domain, locale, visited):
            return _key_fallback(key)
        try:
            entry = self._find(key, locale, domain)
            message = _singular_form(entry)
            if message is None:
                raise TranslationNotFoundError(
                    ErrorTemplate.translation_not_found(key, locale, domain),
                    key=key,
                    locale=locale,
                    domain=domain,
                )
        except TranslationNotFoundError as e:
            return self._fall_back(
                e, lambda fallback: self._translate(key, parameters, domain, fallback, visited)
            )
        return self._formatter.format(message, self._with_locale(parameters, locale))

    def _translate_plural(
        self,
        key: MessageKey,
        count: int,
        parameters: Parameters,
        domain: Domain,
        locale: LocaleCode,
        visited: _Visited,
    ) -> str:
        if not self._visit(key, domain, locale, visited):
            return _key_fallback(key)
        try:
            entry = self._find(key, locale, domain)
            if isinstance(entry, str):
                message: str | None = entry
            else:
                category = self._provider.get_rule(locale).get_category(count)
                message = _plural_form(entry, category)
            if message is None:
                raise TranslationNotFoundError(
                    ErrorTemplate.translation_not_found(key, locale, domain),
                    key=key,
                    locale=locale,
                    domain=domain,
                )
        except TranslationNotFoundError as e:
            return self._fall_back(
                e,
                lambda fallback: self._translate_plural(
                    key, count, parameters, domain, fallback, visited
                ),
            )
        return self._formatter.format(message, self._with_locale(parameters, locale))

    @staticmethod
    def _visit(key: MessageKey, domain: Domain, locale: LocaleCode, visited: _Visited) -> bool:
        marker = (locale, domain, key)
        if marker in visited:
            logger.debug("Translation cycle detected for %s", marker)
            return False
        visited.add(marker)
        return True

    def _fall_back(
        self, error: TranslationNotFoundError, retry: Callable[[LocaleCode], str]
    ) -> str:
        fallback = self._fallback_locale
        if fallback is not None and fallback != error.locale:
            logger.debug("%s; retrying with fallback locale '%s'", error, fallback)
            return retry(fallback)
        logger.debug("%s; returning key fallback", error)
        return _key_fallback(error.key)

    def _with_locale(self, parameters: Parameters, locale: LocaleCode) -> dict[str | int, Any]:
        return {**parameters, self._locale_key: locale}

    def _find(self, key: MessageKey, locale: LocaleCode, domain: Domain) -> CatalogEntry:
        catalog = self._catalog(locale, domain)

        if key in catalog:
            return catalog[key]

        if "." in key:
            current: CatalogEntry = catalog
            for part in key.split("."):
                if not isinstance(current, Mapping) or part not in current:
                    break
                current = current[part]
            else:
                return current

        raise TranslationNotFoundError(
            ErrorTemplate.translation_not_found(key, locale, domain),
            key=key,
            locale=locale,
            domain=domain,
        )

    def _catalog(self, locale: LocaleCode, domain: Domain) -> Catalog:
        cache_key = (locale, domain)
        catalog = self._loaded.get(cache_key)
        if catalog is None:
            catalog = self._source.load(locale, domain) if self._source.exists(locale, domain) else {}
            self._loaded[cache_key] = catalog
        return catalog


def _key_fallback(key: MessageKey) -> str:
    """Last dot-separated segment of a key."""
    return key.rsplit(".", 1)[-1]


def _singular_form(entry: CatalogEntry) -> str | None:
    if isinstance(entry, str):
        return entry
    other = entry.get(PluralCategory.OTHER)
    if isinstance(other, str):
        return other
    return next((form for form in entry.values() if isinstance(form, str)), None)


def _plural_form(entry: Mapping[str, CatalogEntry], category: PluralCategory) -> str | None:
    for label in (category, PluralCategory.OTHER):
        form = entry.get(label)
        if isinstance(form, str):
            return form
    return next((form for form in entry.values() if isinstance(form, str)), None)
