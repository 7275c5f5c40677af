"""Plural rule lookup keyed by normalized language code.

CldrPluralRuleProvider resolves a locale to a PluralRule in this order:
1. Rules registered on the provider (constructor or register_rule)
2. Built-in rules (PluralRule.for_locale)
3. Babel CLDR data, only when constructed with ``cldr_fallback=True``

and raises RuleNotFoundError when all three miss.

Thread Safety:
    Populate the provider during setup, then call freeze(). After freezing
    the rule table is never mutated and lookups need no locking. Built-in
    and Babel-backed rules come from lru_cache'd factories.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Mapping
from typing import Protocol

from icuformatengine.diagnostics import ErrorTemplate, RuleNotFoundError
from icuformatengine.enums import PluralCategory
from icuformatengine.locale_utils import language_code
from icuformatengine.plural.cldr import cldr_rule_for_language
from icuformatengine.plural.rules import PluralRule

__all__ = [
    "CldrPluralRuleProvider",
    "PluralRuleProvider",
    "get_default_provider",
]

logger = logging.getLogger(__name__)


class PluralRuleProvider(Protocol):
    """Protocol for plural rule providers (structural typing)."""

    def get_rule(self, locale: str) -> PluralRule:
        """Get the plural rule for a locale.

        Raises:
            RuleNotFoundError: If no rule matches the locale
        """
        ...


@functools.lru_cache(maxsize=64)
def _builtin_rule(language: str) -> PluralRule | None:
    return PluralRule.for_locale(language)


class CldrPluralRuleProvider:
    """Default plural rule provider.

    Example:
        >>> provider = CldrPluralRuleProvider()
        >>> provider.get_category("en_US", 1)
        <PluralCategory.ONE: 'one'>
        >>> provider.get_category("ru", 5)
        <PluralCategory.MANY: 'many'>
        >>> provider.get_rule("xx")
        Traceback (most recent call last):
        ...
        icuformatengine.diagnostics.errors.RuleNotFoundError: ...
    """

    __slots__ = ("_cldr_fallback", "_frozen", "_rules")

    def __init__(
        self,
        rules: Iterable[PluralRule] | Mapping[str, PluralRule] = (),
        *,
        cldr_fallback: bool = False,
    ) -> None:
        """Initialize provider.

        Args:
            rules: Extra rules. A mapping registers each rule under its key;
                an iterable registers each rule under its own locale.
            cldr_fallback: Resolve languages missing from the table via
                Babel's CLDR data before raising RuleNotFoundError.
        """
        self._rules: dict[str, PluralRule] = {}
        self._frozen = False
        self._cldr_fallback = cldr_fallback

        if isinstance(rules, Mapping):
            for code, rule in rules.items():
                self.register_rule(code, rule)
        else:
            for rule in rules:
                self.register_rule(rule.locale, rule)

    def __repr__(self) -> str:
        return (
            f"CldrPluralRuleProvider(registered={sorted(self._rules)}, "
            f"cldr_fallback={self._cldr_fallback}, frozen={self._frozen})"
        )

    @property
    def is_frozen(self) -> bool:
        """Whether registration is closed."""
        return self._frozen

    def freeze(self) -> CldrPluralRuleProvider:
        """Close registration. Returns self for chaining."""
        self._frozen = True
        return self

    def register_rule(self, language: str, rule: PluralRule) -> None:
        """Register a rule for a language code.

        Intended for setup time only, before concurrent formatting starts.
        Registered rules take precedence over built-in ones.

        Args:
            language: Locale or language code; normalized to two letters
            rule: Rule to register

        Raises:
            RuntimeError: If the provider has been frozen
        """
        if self._frozen:
            raise RuntimeError(ErrorTemplate.rule_table_frozen(language).format_error())
        self._rules[language_code(language)] = rule

    def get_rule(self, locale: str) -> PluralRule:
        """Get the plural rule for a locale.

        Args:
            locale: Locale code (e.g., "en", "en_US", "pt-BR")

        Returns:
            PluralRule for the normalized language code

        Raises:
            RuleNotFoundError: If no rule matches the language code
        """
        language = language_code(locale)

        rule = self._rules.get(language) or _builtin_rule(language)
        if rule is None and self._cldr_fallback:
            rule = cldr_rule_for_language(language)
            if rule is not None:
                logger.debug("Plural rule for '%s' resolved from CLDR data", language)
        if rule is None:
            raise RuleNotFoundError(ErrorTemplate.plural_rule_not_found(locale), locale=locale)
        return rule

    def get_category(self, locale: str, count: int) -> PluralCategory:
        """Get the plural category for a count in a locale.

        Raises:
            RuleNotFoundError: If no rule matches the language code
        """
        return self.get_rule(locale).get_category(count)


@functools.lru_cache(maxsize=1)
def get_default_provider() -> CldrPluralRuleProvider:
    """Shared frozen provider with the built-in rules only."""
    return CldrPluralRuleProvider().freeze()
