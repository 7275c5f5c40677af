"""CLDR-derived plural rules as immutable strategy objects.

Each rule maps a non-negative integer count to a PluralCategory using the
arithmetic of one language family. Rules are constructed once and shared;
they hold no mutable state and are safe for unsynchronized concurrent use.

Negative counts are categorized by their absolute value.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from icuformatengine.enums import PluralCategory
from icuformatengine.locale_utils import language_code

__all__ = [
    "ArabicRule",
    "EastSlavicRule",
    "NoPluralRule",
    "OneIsSingularRule",
    "PluralRule",
    "PolishRule",
    "ZeroOrOneIsSingularRule",
]


@dataclass(frozen=True, slots=True)
class PluralRule:
    """Plural rule for a locale.

    Subclasses implement ``_select()`` for a language family. The base class
    normalizes the count and provides named constructors for the built-in
    languages.

    Attributes:
        locale: Locale or language code the rule was built for
        number_of_plurals: Number of distinct categories the rule produces.
            Informational only, the formatter never consults it.
    """

    locale: str
    number_of_plurals: int

    def get_category(self, count: int) -> PluralCategory:
        """Get the plural category for a count.

        Args:
            count: Integer count. Negative values use their absolute value.

        Returns:
            The CLDR plural category

        Examples:
            >>> PluralRule.english().get_category(1)
            <PluralCategory.ONE: 'one'>
            >>> PluralRule.russian().get_category(22)
            <PluralCategory.FEW: 'few'>
        """
        return self._select(abs(int(count)))

    def _select(self, n: int) -> PluralCategory:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Named constructors
    # ------------------------------------------------------------------

    @classmethod
    def english(cls) -> PluralRule:
        """English: one (n=1), other."""
        return OneIsSingularRule("en", 2)

    @classmethod
    def spanish(cls) -> PluralRule:
        """Spanish: one (n=1), other."""
        return OneIsSingularRule("es", 2)

    @classmethod
    def german(cls) -> PluralRule:
        """German: one (n=1), other."""
        return OneIsSingularRule("de", 2)

    @classmethod
    def portuguese(cls) -> PluralRule:
        """Portuguese: one (n=1), other."""
        return OneIsSingularRule("pt", 2)

    @classmethod
    def french(cls) -> PluralRule:
        """French: one (n=0,1), other."""
        return ZeroOrOneIsSingularRule("fr", 2)

    @classmethod
    def russian(cls) -> PluralRule:
        """Russian: one, few, many."""
        return EastSlavicRule("ru", 3)

    @classmethod
    def polish(cls) -> PluralRule:
        """Polish: one (n=1 exactly), few, many."""
        return PolishRule("pl", 3)

    @classmethod
    def arabic(cls) -> PluralRule:
        """Arabic: zero, one, two, few, many, other."""
        return ArabicRule("ar", 6)

    @classmethod
    def chinese(cls) -> PluralRule:
        """Chinese: other only."""
        return NoPluralRule("zh", 1)

    @classmethod
    def japanese(cls) -> PluralRule:
        """Japanese: other only."""
        return NoPluralRule("ja", 1)

    @classmethod
    def indonesian(cls) -> PluralRule:
        """Indonesian and Malay: other only."""
        return NoPluralRule("id", 1)

    @classmethod
    def for_locale(cls, locale: str) -> PluralRule | None:
        """Create the built-in rule for a locale.

        Args:
            locale: Locale code; only the first two characters are used

        Returns:
            The rule, or None if the language has no built-in rule
        """
        match language_code(locale):
            case "en":
                return cls.english()
            case "es":
                return cls.spanish()
            case "de":
                return cls.german()
            case "pt":
                return cls.portuguese()
            case "fr":
                return cls.french()
            case "ru":
                return cls.russian()
            case "pl":
                return cls.polish()
            case "ar":
                return cls.arabic()
            case "zh":
                return cls.chinese()
            case "ja":
                return cls.japanese()
            case "id" | "ms":
                return cls.indonesian()
            case _:
                return None


@dataclass(frozen=True, slots=True)
class OneIsSingularRule(PluralRule):
    """n == 1 -> one, else other (en, es, de, pt)."""

    def _select(self, n: int) -> PluralCategory:
        return PluralCategory.ONE if n == 1 else PluralCategory.OTHER


@dataclass(frozen=True, slots=True)
class ZeroOrOneIsSingularRule(PluralRule):
    """n in (0, 1) -> one, else other (fr)."""

    def _select(self, n: int) -> PluralCategory:
        return PluralCategory.ONE if n in (0, 1) else PluralCategory.OTHER


@dataclass(frozen=True, slots=True)
class EastSlavicRule(PluralRule):
    """Russian mod-10/mod-100 rule.

    - one:  n % 10 == 1 and n % 100 != 11        (1, 21, 101)
    - few:  n % 10 in 2..4 and n % 100 not in 12..14  (2, 3, 22)
    - many: everything else                       (0, 5, 11, 12)
    """

    def _select(self, n: int) -> PluralCategory:
        mod10 = n % 10
        mod100 = n % 100
        if mod10 == 1 and mod100 != 11:
            return PluralCategory.ONE
        if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
            return PluralCategory.FEW
        return PluralCategory.MANY


@dataclass(frozen=True, slots=True)
class PolishRule(PluralRule):
    """Polish rule: like Russian, but only n == 1 is singular (21 is many)."""

    def _select(self, n: int) -> PluralCategory:
        if n == 1:
            return PluralCategory.ONE
        mod10 = n % 10
        mod100 = n % 100
        if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
            return PluralCategory.FEW
        return PluralCategory.MANY


@dataclass(frozen=True, slots=True)
class ArabicRule(PluralRule):
    """Arabic six-category rule with mod-100 ranges."""

    def _select(self, n: int) -> PluralCategory:
        if n == 0:
            return PluralCategory.ZERO
        if n == 1:
            return PluralCategory.ONE
        if n == 2:
            return PluralCategory.TWO
        mod100 = n % 100
        if 3 <= mod100 <= 10:
            return PluralCategory.FEW
        if 11 <= mod100 <= 99:
            return PluralCategory.MANY
        return PluralCategory.OTHER


@dataclass(frozen=True, slots=True)
class NoPluralRule(PluralRule):
    """Languages without grammatical number: always other."""

    def _select(self, n: int) -> PluralCategory:
        return PluralCategory.OTHER
