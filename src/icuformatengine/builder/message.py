"""Entry points for ICU template generation.

IcuMessage is a static facade; IcuMessageBuilder binds a locale and rule
provider for repeated plural/select construction.

Python 3.13+.
"""

from __future__ import annotations

from icuformatengine.enums import ClauseType
from icuformatengine.plural import PluralRuleProvider, get_default_provider

from .plural import PluralBuilder
from .select import SelectBuilder

__all__ = ["IcuMessage", "IcuMessageBuilder"]


class IcuMessageBuilder:
    """Builder factory bound to one locale."""

    __slots__ = ("_locale", "_provider")

    def __init__(self, locale: str, provider: PluralRuleProvider | None = None) -> None:
        self._locale = locale
        self._provider = provider if provider is not None else get_default_provider()

    @property
    def locale(self) -> str:
        return self._locale

    def plural(self, variable: str) -> PluralBuilder:
        """Start a plural message for this locale."""
        return PluralBuilder(variable, self._locale, self._provider)

    def select(self, variable: str) -> SelectBuilder:
        """Start a select message."""
        return SelectBuilder(variable)

    def message(self, text: str) -> str:
        """Plain message with ``{variable}`` placeholders, returned as is."""
        return text


class IcuMessage:
    """Static facade for ICU template generation.

    Example:
        >>> IcuMessage.gender("gender", "He", "She", "They")
        '{gender, select, male{He} female{She} other{They}}'
        >>> IcuMessage.number("price", "currency", "EUR")
        '{price, number, currency, EUR}'
    """

    __slots__ = ()

    @staticmethod
    def for_locale(locale: str, provider: PluralRuleProvider | None = None) -> IcuMessageBuilder:
        """Create a message builder for a locale."""
        return IcuMessageBuilder(locale, provider)

    @staticmethod
    def plural(
        variable: str, locale: str, provider: PluralRuleProvider | None = None
    ) -> PluralBuilder:
        """Create a plural builder."""
        return IcuMessageBuilder(locale, provider).plural(variable)

    @staticmethod
    def select(variable: str) -> SelectBuilder:
        """Create a select builder."""
        return SelectBuilder(variable)

    @staticmethod
    def gender(variable: str, male_text: str, female_text: str, other_text: str) -> str:
        """Render a male/female/other select template."""
        return (
            SelectBuilder(variable)
            .when("male", male_text)
            .when("female", female_text)
            .otherwise(other_text)
            .build()
        )

    @staticmethod
    def date(variable: str, style: str = "medium") -> str:
        """Render a date clause (short, medium, long, full or an LDML pattern)."""
        return f"{{{variable}, {ClauseType.DATE}, {style}}}"

    @staticmethod
    def time(variable: str, style: str = "medium") -> str:
        """Render a time clause (short, medium, long, full or an LDML pattern)."""
        return f"{{{variable}, {ClauseType.TIME}, {style}}}"

    @staticmethod
    def number(variable: str, style: str | None = None, options: str | None = None) -> str:
        """Render a number clause; options are only emitted with a style."""
        result = f"{{{variable}, {ClauseType.NUMBER}"
        if style is not None:
            result += f", {style}"
            if options is not None:
                result += f", {options}"
        return result + "}"
