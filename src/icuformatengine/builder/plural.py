"""Fluent builder for ``{var, plural, ...}`` templates.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from icuformatengine.constants import COUNT_PLACEHOLDER
from icuformatengine.diagnostics import RuleNotFoundError
from icuformatengine.enums import ClauseType, PluralCategory
from icuformatengine.locale_utils import language_code
from icuformatengine.plural import PluralMap, PluralRuleProvider, get_default_provider

__all__ = ["PluralBuilder", "render_clause"]

logger = logging.getLogger(__name__)


def render_clause(variable: str, clause_type: ClauseType, cases: Mapping[str, str]) -> str:
    """Render ``{variable, type, label{text} ...}`` in insertion order.

    Example:
        >>> render_clause("n", ClauseType.PLURAL, {"one": "# item", "other": "# items"})
        '{n, plural, one{# item} other{# items}}'
    """
    template = f"{variable}, {clause_type}, "
    for label, text in cases.items():
        template += f"{label}{{{text}}} "
    return "{" + template.strip() + "}"


class PluralBuilder:
    """Accumulates plural cases and renders an ICU plural clause.

    Example:
        >>> (
        ...     PluralBuilder("count", "en")
        ...     .when("one", "# item")
        ...     .otherwise("# items")
        ...     .build()
        ... )
        '{count, plural, one{# item} other{# items}}'
    """

    __slots__ = ("_cases", "_locale", "_provider", "_variable")

    def __init__(
        self,
        variable: str,
        locale: str,
        provider: PluralRuleProvider | None = None,
    ) -> None:
        """Initialize builder.

        Args:
            variable: Count parameter name
            locale: Locale whose plural rule with_inflections() probes
            provider: Plural rule provider (default: shared built-in provider)
        """
        self._variable = variable
        self._locale = locale
        self._provider = provider if provider is not None else get_default_provider()
        self._cases: dict[str, str] = {}

    def __repr__(self) -> str:
        return f"PluralBuilder({self._variable!r}, {self._locale!r}, cases={self._cases!r})"

    @property
    def variable(self) -> str:
        return self._variable

    @property
    def cases(self) -> Mapping[str, str]:
        """Read-only view of the cases added so far."""
        return MappingProxyType(self._cases)

    def when(self, category: str | PluralCategory, text: str) -> PluralBuilder:
        """Set the text for a plural category (or an exact ``=N`` label)."""
        self._cases[str(category)] = text
        return self

    def otherwise(self, text: str) -> PluralBuilder:
        """Set the mandatory ``other`` case."""
        return self.when(PluralCategory.OTHER, text)

    def with_inflections(
        self, base_message: str, endings: Mapping[str, str] | None = None
    ) -> PluralBuilder:
        """Fill in the categories the locale needs from a base message.

        The locale's rule is probed with the canonical example counts of its
        language family. Each category found that has no explicit case gets
        ``base_message`` with ``#`` replaced by the example count, followed
        by the category's ending. Cases set with when() are never replaced.

        If the locale has no plural rule, only ``other`` is filled in, using
        the example count 0.

        Args:
            base_message: Text with a ``#`` placeholder
            endings: Suffix per category name (e.g. {"few": "а"})

        Returns:
            self, for chaining

        Example:
            >>> PluralBuilder("n", "ru").with_inflections("# товар", {"few": "а"}).build()
            '{n, plural, one{1 товар} few{2 товара} many{5 товар} other{1 товар}}'
        """
        endings = endings or {}

        try:
            rule = self._provider.get_rule(self._locale)
        except RuleNotFoundError as e:
            logger.debug("with_inflections falling back to 'other' only: %s", e)
            other = str(PluralCategory.OTHER)
            if other not in self._cases:
                self._cases[other] = self._inflect(base_message, 0, endings.get(other, ""))
            return self

        examples: dict[str, int] = {}
        for number in PluralMap.canonical_examples(language_code(self._locale)):
            examples.setdefault(str(rule.get_category(number)), number)

        for category, number in examples.items():
            if category not in self._cases:
                self._cases[category] = self._inflect(
                    base_message, number, endings.get(category, "")
                )

        if PluralCategory.OTHER not in self._cases and self._cases:
            self._cases[str(PluralCategory.OTHER)] = next(iter(self._cases.values()))

        return self

    @staticmethod
    def _inflect(base_message: str, number: int, ending: str) -> str:
        return base_message.replace(COUNT_PLACEHOLDER, str(number)) + ending

    def build(self) -> str:
        """Render the ICU template. Safe to call repeatedly."""
        return render_clause(self._variable, ClauseType.PLURAL, self._cases)
