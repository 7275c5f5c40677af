"""Fluent builder for ``{var, select, ...}`` templates with nested cases.

A case may be given as literal text, as a builder, or as a callback. The
callback receives a NestedMessageBuilder and returns either a string or a
builder. Builders are built immediately and used as the case text. Nesting
depth is shared through a DepthGuard so runaway callbacks fail with
DepthLimitExceededError.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from icuformatengine.core import DepthGuard
from icuformatengine.diagnostics import ErrorTemplate, InvalidBuilderCallbackError
from icuformatengine.enums import ClauseType, PluralCategory
from icuformatengine.plural import PluralRuleProvider

from .plural import PluralBuilder, render_clause

__all__ = ["NestedMessageBuilder", "SelectBuilder"]

type CaseCallback = Callable[[NestedMessageBuilder], str | PluralBuilder | SelectBuilder]
type CaseText = str | PluralBuilder | SelectBuilder | CaseCallback


class NestedMessageBuilder:
    """Builder context handed to SelectBuilder.when() callbacks."""

    __slots__ = ("_guard",)

    def __init__(self, guard: DepthGuard | None = None) -> None:
        self._guard = guard if guard is not None else DepthGuard()

    @property
    def depth(self) -> int:
        """Current callback nesting depth."""
        return self._guard.depth

    def plural(
        self,
        variable: str,
        locale: str,
        provider: PluralRuleProvider | None = None,
    ) -> PluralBuilder:
        """Start a nested plural clause."""
        return PluralBuilder(variable, locale, provider)

    def select(self, variable: str) -> SelectBuilder:
        """Start a nested select clause sharing this context's depth."""
        return SelectBuilder(variable, guard=self._guard)


class SelectBuilder:
    """Accumulates select cases and renders an ICU select clause.

    Example:
        >>> (
        ...     SelectBuilder("gender")
        ...     .when("male", "He")
        ...     .when("female", lambda nested: nested.plural("n", "en").otherwise("She x#"))
        ...     .otherwise("They")
        ...     .build()
        ... )
        '{gender, select, male{He} female{{n, plural, other{She x#}}} other{They}}'
    """

    __slots__ = ("_cases", "_guard", "_variable")

    def __init__(self, variable: str, *, guard: DepthGuard | None = None) -> None:
        """Initialize builder.

        Args:
            variable: Parameter name to select on
            guard: Depth guard shared with an enclosing builder (keyword-only)
        """
        self._variable = variable
        self._guard = guard if guard is not None else DepthGuard()
        self._cases: dict[str, str] = {}

    def __repr__(self) -> str:
        return f"SelectBuilder({self._variable!r}, cases={self._cases!r})"

    @property
    def variable(self) -> str:
        return self._variable

    @property
    def cases(self) -> Mapping[str, str]:
        """Read-only view of the cases added so far."""
        return MappingProxyType(self._cases)

    def when(self, value: str, text: CaseText) -> SelectBuilder:
        """Set the text for a select value.

        Args:
            value: Parameter value to match
            text: Case text, a builder (built immediately), or a callback
                returning text or a builder

        Returns:
            self, for chaining

        Raises:
            InvalidBuilderCallbackError: text is none of the above, or the
                callback returned something else
            DepthLimitExceededError: Callbacks nested too deeply
        """
        match text:
            case str():
                case_text = text
            case PluralBuilder() | SelectBuilder():
                case_text = text.build()
            case _ if callable(text):
                case_text = self._run_callback(text)
            case _:
                raise InvalidBuilderCallbackError(ErrorTemplate.invalid_select_case(text))
        self._cases[str(value)] = case_text
        return self

    def otherwise(self, text: CaseText) -> SelectBuilder:
        """Set the ``other`` fallback case."""
        return self.when(PluralCategory.OTHER, text)

    def _run_callback(self, callback: CaseCallback) -> str:
        with self._guard:
            result = callback(NestedMessageBuilder(self._guard))
            match result:
                case str():
                    return result
                case PluralBuilder() | SelectBuilder():
                    return result.build()
                case _:
                    raise InvalidBuilderCallbackError(
                        ErrorTemplate.invalid_builder_callback(result)
                    )

    def build(self) -> str:
        """Render the ICU template. Safe to call repeatedly."""
        return render_clause(self._variable, ClauseType.SELECT, self._cases)
