"""ICU MessageFormat evaluator.

Formats templates containing ``{name}`` interpolation and nested
``{name, plural, ...}`` / ``{name, select, ...}`` clauses. Number, date and
time clauses are delegated to Babel when enabled.

Degradation policy:
    format() never raises for malformed templates or missing parameters.
    Anything it cannot resolve (unknown parameter, unknown clause type,
    missing case, unbalanced braces, excessive nesting) is echoed as its
    original source text. The one hard error is RuleNotFoundError, raised
    when the active locale has no plural rule.

Thread Safety:
    The formatter holds only immutable configuration and a read-only rule
    provider. Per-call state (depth tracking) lives in a DepthGuard created
    by each top-level format() call.

Python 3.13+. Uses Babel for number/date/time clauses.
"""

from __future__ import annotations

import logging
import re

from icuformatengine.constants import CLAUSE_MARKER, COUNT_PLACEHOLDER
from icuformatengine.core import DepthGuard
from icuformatengine.diagnostics import ClauseFormatError, DepthLimitExceededError
from icuformatengine.enums import ClauseType, PluralCategory, TokenKind
from icuformatengine.formatting.babel_formats import format_clause
from icuformatengine.formatting.base import (
    MISSING,
    ParameterValue,
    Parameters,
    coerce_count,
    lookup_parameter,
    stringify,
)
from icuformatengine.formatting.config import FormatterConfig
from icuformatengine.formatting.tokenizer import parse_cases, split_expression, tokenize
from icuformatengine.plural import PluralRuleProvider, get_default_provider

__all__ = ["IcuMessageFormatter"]

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")

_DELEGATED = frozenset({ClauseType.NUMBER, ClauseType.DATE, ClauseType.TIME})


class IcuMessageFormatter:
    """Formats ICU-style message templates.

    Example:
        >>> formatter = IcuMessageFormatter()
        >>> formatter.format("Hello, {name}!", {"name": "John"})
        'Hello, John!'
        >>> formatter.format(
        ...     "{count, plural, one{# item} other{# items}}",
        ...     {"count": 5, "_locale": "en"},
        ... )
        '5 items'
        >>> formatter.format("Hello, {name}!", {})
        'Hello, {name}!'
    """

    __slots__ = ("_config", "_provider")

    def __init__(
        self,
        provider: PluralRuleProvider | None = None,
        *,
        config: FormatterConfig | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            provider: Plural rule provider (default: shared built-in provider)
            config: Formatter options (keyword-only)
        """
        self._provider = provider if provider is not None else get_default_provider()
        self._config = config if config is not None else FormatterConfig()

    @property
    def config(self) -> FormatterConfig:
        """Formatter configuration."""
        return self._config

    def format(self, message: str, parameters: Parameters | None = None) -> str:
        """Format a template with parameters.

        Args:
            message: ICU message template
            parameters: Parameter mapping; the reserved locale key selects
                the locale for plural rules and Babel clauses

        Returns:
            Formatted string with unresolvable parts left verbatim

        Raises:
            RuleNotFoundError: If a plural clause is evaluated for a locale
                without a plural rule
        """
        params: Parameters = parameters if parameters is not None else {}
        locale = params.get(self._config.locale_key) or self._config.default_locale
        guard = DepthGuard(max_depth=self._config.max_depth)
        return self._format(message, params, str(locale), guard)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def _format(self, message: str, params: Parameters, locale: str, guard: DepthGuard) -> str:
        if CLAUSE_MARKER not in message:
            return self._substitute(message, params)

        parts: list[str] = []
        for token in tokenize(message):
            if token.kind is TokenKind.TEXT:
                parts.append(token.value)
            else:
                parts.append(self._evaluate_expression(token.value, params, locale, guard))
        return "".join(parts)

    def _substitute(self, message: str, params: Parameters) -> str:
        """Fast path: replace every ``{name}`` without tokenizing."""
        reserved = self._config.locale_key

        def replace(match: re.Match[str]) -> str:
            value = lookup_parameter(params, match.group(1).strip(), reserved=reserved)
            return match.group(0) if value is MISSING else stringify(value)

        return _PLACEHOLDER.sub(replace, message)

    def _evaluate_expression(
        self, expression: str, params: Parameters, locale: str, guard: DepthGuard
    ) -> str:
        try:
            return self._evaluate_clause(expression, params, locale, guard)
        except DepthLimitExceededError:
            if guard.depth:
                raise
            logger.warning(
                "Template nesting exceeds %d levels; leaving expression unresolved",
                guard.max_depth,
            )
            return expression

    def _evaluate_clause(
        self, expression: str, params: Parameters, locale: str, guard: DepthGuard
    ) -> str:
        parts = split_expression(expression)
        value = lookup_parameter(params, parts.name, reserved=self._config.locale_key)
        if value is MISSING:
            return expression
        if parts.clause_type is None:
            return stringify(value)

        match parts.clause_type:
            case ClauseType.PLURAL:
                selected = self._select_plural(parts.body, value, locale)
            case ClauseType.SELECT:
                selected = self._select_case(parts.body, value)
            case clause if clause in _DELEGATED and self._config.use_babel:
                return self._delegate(ClauseType(clause), expression, value, parts.body, locale)
            case _:
                return expression

        if selected is None:
            return expression
        if "{" not in selected:
            return selected
        with guard:
            return self._format(selected, params, locale, guard)

    def _select_plural(self, body: str, value: ParameterValue, locale: str) -> str | None:
        count = coerce_count(value)
        category = self._provider.get_rule(locale).get_category(count)
        cases = parse_cases(body)

        text = cases.get(f"={count}")
        if text is None:
            text = cases.get(category, cases.get(PluralCategory.OTHER))
        if text is None:
            return None
        return text.replace(COUNT_PLACEHOLDER, str(count))

    @staticmethod
    def _select_case(body: str, value: ParameterValue) -> str | None:
        cases = parse_cases(body)
        return cases.get(stringify(value), cases.get(PluralCategory.OTHER))

    @staticmethod
    def _delegate(
        clause: ClauseType, expression: str, value: ParameterValue, style: str, locale: str
    ) -> str:
        try:
            return format_clause(clause, value, style, locale)
        except ClauseFormatError as e:
            logger.debug("Leaving %s unresolved: %s", expression, e)
            return expression
