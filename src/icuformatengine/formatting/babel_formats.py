"""Locale-aware number/date/time clause formatting via Babel.

Handles ``{v, number[, style[, option]]}``, ``{v, date[, style]}`` and
``{v, time[, style]}`` clauses. Every function here raises on bad input;
IcuMessageFormatter catches ClauseFormatError and leaves the clause text
unresolved.

Python 3.13+. Uses Babel for CLDR formatting data.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from decimal import Decimal
from typing import TYPE_CHECKING

from babel import dates as babel_dates
from babel import numbers as babel_numbers
from babel.core import UnknownLocaleError

from icuformatengine.diagnostics import ClauseFormatError, ErrorTemplate
from icuformatengine.enums import ClauseType
from icuformatengine.formatting.base import ParameterValue
from icuformatengine.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["format_clause"]


def format_clause(
    clause_type: ClauseType, value: ParameterValue, style: str, locale_code: str
) -> str:
    """Format a number/date/time clause value.

    Args:
        clause_type: NUMBER, DATE or TIME
        value: Parameter value
        style: Clause body (may be empty)
        locale_code: Active locale

    Returns:
        Formatted string

    Raises:
        ClauseFormatError: If the value, style or locale is unusable

    Examples:
        >>> format_clause(ClauseType.NUMBER, 1234.5, "", "en_US")
        '1,234.5'
        >>> format_clause(ClauseType.NUMBER, 0.25, "percent", "en")
        '25%'
    """
    try:
        locale = get_babel_locale(locale_code)
        match clause_type:
            case ClauseType.NUMBER:
                return _format_number(_as_number(value), style, locale)
            case ClauseType.DATE:
                return babel_dates.format_date(
                    _as_datetime(value, ClauseType.DATE), format=_date_style(style), locale=locale
                )
            case ClauseType.TIME:
                return babel_dates.format_time(
                    _as_time(value), format=_date_style(style), locale=locale
                )
            case _:
                raise ClauseFormatError(ErrorTemplate.clause_not_delegated(clause_type))
    except ClauseFormatError:
        raise
    except (UnknownLocaleError, ValueError, TypeError, ArithmeticError, LookupError) as e:
        diagnostic = ErrorTemplate.clause_format_failed(clause_type, locale_code, e)
        raise ClauseFormatError(diagnostic) from e


def _format_number(number: int | float | Decimal, style: str, locale: Locale) -> str:
    style_name, _, option = style.partition(",")
    match style_name.strip():
        case "":
            return babel_numbers.format_decimal(number, locale=locale)
        case "integer":
            return babel_numbers.format_decimal(int(number), locale=locale)
        case "percent":
            return babel_numbers.format_percent(number, locale=locale)
        case "currency":
            currency = option.strip() or _territory_currency(locale)
            return babel_numbers.format_currency(number, currency, locale=locale)
        case _:
            # Anything else is a Babel/LDML number pattern such as "#,##0.00"
            return babel_numbers.format_decimal(number, format=style.strip(), locale=locale)


def _territory_currency(locale: Locale) -> str:
    territory = locale.territory
    if not territory:
        raise ClauseFormatError(ErrorTemplate.currency_code_missing(str(locale)))
    return babel_numbers.get_territory_currencies(territory)[0]


def _date_style(style: str) -> str:
    # Named CLDR style, or an LDML pattern such as "yyyy-MM-dd"
    return style.strip() or "medium"


def _as_number(value: ParameterValue) -> int | float | Decimal:
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal | str):
        raise ClauseFormatError(
            ErrorTemplate.invalid_clause_value(ClauseType.NUMBER, "a number", value)
        )
    if isinstance(value, str):
        return Decimal(value.strip())
    return value


def _as_datetime(value: ParameterValue, clause_type: ClauseType) -> date:
    match value:
        case datetime() | date():
            return value
        case bool():
            pass
        case int() | float():
            return datetime.fromtimestamp(value, tz=UTC)
        case str():
            return datetime.fromisoformat(value.strip())
    raise ClauseFormatError(
        ErrorTemplate.invalid_clause_value(clause_type, "a date, datetime or timestamp", value)
    )


def _as_time(value: ParameterValue) -> datetime | time:
    if isinstance(value, time):
        return value
    moment = _as_datetime(value, ClauseType.TIME)
    if not isinstance(moment, datetime):
        expected = "a time, datetime or timestamp"
        raise ClauseFormatError(
            ErrorTemplate.invalid_clause_value(ClauseType.TIME, expected, moment)
        )
    return moment
