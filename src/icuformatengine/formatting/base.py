"""Formatter protocol and parameter value helpers.

Parameters are a mapping from name (or non-negative integer position) to a
scalar. Values outside ParameterValue are ignored at the boundary: the
placeholder referencing them stays unresolved.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Protocol

from icuformatengine.constants import MAX_COUNT_DIGITS

__all__ = [
    "MISSING",
    "MessageFormatter",
    "ParameterValue",
    "Parameters",
    "coerce_count",
    "is_parameter_value",
    "lookup_parameter",
    "stringify",
]

logger = logging.getLogger(__name__)

type ParameterValue = str | int | float | Decimal | bool | date | datetime | time | None
"""Values a template parameter may carry. Dates and times feed Babel clauses."""

type Parameters = Mapping[str | int, ParameterValue]
"""Parameter mapping accepted by formatters."""

_SCALAR_TYPES = (str, int, float, Decimal, date, time)

_COUNT_LIMIT = 10**MAX_COUNT_DIGITS


class _Missing:
    """Sentinel type for an absent parameter (None is a valid value)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class MessageFormatter(Protocol):
    """Protocol for message formatters (structural typing).

    Implementations must never raise for malformed templates or missing
    parameters; unresolved placeholders are echoed verbatim.
    """

    def format(self, message: str, parameters: Parameters | None = None) -> str:
        """Format a message with parameters."""
        ...


def is_parameter_value(value: object) -> bool:
    """Check whether a value may be substituted into a template.

    Integers too long for ``str()`` under the interpreter's int-to-str digit
    limit are rejected, so references to them stay unresolved.
    """
    if isinstance(value, int):
        return _renderable_int(value)
    return value is None or isinstance(value, _SCALAR_TYPES)


def _renderable_int(value: int) -> bool:
    limit = sys.get_int_max_str_digits()
    # 3 bits per decimal digit stays under the limit
    return limit == 0 or value.bit_length() <= limit * 3


def lookup_parameter(
    parameters: Parameters, name: str, *, reserved: str | None = None
) -> ParameterValue | _Missing:
    """Find a parameter by placeholder name.

    Placeholder names are strings; positional placeholders such as ``{0}``
    also match integer keys.

    Args:
        parameters: Parameter mapping
        name: Stripped placeholder name
        reserved: Key that is never treated as a variable (the locale key)

    Returns:
        The value, or MISSING when absent, reserved, or not a scalar
    """
    if not name or name == reserved:
        return MISSING
    if name in parameters:
        value = parameters[name]
    elif name.isdigit() and int(name) in parameters:
        value = parameters[int(name)]
    else:
        return MISSING
    return value if is_parameter_value(value) else MISSING


def stringify(value: ParameterValue) -> str:
    """Render a scalar for interpolation.

    Examples:
        >>> stringify(None)
        ''
        >>> stringify(True)
        'true'
        >>> stringify(3)
        '3'
    """
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case _:
            return str(value)


def coerce_count(value: ParameterValue) -> int:
    """Coerce a plural parameter to an integer count.

    Floats and Decimals truncate toward zero; numeric strings are parsed the
    same way. Anything non-numeric (including NaN and infinities) counts as 0,
    as does any magnitude of 10**MAX_COUNT_DIGITS or more.

    Examples:
        >>> coerce_count(3.9)
        3
        >>> coerce_count("21")
        21
        >>> coerce_count("abc")
        0
        >>> coerce_count("1e5000")
        0
    """
    number: Decimal | None = None
    match value:
        case bool():
            return int(value)
        case int() if abs(value) < _COUNT_LIMIT:
            return value
        case float() if math.isfinite(value) and abs(value) < _COUNT_LIMIT:
            return int(value)
        case Decimal():
            number = value
        case str():
            try:
                number = Decimal(value.strip())
            except InvalidOperation:
                number = None

    # adjusted() reads the exponent without expanding the digits
    if number is not None and number.is_finite() and number.adjusted() < MAX_COUNT_DIGITS:
        return int(number)

    logger.debug("Non-numeric or out-of-range plural count %r treated as 0", value)
    return 0
