"""Plain placeholder formatter.

Replaces named ``{name}`` and positional ``{0}`` placeholders with scalar
parameter values. No clause support; use IcuMessageFormatter for plural and
select messages.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from icuformatengine.constants import LOCALE_KEY
from icuformatengine.formatting.base import MISSING, Parameters, lookup_parameter, stringify

__all__ = ["DefaultMessageFormatter"]

_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")


class DefaultMessageFormatter:
    """Formats messages by direct placeholder substitution.

    Placeholder names are matched exactly (no whitespace trimming), the way
    they are written in the parameter mapping.

    Example:
        >>> DefaultMessageFormatter().format("{0} says {greeting}", {0: "Ann", "greeting": "hi"})
        'Ann says hi'
    """

    __slots__ = ("_reserved",)

    def __init__(self, *, locale_key: str = LOCALE_KEY) -> None:
        """Initialize formatter.

        Args:
            locale_key: Reserved parameter key that is never interpolated
        """
        self._reserved = locale_key

    def format(self, message: str, parameters: Parameters | None = None) -> str:
        """Replace placeholders with parameter values.

        Args:
            message: Message with ``{name}`` / ``{0}`` placeholders
            parameters: Parameter mapping

        Returns:
            Message with known placeholders replaced; unknown ones verbatim
        """
        if not parameters:
            return message

        def replace(match: re.Match[str]) -> str:
            value = lookup_parameter(parameters, match.group(1), reserved=self._reserved)
            return match.group(0) if value is MISSING else stringify(value)

        return _PLACEHOLDER.sub(replace, message)
