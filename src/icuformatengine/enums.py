"""Enumerations for icuformatengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"
    """Universal fallback, every rule produces it for some input."""


class TokenKind(StrEnum):
    """Kind of template token produced by the tokenizer."""

    TEXT = "text"
    """Literal text between expressions."""

    EXPRESSION = "expression"
    """Brace-balanced expression including its outer braces."""


class ClauseType(StrEnum):
    """Clause types understood by the ICU formatter."""

    PLURAL = "plural"
    """{count, plural, one{...} other{...}}"""

    SELECT = "select"
    """{gender, select, male{...} other{...}}"""

    NUMBER = "number"
    """{amount, number} - delegated to Babel"""

    DATE = "date"
    """{when, date, short} - delegated to Babel"""

    TIME = "time"
    """{when, time, short} - delegated to Babel"""


__all__ = [
    "ClauseType",
    "PluralCategory",
    "TokenKind",
]
