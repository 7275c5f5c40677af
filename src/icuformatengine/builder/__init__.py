"""ICU template builders, the inverse of IcuMessageFormatter.

Exports:
    IcuMessage: Static facade (plural, select, gender, date, time, number)
    IcuMessageBuilder: Locale-bound builder factory
    PluralBuilder: ``{var, plural, ...}`` builder with with_inflections()
    SelectBuilder: ``{var, select, ...}`` builder with nested callbacks
    NestedMessageBuilder: Context passed to SelectBuilder callbacks

Python 3.13+.
"""

from .message import IcuMessage, IcuMessageBuilder
from .plural import PluralBuilder
from .select import NestedMessageBuilder, SelectBuilder

__all__ = [
    "IcuMessage",
    "IcuMessageBuilder",
    "NestedMessageBuilder",
    "PluralBuilder",
    "SelectBuilder",
]
