"""Message formatting package.

Exports:
    IcuMessageFormatter: ICU plural/select evaluator
    DefaultMessageFormatter: Plain named/positional placeholder substitution
    FormatterConfig: Immutable IcuMessageFormatter options
    MessageFormatter: Protocol shared by both formatters
    tokenize, parse_cases, split_expression: Template scanning primitives

Python 3.13+.
"""

from .base import MessageFormatter, ParameterValue, Parameters
from .config import FormatterConfig
from .icu import IcuMessageFormatter
from .simple import DefaultMessageFormatter
from .tokenizer import ExpressionParts, Token, parse_cases, split_expression, tokenize

__all__ = [
    "DefaultMessageFormatter",
    "ExpressionParts",
    "FormatterConfig",
    "IcuMessageFormatter",
    "MessageFormatter",
    "ParameterValue",
    "Parameters",
    "Token",
    "parse_cases",
    "split_expression",
    "tokenize",
]
