"""Diagnostic system for icuformatengine errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ClauseFormatError,
    DepthLimitExceededError,
    I18nError,
    InvalidBuilderCallbackError,
    RuleNotFoundError,
    TranslationNotFoundError,
)
from .templates import ErrorTemplate

__all__ = [
    "ClauseFormatError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "I18nError",
    "InvalidBuilderCallbackError",
    "RuleNotFoundError",
    "TranslationNotFoundError",
]
