"""Exception hierarchy with structured diagnostics.

Only hard conditions are raised: a missing plural rule, a broken builder
callback, builder nesting overflow. Malformed templates and missing
parameters never leave the formatter; ClauseFormatError is raised by the
Babel clause helpers and absorbed there.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ClauseFormatError",
    "DepthLimitExceededError",
    "I18nError",
    "InvalidBuilderCallbackError",
    "RuleNotFoundError",
    "TranslationNotFoundError",
]


class I18nError(Exception):
    """Base exception for all icuformatengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class RuleNotFoundError(I18nError, LookupError):
    """No plural rule registered for a language code.

    Recoverable: callers may retry with a fallback locale or rule.

    Attributes:
        locale: The locale code that was requested
    """

    def __init__(self, message: str | Diagnostic, *, locale: str = "") -> None:
        super().__init__(message)
        self.locale = locale


class TranslationNotFoundError(I18nError, LookupError):
    """Translation key absent for a (locale, domain) pair.

    Raised internally by Translator and converted to a fallback value
    before reaching callers of translate().
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        key: str = "",
        locale: str = "",
        domain: str = "",
    ) -> None:
        super().__init__(message)
        self.key = key
        self.locale = locale
        self.domain = domain


class InvalidBuilderCallbackError(I18nError, TypeError):
    """A SelectBuilder case is neither a string, a builder nor a callback returning one.

    This is a template-authoring bug and cannot be degraded.
    """


class ClauseFormatError(I18nError, ValueError):
    """A delegated number/date/time clause could not be formatted."""


class DepthLimitExceededError(I18nError):
    """Raised when maximum nesting depth is exceeded.

    This error indicates either:
    - Adversarial input designed to cause stack overflow
    - Runaway recursion in builder callbacks
    """
