"""Formatter configuration.

Provides a single frozen dataclass that encapsulates IcuMessageFormatter
options.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from icuformatengine.constants import DEFAULT_LOCALE, LOCALE_KEY, MAX_DEPTH

__all__ = ["FormatterConfig"]


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable configuration for IcuMessageFormatter.

    All fields have sensible defaults; ``FormatterConfig()`` is usable as is.

    Attributes:
        max_depth: Maximum clause nesting depth (default: 64). Deeper
            templates are left unresolved.
        locale_key: Reserved parameter key carrying the active locale
            (default: "_locale").
        default_locale: Locale used when the parameters carry none
            (default: "en").
        use_babel: Format number/date/time clauses with Babel (default: True).
            When False those clauses are echoed unchanged.

    Example:
        >>> config = FormatterConfig(max_depth=8, default_locale="ru")
        >>> formatter = IcuMessageFormatter(config=config)
    """

    max_depth: int = MAX_DEPTH
    locale_key: str = LOCALE_KEY
    default_locale: str = DEFAULT_LOCALE
    use_babel: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_depth is not positive or a string field is empty
        """
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
        if not self.locale_key:
            msg = "locale_key must be a non-empty string"
            raise ValueError(msg)
        if not self.default_locale:
            msg = "default_locale must be a non-empty string"
            raise ValueError(msg)
