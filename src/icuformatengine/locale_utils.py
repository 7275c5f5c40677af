"""Locale utilities for plural rule lookup and Babel interop.

Centralizes locale format normalization used throughout the codebase.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "language_code",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def language_code(locale_code: str) -> str:
    """Extract the plural lookup key from a locale code.

    Pluralization ignores region and script subtags: the key is the first
    two characters, lowercased.

    Example:
        >>> language_code("en_US")
        'en'
        >>> language_code("PT-br")
        'pt'
    """
    return locale_code[:2].lower()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
