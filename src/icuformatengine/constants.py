"""Shared constants for icuformatengine.

Centralized configuration constants used across the plural, formatting,
builder and translation packages. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Reserved parameter keys
    "LOCALE_KEY",
    "COUNT_KEY",
    # Defaults
    "DEFAULT_LOCALE",
    "DEFAULT_DOMAIN",
    # Grammar
    "CLAUSE_MARKER",
    "COUNT_PLACEHOLDER",
    "MAX_COUNT_DIGITS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of clause expressions evaluated by the formatter and of
# callbacks nested through SelectBuilder. Real templates rarely exceed 3 levels.
MAX_DEPTH: int = 64

# ============================================================================
# RESERVED PARAMETER KEYS
# ============================================================================

# Parameter key carrying the active locale into clause evaluation.
LOCALE_KEY: str = "_locale"

# Parameter key injected by Translator.translate_plural().
COUNT_KEY: str = "count"

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_LOCALE: str = "en"
DEFAULT_DOMAIN: str = "messages"

# ============================================================================
# GRAMMAR
# ============================================================================

# Templates without this marker take the plain substitution fast path.
CLAUSE_MARKER: str = ", "

# Replaced with the count inside a selected plural branch.
COUNT_PLACEHOLDER: str = "#"

# Plural counts at or above 10**MAX_COUNT_DIGITS are treated as non-numeric.
MAX_COUNT_DIGITS: int = 18
