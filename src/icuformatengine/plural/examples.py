"""Canonical example counts per language family.

Each family lists integers that between them hit every plural category the
family distinguishes. PluralBuilder.with_inflections() probes a rule with
these numbers to discover which categories it must emit.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

__all__ = ["PluralMap"]


class PluralMap:
    """Canonical plural examples grouped by language family."""

    SLAVIC_LANGUAGES: Final = frozenset(
        {"ru", "uk", "be", "pl", "cs", "sk", "sr", "hr", "bs", "sl", "mk", "bg"}
    )
    WESTERN_EUROPEAN: Final = frozenset(
        {"en", "de", "nl", "es", "it", "pt", "sv", "nb", "no", "da", "el", "hu", "fi", "et",
         "ca", "gl"}
    )
    FRENCH_STYLE: Final = frozenset({"fr", "ff"})
    NO_PLURAL_LANGUAGES: Final = frozenset(
        {"ja", "zh", "ko", "vi", "th", "ms", "id", "fa", "tr", "az", "hy", "ka", "km", "lo"}
    )
    SPECIAL_TWO_FORMS: Final = frozenset(
        {"ak", "am", "bh", "fil", "tl", "guw", "hi", "ln", "mg", "nso", "ti", "wa"}
    )

    # one (1, 21), few (2-4), many (5-20, 0), many in most Slavic for 11
    SLAVIC_EXAMPLES: Final = (1, 2, 5, 0, 11)
    WESTERN_EUROPEAN_EXAMPLES: Final = (1, 0, 2, 5, 100)
    FRENCH_STYLE_EXAMPLES: Final = (0, 1, 2, 100)
    # zero, one, two, few (3-10), many (11-99), other (100+)
    ARABIC_EXAMPLES: Final = (0, 1, 2, 3, 11, 100, 101)
    NO_PLURAL_EXAMPLES: Final = (0, 1, 2, 5, 10)
    SPECIAL_TWO_FORMS_EXAMPLES: Final = (0, 1, 2, 5, 10)

    _SPECIFIC: Final = MappingProxyType({
        "he": (1, 2, 10, 20),
        "lt": (1, 2, 10, 11),
        "lv": (0, 1, 11, 21, 2),
        "ga": (1, 2, 3, 7, 11),
        "cy": (0, 1, 2, 3, 6, 4),
        "ro": (1, 2, 0, 20),
    })

    @classmethod
    def canonical_examples(cls, language: str) -> tuple[int, ...]:
        """Get representative counts for a language.

        Args:
            language: Language or locale code (e.g., "ru", "en_US", "pt-BR")

        Returns:
            Example integers, in probing order. Unknown languages get the
            Western-European set.

        Example:
            >>> PluralMap.canonical_examples("ru_RU")
            (1, 2, 5, 0, 11)
        """
        language = language.lower().replace("-", "_").split("_", 1)[0]

        if language in cls.SLAVIC_LANGUAGES:
            return cls.SLAVIC_EXAMPLES
        if language in cls.WESTERN_EUROPEAN:
            return cls.WESTERN_EUROPEAN_EXAMPLES
        if language == "ar":
            return cls.ARABIC_EXAMPLES
        if language in cls._SPECIFIC:
            return cls._SPECIFIC[language]
        if language in cls.FRENCH_STYLE:
            return cls.FRENCH_STYLE_EXAMPLES
        if language in cls.NO_PLURAL_LANGUAGES:
            return cls.NO_PLURAL_EXAMPLES
        if language in cls.SPECIAL_TWO_FORMS:
            return cls.SPECIAL_TWO_FORMS_EXAMPLES
        return cls.WESTERN_EUROPEAN_EXAMPLES
