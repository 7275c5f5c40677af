"""CLDR plural rules backed by Babel.

Supplies rules for languages absent from the built-in table, using Babel's
copy of the CLDR plural data. Used by CldrPluralRuleProvider when
``cldr_fallback=True``.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from babel.core import UnknownLocaleError

from icuformatengine.enums import PluralCategory
from icuformatengine.locale_utils import get_babel_locale
from icuformatengine.plural.rules import PluralRule

__all__ = ["BabelPluralRule", "cldr_rule_for_language"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BabelPluralRule(PluralRule):
    """Plural rule evaluated by Babel's CLDR plural_form for ``locale``."""

    def _select(self, n: int) -> PluralCategory:
        plural_form = get_babel_locale(self.locale).plural_form
        return PluralCategory(plural_form(n))


@functools.lru_cache(maxsize=256)
def cldr_rule_for_language(language: str) -> BabelPluralRule | None:
    """Build a Babel-backed rule for a two-letter language code.

    Results are memoized; lru_cache is internally locked so concurrent
    callers are safe.

    Args:
        language: Normalized language code (e.g., "uk", "cs")

    Returns:
        Rule instance, or None if Babel does not know the language

    Example:
        >>> rule = cldr_rule_for_language("uk")
        >>> rule.get_category(3)
        <PluralCategory.FEW: 'few'>
    """
    try:
        babel_locale = get_babel_locale(language)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("No CLDR plural data for '%s': %s", language, e)
        return None

    tags = set(babel_locale.plural_form.tags) | {PluralCategory.OTHER.value}
    return BabelPluralRule(language, len(tags))
