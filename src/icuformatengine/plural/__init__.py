"""CLDR plural category resolution.

Maps (locale, integer count) to one of zero/one/two/few/many/other.

Exports:
    PluralRule: Immutable per-language rule strategy
    CldrPluralRuleProvider: Rule table keyed by two-letter language code
    PluralRuleProvider: Protocol accepted by the formatter and builders
    PluralMap: Canonical example counts per language family
    BabelPluralRule: Rule backed by Babel's CLDR data
    get_default_provider: Shared frozen provider with built-in rules

Python 3.13+.
"""

from icuformatengine.enums import PluralCategory

from .cldr import BabelPluralRule, cldr_rule_for_language
from .examples import PluralMap
from .provider import CldrPluralRuleProvider, PluralRuleProvider, get_default_provider
from .rules import PluralRule

__all__ = [
    "BabelPluralRule",
    "CldrPluralRuleProvider",
    "PluralCategory",
    "PluralMap",
    "PluralRule",
    "PluralRuleProvider",
    "cldr_rule_for_language",
    "get_default_provider",
]
