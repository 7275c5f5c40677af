"""icuformatengine - ICU MessageFormat plural/select formatting with CLDR plural rules.

Evaluates ICU-style templates such as ``{count, plural, one{# item} other{# items}}``
against named parameters, resolves CLDR plural categories per locale, and builds
the same templates programmatically.

Public API:
    IcuMessageFormatter - ICU plural/select template evaluator
    DefaultMessageFormatter - Plain placeholder substitution
    FormatterConfig - Immutable formatter options
    CldrPluralRuleProvider - Plural rule table keyed by language code
    PluralRule - Per-language plural category strategy
    PluralCategory - CLDR plural categories
    IcuMessage - Static facade for template generation
    Translator - Key-based translation with locale fallback

Exceptions:
    I18nError - Base exception class
    RuleNotFoundError - No plural rule for a locale
    TranslationNotFoundError - Key missing from a catalog
    InvalidBuilderCallbackError - Unsupported select case text or callback result
    DepthLimitExceededError - Nesting exceeded the configured limit

Submodules:
    icuformatengine.plural - Plural rules, providers and canonical examples
    icuformatengine.formatting - Formatters and template tokenizer
    icuformatengine.builder - Fluent template builders
    icuformatengine.translation - Translator and message sources
    icuformatengine.diagnostics - Error types and diagnostic codes
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .builder import IcuMessage, IcuMessageBuilder, PluralBuilder, SelectBuilder
from .diagnostics import (
    DepthLimitExceededError,
    I18nError,
    InvalidBuilderCallbackError,
    RuleNotFoundError,
    TranslationNotFoundError,
)
from .enums import PluralCategory
from .formatting import DefaultMessageFormatter, FormatterConfig, IcuMessageFormatter
from .plural import CldrPluralRuleProvider, PluralRule, get_default_provider
from .translation import DictMessageSource, Translator

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("icuformatengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CldrPluralRuleProvider",
    "DefaultMessageFormatter",
    "DepthLimitExceededError",
    "DictMessageSource",
    "FormatterConfig",
    "I18nError",
    "IcuMessage",
    "IcuMessageBuilder",
    "IcuMessageFormatter",
    "InvalidBuilderCallbackError",
    "PluralBuilder",
    "PluralCategory",
    "PluralRule",
    "RuleNotFoundError",
    "SelectBuilder",
    "Translator",
    "TranslationNotFoundError",
    "__version__",
    "get_default_provider",
]
