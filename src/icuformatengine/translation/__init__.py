"""Key-based translation over pluggable message sources.

Python 3.13+.
"""

from .sources import ChainMessageSource, DictMessageSource, MessageSource
from .translator import Translator
from .types import Catalog, CatalogEntry, Domain, LocaleCode, MessageKey

__all__ = [
    "Catalog",
    "CatalogEntry",
    "ChainMessageSource",
    "DictMessageSource",
    "Domain",
    "LocaleCode",
    "MessageKey",
    "MessageSource",
    "Translator",
]
