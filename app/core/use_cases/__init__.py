# app/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

This package contains the "Interactors" of the system. They run against the
frozen `LexiconStore` and never mutate it:
1. SearchLexicon: resolve a multi-field query into a bounded result list.
2. GetLexiconStats: report store and index sizes.
"""

from .search_lexicon import SearchLexicon
from .get_lexicon_stats import GetLexiconStats

__all__ = [
    "SearchLexicon",
    "GetLexiconStats",
]
