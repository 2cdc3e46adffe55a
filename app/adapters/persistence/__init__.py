# app/adapters/persistence/__init__.py
"""
Persistence Adapters.

This package implements the lexicon source port defined in the Core Domain.
It handles the translation between the Lexique TSV export and `LexicalEntry` values.

Components:
- LexiqueTsvSource: reads `Lexique383.tsv`.
- DemoLexiconSource: three-entry fallback used when the export is missing.
"""

from .lexique_loader import DemoLexiconSource, LexiqueTsvSource, load_lexicon_entries

__all__ = [
    "DemoLexiconSource",
    "LexiqueTsvSource",
    "load_lexicon_entries",
]
