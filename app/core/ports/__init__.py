# app/core/ports/__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement, so the Core Domain can be fed lexicon data without knowing
where it comes from.
"""

from .lexicon_source import ILexiconSource

__all__ = [
    "ILexiconSource",
]
