# app/core/__init__.py
"""
Core Domain Layer.

This package contains the lexicon store, its indexes and the query engine.
It strictly follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on frameworks (FastAPI) or on file formats.
- Consumes already-parsed `LexicalEntry` values through the `ILexiconSource` port.
"""
