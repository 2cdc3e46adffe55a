# app/__init__.py
"""
Lexique API - read-only lookup service over the Lexique 3 French lexical database.

This package follows Hexagonal Architecture (Ports & Adapters):
the in-memory store and query engine live in `app.core`, the TSV loader
and the FastAPI transport live in `app.adapters`.
"""

__version__ = "1.0.0"
