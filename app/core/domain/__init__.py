# app/core/domain/__init__.py
"""
Domain Entities and Value Objects.

This package defines the core data structures used throughout the application:
lexical entries, search queries and results, and the frozen `LexiconStore`
with its secondary indexes.
"""
