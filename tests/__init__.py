# tests/__init__.py
"""
Test Suite for the Lexique API.

Organization:
- `core`: store, index and query-engine behaviour against in-memory entries.
- `adapters`: TSV loader on temporary files and HTTP endpoints via TestClient.
"""
