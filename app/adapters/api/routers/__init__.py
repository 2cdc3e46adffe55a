# app/adapters/api/routers/__init__.py
"""
API Route Definitions.

This package contains the route handlers (controllers) organized by area.
- `lexicon`: search and stats endpoints (Core Value).
- `health`: liveness and readiness probes.
"""

from .lexicon import router as lexicon_router
from .health import router as health_router

__all__ = [
    "lexicon_router",
    "health_router",
]
