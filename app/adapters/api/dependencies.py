# app/adapters/api/dependencies.py
from __future__ import annotations

from typing import Optional

from fastapi import Query

from app.core.domain.models import SearchQuery


# -----------------------------------------------------------------------------
# Query parameter decoding
# -----------------------------------------------------------------------------
def get_search_query(
    ortho: Optional[str] = Query(None, description="Orthographic form (case-insensitive)"),
    lemme: Optional[str] = Query(None, description="Lemma (case-insensitive)"),
    phon: Optional[str] = Query(None, description="Phonetic form (exact, case-sensitive)"),
    cgram: Optional[str] = Query(None, description="Grammatical category, e.g. NOM, VER"),
    min_freq: Optional[float] = Query(
        None, description="Keep entries whose film OR book frequency reaches this value"
    ),
    limit: Optional[int] = Query(
        None, ge=0, description="Maximum results (default 100, capped at 1000)"
    ),
) -> SearchQuery:
    """
    Decodes `/search` query parameters into a SearchQuery.

    FastAPI validates types before this runs, so a non-numeric `min_freq`
    or `limit` never reaches the core.
    """
    return SearchQuery(
        ortho=ortho,
        lemme=lemme,
        phon=phon,
        cgram=cgram,
        min_freq=min_freq,
        limit=limit,
    )
