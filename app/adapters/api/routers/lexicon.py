# app/adapters/api/routers/lexicon.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from dependency_injector.wiring import inject, Provide

from app.shared.container import Container
from app.core.domain.models import LexiconStats, SearchQuery, SearchResult
from app.core.use_cases.search_lexicon import SearchLexicon
from app.core.use_cases.get_lexicon_stats import GetLexiconStats
from app.adapters.api.dependencies import get_search_query

router = APIRouter(tags=["Lexicon"])

@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def banner() -> str:
    return "Lexique3 API - utilisez /search ou /stats"

@router.get(
    "/search",
    response_model=SearchResult,
    status_code=status.HTTP_200_OK,
    summary="Search the lexicon",
)
@inject
def search(
    query: SearchQuery = Depends(get_search_query),
    use_case: SearchLexicon = Depends(Provide[Container.search_lexicon_use_case]),
) -> SearchResult:
    """
    Filters the lexicon by any combination of fields.

    **Query Parameters:**
    * `ortho`, `lemme`: exact match, case-insensitive (index-backed).
    * `phon`: exact match, case-sensitive (index-backed).
    * `cgram`: exact match, ASCII case-insensitive.
    * `min_freq`: film frequency OR book frequency must reach this value.
    * `limit`: maximum results; defaults to 100, silently capped at 1000.

    **Returns:**
    * `count`: number of entries returned (after the limit).
    * `results`: entries in load order.
    """
    return use_case.execute(query)

@router.get(
    "/stats",
    response_model=LexiconStats,
    status_code=status.HTTP_200_OK,
    summary="Lexicon size",
)
@inject
def stats(
    use_case: GetLexiconStats = Depends(Provide[Container.get_lexicon_stats_use_case]),
) -> LexiconStats:
    """Total entries, distinct lemmas and distinct phonetic forms."""
    return use_case.execute()
