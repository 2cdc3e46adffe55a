# app/core/use_cases/search_lexicon.py
import string
from itertools import islice
from typing import Iterable, Iterator, Optional, Sequence

import structlog

from app.core.domain.models import LexicalEntry, SearchQuery, SearchResult
from app.core.domain.store import Bucket, LexiconStore
from app.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

DEFAULT_LIMIT = 100
MAX_LIMIT = 1000

# Category match folds A-Z only; other letters compare exactly.
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class SearchLexicon:
    """
    Use Case: Resolves a multi-field query against the frozen lexicon store.

    Resolution:
    1. Narrow candidates through the indexes, in the fixed order ortho -> lemme -> phon.
       The first supplied filter seeds the candidate list; later ones keep only
       candidates present in their bucket (left-hand order preserved).
    2. Any supplied index filter whose key is absent empties the result at once.
    3. Without index filters, every entry is a candidate, in load order.
    4. Post-filter on `cgram` (ASCII case-insensitive) and `min_freq` (films OR books).
    5. Materialize the first `limit` survivors.
    """

    def __init__(
        self,
        store: LexiconStore,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ):
        self.store = store
        self.default_limit = default_limit
        self.max_limit = max_limit

    def execute(self, query: SearchQuery) -> SearchResult:
        """
        Runs the search. Never raises for any combination of filters;
        absence of matches is an empty result.
        """
        with tracer.start_as_current_span("use_case.search_lexicon") as span:
            span.set_attribute("app.filters", ",".join(self._supplied_filters(query)))

            limit = self._effective_limit(query.limit)
            candidates = self._narrow(query)

            if candidates is None:
                span.set_attribute("app.result_count", 0)
                logger.debug("lexicon_search_short_circuit", filters=query.index_filters())
                return SearchResult(count=0, results=[])

            survivors = self._post_filter(query, candidates)
            results = list(islice(survivors, limit))

            span.set_attribute("app.result_count", len(results))
            logger.debug("lexicon_search", limit=limit, count=len(results))
            return SearchResult(count=len(results), results=results)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _effective_limit(self, requested: Optional[int]) -> int:
        limit = self.default_limit if requested is None else requested
        return min(limit, self.max_limit)

    def _narrow(self, query: SearchQuery) -> Optional[Sequence[int]]:
        """
        Returns the candidate positions, or None when an index key is absent.
        """
        lookups = (
            (query.ortho, self.store.ortho_bucket),
            (query.lemme, self.store.lemme_bucket),
            (query.phon, self.store.phon_bucket),
        )

        candidates: Optional[Sequence[int]] = None
        for value, lookup in lookups:
            if value is None:
                continue
            bucket = lookup(value)
            if bucket is None:
                return None
            candidates = bucket if candidates is None else _intersect(candidates, bucket)

        if candidates is None:
            return range(len(self.store.entries))
        return candidates

    def _post_filter(self, query: SearchQuery, candidates: Iterable[int]) -> Iterator[LexicalEntry]:
        cgram = _ascii_lower(query.cgram) if query.cgram is not None else None
        min_freq = query.min_freq

        for position in candidates:
            entry = self.store.entries[position]

            if cgram is not None and _ascii_lower(entry.cgram) != cgram:
                continue

            # Either corpus reaching the threshold is enough.
            if min_freq is not None and (
                entry.freqlemfilms2 < min_freq and entry.freqlemlivres < min_freq
            ):
                continue

            yield entry

    @staticmethod
    def _supplied_filters(query: SearchQuery) -> list:
        return [
            name for name in ("ortho", "lemme", "phon", "cgram", "min_freq")
            if getattr(query, name) is not None
        ]


def _ascii_lower(value: str) -> str:
    return value.translate(_ASCII_FOLD)


def _intersect(candidates: Sequence[int], bucket: Bucket) -> Sequence[int]:
    members = frozenset(bucket)
    return [position for position in candidates if position in members]
