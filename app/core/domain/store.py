# app/core/domain/store.py
"""
In-memory record store and secondary indexes over Lexique entries.

Design goals
------------
- No filesystem knowledge (the loader hands over parsed entries).
- Built once, in a single linear pass, then frozen.
- Buckets keep load order, so every later filter preserves it too.

Indexes
-------
- ortho: lowercased orthographic form -> positions
- lemme: lowercased lemma             -> positions
- phon:  raw phonetic form            -> positions (case-sensitive)
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import structlog

from .models import LexicalEntry, LexiconStats

logger = structlog.get_logger()

Bucket = Tuple[int, ...]
Index = Mapping[str, Bucket]


@dataclass(frozen=True)
class LexiconStore:
    """
    Immutable entry sequence plus its three exact-match indexes.

    Construct with `LexiconStore.from_entries(...)`. Instances are shared
    read-only by every request handler.
    """

    entries: Tuple[LexicalEntry, ...]
    ortho_index: Index
    lemme_index: Index
    phon_index: Index

    # ------------------------------------------------------------------
    # Key normalization
    # ------------------------------------------------------------------

    @staticmethod
    def _norm_key(key: str) -> str:
        return key.lower()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_entries(cls, entries: Iterable[LexicalEntry]) -> "LexiconStore":
        """
        Build the store in a single pass over `entries`.

        Every entry is indexed; duplicate keys accumulate positions in
        load order.
        """
        frozen_entries = tuple(entries)

        ortho: Dict[str, List[int]] = {}
        lemme: Dict[str, List[int]] = {}
        phon: Dict[str, List[int]] = {}

        for idx, entry in enumerate(frozen_entries):
            ortho.setdefault(cls._norm_key(entry.ortho), []).append(idx)
            lemme.setdefault(cls._norm_key(entry.lemme), []).append(idx)
            phon.setdefault(entry.phon, []).append(idx)

        store = cls(
            entries=frozen_entries,
            ortho_index=_freeze(ortho),
            lemme_index=_freeze(lemme),
            phon_index=_freeze(phon),
        )
        logger.info(
            "lexicon_indexed",
            entries=len(frozen_entries),
            ortho_keys=len(store.ortho_index),
            lemme_keys=len(store.lemme_index),
            phon_keys=len(store.phon_index),
        )
        return store

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def ortho_bucket(self, ortho: str) -> Optional[Bucket]:
        """Positions of entries whose form lowercases to `ortho.lower()`, or None."""
        return self.ortho_index.get(self._norm_key(ortho))

    def lemme_bucket(self, lemme: str) -> Optional[Bucket]:
        """Positions of entries whose lemma lowercases to `lemme.lower()`, or None."""
        return self.lemme_index.get(self._norm_key(lemme))

    def phon_bucket(self, phon: str) -> Optional[Bucket]:
        """Positions of entries with exactly this phonetic form, or None."""
        return self.phon_index.get(phon)

    def stats(self) -> LexiconStats:
        return LexiconStats(
            total_entries=len(self.entries),
            unique_lemmes=len(self.lemme_index),
            unique_phonemes=len(self.phon_index),
        )

    def __len__(self) -> int:
        return len(self.entries)


def _freeze(index: Dict[str, List[int]]) -> Index:
    return MappingProxyType({key: tuple(positions) for key, positions in index.items()})


__all__ = ["LexiconStore", "Bucket", "Index"]
