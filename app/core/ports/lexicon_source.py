# app/core/ports/lexicon_source.py
from typing import List, Protocol
from app.core.domain.models import LexicalEntry

class ILexiconSource(Protocol):
    """
    Port for obtaining the lexicon at startup.
    Implementations could read a TSV export, a bundled demo set, or a database dump.
    """

    def load(self) -> List[LexicalEntry]:
        """
        Returns every well-formed entry, in source order.
        Malformed records are dropped by the implementation.
        """
        ...

    def describe(self) -> str:
        """Human-readable origin of the data (path, 'demo', ...), used in logs."""
        ...
