# app/core/use_cases/get_lexicon_stats.py
from app.core.domain.models import LexiconStats
from app.core.domain.store import LexiconStore

class GetLexiconStats:
    """
    Use Case: Reports the size of the store and of its lemma / phonetic indexes.
    """

    def __init__(self, store: LexiconStore):
        self.store = store

    def execute(self) -> LexiconStats:
        return self.store.stats()
