# app/core/domain/models.py
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

# --- Entities ---

class LexicalEntry(BaseModel):
    """
    One row of the Lexique database.
    Field names are the Lexique column names and double as the JSON wire names.
    Entries are frozen: the store shares them across every request.
    """
    model_config = ConfigDict(frozen=True)

    ortho: str = Field(..., description="Orthographic (written) form")
    phon: str = Field(..., description="Phonetic transcription, matched verbatim")
    lemme: str = Field(..., description="Lemma (dictionary head form)")
    cgram: str = Field(..., description="Grammatical category, e.g. 'NOM', 'VER'")
    genre: str = Field("", description="Gender: 'm', 'f' or empty")
    nombre: str = Field("", description="Number: 's', 'p' or empty")
    freqlemfilms2: float = Field(0.0, description="Lemma frequency per million (film subtitles)")
    freqlemlivres: float = Field(0.0, description="Lemma frequency per million (books)")
    nbr_syll: int = Field(0, ge=0, le=255, description="Syllable count")

# --- Queries ---

class SearchQuery(BaseModel):
    """
    Filters for a lexicon search. `None` means the filter was not supplied.
    """
    model_config = ConfigDict(frozen=True)

    ortho: Optional[str] = None
    lemme: Optional[str] = None
    phon: Optional[str] = None
    cgram: Optional[str] = None
    min_freq: Optional[float] = None
    limit: Optional[int] = Field(None, ge=0)

    def index_filters(self) -> List[str]:
        """Names of the supplied index-backed filters."""
        return [name for name in ("ortho", "lemme", "phon") if getattr(self, name) is not None]

# --- Results ---

class SearchResult(BaseModel):
    """
    A bounded, ordered list of matches. `count` is the number returned,
    not the number of matches before truncation.
    """
    count: int
    results: List[LexicalEntry] = Field(default_factory=list)

class LexiconStats(BaseModel):
    total_entries: int
    unique_lemmes: int
    unique_phonemes: int
