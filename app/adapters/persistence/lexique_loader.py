# app/adapters/persistence/lexique_loader.py
"""
Loaders for the Lexique 3 database.

Goals
-----
- Read the tab-separated Lexique export (`Lexique383.tsv`) into `LexicalEntry` values.
- Fall back to a three-word demonstration set when the export is absent,
  so the service still boots in development and CI.

Row format
----------
The first row is a header and is skipped. Data rows need at least 26 columns;
shorter rows are counted as malformed and dropped. Columns used:

    0 ortho        3 cgram     6 freqlemfilms2     24 nbr_syll
    1 phon         4 genre     7 freqlemlivres
    2 lemme        5 nombre

Unparsable or negative frequencies read as 0.0 and unparsable syllable
counts as 0. Quote characters are data: `"ouf"` loads with its quotes.
A file that cannot be read or decoded as UTF-8 raises `LexiconSourceUnavailable`.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Sequence, Union

import structlog

from app.core.domain.exceptions import LexiconSourceUnavailable
from app.core.domain.models import LexicalEntry
from app.core.ports.lexicon_source import ILexiconSource

logger = structlog.get_logger()

LEXIQUE_DOWNLOAD_URL = "http://www.lexique.org/databases/Lexique383/Lexique383.tsv"

MIN_COLUMNS = 26
PROGRESS_EVERY = 10_000

# Column offsets
COL_ORTHO = 0
COL_PHON = 1
COL_LEMME = 2
COL_CGRAM = 3
COL_GENRE = 4
COL_NOMBRE = 5
COL_FREQ_FILMS = 6
COL_FREQ_LIVRES = 7
COL_NBR_SYLL = 24


# ---------------------------------------------------------------------------
# Field parsing
# ---------------------------------------------------------------------------


def _parse_freq(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        return 0.0
    # Per-million counts are never negative.
    if value < 0:
        return 0.0
    return value


def _parse_syllables(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        return 0
    if value < 0 or value > 255:
        return 0
    return value


def parse_row(row: Sequence[str]) -> LexicalEntry:
    """Map one data row (already known to be long enough) to an entry."""
    return LexicalEntry(
        ortho=row[COL_ORTHO],
        phon=row[COL_PHON],
        lemme=row[COL_LEMME],
        cgram=row[COL_CGRAM],
        genre=row[COL_GENRE],
        nombre=row[COL_NOMBRE],
        freqlemfilms2=_parse_freq(row[COL_FREQ_FILMS]),
        freqlemlivres=_parse_freq(row[COL_FREQ_LIVRES]),
        nbr_syll=_parse_syllables(row[COL_NBR_SYLL]),
    )


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


class LexiqueTsvSource(ILexiconSource):
    """
    Reads a Lexique TSV export from the local filesystem.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def load(self) -> List[LexicalEntry]:
        if not self.path.is_file():
            raise LexiconSourceUnavailable(str(self.path))

        logger.info("lexique_loading", path=str(self.path))

        entries: List[LexicalEntry] = []
        malformed = 0

        try:
            with self.path.open("r", encoding="utf-8", newline="") as handle:
                reader = csv.reader(handle, delimiter="\t", quoting=csv.QUOTE_NONE)
                next(reader, None)  # header

                for i, row in enumerate(reader):
                    if len(row) < MIN_COLUMNS:
                        malformed += 1
                        continue

                    entries.append(parse_row(row))

                    if (i + 1) % PROGRESS_EVERY == 0:
                        logger.info("lexique_loading_progress", rows=i + 1)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise LexiconSourceUnavailable(str(self.path), reason=str(e)) from e

        logger.info("lexique_loaded", path=str(self.path), entries=len(entries), malformed_rows=malformed)
        return entries


class DemoLexiconSource(ILexiconSource):
    """
    Fixed three-entry dataset served when no Lexique export is available.
    """

    def describe(self) -> str:
        return "demo"

    def load(self) -> List[LexicalEntry]:
        entries = [
            LexicalEntry(
                ortho="chien",
                phon="ʃjɛ̃",
                lemme="chien",
                cgram="NOM",
                genre="m",
                nombre="s",
                freqlemfilms2=12.5,
                freqlemlivres=15.3,
                nbr_syll=1,
            ),
            LexicalEntry(
                ortho="chat",
                phon="ʃa",
                lemme="chat",
                cgram="NOM",
                genre="m",
                nombre="s",
                freqlemfilms2=8.2,
                freqlemlivres=11.7,
                nbr_syll=1,
            ),
            LexicalEntry(
                ortho="bonjour",
                phon="bɔ̃ʒuʁ",
                lemme="bonjour",
                cgram="NOM",
                genre="m",
                nombre="s",
                freqlemfilms2=45.3,
                freqlemlivres=32.1,
                nbr_syll=2,
            ),
        ]
        logger.info("lexique_demo_loaded", entries=len(entries))
        return entries


def select_source(path: Union[str, Path]) -> ILexiconSource:
    """
    Pick the TSV source when the file exists, the demo source otherwise.
    """
    path = Path(path)
    if path.is_file():
        return LexiqueTsvSource(path)

    logger.warning(
        "lexique_file_missing",
        path=str(path),
        fallback="demo",
        download_url=LEXIQUE_DOWNLOAD_URL,
    )
    return DemoLexiconSource()


def load_lexicon_entries(path: Union[str, Path]) -> List[LexicalEntry]:
    """Load entries from `path`, falling back to the demo dataset when it is missing."""
    return select_source(path).load()


__all__ = [
    "LexiqueTsvSource",
    "DemoLexiconSource",
    "select_source",
    "load_lexicon_entries",
    "parse_row",
    "LEXIQUE_DOWNLOAD_URL",
]
