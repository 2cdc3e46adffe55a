# tests/adapters/test_lexique_loader.py
"""
Tests for the Lexique TSV loader and the demo fallback.
"""

from __future__ import annotations

import pytest

from app.adapters.persistence.lexique_loader import (
    DemoLexiconSource,
    LexiqueTsvSource,
    load_lexicon_entries,
    parse_row,
    select_source,
)
from app.core.domain.exceptions import LexiconSourceUnavailable

HEADER = [
    "ortho", "phon", "lemme", "cgram", "genre", "nombre", "freqlemfilms2", "freqlemlivres",
    "freqfilms2", "freqlivres", "infover", "nbhomogr", "nbhomoph", "islem", "nblettres",
    "nbphons", "cvcv", "p_cvcv", "voisorth", "voisphon", "puorth", "puphon", "syll",
    "nbsyll", "cv-cv", "orthrenv", "phonrenv", "orthosyll", "cgramortho", "deflem",
    "defobs", "old20", "pld20", "morphoder", "nbmorph",
]


def lexique_row(ortho, phon, lemme, cgram, genre, nombre, films, livres, nbsyll, width=len(HEADER)):
    row = [""] * width
    row[0:8] = [ortho, phon, lemme, cgram, genre, nombre, films, livres]
    row[24] = nbsyll
    return row


def write_tsv(path, rows):
    lines = ["\t".join(HEADER)] + ["\t".join(r) for r in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def lexique_file(tmp_path):
    return write_tsv(tmp_path / "Lexique383.tsv", [
        lexique_row("a", "a", "avoir", "AUX", "", "", "18559.22", "12800.81", "1"),
        lexique_row("abaissa", "abEsa", "abaisser", "VER", "", "", "5.71", "8.51", "3"),
        lexique_row("abandonnée", "abɑ̃dOne", "abandonné", "ADJ", "f", "s", "1.02", "4.66", "4"),
    ])


class TestTsvSource:

    def test_loads_rows_in_file_order(self, lexique_file):
        entries = LexiqueTsvSource(lexique_file).load()
        assert [e.ortho for e in entries] == ["a", "abaissa", "abandonnée"]

    def test_maps_column_offsets(self, lexique_file):
        entry = LexiqueTsvSource(lexique_file).load()[2]
        assert entry.phon == "abɑ̃dOne"
        assert entry.lemme == "abandonné"
        assert entry.cgram == "ADJ"
        assert entry.genre == "f"
        assert entry.nombre == "s"
        assert entry.freqlemfilms2 == pytest.approx(1.02)
        assert entry.freqlemlivres == pytest.approx(4.66)
        assert entry.nbr_syll == 4

    def test_header_is_skipped(self, lexique_file):
        entries = LexiqueTsvSource(lexique_file).load()
        assert "ortho" not in [e.ortho for e in entries]

    def test_short_rows_are_skipped(self, tmp_path):
        path = write_tsv(tmp_path / "lex.tsv", [
            lexique_row("chien", "ʃjɛ̃", "chien", "NOM", "m", "s", "12.5", "15.3", "1"),
            ["tronqué", "tʁɔ̃ke", "tronquer"],
            lexique_row("chat", "ʃa", "chat", "NOM", "m", "s", "8.2", "11.7", "1", width=26),
            lexique_row("loup", "lu", "loup", "NOM", "m", "s", "3.0", "4.0", "1", width=25),
        ])
        entries = LexiqueTsvSource(path).load()
        assert [e.ortho for e in entries] == ["chien", "chat"]

    def test_unparsable_numbers_read_as_zero(self, tmp_path):
        path = write_tsv(tmp_path / "lex.tsv", [
            lexique_row("x", "iks", "x", "NOM", "m", "s", "n/a", "", "deux"),
            lexique_row("y", "igʁɛk", "y", "NOM", "m", "s", "1,5", "2.0", "300"),
        ])
        x, y = LexiqueTsvSource(path).load()
        assert (x.freqlemfilms2, x.freqlemlivres, x.nbr_syll) == (0.0, 0.0, 0)
        assert (y.freqlemfilms2, y.freqlemlivres, y.nbr_syll) == (0.0, 2.0, 0)

    def test_quotes_are_kept_verbatim(self, tmp_path):
        path = write_tsv(tmp_path / "lex.tsv", [
            lexique_row('"ouf"', "uf", "ouf", "ONO", "", "", "1", "1", "1"),
        ])
        assert LexiqueTsvSource(path).load()[0].ortho == '"ouf"'

    def test_header_only_file_is_empty(self, tmp_path):
        path = write_tsv(tmp_path / "lex.tsv", [])
        assert LexiqueTsvSource(path).load() == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(LexiconSourceUnavailable):
            LexiqueTsvSource(tmp_path / "absent.tsv").load()

    def test_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "latin1.tsv"
        path.write_bytes(b"h\n\xff\xfe" + b"\t" * 30 + b"\n")
        with pytest.raises(LexiconSourceUnavailable):
            LexiqueTsvSource(path).load()

    def test_oversized_field_raises(self, tmp_path):
        path = write_tsv(tmp_path / "lex.tsv", [
            lexique_row("x" * 200_000, "iks", "x", "NOM", "m", "s", "1", "1", "1"),
        ])
        with pytest.raises(LexiconSourceUnavailable):
            LexiqueTsvSource(path).load()

    def test_negative_frequencies_read_as_zero(self, tmp_path):
        path = write_tsv(tmp_path / "lex.tsv", [
            lexique_row("x", "iks", "x", "NOM", "m", "s", "-3.5", "2.0", "1"),
        ])
        entry = LexiqueTsvSource(path).load()[0]
        assert (entry.freqlemfilms2, entry.freqlemlivres) == (0.0, 2.0)


class TestParseRow:

    def test_fields_are_not_trimmed(self):
        entry = parse_row(lexique_row(" le ", "l@", "le", "ART:def", "m", "s", "1", "1", "1"))
        assert entry.ortho == " le "


class TestFallback:

    def test_demo_dataset(self):
        entries = DemoLexiconSource().load()
        assert [e.ortho for e in entries] == ["chien", "chat", "bonjour"]
        assert all(e.cgram == "NOM" for e in entries)
        assert entries[2].freqlemfilms2 == pytest.approx(45.3)
        assert entries[2].nbr_syll == 2

    def test_missing_file_selects_demo(self, tmp_path):
        source = select_source(tmp_path / "Lexique383.tsv")
        assert isinstance(source, DemoLexiconSource)
        assert source.describe() == "demo"

    def test_existing_file_selects_tsv(self, lexique_file):
        source = select_source(lexique_file)
        assert isinstance(source, LexiqueTsvSource)
        assert source.describe() == str(lexique_file)

    def test_load_lexicon_entries_falls_back(self, tmp_path):
        entries = load_lexicon_entries(tmp_path / "nowhere.tsv")
        assert len(entries) == 3

    def test_load_lexicon_entries_reads_file(self, lexique_file):
        assert len(load_lexicon_entries(str(lexique_file))) == 3
