# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.adapters.api.main import create_app
from app.adapters.persistence.lexique_loader import DemoLexiconSource
from app.core.domain.models import LexicalEntry
from app.core.domain.store import LexiconStore
from app.shared.container import container as app_container


def make_entry(ortho, lemme=None, phon=None, cgram="NOM", films=0.0, livres=0.0, **extra):
    """Builds a LexicalEntry with sensible defaults for the fields a test does not care about."""
    return LexicalEntry(
        ortho=ortho,
        phon=phon if phon is not None else ortho,
        lemme=lemme if lemme is not None else ortho,
        cgram=cgram,
        genre=extra.get("genre", "m"),
        nombre=extra.get("nombre", "s"),
        freqlemfilms2=films,
        freqlemlivres=livres,
        nbr_syll=extra.get("nbr_syll", 1),
    )


@pytest.fixture
def demo_entries():
    """The three-entry fallback dataset: chien, chat, bonjour."""
    return DemoLexiconSource().load()


@pytest.fixture
def demo_store(demo_entries):
    return LexiconStore.from_entries(demo_entries)


@pytest.fixture
def inflection_entries():
    """
    A small paradigm with shared lemmas, homophones and mixed case,
    so buckets hold several positions.
    """
    return [
        make_entry("mange", lemme="manger", phon="mɑ̃ʒ", cgram="VER", films=20.0, livres=5.0),    # 0
        make_entry("Manger", lemme="manger", phon="mɑ̃ʒe", cgram="VER", films=90.0, livres=80.0), # 1
        make_entry("manges", lemme="manger", phon="mɑ̃ʒ", cgram="VER", films=1.0, livres=0.5),   # 2
        make_entry("mangé", lemme="manger", phon="mɑ̃ʒe", cgram="VER", films=3.0, livres=30.0),  # 3
        make_entry("manger", lemme="manger", phon="mɑ̃ʒe", cgram="NOM", films=0.2, livres=0.1),  # 4
        make_entry("mangeur", lemme="mangeur", phon="mɑ̃ʒœʁ", cgram="NOM", films=0.9, livres=1.1),  # 5
        make_entry("MANGER", lemme="Manger", phon="MƐ", cgram="ver", films=0.0, livres=0.0),      # 6
    ]


@pytest.fixture
def inflection_store(inflection_entries):
    return LexiconStore.from_entries(inflection_entries)


@pytest.fixture
def container(demo_store):
    """
    The application container with the lexicon store replaced by the demo store.
    Overrides are reset after the test.
    """
    app_container.lexicon_store.override(demo_store)
    yield app_container
    app_container.lexicon_store.reset_override()
    app_container.unwire()


@pytest.fixture
def client(container):
    """
    Returns a FastAPI TestClient over the demo store.
    Entering the context runs the lifespan (wiring + store build).
    """
    app = create_app()
    with TestClient(app) as c:
        yield c
