# app/shared/container.py
from dependency_injector import containers, providers

from app.shared.config import settings
from app.adapters.persistence.lexique_loader import load_lexicon_entries
from app.core.domain.store import LexiconStore
from app.core.use_cases.search_lexicon import SearchLexicon
from app.core.use_cases.get_lexicon_stats import GetLexiconStats

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    # We load settings directly, but wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # Raw entries from the Lexique export (or the demo fallback); consumed by the store.
    lexicon_entries = providers.Factory(
        load_lexicon_entries,
        path=config.LEXIQUE_PATH,
    )

    # Record store + indexes (Singleton: built once at startup, then frozen)
    lexicon_store = providers.Singleton(
        LexiconStore.from_entries,
        entries=lexicon_entries,
    )

    # 3. Use Cases (Application Logic)

    # Factory: a light wrapper per request, all sharing the one store.
    search_lexicon_use_case = providers.Factory(
        SearchLexicon,
        store=lexicon_store,
        default_limit=config.SEARCH_DEFAULT_LIMIT,
        max_limit=config.SEARCH_MAX_LIMIT,
    )

    get_lexicon_stats_use_case = providers.Factory(
        GetLexiconStats,
        store=lexicon_store,
    )

# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
