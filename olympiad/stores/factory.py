"""Wire history/curated stores from settings."""
from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from config import Settings, get_settings
from olympiad.stores.base import CuratedStore, HistoryStore
from olympiad.stores.guarded import TimeoutGuardedCuratedStore, TimeoutGuardedHistoryStore, shared_executor


@dataclass
class StoreBundle:
    history: HistoryStore
    curated: CuratedStore
    backend: str


def build_stores(settings: Settings | None = None, guard: bool = True) -> StoreBundle:
    """
    Pick the store backend.

    Priority: REST (when URL and key are set) > SQL (store_backend="sql") >
    in-memory demo stores. Guards run on the process-wide pool from
    shared_executor(), so building stores per request adds no threads.
    """
    settings = settings or get_settings()

    if settings.use_rest:
        from olympiad.stores.rest import RestClient, RestCuratedStore, RestHistoryStore

        client = RestClient(settings.rest_url, settings.rest_api_key, timeout=settings.rest_timeout_seconds)
        history, curated, backend = RestHistoryStore(client), RestCuratedStore(client), "rest"
    elif settings.store_backend == "sql":
        from olympiad.stores.sql import SqlCuratedStore, SqlHistoryStore

        history, curated, backend = SqlHistoryStore(), SqlCuratedStore(), "sql"
    else:
        from olympiad.stores.memory import InMemoryCuratedStore, InMemoryHistoryStore

        curated = (
            InMemoryCuratedStore.load_json(settings.curated_seed_file)
            if settings.curated_seed_file
            else InMemoryCuratedStore()
        )
        history, backend = InMemoryHistoryStore(), "memory"

    logger.info(f"Using {backend} stores")

    if guard:
        executor = shared_executor()
        history = TimeoutGuardedHistoryStore(history, settings.store_timeout_seconds, executor)
        curated = TimeoutGuardedCuratedStore(curated, settings.store_timeout_seconds, executor)

    return StoreBundle(history=history, curated=curated, backend=backend)
