"""
History and curated stores.

Variants of the same capability set:
- memory: demo mode and tests
- sql: SQLAlchemy tables (SQLite or PostgreSQL)
- rest: PostgREST endpoint (hosted backend)
- guarded: timeout wrappers around any of the above
"""

from olympiad.stores.base import CuratedStore, HistoryStore
from olympiad.stores.factory import StoreBundle, build_stores
from olympiad.stores.guarded import TimeoutGuardedCuratedStore, TimeoutGuardedHistoryStore
from olympiad.stores.memory import InMemoryCuratedStore, InMemoryHistoryStore

__all__ = [
    "CuratedStore",
    "HistoryStore",
    "InMemoryCuratedStore",
    "InMemoryHistoryStore",
    "StoreBundle",
    "TimeoutGuardedCuratedStore",
    "TimeoutGuardedHistoryStore",
    "build_stores",
]
