"""
Store protocols consumed by the session builder.

The engine reads answer history and curated questions through these narrow
interfaces and never mutates the curated store. Implementations translate
backend failures into StoreError.
"""
from __future__ import annotations

from collections.abc import Collection, Sequence
from typing import Protocol

from olympiad.core.models import AnswerHistoryEntry, CuratedRow, Level, Subject


class HistoryStore(Protocol):
    """Append-only record of answered questions per user."""

    def fetch_history(self, user_id: str) -> Sequence[AnswerHistoryEntry]:
        """Every entry for the user, all subjects. Raises StoreError on failure."""
        ...

    def record_answer(self, entry: AnswerHistoryEntry) -> None:
        """Append one entry. Raises StoreError on failure."""
        ...


class CuratedStore(Protocol):
    """Read-only access to active question bank rows."""

    def query_active_questions(
        self,
        level: Level,
        subject: Subject,
        exclude_ids: Collection[str],
        limit: int,
    ) -> Sequence[CuratedRow]:
        """At most `limit` active rows for the pair whose id is not excluded."""
        ...
