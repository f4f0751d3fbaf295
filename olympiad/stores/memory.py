"""
In-memory stores for demo mode and tests.

Same capability set as the SQL and REST stores; instances are passed
explicitly to the session builder rather than living in module globals.
"""
from __future__ import annotations

import json
from collections.abc import Collection, Iterable, Sequence
from pathlib import Path

from loguru import logger

from olympiad.core.errors import StoreError
from olympiad.core.models import AnswerHistoryEntry, CuratedRow, Level, Subject


class InMemoryHistoryStore:
    """History kept in a list, newest last."""

    def __init__(self, entries: Iterable[AnswerHistoryEntry] | None = None):
        self._entries: list[AnswerHistoryEntry] = list(entries or ())

    def fetch_history(self, user_id: str) -> list[AnswerHistoryEntry]:
        return [e for e in self._entries if e.user_id == user_id]

    def record_answer(self, entry: AnswerHistoryEntry) -> None:
        self._entries.append(entry)

    def __len__(self) -> int:
        return len(self._entries)


class InMemoryCuratedStore:
    """Question bank rows kept in insertion order."""

    def __init__(self, rows: Iterable[CuratedRow] | None = None):
        self._rows: list[CuratedRow] = list(rows or ())

    def add(self, row: CuratedRow) -> None:
        self._rows.append(row)

    def query_active_questions(
        self,
        level: Level,
        subject: Subject,
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CuratedRow]:
        if limit <= 0:
            return []
        excluded = set(exclude_ids)
        matches = [
            row
            for row in self._rows
            if row.is_active
            and row.level == level.value
            and row.subject == subject.value
            and row.id not in excluded
        ]
        return matches[:limit]

    @classmethod
    def load_json(cls, path: str | Path) -> InMemoryCuratedStore:
        """Load rows from a JSON array of question bank records."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Cannot load curated rows from {path}: {e}") from e

        if not isinstance(data, list):
            raise StoreError(f"{path} must contain a JSON array of rows")

        try:
            rows = [CuratedRow.from_dict(item) for item in data]
        except (KeyError, TypeError, AttributeError) as e:
            raise StoreError(f"Malformed curated row in {path}: {e}") from e
        logger.info(f"Loaded {len(rows)} curated rows from {path}")
        return cls(rows)

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> Sequence[CuratedRow]:
        return tuple(self._rows)
