"""
SQLAlchemy-backed history and curated stores.

Both stores take a session factory so tests and embedding applications can
point them at their own engine; by default they use the settings database.
"""
from __future__ import annotations

from collections.abc import Collection
from datetime import timezone

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from olympiad.core.errors import StoreError
from olympiad.core.models import AnswerHistoryEntry, CuratedRow, Level, Subject
from olympiad.db.database import get_session_factory, session_scope
from olympiad.db.models import QuestionBank, QuizHistory


class SqlHistoryStore:
    """History store over the quiz_history table."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None):
        self._factory = session_factory or get_session_factory()

    def fetch_history(self, user_id: str) -> list[AnswerHistoryEntry]:
        try:
            with session_scope(self._factory) as session:
                rows = session.scalars(
                    select(QuizHistory)
                    .where(QuizHistory.user_id == user_id)
                    .order_by(QuizHistory.created_at)
                ).all()
                return [_history_entry(row) for row in rows]
        except SQLAlchemyError as e:
            raise StoreError(f"History query failed for user {user_id}: {e}") from e

    def record_answer(self, entry: AnswerHistoryEntry) -> None:
        try:
            with session_scope(self._factory) as session:
                session.add(
                    QuizHistory(
                        user_id=entry.user_id,
                        subject=entry.subject,
                        question_signature=entry.question_signature,
                        is_correct=entry.is_correct,
                        created_at=entry.timestamp,
                    )
                )
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to record answer for user {entry.user_id}: {e}") from e
        logger.debug(f"Recorded answer {entry.question_signature} for {entry.user_id}")


class SqlCuratedStore:
    """Curated store over the question_bank table (active rows only)."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None):
        self._factory = session_factory or get_session_factory()

    def query_active_questions(
        self,
        level: Level,
        subject: Subject,
        exclude_ids: Collection[str],
        limit: int,
    ) -> list[CuratedRow]:
        if limit <= 0:
            return []

        stmt = (
            select(QuestionBank)
            .where(
                QuestionBank.is_active.is_(True),
                QuestionBank.level == level.value,
                QuestionBank.subject == subject.value,
            )
            .order_by(QuestionBank.created_at.desc())
            .limit(limit)
        )
        if exclude_ids:
            stmt = stmt.where(QuestionBank.id.not_in(list(exclude_ids)))

        try:
            with session_scope(self._factory) as session:
                return [_curated_row(row) for row in session.scalars(stmt).all()]
        except SQLAlchemyError as e:
            raise StoreError(f"Question bank query failed for {level.value}/{subject.value}: {e}") from e

    def add(self, row: CuratedRow) -> None:
        """Insert a curated row (admin/seed tooling)."""
        try:
            with session_scope(self._factory) as session:
                session.add(
                    QuestionBank(
                        id=row.id,
                        level=row.level,
                        subject=row.subject,
                        question=row.question_text,
                        options=list(row.options),
                        answer=row.answer_text,
                        explanation=row.explanation,
                        image_url=row.image_url,
                        is_active=row.is_active,
                    )
                )
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to insert curated row {row.id}: {e}") from e


def _history_entry(row: QuizHistory) -> AnswerHistoryEntry:
    ts = row.created_at
    if ts is not None and ts.tzinfo is None:
        # SQLite drops tzinfo; values are written as UTC
        ts = ts.replace(tzinfo=timezone.utc)
    return AnswerHistoryEntry(
        user_id=row.user_id,
        subject=row.subject,
        question_signature=row.question_signature,
        is_correct=row.is_correct,
        timestamp=ts,
    )


def _curated_row(row: QuestionBank) -> CuratedRow:
    return CuratedRow(
        id=row.id,
        level=row.level,
        subject=row.subject,
        question_text=row.question,
        options=list(row.options or []),
        answer_text=row.answer,
        explanation=row.explanation or "",
        image_url=row.image_url,
        is_active=row.is_active,
    )
