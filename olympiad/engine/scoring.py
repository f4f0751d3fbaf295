"""
Answer recording and streak tracking.

Every answer is appended to the history store under the question's
signature, which is what the session builder later excludes.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timezone

from loguru import logger

from olympiad.core.models import AnswerHistoryEntry, Question
from olympiad.stores.base import HistoryStore

DEFAULT_MILESTONE_EVERY = 25


@dataclass(frozen=True)
class AnswerOutcome:
    """Result of answering one question."""

    question_signature: str
    selected_index: int
    correct_index: int
    is_correct: bool
    streak: int
    milestone: bool = False
    recorded: bool = True


@dataclass(frozen=True)
class SessionSummary:
    answered: int
    correct: int
    best_streak: int

    @property
    def accuracy(self) -> float:
        return self.correct / self.answered if self.answered else 0.0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AnswerRecorder:
    """Scores answers, persists them and keeps the running streak."""

    def __init__(
        self,
        history_store: HistoryStore,
        milestone_every: int = DEFAULT_MILESTONE_EVERY,
        clock: Callable[[], datetime] | None = None,
    ):
        if milestone_every < 1:
            raise ValueError("milestone_every must be at least 1")
        self.history_store = history_store
        self.milestone_every = milestone_every
        self.clock = clock or _utc_now

    def record(self, user_id: str, question: Question, selected_index: int, streak: int) -> AnswerOutcome:
        """
        Score an answer and append it to the user's history.

        Args:
            user_id: Player id
            question: The question that was answered
            selected_index: Index of the chosen option
            streak: Streak before this answer

        Returns:
            AnswerOutcome with the updated streak. A failed history write is
            logged and reported as recorded=False; the answer still counts.

        Raises:
            ValueError: if selected_index is not a valid option index
        """
        if not 0 <= selected_index < len(question.options):
            raise ValueError(f"selected_index {selected_index} out of range for {len(question.options)} options")

        is_correct = selected_index == question.correct_index
        new_streak = streak + 1 if is_correct else 0
        milestone = new_streak > 0 and new_streak % self.milestone_every == 0

        entry = AnswerHistoryEntry(
            user_id=user_id,
            subject=question.subject.value,
            question_signature=question.signature,
            is_correct=is_correct,
            timestamp=self.clock(),
        )
        recorded = True
        try:
            self.history_store.record_answer(entry)
        except Exception as e:  # Intentionally broad - scoring must not fail on storage
            logger.warning(f"Failed to record answer for {user_id} ({question.signature}): {e}")
            recorded = False

        if milestone:
            logger.info(f"{user_id} reached a streak of {new_streak}")

        return AnswerOutcome(
            question_signature=question.signature,
            selected_index=selected_index,
            correct_index=question.correct_index,
            is_correct=is_correct,
            streak=new_streak,
            milestone=milestone,
            recorded=recorded,
        )


def summarize(outcomes: Iterable[AnswerOutcome]) -> SessionSummary:
    """Aggregate a session's outcomes."""
    answered = correct = best = 0
    for outcome in outcomes:
        answered += 1
        correct += outcome.is_correct
        best = max(best, outcome.streak)
    return SessionSummary(answered=answered, correct=correct, best_streak=best)
