"""
Unit tests for answer recording, streaks and session summaries.
"""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from olympiad.core.errors import StoreError
from olympiad.core.models import Level, Question, Subject
from olympiad.engine.scoring import AnswerOutcome, AnswerRecorder, summarize
from olympiad.stores.memory import InMemoryHistoryStore

NOW = datetime(2024, 8, 17, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def question():
    return Question(
        id="1700000000000-abc123",
        signature="ipa-ohm-r5-i2",
        level=Level.SMP,
        subject=Subject.IPA,
        question_text="Hambatan 5 Ω dialiri arus 2 A. Berapa tegangannya?",
        options=["8", "10", "12", "7"],
        correct_index=1,
    )


@pytest.fixture
def recorder(history_store):
    return AnswerRecorder(history_store, clock=lambda: NOW)


class TestAnswerRecorder:
    """Scoring and persistence of single answers."""

    def test_correct_answer_extends_streak(self, recorder, question):
        outcome = recorder.record("user-1", question, 1, streak=4)

        assert outcome.is_correct
        assert outcome.streak == 5
        assert outcome.recorded
        assert not outcome.milestone

    def test_wrong_answer_resets_streak(self, recorder, question):
        outcome = recorder.record("user-1", question, 0, streak=9)

        assert not outcome.is_correct
        assert outcome.streak == 0
        assert outcome.correct_index == 1

    def test_history_entry_written(self, recorder, question, history_store):
        recorder.record("user-1", question, 3, streak=0)

        [entry] = history_store.fetch_history("user-1")
        assert entry.question_signature == "ipa-ohm-r5-i2"
        assert entry.subject == "IPA"
        assert entry.is_correct is False
        assert entry.timestamp == NOW

    @pytest.mark.parametrize("streak,milestone", [
        (23, False),
        (24, True),
        (49, True),
        (25, False),
    ])
    def test_milestone_every_25(self, recorder, question, streak, milestone):
        assert recorder.record("user-1", question, 1, streak=streak).milestone is milestone

    def test_custom_milestone(self, history_store, question):
        recorder = AnswerRecorder(history_store, milestone_every=3)
        assert recorder.record("u", question, 1, streak=2).milestone

    def test_wrong_answer_never_milestone(self, history_store, question):
        recorder = AnswerRecorder(history_store, milestone_every=1)
        assert not recorder.record("u", question, 0, streak=0).milestone

    @pytest.mark.parametrize("index", [-1, 4])
    def test_out_of_range_selection(self, recorder, question, index):
        with pytest.raises(ValueError):
            recorder.record("user-1", question, index, streak=0)

    def test_invalid_milestone(self, history_store):
        with pytest.raises(ValueError):
            AnswerRecorder(history_store, milestone_every=0)

    def test_history_failure_still_scores(self, question):
        history = Mock()
        history.record_answer.side_effect = StoreError("down")
        recorder = AnswerRecorder(history, clock=lambda: NOW)

        outcome = recorder.record("user-1", question, 1, streak=0)

        assert outcome.is_correct
        assert outcome.streak == 1
        assert not outcome.recorded

    def test_recorded_answer_excluded_next_session(self, question, generator):
        """Answered signatures feed straight into exclusion."""
        from olympiad.engine.hybrid import HybridSessionBuilder
        from olympiad.stores.memory import InMemoryCuratedStore

        history = InMemoryHistoryStore()
        AnswerRecorder(history).record("user-1", question, 1, streak=0)
        builder = HybridSessionBuilder(history, InMemoryCuratedStore(), generator=generator)

        session = builder.fetch_session(Level.SMP, Subject.IPA, 10, "user-1")

        assert "ipa-ohm-r5-i2" not in session.signatures


class TestSummarize:
    """Session summaries."""

    def _outcome(self, correct, streak):
        return AnswerOutcome("sig", 0, 0 if correct else 1, correct, streak)

    def test_summary(self):
        outcomes = [
            self._outcome(True, 1),
            self._outcome(True, 2),
            self._outcome(False, 0),
            self._outcome(True, 1),
        ]

        summary = summarize(outcomes)

        assert summary.answered == 4
        assert summary.correct == 3
        assert summary.accuracy == 0.75
        assert summary.best_streak == 2

    def test_empty(self):
        summary = summarize([])
        assert summary.answered == 0
        assert summary.accuracy == 0.0
        assert summary.best_streak == 0
