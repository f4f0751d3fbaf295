"""
Core Module - Shared domain models and interfaces.

Components:
- models: Question, DiagramSpec, Level/Subject enums, history entries, sessions
- random_source: Injectable randomness used by templates and shuffles
- errors: Exception hierarchy (StoreError and friends)
- logging: loguru sink setup
"""

from olympiad.core.errors import OlympiadError, StoreError, StoreTimeoutError
from olympiad.core.models import (
    FILLER_MARKER,
    OPTION_COUNT,
    SUBJECTS_BY_LEVEL,
    AnswerHistoryEntry,
    CuratedRow,
    DiagramKind,
    DiagramSpec,
    Level,
    Question,
    QuestionOrigin,
    QuizSession,
    Subject,
    is_valid_pair,
)
from olympiad.core.random_source import RandomSource, make_rng

__all__ = [
    "FILLER_MARKER",
    "OPTION_COUNT",
    "SUBJECTS_BY_LEVEL",
    "AnswerHistoryEntry",
    "CuratedRow",
    "DiagramKind",
    "DiagramSpec",
    "Level",
    "OlympiadError",
    "Question",
    "QuestionOrigin",
    "QuizSession",
    "RandomSource",
    "StoreError",
    "StoreTimeoutError",
    "Subject",
    "is_valid_pair",
    "make_rng",
]
