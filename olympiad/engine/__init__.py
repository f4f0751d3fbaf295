"""
Engine Module - Session assembly and answer scoring.

Components:
- hybrid: HybridSessionBuilder (curated + generated sessions)
- scoring: AnswerRecorder, streaks and session summaries
"""

from olympiad.engine.hybrid import ExclusionScope, HybridSessionBuilder
from olympiad.engine.scoring import AnswerOutcome, AnswerRecorder, SessionSummary, summarize

__all__ = [
    "AnswerOutcome",
    "AnswerRecorder",
    "ExclusionScope",
    "HybridSessionBuilder",
    "SessionSummary",
    "summarize",
]
