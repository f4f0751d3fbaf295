"""
Curated question bank adapter.

Maps question bank rows into the same Question shape the generator produces,
so curated and generated items can be mixed freely. The row id doubles as
the signature.
"""
from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from olympiad.core.models import CuratedRow, Level, Question, QuestionOrigin, Subject
from olympiad.curated.validator import CurationIssue, IssueCode, find_answer_index

IssueCallback = Callable[[CurationIssue], None]


def map_curated_row(row: CuratedRow, on_mismatch: IssueCallback | None = None) -> Question:
    """
    Convert a curated row to a Question.

    A row whose answer text matches no option is not an error here: the first
    option is marked correct, a warning is logged and `on_mismatch` receives a
    CurationIssue for out-of-band review.

    Raises:
        ValueError: if the row's level/subject is unknown or it does not have
            exactly four options (a Question cannot be built at all).
    """
    index = find_answer_index(row.options, row.answer_text)
    if index is None:
        logger.warning(
            f"Curated question {row.id}: answer {row.answer_text!r} matches no option; defaulting to option 0"
        )
        if on_mismatch is not None:
            on_mismatch(
                CurationIssue(row.id, IssueCode.ANSWER_NOT_IN_OPTIONS, f"Answer {row.answer_text!r} matches no option")
            )
        index = 0

    return Question(
        id=row.id,
        signature=row.id,
        level=Level.parse(row.level),
        subject=Subject.parse(row.subject),
        question_text=row.question_text,
        options=list(row.options),
        correct_index=index,
        explanation=row.explanation or "",
        diagram=None,
        image_url=row.image_url or None,
        origin=QuestionOrigin.CURATED,
    )


def store_id_of(question: Question) -> str | None:
    """Question bank id of a curated question (None for generated ones)."""
    if question.origin is not QuestionOrigin.CURATED:
        return None
    return question.signature
