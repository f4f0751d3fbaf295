"""
Curation checks for hand-authored question bank rows.

Used out-of-band (CLI `validate-bank`, admin tooling) and by the mapper to
flag rows whose answer text does not match any option.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from olympiad.core.models import OPTION_COUNT, CuratedRow, Level, Subject, is_valid_pair


class IssueCode(str, Enum):
    ANSWER_NOT_IN_OPTIONS = "answer_not_in_options"
    WRONG_OPTION_COUNT = "wrong_option_count"
    DUPLICATE_OPTIONS = "duplicate_options"
    EMPTY_QUESTION = "empty_question"
    UNKNOWN_LEVEL = "unknown_level"
    UNKNOWN_SUBJECT = "unknown_subject"
    SUBJECT_NOT_IN_LEVEL = "subject_not_in_level"
    UNMAPPABLE_ROW = "unmappable_row"


@dataclass(frozen=True)
class CurationIssue:
    """A data-quality problem in one curated row."""

    row_id: str
    code: IssueCode
    message: str


def normalize_option(text: str) -> str:
    return text.strip().lower()


def find_answer_index(options: list[str], answer_text: str) -> int | None:
    """Index of the option matching the answer (trimmed, case-insensitive)."""
    target = normalize_option(answer_text)
    for i, option in enumerate(options):
        if normalize_option(option) == target:
            return i
    return None


def validate_curated_row(row: CuratedRow) -> list[CurationIssue]:
    """Return every issue found in a row; an empty list means the row is clean."""
    issues: list[CurationIssue] = []

    def add(code: IssueCode, message: str) -> None:
        issues.append(CurationIssue(row.id, code, message))

    if not row.question_text.strip():
        add(IssueCode.EMPTY_QUESTION, "Question text is empty")

    if len(row.options) != OPTION_COUNT:
        add(IssueCode.WRONG_OPTION_COUNT, f"Expected {OPTION_COUNT} options, found {len(row.options)}")

    counts = Counter(normalize_option(o) for o in row.options)
    dupes = sorted(o for o, n in counts.items() if n > 1)
    if dupes:
        add(IssueCode.DUPLICATE_OPTIONS, f"Duplicate options: {', '.join(dupes)}")

    if find_answer_index(row.options, row.answer_text) is None:
        add(IssueCode.ANSWER_NOT_IN_OPTIONS, f"Answer {row.answer_text!r} matches no option")

    level = subject = None
    try:
        level = Level.parse(row.level)
    except ValueError:
        add(IssueCode.UNKNOWN_LEVEL, f"Unknown level {row.level!r}")
    try:
        subject = Subject.parse(row.subject)
    except ValueError:
        add(IssueCode.UNKNOWN_SUBJECT, f"Unknown subject {row.subject!r}")

    if level is not None and subject is not None and not is_valid_pair(level, subject):
        add(IssueCode.SUBJECT_NOT_IN_LEVEL, f"{subject.value} is not offered at {level.value}")

    return issues


@dataclass
class CurationReport:
    """Aggregated issues over many rows."""

    rows_checked: int = 0
    issues: list[CurationIssue] = field(default_factory=list)

    def add(self, issue: CurationIssue) -> None:
        self.issues.append(issue)

    def check(self, row: CuratedRow) -> list[CurationIssue]:
        self.rows_checked += 1
        found = validate_curated_row(row)
        self.issues.extend(found)
        return found

    @property
    def is_clean(self) -> bool:
        return not self.issues

    @property
    def flagged_row_ids(self) -> list[str]:
        return sorted({issue.row_id for issue in self.issues})

    def by_code(self) -> dict[IssueCode, int]:
        return dict(Counter(issue.code for issue in self.issues))
