"""
Domain models for the question engine.

A single tagged Question type covers both curated and generated content:
generated questions may carry a DiagramSpec for client-side rendering,
curated questions may carry an image_url. Consumers treat both as optional.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

OPTION_COUNT = 4

# Marker appended to signatures of filler questions once content is exhausted
FILLER_MARKER = "-dup-"


class Level(str, Enum):
    """Schooling tier."""

    SMP = "SMP"  # junior high
    SMA = "SMA"  # senior high

    @classmethod
    def parse(cls, value: str) -> Level:
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Unknown level: {value!r}")


class Subject(str, Enum):
    """Quiz subject. Valid subjects depend on the level (see SUBJECTS_BY_LEVEL)."""

    MATEMATIKA = "Matematika"
    IPA = "IPA"
    IPS = "IPS"
    FISIKA = "Fisika"
    KIMIA = "Kimia"
    BIOLOGI = "Biologi"
    INFORMATIKA = "Informatika"
    ASTRONOMI = "Astronomi"
    EKONOMI = "Ekonomi"
    KEBUMIAN = "Kebumian"
    GEOGRAFI = "Geografi"

    @classmethod
    def parse(cls, value: str) -> Subject:
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Unknown subject: {value!r}")


SUBJECTS_BY_LEVEL: dict[Level, tuple[Subject, ...]] = {
    Level.SMP: (Subject.MATEMATIKA, Subject.IPA, Subject.IPS),
    Level.SMA: (
        Subject.MATEMATIKA,
        Subject.FISIKA,
        Subject.KIMIA,
        Subject.BIOLOGI,
        Subject.INFORMATIKA,
        Subject.ASTRONOMI,
        Subject.EKONOMI,
        Subject.KEBUMIAN,
        Subject.GEOGRAFI,
    ),
}


def is_valid_pair(level: Level, subject: Subject) -> bool:
    """Check whether a subject is offered at a level."""
    return subject in SUBJECTS_BY_LEVEL.get(level, ())


class DiagramKind(str, Enum):
    """Illustration kinds the client knows how to draw."""

    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    BLOCK_FORCE = "block-force"
    CIRCLE = "circle"
    TRAPEZOID = "trapezoid"


class QuestionOrigin(str, Enum):
    CURATED = "curated"
    GENERATED = "generated"


@dataclass(frozen=True)
class DiagramSpec:
    """Diagram kind tag plus the numeric parameters needed to draw it."""

    kind: DiagramKind
    params: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "params": dict(self.params)}


@dataclass
class Question:
    """A single multiple-choice quiz item."""

    id: str
    signature: str
    level: Level
    subject: Subject
    question_text: str
    options: list[str]
    correct_index: int
    explanation: str = ""
    diagram: DiagramSpec | None = None
    image_url: str | None = None
    origin: QuestionOrigin = QuestionOrigin.GENERATED

    def __post_init__(self) -> None:
        if len(self.options) != OPTION_COUNT:
            raise ValueError(
                f"Question {self.id} must have {OPTION_COUNT} options, got {len(self.options)}"
            )
        if not 0 <= self.correct_index < OPTION_COUNT:
            raise ValueError(f"Question {self.id} has invalid correct_index {self.correct_index}")

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_index]

    @property
    def is_filler(self) -> bool:
        """True for questions force-filled after content exhaustion."""
        return FILLER_MARKER in self.signature

    def to_dict(self) -> dict[str, Any]:
        """JSON-serialisable representation."""
        return {
            "id": self.id,
            "signature": self.signature,
            "level": self.level.value,
            "subject": self.subject.value,
            "question": self.question_text,
            "options": list(self.options),
            "correct_index": self.correct_index,
            "explanation": self.explanation,
            "diagram": self.diagram.to_dict() if self.diagram else None,
            "image_url": self.image_url,
            "origin": self.origin.value,
        }


@dataclass(frozen=True)
class AnswerHistoryEntry:
    """One answered question. Append-only, never mutated."""

    user_id: str
    subject: str
    question_signature: str
    is_correct: bool
    timestamp: datetime


def _as_text(value: Any) -> str:
    """Text form of a stored value: None -> "", integral floats without decimals."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class CuratedRow:
    """A hand-authored question record as stored in the question bank."""

    id: str
    level: str
    subject: str
    question_text: str
    options: list[str]
    answer_text: str
    explanation: str = ""
    image_url: str | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        # Banks authored as JSON often hold numbers or nulls where text is expected
        self.id = _as_text(self.id)
        self.level = _as_text(self.level)
        self.subject = _as_text(self.subject)
        self.question_text = _as_text(self.question_text)
        self.options = [_as_text(option) for option in self.options or ()]
        self.answer_text = _as_text(self.answer_text)
        self.explanation = _as_text(self.explanation)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CuratedRow:
        """Parse a row; accepts both `question`/`answer` and the long key names."""
        return cls(
            id=data["id"],
            level=data.get("level", ""),
            subject=data.get("subject", ""),
            question_text=data.get("question_text", data.get("question", "")),
            options=list(data.get("options") or []),
            answer_text=data.get("answer_text", data.get("answer", "")),
            explanation=data.get("explanation") or "",
            image_url=data.get("image_url") or None,
            is_active=data.get("is_active", True),
        )


@dataclass
class QuizSession:
    """Engine output: the ordered questions plus the mastery signal."""

    questions: list[Question]
    mastery_reached: bool = False
    curated_count: int = 0
    generated_count: int = 0
    degraded: bool = False

    def __len__(self) -> int:
        return len(self.questions)

    @property
    def signatures(self) -> list[str]:
        return [q.signature for q in self.questions]
