"""
Base types and registry for question templates.

A template is a plain function taking a RandomSource and returning a
TemplateResult. Templates never touch engine state, so they are safe to call
from concurrent sessions. Registration happens once at import time through
the @template decorator; afterwards the registry is only read.
"""
from __future__ import annotations

import math
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from olympiad.core.models import DiagramSpec, Level, Subject
from olympiad.core.random_source import RandomSource, choice

Answer = int | float | str


@dataclass(frozen=True)
class TemplateResult:
    """What a template produces before options are built."""

    question_text: str
    answer: Answer
    explanation: str
    signature_base: str
    diagram: DiagramSpec | None = None
    spread: int | None = None  # numeric distractor spread hint
    other_options: tuple[str, ...] = field(default_factory=tuple)  # string answers only

    @property
    def is_string_answer(self) -> bool:
        return isinstance(self.answer, str)


Template = Callable[[RandomSource], TemplateResult]


@dataclass(frozen=True)
class Fact:
    """One entry of a factual question bank."""

    question: str
    answer: str
    others: tuple[str, str, str]


# Registry - populated by @template decorator
_REGISTRY: dict[tuple[Level, Subject], list[Template]] = {}
_SIGNATURE_PREFIXES: set[str] = set()


def template(level: Level, subject: Subject, signature_prefix: str):
    """Decorator to register a template for a (level, subject) pair."""
    def decorator(fn: Template) -> Template:
        _REGISTRY.setdefault((level, subject), []).append(fn)
        _SIGNATURE_PREFIXES.add(signature_prefix)
        return fn
    return decorator


def templates_for(level: Level, subject: Subject) -> tuple[Template, ...]:
    """Templates registered for a pair; empty tuple when none."""
    return tuple(_REGISTRY.get((level, subject), ()))


def registered_pairs() -> list[tuple[Level, Subject]]:
    return list(_REGISTRY)


def is_generated_signature(signature: str) -> bool:
    """True when a signature was produced by a registered template."""
    return any(signature.startswith(prefix) for prefix in _SIGNATURE_PREFIXES)


def num(value: int | float) -> str:
    """Render a number for question text: integral values without decimals."""
    if float(value).is_integer():
        return str(int(value))
    return str(round(value, 2))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_WHITESPACE = re.compile(r"\s")


def fact_key(answer: str, *, keep_punctuation: bool = False, max_len: int | None = None) -> str:
    """Signature fragment for a factual answer."""
    key = _WHITESPACE.sub("", answer) if keep_punctuation else _NON_ALNUM.sub("", answer)
    return key[:max_len] if max_len else key


def fact_result(
    rng: RandomSource,
    facts: Sequence[Fact],
    prefix: str,
    *,
    explanation_label: str = "Jawaban",
    keep_punctuation: bool = False,
    max_len: int | None = None,
) -> TemplateResult:
    """Pick one fact from a bank and turn it into a string-answer result."""
    fact = choice(rng, list(facts))
    return TemplateResult(
        question_text=fact.question,
        answer=fact.answer,
        explanation=f"{explanation_label}: {fact.answer}",
        signature_base=f"{prefix}-{fact_key(fact.answer, keep_punctuation=keep_punctuation, max_len=max_len)}",
        other_options=fact.others,
    )
