"""
Option building for generated questions.

Numeric answers get three jittered distractors; string answers use the
template's hand-picked distractors verbatim. Both are shuffled with
Fisher-Yates through the injected random source.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from olympiad.core.models import OPTION_COUNT
from olympiad.core.random_source import RandomSource, rand_int, shuffled

DISTRACTOR_COUNT = OPTION_COUNT - 1
MAX_DISTRACTOR_DRAWS = 200


@dataclass(frozen=True)
class OptionSet:
    options: list[str]
    correct_index: int


def default_spread(correct: float) -> int:
    return max(1, math.floor(abs(correct) * 0.3))


def format_number(value: float) -> str:
    """Integers as plain digits, everything else fixed to 2 decimals."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def numeric_distractors(
    rng: RandomSource,
    correct: float,
    spread: int | None = None,
) -> list[float]:
    """
    Draw three distinct wrong answers around the correct value.

    A zero offset is replaced by `len(distractors) + 1` so an exhausted spread
    still makes progress; candidates equal to the answer or to an earlier
    distractor are redrawn.
    """
    s = spread or default_spread(correct)
    correct_label = format_number(correct)
    distractors: list[float] = []
    labels = {correct_label}
    draws = 0

    while len(distractors) < DISTRACTOR_COUNT and draws < MAX_DISTRACTOR_DRAWS:
        draws += 1
        offset = rand_int(rng, -s, s)
        if offset == 0:
            offset = len(distractors) + 1
        candidate = correct + offset
        label = format_number(candidate)
        if label not in labels:
            labels.add(label)
            distractors.append(candidate)

    # Walk outward past the spread if random draws could not finish the set
    step = s + 1
    while len(distractors) < DISTRACTOR_COUNT:
        candidate = correct + step
        label = format_number(candidate)
        if label not in labels:
            labels.add(label)
            distractors.append(candidate)
        step += 1

    return distractors


def numeric_options(rng: RandomSource, correct: float, spread: int | None = None) -> OptionSet:
    values = [correct, *numeric_distractors(rng, correct, spread)]
    order = shuffled(rng, list(range(OPTION_COUNT)))
    return OptionSet(
        options=[format_number(values[i]) for i in order],
        correct_index=order.index(0),
    )


def string_options(rng: RandomSource, correct: str, others: tuple[str, ...] | list[str]) -> OptionSet:
    if len(others) < DISTRACTOR_COUNT:
        raise ValueError(f"String templates need {DISTRACTOR_COUNT} distractors, got {len(others)}")
    values = [correct, *list(others)[:DISTRACTOR_COUNT]]
    order = shuffled(rng, list(range(OPTION_COUNT)))
    return OptionSet(
        options=[values[i] for i in order],
        correct_index=order.index(0),
    )
