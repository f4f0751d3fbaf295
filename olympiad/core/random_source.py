"""
Injectable randomness.

Templates, option shuffles and session shuffles all draw from a RandomSource
instead of the module-level `random` state, so tests can seed them.
"""
from __future__ import annotations

import random
from typing import Protocol, TypeVar

T = TypeVar("T")

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


class RandomSource(Protocol):
    """Anything with a `random()` returning a float in [0, 1)."""

    def random(self) -> float:
        ...


def rand_int(rng: RandomSource, low: int, high: int) -> int:
    """Uniform integer in the inclusive range [low, high]."""
    return int(rng.random() * (high - low + 1)) + low


def choice(rng: RandomSource, items: tuple[T, ...] | list[T]) -> T:
    if not items:
        raise ValueError("Cannot choose from an empty sequence")
    return items[rand_int(rng, 0, len(items) - 1)]


def shuffled(rng: RandomSource, items: list[T]) -> list[T]:
    """Return a Fisher-Yates shuffled copy of items."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rand_int(rng, 0, i)
        result[i], result[j] = result[j], result[i]
    return result


def random_token(rng: RandomSource, length: int = 6) -> str:
    return "".join(_BASE36[rand_int(rng, 0, 35)] for _ in range(length))


def make_rng(seed: int | None = None) -> random.Random:
    """Default source; `random.Random` already satisfies the protocol."""
    return random.Random(seed)
