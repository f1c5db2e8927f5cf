# rng.py
from __future__ import annotations

import random
from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")

# A random source is any zero-arg callable returning a float in [0, 1).
RandomSource = Callable[[], float]

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32


def lcg(seed: int) -> RandomSource:
    """
    Linear-congruential generator:

        state = (state * 1664525 + 1013904223) mod 2^32
        output = state / 2^32

    Two generators built from the same seed yield the same sequence.
    """
    state = seed % LCG_MODULUS

    def _next() -> float:
        nonlocal state
        state = (state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return state / LCG_MODULUS

    return _next


def make_random(seed: Optional[int] = None) -> RandomSource:
    """Seeded LCG when a seed is given, otherwise a fresh OS-seeded source."""
    if seed is not None:
        return lcg(seed)
    return random.Random().random


def pick(rand: RandomSource, items: Sequence[T]) -> T:
    """Uniform choice from a non-empty sequence using the given source."""
    return items[int(rand() * len(items))]
