"""
Injected random source.

Every random decision in the generator goes through an object exposing
`random() -> float` in [0, 1). `random.Random` satisfies this, so a seed is
all a caller needs for reproducible puzzles.
"""

import random
from typing import List, Optional, Protocol, Sequence, TypeVar


T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1)."""

    def random(self) -> float:
        ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create a seeded random source (unseeded when `seed` is None)."""
    return random.Random(seed)


def randbelow(rng: RandomSource, n: int) -> int:
    """Uniform integer in [0, n)."""
    if n <= 0:
        raise ValueError(f"randbelow() needs a positive bound, got {n}")
    # int(x * n) can round up to n for x close to 1.0
    return min(int(rng.random() * n), n - 1)


def choice(rng: RandomSource, items: Sequence[T]) -> T:
    """Uniform pick from a non-empty sequence."""
    return items[randbelow(rng, len(items))]


def shuffled(rng: RandomSource, items: Sequence[T]) -> List[T]:
    """Return a Fisher-Yates shuffled copy of `items`."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = randbelow(rng, i + 1)
        result[i], result[j] = result[j], result[i]
    return result
