from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class RNG:
    """
    Injectable wrapper around random.Random.

    A single instance is shared by generation, population and AI so the whole
    session draws from one source. Tests substitute a fixed-sequence double
    exposing the same methods.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def random(self) -> float:
        """Return the next random float in the range [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def coin_flip(self) -> bool:
        """Return True or False with equal probability."""
        return self._rng.random() < 0.5
