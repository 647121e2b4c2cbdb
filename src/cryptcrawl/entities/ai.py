from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BasicAI:
    """Chase the player while visible and attack when adjacent."""


@dataclass(frozen=True)
class ConfusedAI:
    """Random-walk for a number of turns, then restore ``previous``.

    ``previous`` is a complete snapshot of the AI value that was replaced, so
    it may itself be a ConfusedAI; nesting depth is unbounded.
    """

    previous: "AI"
    num_turns: int

    def tick(self) -> "ConfusedAI":
        return ConfusedAI(previous=self.previous, num_turns=self.num_turns - 1)


AI = Union[BasicAI, ConfusedAI]
