from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from ..colors import Color
from .ai import AI


class DeathBehavior(Enum):
    """Which death routine runs when a Fighter drops to 0 hp."""

    PLAYER = auto()
    MONSTER = auto()


class ItemKind(Enum):
    """Tag selecting which effect runs when an item is used."""

    HEAL = auto()
    LIGHTNING_BOLT = auto()
    CONFUSE = auto()


@dataclass
class Fighter:
    """Combat capability.

    Attributes:
        max_hp: Maximum hit points.
        hp: Current hit points; may drop below zero on the killing blow.
        defense: Subtracted from incoming attack power.
        power: Attack strength.
        on_death: Death routine selected at creation.
    """

    max_hp: int
    hp: int
    defense: int
    power: int
    on_death: DeathBehavior

    @classmethod
    def from_stats(cls, stats, on_death: DeathBehavior) -> "Fighter":
        return cls(
            max_hp=stats.max_hp,
            hp=stats.max_hp,
            defense=stats.defense,
            power=stats.power,
            on_death=on_death,
        )


@dataclass
class Entity:
    """A generic thing on the map: the player, a monster, an item, a corpse."""

    x: int
    y: int
    char: str
    color: Color
    name: str
    blocks: bool = False
    is_alive: bool = False
    fighter: Optional[Fighter] = None
    ai: Optional[AI] = None
    item: Optional[ItemKind] = None

    @property
    def pos(self) -> Tuple[int, int]:
        return self.x, self.y

    def set_pos(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def distance(self, x: int, y: int) -> float:
        return math.hypot(x - self.x, y - self.y)

    def distance_to(self, other: "Entity") -> float:
        return self.distance(other.x, other.y)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"Entity(name={self.name!r}, pos={self.pos}, alive={self.is_alive})"
