from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tile:
    """A single map cell.

    - blocked: movement is not possible through this tile
    - block_sight: light does not pass through this tile
    - explored: the player has seen this tile at least once (never reverts)
    """

    blocked: bool
    block_sight: bool
    explored: bool = False

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, block_sight=True)

    @classmethod
    def floor(cls) -> "Tile":
        return cls(blocked=False, block_sight=False)

    @property
    def is_wall(self) -> bool:
        return self.blocked and self.block_sight

    def mark_explored(self) -> None:
        self.explored = True

    @property
    def glyph(self) -> str:
        """A single-character visualization useful for logs/debug."""
        return "#" if self.blocked else "."
