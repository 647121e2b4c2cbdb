from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple

from .rect import Rect
from .tiles import Tile

logger = logging.getLogger(__name__)


class Grid:
    """
    The tile map for one level. Width and height are fixed for the lifetime of
    the grid; all tile access is bounds-checked.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive")
        self.width = width
        self.height = height
        self._tiles: List[List[Tile]] = [[Tile.wall() for _ in range(height)] for _ in range(width)]

    # ---- Safety / Bounds -------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile out of bounds: ({x},{y}) not in [0,{self.width})x[0,{self.height})")
        return self._tiles[x][y]

    def __getitem__(self, pos: Tuple[int, int]) -> Tile:
        return self.tile(*pos)

    def set_floor(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            # Guard and log rather than throw in generation; rooms and
            # corridors never reach outside, but this protects against regressions.
            logger.error("Attempt to carve out-of-bounds tile at (%d,%d)", x, y)
            return
        self._tiles[x][y] = Tile.floor()

    # ---- Query -----------------------------------------------------------
    def is_blocked(self, x: int, y: int) -> bool:
        """Out-of-bounds positions count as blocked."""
        if not self.in_bounds(x, y):
            return True
        return self._tiles[x][y].blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return self._tiles[x][y].block_sight

    def positions(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def mark_explored(self, positions: Iterable[Tuple[int, int]]) -> None:
        for x, y in positions:
            if self.in_bounds(x, y):
                self._tiles[x][y].mark_explored()

    # ---- Carving helpers -------------------------------------------------
    def carve_room(self, room: Rect) -> None:
        for x, y in room.interior():
            self.set_floor(x, y)

    def carve_h_tunnel(self, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self.set_floor(x, y)

    def carve_v_tunnel(self, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self.set_floor(x, y)

    # ---- Export ----------------------------------------------------------
    def to_str_lines(self) -> List[str]:
        return ["".join(self._tiles[x][y].glyph for x in range(self.width)) for y in range(self.height)]

    def snapshot(self) -> Tuple[Tuple[bool, ...], ...]:
        """Hashable snapshot of the blocked flags for equality tests."""
        return tuple(tuple(self._tiles[x][y].blocked for x in range(self.width)) for y in range(self.height))
