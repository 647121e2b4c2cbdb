"""
Headless field-of-view adapter.

Presentation layers normally supply their own FieldOfView (for example a
shadowcasting implementation from their rendering library). This adapter
casts Bresenham lines within a circular radius so the core can run without
one, e.g. from the command line.
"""
from __future__ import annotations

import logging
from typing import List, Set, Tuple

from .map import Grid

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> List[Coord]:
    """Returns the points from (x0, y0) to (x1, y1) inclusive."""
    points: List[Coord] = []

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    x, y = x0, y0
    while True:
        points.append((x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy

    return points


def is_visible_line(grid: Grid, x0: int, y0: int, x1: int, y1: int, *, light_walls: bool = True) -> bool:
    """
    All intermediate tiles must be transparent. With light_walls the final
    tile may be opaque, so walls bordering lit floor are shown.
    """
    line = bresenham_line(x0, y0, x1, y1)
    for x, y in line[1:-1]:
        if grid.blocks_sight(x, y):
            return False
    if not light_walls and len(line) > 1:
        return not grid.blocks_sight(x1, y1)
    return True


class LineOfSightFov:
    """FieldOfView implementation; a radius of 0 means unlimited range."""

    def __init__(self) -> None:
        self._visible: Set[Coord] = set()

    def compute(self, grid: Grid, x: int, y: int, radius: int, light_walls: bool) -> None:
        if not grid.in_bounds(x, y):
            raise ValueError("Origin out of bounds")
        visible: Set[Coord] = {(x, y)}
        for tx, ty in grid.positions():
            if (tx, ty) == (x, y):
                continue
            if radius > 0 and (tx - x) ** 2 + (ty - y) ** 2 > radius * radius:
                continue
            if is_visible_line(grid, x, y, tx, ty, light_walls=light_walls):
                visible.add((tx, ty))
        self._visible = visible
        logger.debug("FOV from (%d,%d) radius %d -> %d visible tiles", x, y, radius, len(visible))

    def is_in_fov(self, x: int, y: int) -> bool:
        return (x, y) in self._visible
