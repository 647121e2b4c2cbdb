from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ..config import GameConfig
from ..entities import EntityList
from ..map import Grid, Rect
from .population import place_objects

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    grid: Grid
    rooms: List[Rect] = field(default_factory=list)


def random_room(config: GameConfig, rng) -> Rect:
    m = config.map
    w = rng.randint(m.room_min_size, m.room_max_size)
    h = rng.randint(m.room_min_size, m.room_max_size)
    # Keep the whole rectangle, border included, inside the grid
    x = rng.randint(0, m.width - w - 1)
    y = rng.randint(0, m.height - h - 1)
    return Rect.from_size(x, y, w, h)


def connect_rooms(grid: Grid, previous: Rect, new: Rect, rng) -> None:
    """Join two room centers with one L-shaped corridor."""
    prev_x, prev_y = previous.center()
    new_x, new_y = new.center()
    if rng.coin_flip():
        # horizontal first, then vertical
        grid.carve_h_tunnel(prev_x, new_x, prev_y)
        grid.carve_v_tunnel(prev_y, new_y, new_x)
    else:
        grid.carve_v_tunnel(prev_y, new_y, prev_x)
        grid.carve_h_tunnel(prev_x, new_x, new_y)


def make_map(config: GameConfig, entities: EntityList, rng) -> GenerationResult:
    """Generate a level into a fresh grid and populate ``entities``.

    Makes ``max_rooms`` placement attempts; candidates that intersect an
    accepted room are discarded, so dense layouts can end up with fewer rooms.
    The player is moved to the center of the first accepted room.
    """
    m = config.map
    grid = Grid(m.width, m.height)
    result = GenerationResult(grid=grid)
    logger.debug("Generating map %dx%d with up to %d rooms", m.width, m.height, m.max_rooms)

    for attempt in range(m.max_rooms):
        new_room = random_room(config, rng)
        if any(new_room.intersects_with(other) for other in result.rooms):
            logger.debug("Attempt %d: rejected overlapping room %s", attempt, new_room)
            continue

        grid.carve_room(new_room)
        if not result.rooms:
            entities.player.set_pos(*new_room.center())
        else:
            connect_rooms(grid, result.rooms[-1], new_room, rng)
        place_objects(new_room, grid, entities, rng, config)
        result.rooms.append(new_room)

    logger.info("Generated %d rooms (%d entities)", len(result.rooms), len(entities))
    return result
