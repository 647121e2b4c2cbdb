from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..config import GameConfig
from ..entities import EntityList, ItemKind
from ..entities.factory import make_item, make_orc, make_troll
from ..map import Grid, Rect

logger = logging.getLogger(__name__)


def _random_spot(room: Rect, grid: Grid, entities: EntityList, rng) -> Optional[Tuple[int, int]]:
    """One draw inside the room interior; None when that tile is taken."""
    x = rng.randint(room.x1 + 1, room.x2 - 1)
    y = rng.randint(room.y1 + 1, room.y2 - 1)
    if entities.is_blocked(grid, x, y):
        return None
    return x, y


def choose_item_kind(dice: float, config: GameConfig) -> ItemKind:
    p = config.population
    if dice < p.heal_chance:
        return ItemKind.HEAL
    if dice < p.heal_chance + p.lightning_chance:
        return ItemKind.LIGHTNING_BOLT
    return ItemKind.CONFUSE


def place_objects(room: Rect, grid: Grid, entities: EntityList, rng, config: GameConfig) -> None:
    p = config.population

    num_monsters = rng.randint(0, p.max_room_monsters)
    for _ in range(num_monsters):
        spot = _random_spot(room, grid, entities, rng)
        if spot is None:
            logger.debug("No free tile for a monster in %s; slot skipped", room)
            continue
        if rng.random() < p.orc_chance:
            monster = make_orc(config.orc, *spot)
        else:
            monster = make_troll(config.troll, *spot)
        entities.append(monster)
        logger.debug("Spawned %s at %s", monster.name, spot)

    num_items = rng.randint(0, p.max_room_items)
    for _ in range(num_items):
        spot = _random_spot(room, grid, entities, rng)
        if spot is None:
            logger.debug("No free tile for an item in %s; slot skipped", room)
            continue
        item = make_item(choose_item_kind(rng.random(), config), *spot)
        entities.append(item)
        logger.debug("Placed %s at %s", item.name, spot)
