"""
Inventory and item effects.

Picking an item up moves its entity out of the world collection into the
player's inventory. Using it dispatches on the item's tag to one effect,
which either uses the item up or cancels and leaves the inventory untouched.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Iterator, List, Optional

from . import colors
from .combat import heal, take_damage
from .config import ItemConfig
from .entities import PLAYER, BasicAI, ConfusedAI, Entity, EntityList, ItemKind
from .exceptions import InventoryFull
from .interfaces import FieldOfView
from .messages import MessageLog

logger = logging.getLogger(__name__)


class UseResult(Enum):
    USED_UP = auto()
    CANCELLED = auto()


class Inventory:
    """Bounded list of item-bearing entities, disjoint from the world."""

    def __init__(self, capacity: int = 9) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: List[Entity] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Entity:
        return self._items[index]

    def add(self, item: Entity) -> None:
        if self.is_full:
            raise InventoryFull(f"Inventory is at capacity ({self._capacity})")
        self._items.append(item)

    def remove(self, index: int) -> Entity:
        return self._items.pop(index)

    def names(self) -> List[str]:
        return [item.name for item in self._items]


@dataclass
class EffectContext:
    """Everything an item effect may read or change."""

    entities: EntityList
    fov: FieldOfView
    messages: MessageLog
    config: ItemConfig


def pick_item_up(object_id: int, entities: EntityList, inventory: Inventory, messages: MessageLog) -> bool:
    """Move the item at object_id from the world into the inventory.

    Returns True if picked up; a full inventory leaves both untouched.
    """
    item = entities[object_id]
    if inventory.is_full:
        messages.add(f"Your inventory is full, cannot pick up {item.name}.", colors.RED)
        return False
    entities.remove(object_id)
    inventory.add(item)
    messages.add(f"You picked up a {item.name}!", colors.GREEN)
    logger.debug("Picked up %s (%d/%d)", item.name, len(inventory), inventory.capacity)
    return True


def closest_monster(ctx: EffectContext, max_range: int) -> Optional[int]:
    """Find the closest visible monster within range.

    Both bounds are strict: a target at exactly max_range is out of reach
    and ties keep the earlier entity in collection order.
    """
    player = ctx.entities.player
    closest_enemy: Optional[int] = None
    closest_dist = math.inf
    for index, entity in enumerate(ctx.entities):
        if index == PLAYER or entity.fighter is None or entity.ai is None:
            continue
        if not ctx.fov.is_in_fov(entity.x, entity.y):
            continue
        dist = player.distance_to(entity)
        if dist < max_range and dist < closest_dist:
            closest_enemy = index
            closest_dist = dist
    return closest_enemy


def cast_heal(ctx: EffectContext) -> UseResult:
    player = ctx.entities.player
    fighter = player.fighter
    if fighter is None:
        return UseResult.CANCELLED
    if fighter.hp == fighter.max_hp:
        ctx.messages.add("You are already at full health.", colors.RED)
        return UseResult.CANCELLED
    ctx.messages.add("Your wounds start to feel better!", colors.LIGHT_VIOLET)
    heal(player, ctx.config.heal_amount)
    return UseResult.USED_UP


def cast_lightning(ctx: EffectContext) -> UseResult:
    monster_id = closest_monster(ctx, ctx.config.lightning_range)
    if monster_id is None:
        ctx.messages.add("No enemy is close enough to strike.", colors.RED)
        return UseResult.CANCELLED
    monster = ctx.entities[monster_id]
    damage = ctx.config.lightning_damage
    ctx.messages.add(
        f"A lightning bolt strikes the {monster.name} with a loud thunder! "
        f"The damage is {damage} hit points.",
        colors.LIGHT_BLUE,
    )
    take_damage(monster, damage, ctx.messages)
    return UseResult.USED_UP


def cast_confuse(ctx: EffectContext) -> UseResult:
    monster_id = closest_monster(ctx, ctx.config.confuse_range)
    if monster_id is None:
        ctx.messages.add("No enemy is close enough to strike.", colors.RED)
        return UseResult.CANCELLED
    monster = ctx.entities[monster_id]
    old_ai = monster.ai if monster.ai is not None else BasicAI()
    monster.ai = ConfusedAI(previous=old_ai, num_turns=ctx.config.confuse_num_turns)
    ctx.messages.add(
        f"The eyes of the {monster.name} look vacant, as it starts to stumble around!",
        colors.LIGHT_GREEN,
    )
    return UseResult.USED_UP


EFFECTS: Dict[ItemKind, Callable[[EffectContext], UseResult]] = {
    ItemKind.HEAL: cast_heal,
    ItemKind.LIGHTNING_BOLT: cast_lightning,
    ItemKind.CONFUSE: cast_confuse,
}


def use_item(index: int, inventory: Inventory, ctx: EffectContext) -> UseResult:
    item = inventory[index]
    effect = EFFECTS.get(item.item) if item.item is not None else None
    if effect is None:
        ctx.messages.add(f"The {item.name} cannot be used.", colors.WHITE)
        return UseResult.CANCELLED
    result = effect(ctx)
    if result is UseResult.USED_UP:
        inventory.remove(index)
        logger.debug("Used up %s", item.name)
    else:
        ctx.messages.add("Cancelled", colors.WHITE)
    return result
