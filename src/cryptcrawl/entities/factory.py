from __future__ import annotations

from .. import colors
from ..config import FighterStats
from .ai import BasicAI
from .entity import DeathBehavior, Entity, Fighter, ItemKind


def make_player(stats: FighterStats, x: int = 0, y: int = 0) -> Entity:
    return Entity(
        x, y, "@", colors.WHITE, "player",
        blocks=True,
        is_alive=True,
        fighter=Fighter.from_stats(stats, DeathBehavior.PLAYER),
    )


def make_orc(stats: FighterStats, x: int, y: int) -> Entity:
    return Entity(
        x, y, "o", colors.DESATURATED_GREEN, "orc",
        blocks=True,
        is_alive=True,
        fighter=Fighter.from_stats(stats, DeathBehavior.MONSTER),
        ai=BasicAI(),
    )


def make_troll(stats: FighterStats, x: int, y: int) -> Entity:
    return Entity(
        x, y, "T", colors.DARKER_GREEN, "troll",
        blocks=True,
        is_alive=True,
        fighter=Fighter.from_stats(stats, DeathBehavior.MONSTER),
        ai=BasicAI(),
    )


_ITEM_LOOKS = {
    ItemKind.HEAL: ("!", colors.VIOLET, "healing potion"),
    ItemKind.LIGHTNING_BOLT: ("#", colors.LIGHT_YELLOW, "scroll of lightning bolt"),
    ItemKind.CONFUSE: ("#", colors.LIGHT_YELLOW, "scroll of confusion"),
}


def make_item(kind: ItemKind, x: int, y: int) -> Entity:
    char, color, name = _ITEM_LOOKS[kind]
    return Entity(x, y, char, color, name, item=kind)
