"""
Entity model: the central record for everything placed on the map, with
optional Fighter, AI and Item capabilities, and the ordered collection that
owns them (index 0 is always the player).
"""
from .ai import AI, BasicAI, ConfusedAI
from .collection import PLAYER, EntityList
from .entity import DeathBehavior, Entity, Fighter, ItemKind

__all__ = [
    "AI",
    "BasicAI",
    "ConfusedAI",
    "PLAYER",
    "EntityList",
    "DeathBehavior",
    "Entity",
    "Fighter",
    "ItemKind",
]
