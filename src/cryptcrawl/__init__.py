"""
cryptcrawl: the simulation core of a turn-based dungeon crawler.

This package provides headless game logic:
- Procedural level generation (rooms, corridors, monster and item placement)
- Entities with optional Fighter, AI and Item capabilities
- The turn engine, combat resolution and monster decision making
- Inventory and item effects, plus the message log

Drawing, raw input handling and field-of-view computation belong to a
presentation layer, which talks to the core through ``cryptcrawl.interfaces``.
"""
__version__ = "0.1.0"

from .config import GameConfig
from .engine import Game, TurnState
from .exceptions import ConfigError, CryptcrawlError, InventoryFull, InvariantViolation
from .input import Command, InputEvent, InputMapper, PlayerAction
from .inventory import Inventory, UseResult
from .messages import Message, MessageLog
from .rng import RNG

__all__ = [
    "__version__",
    "GameConfig",
    "Game",
    "TurnState",
    "ConfigError",
    "CryptcrawlError",
    "InventoryFull",
    "InvariantViolation",
    "Command",
    "InputEvent",
    "InputMapper",
    "PlayerAction",
    "Inventory",
    "UseResult",
    "Message",
    "MessageLog",
    "RNG",
]
