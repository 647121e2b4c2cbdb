from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class Command(Enum):
    """Logical player commands, independent of the input device."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    PICK_UP = auto()
    INVENTORY = auto()
    TOGGLE_FULLSCREEN = auto()
    QUIT = auto()


class PlayerAction(Enum):
    """How a handled input affects the turn."""

    TOOK_TURN = auto()
    DIDNT_TAKE_TURN = auto()
    EXIT = auto()


MOVE_DELTAS: Dict[Command, Tuple[int, int]] = {
    Command.MOVE_UP: (0, -1),
    Command.MOVE_DOWN: (0, 1),
    Command.MOVE_LEFT: (-1, 0),
    Command.MOVE_RIGHT: (1, 0),
}


@dataclass(frozen=True)
class InputEvent:
    """One polled input event.

    Attributes:
        key: Key name ("UP", "ESCAPE", "g", ...) or None for mouse-only events.
        alt: True if Alt was held.
        mouse: Tile coordinates under the mouse cursor, if reported.
    """

    key: Optional[str] = None
    alt: bool = False
    mouse: Optional[Tuple[int, int]] = None


class InputMapper:
    """Rebindable mapping from key names (plus Alt) to commands.

    Named keys ("UP", "escape") are normalized to uppercase so backends only
    need to translate their own constants to names. Single characters are
    literal and case-sensitive, so "g" and Shift+G ("G") are distinct keys.

    Example usage:
        mapper = InputMapper.default()
        mapper.translate(InputEvent("g"))              # -> Command.PICK_UP
        mapper.translate(InputEvent("ENTER", alt=True)) # -> Command.TOGGLE_FULLSCREEN
    """

    def __init__(self) -> None:
        self._bindings: Dict[Tuple[str, bool], Command] = {}
        self._aliases: Dict[str, str] = {}

    @staticmethod
    def _normalize(key: Optional[str]) -> Optional[str]:
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        if len(k) == 1:
            return k
        return k.upper()

    def bind(self, key: str, command: Command, *, alt: bool = False) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[(nk, alt)] = command

    def unbind(self, key: str, *, alt: bool = False) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop((nk, alt), None)

    def set_alias(self, physical: str, canonical_name: str) -> None:
        """Example: set_alias("RETURN", "ENTER")."""
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    def translate(self, event: InputEvent) -> Optional[Command]:
        """Return the bound command or None for unrecognized input.

        An Alt binding wins; otherwise Alt is ignored so Alt+arrow still moves.
        """
        nk = self._normalize(event.key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        if event.alt and (canonical, True) in self._bindings:
            return self._bindings[(canonical, True)]
        return self._bindings.get((canonical, False))

    @classmethod
    def default(cls) -> "InputMapper":
        mapper = cls()
        mapper.bind("UP", Command.MOVE_UP)
        mapper.bind("DOWN", Command.MOVE_DOWN)
        mapper.bind("LEFT", Command.MOVE_LEFT)
        mapper.bind("RIGHT", Command.MOVE_RIGHT)
        mapper.bind("g", Command.PICK_UP)
        mapper.bind("i", Command.INVENTORY)
        mapper.bind("ENTER", Command.TOGGLE_FULLSCREEN, alt=True)
        mapper.bind("ESCAPE", Command.QUIT)
        mapper.set_alias("RETURN", "ENTER")
        mapper.set_alias("ESC", "ESCAPE")
        return mapper


__all__ = ["Command", "PlayerAction", "InputEvent", "InputMapper", "MOVE_DELTAS"]
