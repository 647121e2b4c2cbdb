from __future__ import annotations

import logging
import math
from typing import Callable, Iterator, List, Optional, Tuple

from ..exceptions import InvariantViolation
from ..map import Grid
from .entity import Entity

logger = logging.getLogger(__name__)

# The player always lives at index 0
PLAYER = 0


def _round_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class EntityList:
    """Ordered, growable collection of every entity on the current level.

    Index 0 is reserved for the player and is never removed or reassigned.
    Monsters are never removed (they turn into corpses in place), so indices
    captured at the start of an AI phase stay valid for the whole phase.
    """

    def __init__(self, player: Entity) -> None:
        self._entities: List[Entity] = [player]

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __getitem__(self, index: int) -> Entity:
        return self._entities[index]

    @property
    def player(self) -> Entity:
        return self._entities[PLAYER]

    def append(self, entity: Entity) -> int:
        self._entities.append(entity)
        return len(self._entities) - 1

    def remove(self, index: int) -> Entity:
        if index == PLAYER:
            raise InvariantViolation("The player slot can never be removed")
        return self._entities.pop(index)

    def find_at(self, x: int, y: int, predicate: Callable[[Entity], bool]) -> Optional[int]:
        """Return the index of the first entity at (x, y) satisfying predicate."""
        for i, e in enumerate(self._entities):
            if e.pos == (x, y) and predicate(e):
                return i
        return None

    def pair(self, first: int, second: int) -> Tuple[Entity, Entity]:
        """Hand back two distinct entities for a routine that mutates both.

        The collection is split at the larger index so each view comes from a
        different half. Asking for the same index twice is a logic defect.
        """
        if first == second:
            raise InvariantViolation(f"pair() called with identical indices ({first})")
        split_at = max(first, second)
        head, tail = self._entities[:split_at], self._entities[split_at:]
        if first < second:
            return head[first], tail[0]
        return tail[0], head[second]

    # ---- Blocking & movement ---------------------------------------------
    def is_blocked(self, grid: Grid, x: int, y: int) -> bool:
        if grid.is_blocked(x, y):
            return True
        return any(e.blocks and e.pos == (x, y) for e in self._entities)

    def move_by(self, grid: Grid, index: int, dx: int, dy: int) -> bool:
        """Move an entity by the delta unless the destination is blocked.

        Returns True if the move happened.
        """
        entity = self._entities[index]
        nx, ny = entity.x + dx, entity.y + dy
        if self.is_blocked(grid, nx, ny):
            logger.debug("%s blocked moving to (%d,%d)", entity.name, nx, ny)
            return False
        entity.set_pos(nx, ny)
        return True

    def move_toward(self, grid: Grid, index: int, target_x: int, target_y: int) -> bool:
        """Take one unit step in the direction of the target.

        Each axis is rounded independently after normalizing, which is
        approximate pathing only: entities can get stuck against obstacles.
        """
        entity = self._entities[index]
        dx = target_x - entity.x
        dy = target_y - entity.y
        distance = math.hypot(dx, dy)
        if distance == 0:
            return False
        step_x = _round_away_from_zero(dx / distance)
        step_y = _round_away_from_zero(dy / distance)
        return self.move_by(grid, index, step_x, step_y)
