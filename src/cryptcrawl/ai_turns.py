from __future__ import annotations

import logging

from . import colors
from .combat import attack
from .entities import PLAYER, AI, BasicAI, ConfusedAI, EntityList
from .interfaces import FieldOfView
from .map import Grid
from .messages import MessageLog

logger = logging.getLogger(__name__)


def take_turn(
    monster_id: int,
    grid: Grid,
    entities: EntityList,
    fov: FieldOfView,
    messages: MessageLog,
    rng,
) -> None:
    """Run one AI decision for the entity at monster_id.

    The AI value is taken out of the entity for the duration of the decision
    and replaced by whatever the decision returns.
    """
    monster = entities[monster_id]
    ai = monster.ai
    if ai is None or not monster.is_alive:
        return
    monster.ai = None
    new_ai = _decide(ai, monster_id, grid, entities, fov, messages, rng)
    if monster.is_alive:
        monster.ai = new_ai


def _decide(ai: AI, monster_id, grid, entities, fov, messages, rng) -> AI:
    if isinstance(ai, BasicAI):
        return ai_basic(ai, monster_id, grid, entities, fov, messages)
    if isinstance(ai, ConfusedAI):
        return ai_confused(ai, monster_id, grid, entities, messages, rng)
    raise TypeError(f"Unknown AI variant: {ai!r}")


def ai_basic(
    ai: BasicAI,
    monster_id: int,
    grid: Grid,
    entities: EntityList,
    fov: FieldOfView,
    messages: MessageLog,
) -> AI:
    # A basic monster takes its turn. If you can see it, it can see you
    monster = entities[monster_id]
    if not fov.is_in_fov(monster.x, monster.y):
        return ai
    player = entities.player
    if monster.distance_to(player) >= 2.0:
        entities.move_toward(grid, monster_id, player.x, player.y)
    elif player.fighter is not None and player.fighter.hp > 0:
        attacker, defender = entities.pair(monster_id, PLAYER)
        attack(attacker, defender, messages)
    return ai


def ai_confused(
    ai: ConfusedAI,
    monster_id: int,
    grid: Grid,
    entities: EntityList,
    messages: MessageLog,
    rng,
) -> AI:
    monster = entities[monster_id]
    if ai.num_turns >= 0:
        # Standing still is a legal outcome
        dx = rng.randint(-1, 1)
        dy = rng.randint(-1, 1)
        entities.move_by(grid, monster_id, dx, dy)
        logger.debug("%s stumbles (%d,%d), %d turns left", monster.name, dx, dy, ai.num_turns)
        return ai.tick()
    messages.add(f"The {monster.name} is no longer confused!", colors.RED)
    return ai.previous
