"""
Combat resolution: damage from power minus defense, and the two death
routines selected by each Fighter's ``on_death`` tag.
"""
from __future__ import annotations

import logging

from . import colors
from .entities import DeathBehavior, Entity
from .messages import MessageLog

logger = logging.getLogger(__name__)


def player_death(player: Entity, messages: MessageLog) -> None:
    messages.add("You died!", colors.RED)
    logger.info("Player died at %s", player.pos)
    player.char = "%"
    player.color = colors.DARK_RED


def monster_death(monster: Entity, messages: MessageLog) -> None:
    # Transform it into a corpse that does not block, can't attack or move
    messages.add(f"{monster.name} is dead!", colors.ORANGE)
    logger.info("%s died at %s", monster.name, monster.pos)
    monster.char = "%"
    monster.color = colors.DARK_RED
    monster.blocks = False
    monster.fighter = None
    monster.ai = None
    monster.name = f"remains of {monster.name}"


def _run_death(entity: Entity, behavior: DeathBehavior, messages: MessageLog) -> None:
    if behavior is DeathBehavior.PLAYER:
        player_death(entity, messages)
    elif behavior is DeathBehavior.MONSTER:
        monster_death(entity, messages)


def take_damage(entity: Entity, damage: int, messages: MessageLog) -> None:
    """Apply damage to an entity's Fighter.

    Non-positive amounts change nothing. The death routine fires only on the
    hit that takes a living entity to 0 hp or below.
    """
    fighter = entity.fighter
    if fighter is None:
        return
    if damage > 0:
        fighter.hp -= damage
        logger.debug("%s takes %d damage (HP: %d/%d)", entity.name, damage, fighter.hp, fighter.max_hp)
    if fighter.hp <= 0 and entity.is_alive:
        entity.is_alive = False
        _run_death(entity, fighter.on_death, messages)


def attack(attacker: Entity, defender: Entity, messages: MessageLog) -> int:
    """Attack defender with attacker's power. Returns the damage dealt."""
    if attacker.fighter is None or defender.fighter is None:
        logger.warning("%s cannot attack %s: missing fighter", attacker.name, defender.name)
        return 0
    damage = attacker.fighter.power - defender.fighter.defense
    if damage > 0:
        messages.add(f"{attacker.name} attacks {defender.name} for {damage} hit points.", colors.WHITE)
        take_damage(defender, damage, messages)
        return damage
    messages.add(f"{attacker.name} attacks {defender.name} but it has no effect!", colors.WHITE)
    return 0


def heal(entity: Entity, amount: int) -> None:
    """Heal by the given amount without going over the maximum."""
    fighter = entity.fighter
    if fighter is None:
        return
    fighter.hp = min(fighter.max_hp, fighter.hp + amount)
