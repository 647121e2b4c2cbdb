import pytest

from cryptcrawl.config import GameConfig
from cryptcrawl.dungeon import place_objects
from cryptcrawl.dungeon.population import choose_item_kind
from cryptcrawl.entities import BasicAI, DeathBehavior, ItemKind
from cryptcrawl.map import Rect


@pytest.mark.parametrize(
    "dice, kind",
    [
        (0.0, ItemKind.HEAL),
        (0.69, ItemKind.HEAL),
        (0.7, ItemKind.LIGHTNING_BOLT),
        (0.79, ItemKind.LIGHTNING_BOLT),
        (0.8, ItemKind.CONFUSE),
        (0.99, ItemKind.CONFUSE),
    ],
)
def test_item_kind_partitions(dice, kind):
    assert choose_item_kind(dice, GameConfig()) is kind


def test_monsters_and_items_placed_and_taken_tiles_skipped(world, scripted_rng):
    grid, entities = world((9, 9))
    room = Rect(0, 0, 6, 6)
    rng = scripted_rng(
        # 2 monsters: (2,2) then (2,2) again which is taken; 1 item at (3,3)
        ints=[2, 2, 2, 2, 2, 1, 3, 3],
        floats=[0.5, 0.75],
    )
    place_objects(room, grid, entities, rng, GameConfig())

    assert len(entities) == 3
    orc = entities[1]
    assert orc.name == "orc" and orc.pos == (2, 2)
    assert orc.blocks and orc.is_alive
    assert orc.ai == BasicAI()
    assert orc.fighter.on_death is DeathBehavior.MONSTER
    assert (orc.fighter.hp, orc.fighter.defense, orc.fighter.power) == (10, 0, 3)

    scroll = entities[2]
    assert scroll.item is ItemKind.LIGHTNING_BOLT
    assert scroll.pos == (3, 3)
    assert not scroll.blocks and scroll.fighter is None
    assert rng.ints == [] and rng.floats == []


def test_troll_spawned_above_orc_chance(world, scripted_rng):
    grid, entities = world((9, 9))
    rng = scripted_rng(ints=[1, 4, 4, 0], floats=[0.85])
    place_objects(Rect(0, 0, 6, 6), grid, entities, rng, GameConfig())

    troll = entities[1]
    assert troll.name == "troll" and troll.char == "T"
    assert (troll.fighter.max_hp, troll.fighter.defense, troll.fighter.power) == (16, 1, 4)


def test_wall_tile_slot_is_skipped(world, scripted_rng):
    grid, entities = world((9, 9))
    # Wall off an interior tile to force a blocked draw
    grid.tile(2, 2).blocked = True
    rng = scripted_rng(ints=[1, 2, 2, 0])
    place_objects(Rect(0, 0, 6, 6), grid, entities, rng, GameConfig())
    assert len(entities) == 1
