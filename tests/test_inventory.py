import pytest

from cryptcrawl import colors
from cryptcrawl.config import GameConfig, ItemConfig
from cryptcrawl.entities import BasicAI, ConfusedAI, Entity, ItemKind
from cryptcrawl.entities.factory import make_item, make_orc
from cryptcrawl.exceptions import InventoryFull
from cryptcrawl.inventory import (
    EffectContext,
    Inventory,
    UseResult,
    closest_monster,
    pick_item_up,
    use_item,
)
from cryptcrawl.messages import MessageLog


@pytest.fixture
def setup(world, static_fov):
    def _make(player_pos=(5, 5), visible=None):
        grid, entities = world(player_pos)
        log = MessageLog()
        ctx = EffectContext(entities=entities, fov=static_fov(visible), messages=log, config=ItemConfig())
        return entities, Inventory(9), ctx

    return _make


def add_orc(entities, x, y):
    return entities.append(make_orc(GameConfig().orc, x, y))


def test_pick_up_moves_item_out_of_world(setup):
    entities, inventory, ctx = setup()
    item_id = entities.append(make_item(ItemKind.HEAL, 5, 5))

    assert pick_item_up(item_id, entities, inventory, ctx.messages) is True

    assert len(entities) == 1
    assert inventory.names() == ["healing potion"]
    assert ctx.messages.recent(1)[0].text == "You picked up a healing potion!"
    assert ctx.messages.recent(1)[0].color == colors.GREEN


def test_full_inventory_rejects_tenth_pickup(setup):
    entities, inventory, ctx = setup()
    for _ in range(9):
        inventory.add(make_item(ItemKind.HEAL, 0, 0))
    item_id = entities.append(make_item(ItemKind.CONFUSE, 5, 5))

    assert pick_item_up(item_id, entities, inventory, ctx.messages) is False

    assert len(inventory) == 9
    assert entities[item_id].name == "scroll of confusion"
    assert ctx.messages.texts() == ["Your inventory is full, cannot pick up scroll of confusion."]
    with pytest.raises(InventoryFull):
        inventory.add(make_item(ItemKind.HEAL, 0, 0))


def test_heal_at_full_health_is_cancelled(setup):
    entities, inventory, ctx = setup()
    inventory.add(make_item(ItemKind.HEAL, 0, 0))

    assert use_item(0, inventory, ctx) is UseResult.CANCELLED

    assert entities.player.fighter.hp == 30
    assert len(inventory) == 1
    assert ctx.messages.texts() == ["You are already at full health.", "Cancelled"]


def test_heal_restores_fixed_amount(setup):
    entities, inventory, ctx = setup()
    entities.player.fighter.hp = 10
    inventory.add(make_item(ItemKind.HEAL, 0, 0))

    assert use_item(0, inventory, ctx) is UseResult.USED_UP

    assert entities.player.fighter.hp == 14
    assert len(inventory) == 0
    assert ctx.messages.texts() == ["Your wounds start to feel better!"]


def test_heal_is_capped_at_max(setup):
    entities, inventory, ctx = setup()
    entities.player.fighter.hp = 28
    inventory.add(make_item(ItemKind.HEAL, 0, 0))
    use_item(0, inventory, ctx)
    assert entities.player.fighter.hp == 30


def test_lightning_without_visible_target_is_cancelled(setup):
    entities, inventory, ctx = setup(visible=[(5, 5)])
    orc_id = add_orc(entities, 6, 5)
    inventory.add(make_item(ItemKind.LIGHTNING_BOLT, 0, 0))

    assert use_item(0, inventory, ctx) is UseResult.CANCELLED

    assert entities[orc_id].fighter.hp == 10
    assert entities.player.fighter.hp == 30
    assert len(inventory) == 1
    assert ctx.messages.texts() == ["No enemy is close enough to strike.", "Cancelled"]


def test_lightning_strikes_and_kills_closest(setup):
    entities, inventory, ctx = setup()
    orc_id = add_orc(entities, 7, 5)
    inventory.add(make_item(ItemKind.LIGHTNING_BOLT, 0, 0))

    assert use_item(0, inventory, ctx) is UseResult.USED_UP

    orc = entities[orc_id]
    assert not orc.is_alive
    assert orc.name == "remains of orc"
    assert ctx.messages.texts() == [
        "A lightning bolt strikes the orc with a loud thunder! The damage is 40 hit points.",
        "orc is dead!",
    ]


def test_closest_target_tie_keeps_earlier_entity(setup):
    entities, _, ctx = setup()
    first = add_orc(entities, 7, 5)
    add_orc(entities, 3, 5)
    assert closest_monster(ctx, 5) == first


def test_closest_target_prefers_nearer(setup):
    entities, _, ctx = setup()
    add_orc(entities, 8, 5)
    nearer = add_orc(entities, 5, 7)
    assert closest_monster(ctx, 5) == nearer


def test_closest_target_respects_range(setup):
    entities, _, ctx = setup(player_pos=(2, 5))
    add_orc(entities, 8, 5)
    assert closest_monster(ctx, 5) is None
    inside = add_orc(entities, 6, 5)
    assert closest_monster(ctx, 5) == inside


def test_target_at_exactly_max_range_is_out_of_reach(setup):
    entities, _, ctx = setup(player_pos=(2, 5))
    add_orc(entities, 7, 5)
    add_orc(entities, 5, 9)  # 3-4-5 triangle
    assert closest_monster(ctx, 5) is None


def test_closest_target_skips_entities_without_ai_or_fighter(setup):
    entities, _, ctx = setup()
    orc_id = add_orc(entities, 6, 5)
    entities[orc_id].ai = None
    entities.append(make_item(ItemKind.HEAL, 6, 6))
    assert closest_monster(ctx, 5) is None


def test_confuse_wraps_current_ai(setup):
    entities, inventory, ctx = setup()
    orc_id = add_orc(entities, 6, 6)
    inventory.add(make_item(ItemKind.CONFUSE, 0, 0))

    assert use_item(0, inventory, ctx) is UseResult.USED_UP

    assert entities[orc_id].ai == ConfusedAI(previous=BasicAI(), num_turns=10)
    assert ctx.messages.texts() == [
        "The eyes of the orc look vacant, as it starts to stumble around!"
    ]


def test_confuse_without_target_is_cancelled(setup):
    entities, inventory, ctx = setup()
    inventory.add(make_item(ItemKind.CONFUSE, 0, 0))
    assert use_item(0, inventory, ctx) is UseResult.CANCELLED
    assert len(inventory) == 1


def test_item_without_effect_is_reported(setup):
    entities, inventory, ctx = setup()
    inventory.add(Entity(0, 0, "*", colors.WHITE, "rock"))

    assert use_item(0, inventory, ctx) is UseResult.CANCELLED

    assert len(inventory) == 1
    assert ctx.messages.texts() == ["The rock cannot be used."]
