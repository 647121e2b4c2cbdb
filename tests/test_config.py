import logging

import pytest

from cryptcrawl.config import GameConfig, MapConfig, PopulationConfig
from cryptcrawl.exceptions import ConfigError


def test_packaged_defaults_match_dataclass_defaults():
    assert GameConfig.load() == GameConfig()


def test_defaults():
    cfg = GameConfig()
    assert (cfg.map.width, cfg.map.height) == (80, 43)
    assert cfg.items.inventory_capacity == 9
    assert cfg.items.heal_amount == 4
    assert cfg.population.orc_chance == 0.8


def test_user_file_is_deep_merged(tmp_path):
    user = tmp_path / "config.yaml"
    user.write_text("map:\n  max_rooms: 5\nitems:\n  heal_amount: 10\n", encoding="utf-8")

    cfg = GameConfig.load(user_path=user)

    assert cfg.map.max_rooms == 5
    assert cfg.map.width == 80
    assert cfg.items.heal_amount == 10
    assert cfg.items.lightning_damage == 40


def test_missing_user_file_falls_back_to_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        cfg = GameConfig.load(user_path=tmp_path / "nope.yaml")
    assert cfg == GameConfig()
    assert "not found" in caplog.text


@pytest.mark.parametrize(
    "text",
    [
        "bogus:\n  a: 1\n",
        "map:\n  depth: 3\n",
        "map: 12\n",
        "- 1\n- 2\n",
        "map:\n  room_min_size: 12\n",
        "population:\n  heal_chance: 0.95\n",
        "items:\n  inventory_capacity: 12\n",
        "orc:\n  max_hp: 0\n",
    ],
)
def test_invalid_user_config_raises(tmp_path, text):
    user = tmp_path / "bad.yaml"
    user.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        GameConfig.load(user_path=user)


def test_invalid_values_raise_on_construction():
    with pytest.raises(ConfigError):
        MapConfig(width=10, height=10, room_min_size=3, room_max_size=10)
    with pytest.raises(ConfigError):
        MapConfig(width=20, height=20, room_min_size=1, room_max_size=1)
    with pytest.raises(ConfigError):
        PopulationConfig(orc_chance=1.5)
    # ConfigError is also a ValueError
    with pytest.raises(ValueError):
        MapConfig(width=2, height=2)
