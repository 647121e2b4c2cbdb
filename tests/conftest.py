import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from cryptcrawl.config import GameConfig, MapConfig, PopulationConfig  # noqa: E402
from cryptcrawl.engine import Game  # noqa: E402
from cryptcrawl.entities import EntityList  # noqa: E402
from cryptcrawl.entities.factory import make_player  # noqa: E402
from cryptcrawl.map import Grid, Rect  # noqa: E402


class ScriptedRNG:
    """Fixed-sequence stand-in for cryptcrawl.rng.RNG."""

    def __init__(self, ints=(), floats=(), coins=()):
        self.ints = list(ints)
        self.floats = list(floats)
        self.coins = list(coins)

    def randint(self, a, b):
        assert self.ints, f"ScriptedRNG ran out of ints (randint({a}, {b}))"
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value

    def random(self):
        assert self.floats, "ScriptedRNG ran out of floats"
        return self.floats.pop(0)

    def coin_flip(self):
        assert self.coins, "ScriptedRNG ran out of coin flips"
        return self.coins.pop(0)


class StaticFov:
    """FieldOfView double: a fixed visible set, or everything when None."""

    def __init__(self, visible=None):
        self.visible = None if visible is None else set(visible)
        self.computed_from = []

    def compute(self, grid, x, y, radius, light_walls):
        self.computed_from.append((x, y))

    def is_in_fov(self, x, y):
        return self.visible is None or (x, y) in self.visible


class ScriptedMenu:
    def __init__(self, *choices):
        self.choices = list(choices)
        self.calls = []

    def select(self, header, options):
        self.calls.append((header, list(options)))
        return self.choices.pop(0) if self.choices else None


def open_grid(width=12, height=12):
    """A grid with a walled border and an open interior."""
    grid = Grid(width, height)
    grid.carve_room(Rect(0, 0, width - 1, height - 1))
    return grid


@pytest.fixture
def scripted_rng():
    return ScriptedRNG


@pytest.fixture
def static_fov():
    return StaticFov


@pytest.fixture
def scripted_menu():
    return ScriptedMenu


@pytest.fixture
def small_config():
    return GameConfig(
        map=MapConfig(width=20, height=20, room_min_size=3, room_max_size=5, max_rooms=2),
        population=PopulationConfig(max_room_monsters=0, max_room_items=0),
    )


@pytest.fixture
def world():
    """Factory for (grid, entities) with the player at the given position."""

    def _make(player_pos=(5, 5), width=12, height=12):
        grid = open_grid(width, height)
        entities = EntityList(make_player(GameConfig().player, *player_pos))
        return grid, entities

    return _make


@pytest.fixture
def make_game(world):
    """Factory for a Game on an open grid with a StaticFov and ScriptedRNG."""

    def _make(player_pos=(5, 5), visible=None, rng=None, menu=None, display=None, config=None):
        grid, entities = world(player_pos)
        game = Game(
            config or GameConfig(),
            grid,
            entities,
            rng or ScriptedRNG(),
            StaticFov(visible),
            menu=menu,
            display=display,
        )
        return game

    return _make
