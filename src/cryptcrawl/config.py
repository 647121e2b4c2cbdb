from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class MapConfig:
    width: int = 80
    height: int = 43
    room_min_size: int = 6
    room_max_size: int = 10
    max_rooms: int = 30

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ConfigError("map must be at least 3x3")
        # A room narrower than 2 has no interior tile to carve or spawn on
        if self.room_min_size < 2 or self.room_min_size > self.room_max_size:
            raise ConfigError("room_min_size must be >= 2 and <= room_max_size")
        if self.room_max_size >= self.width or self.room_max_size >= self.height:
            raise ConfigError("room_max_size must be smaller than both map dimensions")
        if self.max_rooms < 0:
            raise ConfigError("max_rooms must be non-negative")


@dataclass
class PopulationConfig:
    max_room_monsters: int = 3
    max_room_items: int = 2
    orc_chance: float = 0.8
    heal_chance: float = 0.7
    lightning_chance: float = 0.1

    def __post_init__(self) -> None:
        if self.max_room_monsters < 0 or self.max_room_items < 0:
            raise ConfigError("spawn counts must be non-negative")
        for name in ("orc_chance", "heal_chance", "lightning_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be within [0, 1], got {value}")
        if self.heal_chance + self.lightning_chance > 1.0:
            raise ConfigError("heal_chance + lightning_chance must not exceed 1")


@dataclass
class ItemConfig:
    heal_amount: int = 4
    lightning_damage: int = 40
    lightning_range: int = 5
    confuse_range: int = 8
    confuse_num_turns: int = 10
    inventory_capacity: int = 9

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            if getattr(self, f.name) < 0:
                raise ConfigError(f"{f.name} must be non-negative")
        if not 1 <= self.inventory_capacity <= 9:
            # Menu selection is keyed by a single digit
            raise ConfigError("inventory_capacity must be within [1, 9]")


@dataclass
class FovConfig:
    torch_radius: int = 10
    light_walls: bool = True

    def __post_init__(self) -> None:
        if self.torch_radius < 0:
            raise ConfigError("torch_radius must be non-negative")


@dataclass
class MessageConfig:
    max_lines: int = 6

    def __post_init__(self) -> None:
        if self.max_lines <= 0:
            raise ConfigError("max_lines must be positive")


@dataclass
class FighterStats:
    max_hp: int
    defense: int
    power: int

    def __post_init__(self) -> None:
        if self.max_hp <= 0:
            raise ConfigError("max_hp must be positive")
        if self.defense < 0 or self.power < 0:
            raise ConfigError("defense and power must be non-negative")


@dataclass
class GameConfig:
    map: MapConfig = field(default_factory=MapConfig)
    population: PopulationConfig = field(default_factory=PopulationConfig)
    items: ItemConfig = field(default_factory=ItemConfig)
    fov: FovConfig = field(default_factory=FovConfig)
    messages: MessageConfig = field(default_factory=MessageConfig)
    player: FighterStats = field(default_factory=lambda: FighterStats(max_hp=30, defense=2, power=5))
    orc: FighterStats = field(default_factory=lambda: FighterStats(max_hp=10, defense=0, power=3))
    troll: FighterStats = field(default_factory=lambda: FighterStats(max_hp=16, defense=1, power=4))

    _SECTIONS = {
        "map": MapConfig,
        "population": PopulationConfig,
        "items": ItemConfig,
        "fov": FovConfig,
        "messages": MessageConfig,
        "player": FighterStats,
        "orc": FighterStats,
        "troll": FighterStats,
    }

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config root in {path} must be a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        unknown = set(data) - set(cls._SECTIONS)
        if unknown:
            raise ConfigError(f"Unknown config sections: {sorted(unknown)}")
        sections: Dict[str, Any] = {}
        for name, section_cls in cls._SECTIONS.items():
            if name not in data:
                continue
            raw = data[name]
            if not isinstance(raw, dict):
                raise ConfigError(f"Config section '{name}' must be a mapping")
            try:
                sections[name] = section_cls(**raw)
            except TypeError as exc:
                raise ConfigError(f"Invalid keys in section '{name}': {exc}") from exc
        return cls(**sections)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "GameConfig":
        """Load config from the built-in defaults and an optional user override file.

        If user_path is provided and exists, its values are overlaid onto defaults.
        """
        try:
            with resources.files("cryptcrawl").joinpath("data").joinpath("default_config.yaml").open(
                "r", encoding="utf-8"
            ) as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default config not found; falling back to dataclass defaults.")
            default_data = {}

        user_data: dict = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user config from %s", user_path)
            else:
                logger.warning("User config file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        config = cls.from_dict(merged)
        logger.debug("Config merged: %s", config)
        return config
