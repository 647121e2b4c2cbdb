from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from . import __version__
from .config import GameConfig
from .engine import Game
from .input import InputEvent
from .logging_config import configure_logging
from .rng import RNG

logger = logging.getLogger(__name__)


class QueueMenu:
    """Menu collaborator answering from a pre-recorded list of selections."""

    def __init__(self, choices: Sequence[int]) -> None:
        self._choices: List[int] = list(choices)

    def select(self, header: str, options: Sequence[str]) -> Optional[int]:
        if not self._choices:
            return None
        choice = self._choices.pop(0)
        logger.debug("Menu %r -> %d of %s", header.strip(), choice, list(options))
        return choice


def parse_key(token: str) -> InputEvent:
    token = token.strip()
    if token.upper().startswith("ALT+"):
        return InputEvent(key=token[4:], alt=True)
    return InputEvent(key=token)


def choice_list(text: str) -> List[int]:
    """argparse type for comma-separated menu selections, e.g. "0,2"."""
    try:
        return [int(c) for c in text.split(",") if c.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {text!r}") from None


def ascii_view(game: Game) -> List[str]:
    """Explored tiles plus currently visible entities, one string per row."""
    rows = [
        [game.grid.tile(x, y).glyph if game.grid.tile(x, y).explored else " " for x in range(game.grid.width)]
        for y in range(game.grid.height)
    ]
    for entity in game.drawable_entities():
        rows[entity.y][entity.x] = entity.char
    return ["".join(row) for row in rows]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="cryptcrawl",
        description="Generate a dungeon level and optionally replay a scripted key sequence.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the shared random source.")
    parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to a YAML file overriding the default config.",
    )
    parser.add_argument(
        "--keys",
        default="",
        help="Comma-separated key names to replay, e.g. UP,UP,g,i,ALT+ENTER.",
    )
    parser.add_argument(
        "--choose",
        type=choice_list,
        default=[],
        help="Comma-separated menu selections answered in order when the inventory opens.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    configure_logging(level=level)

    config = GameConfig.load(user_path=args.config_path)
    game = Game.new(config, RNG(args.seed), menu=QueueMenu(args.choose))

    events = [parse_key(k) for k in args.keys.split(",") if k.strip()]
    taken = game.run(events)

    for line in ascii_view(game):
        print(line.rstrip())
    fighter = game.player.fighter
    if fighter is not None:
        print(f"HP: {fighter.hp}/{fighter.max_hp}  turns: {taken}  inventory: {len(game.inventory)}")
    for msg in reversed(game.messages.recent(config.messages.max_lines)):
        print(msg.text)
    return 0
