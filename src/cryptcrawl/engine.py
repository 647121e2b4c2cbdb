from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

from . import colors
from .ai_turns import take_turn
from .combat import attack
from .config import GameConfig
from .dungeon import make_map
from .entities import PLAYER, Entity, EntityList
from .entities.factory import make_player
from .fov import LineOfSightFov
from .input import MOVE_DELTAS, Command, InputEvent, InputMapper, PlayerAction
from .interfaces import Display, FieldOfView, Menu
from .inventory import EffectContext, Inventory, UseResult, pick_item_up, use_item
from .map import Grid, Rect
from .messages import MessageLog
from .rng import RNG

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome stranger! Prepare to perish in the Tombs of the Ancient Kings."
INVENTORY_HEADER = "Press the key next to an item to use it, or any other to cancel.\n"
EMPTY_INVENTORY_OPTION = "Inventory is empty."


class TurnState(Enum):
    AWAITING_INPUT = auto()
    RESOLVING_PLAYER = auto()
    RESOLVING_AI = auto()
    EXITED = auto()


class Game:
    """One game session: the level, its entities, the inventory and the log.

    Each call to play_turn() resolves the player's input and, if that input
    consumed a turn and the player is still alive, lets every living AI-bearing
    entity act once in collection order. A turn always runs to completion.
    """

    def __init__(
        self,
        config: GameConfig,
        grid: Grid,
        entities: EntityList,
        rng,
        fov: FieldOfView,
        *,
        rooms: Optional[List[Rect]] = None,
        menu: Optional[Menu] = None,
        display: Optional[Display] = None,
        mapper: Optional[InputMapper] = None,
    ) -> None:
        self.config = config
        self.grid = grid
        self.entities = entities
        self.rng = rng
        self.fov = fov
        self.rooms: List[Rect] = list(rooms or [])
        self.menu = menu
        self.display = display
        self.mapper = mapper or InputMapper.default()
        self.inventory = Inventory(config.items.inventory_capacity)
        self.messages = MessageLog()
        self.state = TurnState.AWAITING_INPUT
        self.mouse: Optional[Tuple[int, int]] = None
        self._fov_origin: Optional[Tuple[int, int]] = None

    @classmethod
    def new(
        cls,
        config: Optional[GameConfig] = None,
        rng=None,
        fov: Optional[FieldOfView] = None,
        *,
        menu: Optional[Menu] = None,
        display: Optional[Display] = None,
    ) -> "Game":
        """Create the player, generate a level around it and greet the player."""
        config = config or GameConfig()
        rng = rng if rng is not None else RNG()
        fov = fov if fov is not None else LineOfSightFov()
        entities = EntityList(make_player(config.player))
        result = make_map(config, entities, rng)
        game = cls(config, result.grid, entities, rng, fov, rooms=result.rooms, menu=menu, display=display)
        game.refresh_fov()
        game.messages.add(WELCOME_MESSAGE, colors.RED)
        logger.info("New game: %d rooms, player at %s", len(result.rooms), entities.player.pos)
        return game

    @property
    def player(self) -> Entity:
        return self.entities.player

    # ---- Visibility -------------------------------------------------------
    def refresh_fov(self) -> None:
        """Recompute visibility if the player moved since the last compute.

        Every visible tile is marked explored.
        """
        origin = self.player.pos
        if origin == self._fov_origin:
            return
        fov_cfg = self.config.fov
        self.fov.compute(self.grid, origin[0], origin[1], fov_cfg.torch_radius, fov_cfg.light_walls)
        self.grid.mark_explored(p for p in self.grid.positions() if self.fov.is_in_fov(*p))
        self._fov_origin = origin

    def is_visible(self, entity: Entity) -> bool:
        return self.fov.is_in_fov(entity.x, entity.y)

    def drawable_entities(self) -> List[Entity]:
        """Visible entities, non-blocking ones first so they never cover creatures."""
        visible = [e for e in self.entities if self.is_visible(e)]
        return sorted(visible, key=lambda e: e.blocks)

    def names_under_mouse(self) -> str:
        if self.mouse is None:
            return ""
        x, y = self.mouse
        names = [e.name for e in self.entities if e.pos == (x, y) and self.is_visible(e)]
        return ", ".join(names)

    # ---- Player actions ---------------------------------------------------
    def player_move_or_attack(self, dx: int, dy: int) -> None:
        x = self.player.x + dx
        y = self.player.y + dy
        target_id = self.entities.find_at(x, y, lambda e: e.fighter is not None)
        if target_id is not None and target_id != PLAYER:
            player, target = self.entities.pair(PLAYER, target_id)
            attack(player, target, self.messages)
        else:
            self.entities.move_by(self.grid, PLAYER, dx, dy)

    def pick_up(self) -> None:
        px, py = self.player.pos
        item_id = self.entities.find_at(px, py, lambda e: e.item is not None)
        if item_id is not None:
            pick_item_up(item_id, self.entities, self.inventory, self.messages)

    def effect_context(self) -> EffectContext:
        return EffectContext(
            entities=self.entities,
            fov=self.fov,
            messages=self.messages,
            config=self.config.items,
        )

    def open_inventory(self) -> PlayerAction:
        if self.menu is None:
            logger.warning("No menu collaborator attached; inventory cannot be opened")
            return PlayerAction.DIDNT_TAKE_TURN
        options = self.inventory.names() or [EMPTY_INVENTORY_OPTION]
        choice = self.menu.select(INVENTORY_HEADER, options)
        if choice is None or not 0 <= choice < len(self.inventory):
            return PlayerAction.DIDNT_TAKE_TURN
        result = use_item(choice, self.inventory, self.effect_context())
        if result is UseResult.USED_UP:
            return PlayerAction.TOOK_TURN
        return PlayerAction.DIDNT_TAKE_TURN

    def handle_input(self, event: InputEvent) -> PlayerAction:
        if event.mouse is not None:
            self.mouse = event.mouse
        command = self.mapper.translate(event)
        if command is None:
            return PlayerAction.DIDNT_TAKE_TURN
        if command is Command.TOGGLE_FULLSCREEN:
            if self.display is not None:
                self.display.toggle_fullscreen()
            return PlayerAction.DIDNT_TAKE_TURN
        if command is Command.QUIT:
            return PlayerAction.EXIT
        if not self.player.is_alive:
            return PlayerAction.DIDNT_TAKE_TURN
        if command in MOVE_DELTAS:
            self.player_move_or_attack(*MOVE_DELTAS[command])
            return PlayerAction.TOOK_TURN
        if command is Command.PICK_UP:
            self.pick_up()
            return PlayerAction.DIDNT_TAKE_TURN
        if command is Command.INVENTORY:
            return self.open_inventory()
        return PlayerAction.DIDNT_TAKE_TURN

    # ---- Turn sequencing --------------------------------------------------
    def run_ai_phase(self) -> None:
        # The range is fixed here, so only entities present at phase start act
        for monster_id in range(len(self.entities)):
            monster = self.entities[monster_id]
            if monster.is_alive and monster.ai is not None:
                take_turn(monster_id, self.grid, self.entities, self.fov, self.messages, self.rng)

    def play_turn(self, event: InputEvent) -> PlayerAction:
        if self.state is TurnState.EXITED:
            return PlayerAction.EXIT

        self.state = TurnState.RESOLVING_PLAYER
        action = self.handle_input(event)
        if action is PlayerAction.EXIT:
            self.state = TurnState.EXITED
            logger.info("Player quit")
            return action

        self.refresh_fov()
        if self.player.is_alive and action is PlayerAction.TOOK_TURN:
            self.state = TurnState.RESOLVING_AI
            self.run_ai_phase()

        self.state = TurnState.AWAITING_INPUT
        return action

    def run(self, events: Iterable[InputEvent]) -> int:
        """Play turns until the input runs out or the player quits.

        Returns the number of turns that consumed game time.
        """
        taken = 0
        for event in events:
            action = self.play_turn(event)
            if action is PlayerAction.EXIT:
                break
            if action is PlayerAction.TOOK_TURN:
                taken += 1
        return taken
