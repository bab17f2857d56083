"""
Game controller - the palace adventure a host drives line by line.

The controller parses each line, validates it, asks the state manager to
apply the result and writes the outcome to the host's context. Player
mistakes are reported as transcript lines; handle() never raises for any
input string.
"""

from __future__ import annotations

import logging
from typing import Callable

from gyeongbokgung.engine import narration
from gyeongbokgung.engine.parser import CommandParser
from gyeongbokgung.engine.protocols import GameContext
from gyeongbokgung.engine.state import GameStateManager
from gyeongbokgung.engine.validators import (
    MovementValidator,
    TakeValidator,
    UseEffect,
    UseValidator,
)
from gyeongbokgung.models.game import GameState
from gyeongbokgung.models.intent import ActionIntent, ActionType
from gyeongbokgung.models.validation import ValidationResult
from gyeongbokgung.models.world import Item, Location

logger = logging.getLogger(__name__)


class GyeongbokgungGame:
    """The Secret of Gyeongbokgung Palace.

    Implements the AdventureGame protocol. Owns the session's
    GameStateManager; nothing else holds a reference to the state.

    Example:
        >>> from gyeongbokgung.hosts.transcript import TranscriptContext
        >>> game = GyeongbokgungGame()
        >>> context = TranscriptContext()
        >>> game.start(context)
        >>> game.handle("north", context)
        >>> game.state.current_location
        <Location.COURTYARD: 'courtyard'>
    """

    def __init__(self, state_manager: GameStateManager | None = None):
        self.state_manager = state_manager or GameStateManager()
        self.parser = CommandParser()
        self.movement_validator = MovementValidator()
        self.take_validator = TakeValidator()
        self.use_validator = UseValidator()

        self._handlers: dict[ActionType, Callable[[ActionIntent, GameContext], None]] = {
            ActionType.HELP: self._handle_help,
            ActionType.LOOK: self._handle_look,
            ActionType.INVENTORY: self._handle_inventory,
            ActionType.MOVE: self._handle_move,
            ActionType.TAKE: self._handle_take,
            ActionType.USE: self._handle_use,
            ActionType.UNKNOWN: self._handle_unknown,
        }

    @property
    def title(self) -> str:
        return narration.TITLE

    @property
    def state(self) -> GameState:
        return self.state_manager.get_state()

    def start(self, context: GameContext) -> None:
        """Write the introduction and describe the main gate."""
        logger.info("Starting new game")
        self._write(context, narration.INTRO)
        self._describe_current_location(context)

    def handle(self, raw_input: str, context: GameContext) -> None:
        """Process one line of player input.

        Args:
            raw_input: The line the player typed
            context: Where to write output and signal the end
        """
        intent = self.parser.parse(raw_input)
        logger.info(f"Handling {intent.action_type.value} command: {intent.normalized!r}")
        self._handlers[intent.action_type](intent, context)

    # -------------------------------------------------------------------------
    # Command handlers
    # -------------------------------------------------------------------------

    def _handle_help(self, intent: ActionIntent, context: GameContext) -> None:
        self._write(context, narration.HELP)

    def _handle_look(self, intent: ActionIntent, context: GameContext) -> None:
        self._describe_current_location(context)

    def _handle_inventory(self, intent: ActionIntent, context: GameContext) -> None:
        self._write(context, narration.inventory(self.state.inventory))

    def _handle_unknown(self, intent: ActionIntent, context: GameContext) -> None:
        context.write(narration.UNKNOWN_COMMAND)

    def _handle_move(self, intent: ActionIntent, context: GameContext) -> None:
        result = self.movement_validator.validate(intent, self.state)
        if not result.valid:
            self._reject(result, context)
            return

        destination = result.context["destination"]
        assert isinstance(destination, Location)
        self.state_manager.move_to(destination)
        self._describe_current_location(context)

    def _handle_take(self, intent: ActionIntent, context: GameContext) -> None:
        result = self.take_validator.validate(intent, self.state)
        if not result.valid:
            self._reject(result, context)
            return

        item = result.context["item"]
        assert isinstance(item, Item)
        self.state_manager.add_item(item)
        context.write(str(result.context["take_description"]))

    def _handle_use(self, intent: ActionIntent, context: GameContext) -> None:
        result = self.use_validator.validate(intent, self.state)
        if not result.valid:
            self._reject(result, context)
            return

        item = result.context["item"]
        assert isinstance(item, Item)

        if result.context["effect"] == UseEffect.READ:
            self.state_manager.mark_scroll_read()
            self._write(context, narration.SCROLL_LORE)
            return

        sacred_place = result.context["sacred_place"]
        assert isinstance(sacred_place, Location)
        if not self.state_manager.bless(sacred_place, item):
            context.write(narration.NOTHING_HAPPENS)
            return

        context.write(narration.BLESSED[sacred_place])
        if sacred_place == Location.TEMPLE and self.state.has_read_scroll:
            self._win(context)

    # -------------------------------------------------------------------------
    # Descriptions and endings
    # -------------------------------------------------------------------------

    def _describe_current_location(self, context: GameContext) -> None:
        """Describe where the player is.

        The temple is checked for banishment every time it is described,
        so walking in unprepared ends the game on the spot.
        """
        if self.state.current_location == Location.TEMPLE:
            self._resolve_temple(context)
            return
        self._write(context, narration.describe_location(self.state))

    def _resolve_temple(self, context: GameContext) -> None:
        state = self.state
        if (
            not state.has_found_secret
            and not state.has_read_scroll
            and not state.is_blessed(Location.TEMPLE)
        ):
            self._banish(context)
            return

        # After victory the temple has nothing more to say
        if not state.has_found_secret:
            self._write(context, narration.describe_location(state))

    def _banish(self, context: GameContext) -> None:
        self._write(context, narration.BANISHMENT)
        self.state_manager.mark_banished()
        logger.info("Game over: player banished from the temple")
        context.end_game()

    def _win(self, context: GameContext) -> None:
        self._write(context, narration.VICTORY)
        self.state_manager.mark_secret_found()
        logger.info("Game over: secret of Hangul discovered")
        context.end_game()

    def _reject(self, result: ValidationResult, context: GameContext) -> None:
        assert result.rejection_code is not None
        assert result.rejection_reason is not None
        logger.debug(f"Rejected: {result.rejection_code.value}")
        context.write(result.rejection_reason)

    @staticmethod
    def _write(context: GameContext, lines: list[str]) -> None:
        for line in lines:
            context.write(line)
