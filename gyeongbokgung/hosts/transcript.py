"""
In-memory host for the palace game.

TranscriptContext records everything the game writes. GameSession pairs a
game with a context and enforces the host side of the contract: start
once, one line at a time, no input after an ending.
"""

from __future__ import annotations

import logging
from typing import Callable

from gyeongbokgung.engine.game import GyeongbokgungGame
from gyeongbokgung.engine.protocols import AdventureGame

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when input is sent to a session that has already ended."""


class TranscriptContext:
    """GameContext that records output lines in memory.

    Attributes:
        lines: Every line written so far, in order
        ended: Whether end_game() has been called
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.ended = False

    def write(self, line: str) -> None:
        self.lines.append(line)

    def end_game(self) -> None:
        self.ended = True


class GameSession:
    """One play session: a game, its transcript and its lifecycle.

    Example:
        >>> session = GameSession()
        >>> opening = session.start()
        >>> session.send("north")[0]
        'You are in the main courtyard, Geunjeongmun. 🏞️'
    """

    def __init__(
        self,
        game: AdventureGame | None = None,
        context: TranscriptContext | None = None,
    ):
        self.game = game if game is not None else GyeongbokgungGame()
        self.context = context if context is not None else TranscriptContext()
        self.started = False

    @property
    def ended(self) -> bool:
        return self.context.ended

    @property
    def transcript(self) -> list[str]:
        return self.context.lines

    def start(self) -> list[str]:
        """Start the game.

        Returns:
            The opening lines

        Raises:
            RuntimeError: If the session was already started
        """
        if self.started:
            raise RuntimeError("Session has already been started")
        self.started = True
        return self._run(lambda: self.game.start(self.context))

    def send(self, raw_input: str) -> list[str]:
        """Send one line of player input.

        Args:
            raw_input: The line the player typed

        Returns:
            The lines the game wrote in response

        Raises:
            GameOverError: If the game has already ended
        """
        if self.ended:
            raise GameOverError("The game has ended. Start a new game to play again.")
        if not self.started:
            self.start()
        return self._run(lambda: self.game.handle(raw_input, self.context))

    def _run(self, turn: Callable[[], None]) -> list[str]:
        before = len(self.context.lines)
        turn()
        if self.ended:
            logger.info("Session ended")
        return self.context.lines[before:]
