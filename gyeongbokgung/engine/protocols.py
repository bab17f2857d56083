"""
Protocol definitions for the palace game and its host.

The host owns the input loop and the transcript. The game never reads
input or prints on its own; it only talks to the host through a
GameContext.

Component Flow:
    Host -> AdventureGame.start(context)      (once)
    Host -> AdventureGame.handle(line, context)  (once per line)
                  |
                  v
    GameContext.write(line) / GameContext.end_game()
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class GameContext(Protocol):
    """Output channel a host hands to the game.

    Implementations:
        - TranscriptContext: records lines in memory (tests, sessions)
        - ConsoleContext: echoes lines to the terminal
        - ScreenContext: appends lines to the Textual transcript
    """

    def write(self, line: str) -> None:
        """Append one line of text to the player's transcript."""
        ...

    def end_game(self) -> None:
        """Signal that the session is over.

        This does not itself output a game over message.
        """
        ...


@runtime_checkable
class AdventureGame(Protocol):
    """Protocol for a turn-based text adventure driven by a host."""

    @property
    def title(self) -> str:
        """Title displayed by the host."""
        ...

    def start(self, context: GameContext) -> None:
        """Run once at the start of every game.

        Args:
            context: Where to write output and signal the end
        """
        ...

    def handle(self, raw_input: str, context: GameContext) -> None:
        """Run once for each line the player enters.

        Args:
            raw_input: The line the player typed
            context: Where to write output and signal the end
        """
        ...
