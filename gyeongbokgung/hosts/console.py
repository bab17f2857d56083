"""
Console host - plays the game in a plain terminal.

Reads lines with click.prompt and echoes the game's output with
click.echo. Stops at an ending, on 'quit', or at end of input.
"""

from __future__ import annotations

import logging

import click

from gyeongbokgung.engine.game import GyeongbokgungGame
from gyeongbokgung.engine.protocols import AdventureGame

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"quit", "exit"})


class ConsoleContext:
    """GameContext that echoes each line to the terminal."""

    def __init__(self) -> None:
        self.ended = False

    def write(self, line: str) -> None:
        click.echo(line)

    def end_game(self) -> None:
        self.ended = True


def run_console(game: AdventureGame | None = None) -> ConsoleContext:
    """Play a game on the console until it ends.

    Args:
        game: The game to play; a new GyeongbokgungGame if omitted

    Returns:
        The context, so callers can see whether the game ended
    """
    game = game if game is not None else GyeongbokgungGame()
    context = ConsoleContext()

    click.secho(game.title, bold=True)
    click.echo()
    game.start(context)

    while not context.ended:
        try:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            logger.info("Console input closed")
            break

        if line.strip().lower() in QUIT_COMMANDS:
            logger.info("Player quit")
            break
        game.handle(line, context)

    if context.ended:
        click.echo()
        click.secho("Game over.", bold=True)
    return context
