"""
Gyeongbokgung - Main TUI Application

Shows the game's transcript above an input line, like a chat window.
"""
from textual.app import App
from textual.binding import Binding

from gyeongbokgung.engine import narration
from gyeongbokgung.tui.screens.game import GameScreen


class PalaceApp(App):
    """Terminal UI host for the Secret of Gyeongbokgung Palace."""

    CSS = """
    Screen {
        background: $surface;
    }

    .game-over {
        color: $error;
        text-style: bold;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+n", "new_game", "New Game", priority=True),
        Binding("f1", "show_help", "Help"),
    ]

    TITLE = narration.TITLE
    SUB_TITLE = "A Joseon Dynasty text adventure"

    def on_mount(self) -> None:
        """Start a game on startup."""
        self.push_screen(GameScreen())

    def action_new_game(self) -> None:
        """Replace the current game with a fresh one."""
        self.switch_screen(GameScreen())

    def action_show_help(self) -> None:
        """Show keyboard help."""
        self.notify(
            "Type commands below and press Enter | [Ctrl+N] New Game | [Ctrl+Q] Quit",
            title="Help",
            timeout=5
        )
