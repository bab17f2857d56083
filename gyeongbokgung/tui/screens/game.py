"""
Game Screen - the transcript and command line for one play session.
"""
import logging

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, RichLog, Static

from gyeongbokgung.engine.game import GyeongbokgungGame
from gyeongbokgung.hosts.transcript import TranscriptContext

logger = logging.getLogger(__name__)


class ScreenContext(TranscriptContext):
    """GameContext that records lines and shows them in a RichLog."""

    def __init__(self, log: RichLog) -> None:
        super().__init__()
        self._log = log

    def write(self, line: str) -> None:
        super().write(line)
        self._log.write(line)


class GameScreen(Screen):
    """One game: transcript above, command input below."""

    CSS = """
    #game-panel {
        height: 100%;
        padding: 0 1;
    }

    #transcript {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #command {
        margin: 1 0 0 0;
    }

    #status {
        color: $text-muted;
        height: 1;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.game = GyeongbokgungGame()
        self.game_context: ScreenContext | None = None

    def compose(self) -> ComposeResult:
        """Create game UI."""
        yield Header()

        with Vertical(id="game-panel"):
            yield RichLog(id="transcript", wrap=True, markup=False, highlight=False)
            yield Input(placeholder="What do you do? (type 'help')", id="command")
            yield Static("", id="status")

        yield Footer()

    def on_mount(self) -> None:
        """Start the game once the transcript exists."""
        self.game_context = ScreenContext(self.query_one("#transcript", RichLog))
        self.game.start(self.game_context)
        self.query_one("#command", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Send the typed line to the game."""
        if self.game_context is None or self.game_context.ended:
            return

        line = event.value
        event.input.value = ""
        self.query_one("#transcript", RichLog).write(f"> {line}")
        self.game.handle(line, self.game_context)

        if self.game_context.ended:
            self._show_game_over()

    def _show_game_over(self) -> None:
        state = self.game.state
        outcome = "Victory" if state.has_found_secret else "Banished"
        logger.info(f"TUI session over: {outcome}")

        command = self.query_one("#command", Input)
        command.disabled = True
        status = self.query_one("#status", Static)
        status.update(f"Game over ({outcome}). Press Ctrl+N for a new game.")
        status.add_class("game-over")
        self.app.notify(f"Game over: {outcome}", title=self.game.title, timeout=5)
