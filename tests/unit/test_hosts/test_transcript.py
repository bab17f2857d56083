"""Unit tests for TranscriptContext and GameSession."""

import pytest

from gyeongbokgung.engine.protocols import GameContext
from gyeongbokgung.hosts.transcript import GameOverError, GameSession, TranscriptContext


class TestTranscriptContext:
    """Tests for TranscriptContext."""

    def test_records_lines(self) -> None:
        context = TranscriptContext()

        context.write("one")
        context.write("two")

        assert context.lines == ["one", "two"]
        assert context.ended is False

    def test_end_game(self) -> None:
        context = TranscriptContext()

        context.end_game()

        assert context.ended is True
        assert context.lines == []

    def test_is_game_context(self) -> None:
        assert isinstance(TranscriptContext(), GameContext)


class TestGameSession:
    """Tests for GameSession."""

    def test_start_returns_opening(self, session) -> None:
        opening = session.start()

        assert opening[0] == "In the twilight of the Joseon Dynasty..."
        assert session.transcript == opening

    def test_start_twice(self, session) -> None:
        session.start()

        with pytest.raises(RuntimeError):
            session.start()

    def test_send_returns_turn_lines(self, session) -> None:
        session.start()

        lines = session.send("inventory")

        assert lines == ["Your inventory is empty. 👜"]

    def test_send_starts_session(self, session) -> None:
        session.send("look")

        assert session.started is True
        assert session.transcript[0] == "In the twilight of the Joseon Dynasty..."

    def test_send_after_ending(self, session) -> None:
        session.start()
        for line in ["north", "take binyeo", "east", "west", "use binyeo", "north", "east"]:
            session.send(line)

        session.send("north")
        assert session.ended is True

        with pytest.raises(GameOverError):
            session.send("look")
