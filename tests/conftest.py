"""
Shared pytest fixtures for the Gyeongbokgung tests.

This module provides:
- game / context: a fresh controller and a recording host context
- play: run a list of commands through the game
- state_factory: GameState at a chosen point in the story
- Custom markers for test categorization
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pytest

from gyeongbokgung.engine.game import GyeongbokgungGame
from gyeongbokgung.engine.state import GameStateManager
from gyeongbokgung.hosts.transcript import GameSession
from gyeongbokgung.models.game import GameState
from gyeongbokgung.models.world import Item, Location

if TYPE_CHECKING:
    from tests.mocks.context import RecordingContext


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "tui: marks tests that drive the Textual app")


# =============================================================================
# Game Fixtures
# =============================================================================


@pytest.fixture
def context() -> "RecordingContext":
    """Create a recording host context."""
    from tests.mocks.context import RecordingContext

    return RecordingContext()


@pytest.fixture
def game() -> GyeongbokgungGame:
    """Create a fresh game at the main gate."""
    return GyeongbokgungGame()


@pytest.fixture
def session() -> GameSession:
    """Create an unstarted in-memory session."""
    return GameSession()


@pytest.fixture
def play(game, context) -> Callable[[list[str]], "RecordingContext"]:
    """Run commands through the game fixture, one line at a time.

    Usage:
        def test_something(play, game):
            context = play(["north", "take binyeo"])
    """

    def _play(commands: list[str]) -> "RecordingContext":
        for command in commands:
            game.handle(command, context)
        return context

    return _play


@pytest.fixture
def state_factory() -> Callable[..., GameState]:
    """Factory fixture to build a GameState mid-story.

    Usage:
        state = state_factory(
            location=Location.COURTYARD,
            inventory=[Item.BINYEO],
            blessed=[Location.THRONE_HALL],
        )
    """

    def _factory(
        location: Location = Location.MAIN_GATE,
        inventory: list[Item] | None = None,
        blessed: list[Location] | None = None,
        has_read_scroll: bool = False,
    ) -> GameState:
        state = GameState(
            current_location=location,
            inventory=list(inventory or []),
            has_read_scroll=has_read_scroll,
        )
        for place in blessed or []:
            state.sacred_places[place].is_blessed = True
        return state

    return _factory


@pytest.fixture
def game_at(state_factory) -> Callable[..., GyeongbokgungGame]:
    """Factory fixture for a game starting from a prepared state."""

    def _factory(**kwargs) -> GyeongbokgungGame:
        return GyeongbokgungGame(GameStateManager(state_factory(**kwargs)))

    return _factory
