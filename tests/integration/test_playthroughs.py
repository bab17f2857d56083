"""Integration tests for full playthroughs.

Drives GyeongbokgungGame through scripted command sequences and checks
the endings, the order of host calls, and the invariants that must hold
along the way.
"""

import pytest

from gyeongbokgung.engine import narration
from gyeongbokgung.models.world import Item, Location

pytestmark = pytest.mark.integration

BANISHMENT_COMMANDS = [
    "north", "take binyeo", "east", "west", "use binyeo", "north", "east", "north",
]

VICTORY_COMMANDS = [
    "north", "take binyeo", "east", "take scroll", "use scroll", "west",
    "use binyeo", "north", "east", "take incense", "north", "use incense",
]


class TestBanishment:
    """Walking into the temple unprepared ends the game."""

    def test_banishment_scenario(self, game, context, play) -> None:
        game.start(context)
        play(BANISHMENT_COMMANDS)

        assert game.state.has_been_banished is True
        assert game.state.has_found_secret is False
        assert game.state.status == "lost"
        assert context.end_game_count == 1

    def test_banishment_text_ends_transcript(self, play) -> None:
        context = play(BANISHMENT_COMMANDS)

        assert context.lines[-len(narration.BANISHMENT):] == narration.BANISHMENT
        assert context.calls[-1].method == "end_game"

    def test_banished_on_first_unauthorized_entry(self, play) -> None:
        """The ending fires the moment the temple is described."""
        context = play(BANISHMENT_COMMANDS[:-1])
        assert not context.ended

        play(BANISHMENT_COMMANDS[-1:])

        assert context.ended
        assert "You are in Jagyeongjeon, the sacred temple. ⛩️" not in context.lines

    def test_carrying_unread_scroll_still_banished(self, play, game) -> None:
        context = play([
            "north", "take binyeo", "east", "take scroll", "west",
            "use binyeo", "north", "east", "north",
        ])

        assert context.ended
        assert game.state.has_been_banished is True


class TestVictory:
    """Reading the scroll and offering incense reveals the secret."""

    def test_victory_scenario(self, game, context, play) -> None:
        game.start(context)
        play(VICTORY_COMMANDS)

        assert game.state.has_found_secret is True
        assert game.state.has_been_banished is False
        assert game.state.status == "won"
        assert context.end_game_count == 1

    def test_victory_transcript(self, play) -> None:
        context = play(VICTORY_COMMANDS)

        expected_tail = ["The temple accepts your offering! 🕯️"] + narration.VICTORY
        assert context.lines[-len(expected_tail):] == expected_tail
        assert context.calls[-1].method == "end_game"

    def test_temple_entry_after_reading_is_safe(self, play) -> None:
        context = play(VICTORY_COMMANDS[:-1])

        assert not context.ended
        assert context.lines[-4:] == [
            "You are in Jagyeongjeon, the sacred temple. ⛩️",
            "The air is thick with anticipation.",
            "Ancient secrets of Hangul might be hidden here...",
            "Available paths: go south to garden",
        ]

    def test_final_state(self, play, game) -> None:
        play(VICTORY_COMMANDS)

        assert game.state.current_location == Location.TEMPLE
        assert game.state.inventory == [Item.BINYEO, Item.SCROLL, Item.INCENSE]
        assert game.state.is_blessed(Location.THRONE_HALL)
        assert game.state.is_blessed(Location.TEMPLE)


class TestInvariants:
    """Properties that hold for any sequence of commands."""

    def test_guarded_movement_needs_both_conditions(self, play, game) -> None:
        play(["north", "north"])
        assert game.state.current_location == Location.COURTYARD

        play(["take binyeo", "north"])
        assert game.state.current_location == Location.COURTYARD

        play(["use binyeo", "north"])
        assert game.state.current_location == Location.THRONE_HALL

    def test_blessing_is_monotonic(self, play, game) -> None:
        context = play(["north", "take binyeo", "use binyeo"])
        success = "The throne hall resonates with the power of the binyeo! 💎"

        play(["use binyeo", "south", "use binyeo", "north", "use binyeo"])

        assert game.state.is_blessed(Location.THRONE_HALL)
        assert context.lines.count(success) == 1

    @pytest.mark.parametrize(
        "path,item",
        [
            (["north"], "binyeo"),
            (["north", "east"], "scroll"),
        ],
    )
    def test_no_duplicate_items(self, play, game, path, item) -> None:
        play(path + [f"take {item}", f"take {item}", f"TAKE {item}"])

        assert [held.value for held in game.state.inventory] == [item]

    @pytest.mark.parametrize("line", ["xyzzy", "take", "north east", "use", "   "])
    def test_unknown_input_mid_game(self, play, game, line) -> None:
        context = play(["north", "take binyeo", "east"])
        before = game.state.model_dump()
        context.clear()

        play([line])

        assert context.lines == [narration.UNKNOWN_COMMAND]
        assert game.state.model_dump() == before

    def test_rejections_do_not_change_state(self, play, game) -> None:
        play(["north"])
        before = game.state.model_dump()

        play(["west", "take scroll", "use incense", "use sword", "take sword", "north"])

        assert game.state.model_dump() == before
