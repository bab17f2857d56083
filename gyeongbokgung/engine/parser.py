"""
Rule-based command parser for the palace game.

Matching is done on the lowercased, trimmed line:
    - exact words: help, look, inventory, north, south, east, west
    - prefixes: "take <item>", "use <item>"

Anything else parses to ActionType.UNKNOWN, so parse() is defined for
every possible input string.
"""

from __future__ import annotations

from gyeongbokgung.models.intent import ActionIntent, ActionType
from gyeongbokgung.models.world import Direction


class CommandParser:
    """Parse player input into an ActionIntent.

    Example:
        >>> parser = CommandParser()
        >>> intent = parser.parse("  TAKE scroll")
        >>> intent.action_type == ActionType.TAKE
        True
        >>> intent.target
        'scroll'
    """

    EXACT_COMMANDS: dict[str, ActionType] = {
        "help": ActionType.HELP,
        "look": ActionType.LOOK,
        "inventory": ActionType.INVENTORY,
    }

    # Prefix includes the trailing space; the rest of the line is the target
    PREFIX_COMMANDS: dict[str, ActionType] = {
        "take ": ActionType.TAKE,
        "use ": ActionType.USE,
    }

    DIRECTIONS = frozenset(direction.value for direction in Direction)

    def parse(self, raw_input: str) -> ActionIntent:
        """Parse one line of player input.

        Args:
            raw_input: The raw player input string

        Returns:
            ActionIntent; UNKNOWN if the line matches no command
        """
        normalized = raw_input.lower().strip()

        if normalized in self.EXACT_COMMANDS:
            return ActionIntent(
                action_type=self.EXACT_COMMANDS[normalized],
                raw_input=raw_input,
                normalized=normalized,
            )

        if normalized in self.DIRECTIONS:
            return ActionIntent(
                action_type=ActionType.MOVE,
                raw_input=raw_input,
                normalized=normalized,
                target=normalized,
            )

        for prefix, action_type in self.PREFIX_COMMANDS.items():
            if normalized.startswith(prefix):
                return ActionIntent(
                    action_type=action_type,
                    raw_input=raw_input,
                    normalized=normalized,
                    target=normalized[len(prefix):],
                )

        return ActionIntent(
            action_type=ActionType.UNKNOWN,
            raw_input=raw_input,
            normalized=normalized,
        )
