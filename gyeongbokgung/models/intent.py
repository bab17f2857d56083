"""
Intent models - parsed player commands

An ActionIntent is what the parser makes of one line of player input,
before any rule has been checked against it.

Example:
    >>> intent = ActionIntent(
    ...     action_type=ActionType.TAKE,
    ...     raw_input="  Take Binyeo ",
    ...     normalized="take binyeo",
    ...     target="binyeo",
    ... )
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ActionType(str, Enum):
    """Categories of player commands.

    Categories:
        Meta: HELP, LOOK, INVENTORY
        Movement: MOVE
        Items: TAKE, USE
        Fallback: UNKNOWN
    """

    HELP = "help"
    LOOK = "look"
    INVENTORY = "inventory"
    MOVE = "move"
    TAKE = "take"
    USE = "use"
    UNKNOWN = "unknown"


class ActionIntent(BaseModel):
    """Structured representation of one player command.

    Attributes:
        action_type: The kind of command
        raw_input: The line exactly as typed
        normalized: Lowercased, trimmed input used for matching
        target: Direction for MOVE, item name for TAKE/USE, None otherwise.
            Item names are left unresolved here; unknown names are
            rejected by the validators.
    """

    action_type: ActionType
    raw_input: str
    normalized: str
    target: str | None = None
