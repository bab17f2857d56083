"""
Take validator for the palace engine.

Validates TAKE actions: the name must be an item, the item must be
collectable at the current location, and the player must not already
have it.
"""

from __future__ import annotations

from gyeongbokgung.engine import narration
from gyeongbokgung.engine.rules import PICKUPS
from gyeongbokgung.models.game import GameState
from gyeongbokgung.models.intent import ActionIntent
from gyeongbokgung.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)
from gyeongbokgung.models.world import Item


class TakeValidator:
    """Validates TAKE actions against the pickup table.

    Returns ValidationResult with:
        - valid=True: item and take_description in context
        - valid=False: UNKNOWN_ITEM, ITEM_NOT_HERE or ALREADY_HAVE
    """

    def validate(self, intent: ActionIntent, state: GameState) -> ValidationResult:
        item = Item.parse(intent.target or "")
        if item is None:
            return invalid_result(
                code=RejectionCode.UNKNOWN_ITEM,
                reason=narration.NOT_TAKEABLE,
            )

        take_description = PICKUPS.get((state.current_location, item))
        if take_description is None:
            return invalid_result(
                code=RejectionCode.ITEM_NOT_HERE,
                reason=narration.nothing_to_take(item),
                item=item,
            )

        if item in state.inventory:
            return invalid_result(
                code=RejectionCode.ALREADY_HAVE,
                reason=narration.already_have(item),
                item=item,
            )

        return valid_result(item=item, take_description=take_description)
