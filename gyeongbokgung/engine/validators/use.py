"""
Use validator for the palace engine.

Validates USE actions and works out what the item does at the current
location: bless a sacred place, be read, or nothing at all.
"""

from __future__ import annotations

from enum import Enum

from gyeongbokgung.engine import narration
from gyeongbokgung.engine.rules import OFFERINGS, READABLE_ITEMS
from gyeongbokgung.models.game import GameState
from gyeongbokgung.models.intent import ActionIntent
from gyeongbokgung.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)
from gyeongbokgung.models.world import Item


class UseEffect(str, Enum):
    """What a valid USE action does"""

    BLESS = "bless"
    READ = "read"


class UseValidator:
    """Validates USE actions against the offering table.

    Checks, in order:
        1. The name is an item (UNKNOWN_ITEM)
        2. The player is carrying it (NOT_HELD)
        3. Readable items are valid anywhere (effect=READ)
        4. An offering exists for (location, item) (NOTHING_HAPPENS)
        5. The sacred place exists and is not yet blessed
           (NOTHING_HAPPENS / ALREADY_BLESSED)

    A valid result carries `item`, `effect` and, for BLESS, `sacred_place`.
    """

    def validate(self, intent: ActionIntent, state: GameState) -> ValidationResult:
        item = Item.parse(intent.target or "")
        if item is None:
            return invalid_result(
                code=RejectionCode.UNKNOWN_ITEM,
                reason=narration.NOT_USABLE,
            )

        if item not in state.inventory:
            return invalid_result(
                code=RejectionCode.NOT_HELD,
                reason=narration.NOT_HELD,
                item=item,
            )

        if item in READABLE_ITEMS:
            return valid_result(item=item, effect=UseEffect.READ)

        sacred_place = OFFERINGS.get((state.current_location, item))
        if sacred_place is None or sacred_place not in state.sacred_places:
            return invalid_result(
                code=RejectionCode.NOTHING_HAPPENS,
                reason=narration.NOTHING_HAPPENS,
                item=item,
            )

        if state.is_blessed(sacred_place):
            return invalid_result(
                code=RejectionCode.ALREADY_BLESSED,
                reason=narration.ALREADY_BLESSED.get(sacred_place, narration.NOTHING_HAPPENS),
                item=item,
                sacred_place=sacred_place,
            )

        return valid_result(item=item, effect=UseEffect.BLESS, sacred_place=sacred_place)
