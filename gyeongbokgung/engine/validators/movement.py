"""
Movement validator for the palace engine.

This module validates MOVE actions against the route table, checking
that a route exists and that its requirements are met.
"""

from __future__ import annotations

from gyeongbokgung.engine import narration
from gyeongbokgung.engine.rules import RouteRequirement, find_route
from gyeongbokgung.models.game import GameState
from gyeongbokgung.models.intent import ActionIntent, ActionType
from gyeongbokgung.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)
from gyeongbokgung.models.world import Direction, Location


class MovementValidator:
    """Validates MOVE actions against the route table.

    Checks:
        1. A route leaves the current location in that direction
        2. The route's item requirement is met
        3. The route's blessing requirement is met

    The item is checked before the blessing, so a player without the
    binyeo is told about the binyeo first.

    Returns ValidationResult with:
        - valid=True: destination and direction in context
        - valid=False: rejection code and reason
    """

    def validate(self, intent: ActionIntent, state: GameState) -> ValidationResult:
        """Validate a movement intent.

        Args:
            intent: The parsed MOVE action intent
            state: Current game state

        Returns:
            ValidationResult indicating success or failure with reason
        """
        if intent.action_type != ActionType.MOVE:
            return invalid_result(
                code=RejectionCode.NO_EXIT,
                reason=narration.NO_EXIT,
            )

        try:
            direction = Direction(intent.target)
        except ValueError:
            return invalid_result(code=RejectionCode.NO_EXIT, reason=narration.NO_EXIT)

        route = find_route(state.current_location, direction)
        if route is None:
            return invalid_result(
                code=RejectionCode.NO_EXIT,
                reason=narration.NO_EXIT,
                direction=direction,
            )

        if route.requires:
            validation = self._check_requirements(route.requires, route.destination, state)
            if not validation.valid:
                return validation

        return valid_result(
            destination=route.destination,
            direction=direction,
            from_location=state.current_location,
        )

    def _check_requirements(
        self,
        requires: RouteRequirement,
        destination: Location,
        state: GameState,
    ) -> ValidationResult:
        """Check if route requirements are met.

        Returns:
            ValidationResult - valid if requirements met
        """
        if requires.item and requires.item not in state.inventory:
            return invalid_result(
                code=RejectionCode.MISSING_ITEM,
                reason=narration.missing_item(destination, requires.item),
                requires_item=requires.item,
            )

        if requires.blessed and not state.is_blessed(requires.blessed):
            return invalid_result(
                code=RejectionCode.NOT_BLESSED,
                reason=narration.not_blessed(destination, requires.blessed),
                requires_blessed=requires.blessed,
            )

        return valid_result()
