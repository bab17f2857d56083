"""
Game state management for the palace engine.

GameStateManager owns the session's single GameState and is the only
code that mutates it. Validators read the state; the controller asks the
manager to apply whatever a validated action changes.
"""

from __future__ import annotations

import logging

from gyeongbokgung.models.game import GameState
from gyeongbokgung.models.world import Item, Location

logger = logging.getLogger(__name__)


class GameStateManager:
    """Manages game state for one play session.

    Example:
        >>> manager = GameStateManager()
        >>> manager.move_to(Location.COURTYARD)
        >>> manager.add_item(Item.BINYEO)
        True
        >>> manager.bless(Location.THRONE_HALL, Item.BINYEO)
        True
    """

    def __init__(self, state: GameState | None = None):
        """Initialize a new session.

        Args:
            state: Starting state; a fresh GameState if omitted
        """
        self._state = state if state is not None else GameState()

    def get_state(self) -> GameState:
        """Get the current game state."""
        return self._state

    def move_to(self, location: Location) -> None:
        """Move the player to a new location."""
        logger.debug(
            f"Moving {self._state.current_location.value} -> {location.value}"
        )
        self._state.current_location = location

    def has_item(self, item: Item) -> bool:
        """Check if the player is carrying an item."""
        return item in self._state.inventory

    def add_item(self, item: Item) -> bool:
        """Add an item to inventory.

        Returns:
            True if the item was added, False if already present
        """
        if item in self._state.inventory:
            return False
        self._state.inventory.append(item)
        logger.debug(f"Added {item.value} to inventory")
        return True

    def bless(self, location: Location, item: Item) -> bool:
        """Offer an item to a sacred place.

        Args:
            location: The sacred place to bless
            item: The item being offered

        Returns:
            True if the place became blessed, False if it is not a sacred
            place, is already blessed, or does not accept the item
        """
        place = self._state.sacred_places.get(location)
        if place is None:
            return False
        blessed = place.bless(item)
        if blessed:
            logger.debug(f"{location.display_name} blessed with {item.value}")
        return blessed

    def mark_scroll_read(self) -> None:
        """Record that the player has read the scroll."""
        if not self._state.has_read_scroll:
            logger.debug("Scroll read for the first time")
        self._state.has_read_scroll = True

    def mark_secret_found(self) -> None:
        """Record the victory ending."""
        self._state.has_found_secret = True

    def mark_banished(self) -> None:
        """Record the banishment ending."""
        self._state.has_been_banished = True
