"""
World models - the closed sets of directions, locations and items
"""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Compass directions the player can move in"""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class Location(str, Enum):
    """Palace locations.

    The comments give the real palace building each location stands for.
    """

    MAIN_GATE = "main_gate"  # Gwanghwamun, the starting location
    COURTYARD = "courtyard"  # Geunjeongmun, central hub
    THRONE_HALL = "throne_hall"  # Geunjeongjeon, requires the blessed binyeo
    LIBRARY = "library"  # Gyujanggak, holds the scroll
    GARDEN = "garden"  # Hyangwonjeong, holds the incense
    TEMPLE = "temple"  # Jagyeongjeon, where the game ends

    @property
    def display_name(self) -> str:
        """Readable name, e.g. 'throne hall'."""
        return self.value.replace("_", " ")


class Item(str, Enum):
    """Items the player can pick up.

    The value doubles as the display name and the name typed in commands.
    """

    BINYEO = "binyeo"
    SCROLL = "scroll"
    INCENSE = "incense"

    @classmethod
    def parse(cls, name: str) -> Item | None:
        """Resolve a typed item name.

        Args:
            name: Item name as typed, already lowercased by the parser

        Returns:
            The matching Item, or None if the name is not an item
        """
        try:
            return cls(name)
        except ValueError:
            return None
