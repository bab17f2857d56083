"""
Game state models - Pydantic model for the play session snapshot
"""

from typing import Literal

from pydantic import BaseModel, Field

from gyeongbokgung.models.sacred import SacredPlace
from gyeongbokgung.models.world import Item, Location


def default_sacred_places() -> dict[Location, SacredPlace]:
    """The two sacred places every session starts with."""
    return {
        Location.TEMPLE: SacredPlace(required_item=Item.INCENSE),
        Location.THRONE_HALL: SacredPlace(required_item=Item.BINYEO),
    }


class GameState(BaseModel):
    """Current game session state"""
    current_location: Location = Location.MAIN_GATE
    inventory: list[Item] = Field(default_factory=list)  # Pickup order, no duplicates
    sacred_places: dict[Location, SacredPlace] = Field(default_factory=default_sacred_places)

    # Ending markers - set once, never reset
    has_read_scroll: bool = False
    has_found_secret: bool = False
    has_been_banished: bool = False

    @property
    def status(self) -> Literal["playing", "won", "lost"]:
        """Session status derived from the ending flags"""
        if self.has_found_secret:
            return "won"
        if self.has_been_banished:
            return "lost"
        return "playing"

    def is_blessed(self, location: Location) -> bool:
        """Whether the location is a sacred place that has been blessed"""
        place = self.sacred_places.get(location)
        return place is not None and place.is_blessed
