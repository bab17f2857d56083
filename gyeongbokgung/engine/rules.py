"""
Movement and interaction rules for the palace.

The palace layout never changes, so the rules are plain lookup tables
keyed by (location, direction) or (location, item).

Layout:
                   [temple]
                      |
    [throne_hall] --- [garden]
          |
    [courtyard] --- [library]
          |
    [main_gate]
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from gyeongbokgung.models.world import Direction, Item, Location


class RouteRequirement(BaseModel):
    """What the player needs before a route opens"""
    model_config = ConfigDict(frozen=True)

    item: Item | None = None  # Must be carrying this item
    blessed: Location | None = None  # This sacred place must be blessed


class Route(BaseModel):
    """A one-way connection from one location to another"""
    model_config = ConfigDict(frozen=True)

    destination: Location
    requires: RouteRequirement | None = None


ROUTES: dict[tuple[Location, Direction], Route] = {
    (Location.MAIN_GATE, Direction.NORTH): Route(destination=Location.COURTYARD),
    (Location.COURTYARD, Direction.NORTH): Route(
        destination=Location.THRONE_HALL,
        requires=RouteRequirement(item=Item.BINYEO, blessed=Location.THRONE_HALL),
    ),
    (Location.COURTYARD, Direction.EAST): Route(destination=Location.LIBRARY),
    (Location.COURTYARD, Direction.SOUTH): Route(destination=Location.MAIN_GATE),
    (Location.THRONE_HALL, Direction.EAST): Route(destination=Location.GARDEN),
    (Location.THRONE_HALL, Direction.SOUTH): Route(destination=Location.COURTYARD),
    (Location.LIBRARY, Direction.WEST): Route(destination=Location.COURTYARD),
    (Location.GARDEN, Direction.NORTH): Route(destination=Location.TEMPLE),
    (Location.GARDEN, Direction.WEST): Route(destination=Location.THRONE_HALL),
    (Location.TEMPLE, Direction.SOUTH): Route(destination=Location.GARDEN),
}

# Where each item can be picked up, with the flavor text for taking it
PICKUPS: dict[tuple[Location, Item], str] = {
    (Location.COURTYARD, Item.BINYEO): "You carefully take the royal binyeo, admiring its jade ornaments. 💎",
    (Location.LIBRARY, Item.SCROLL): "You reverently take the ancient scroll. 📜",
    (Location.GARDEN, Item.INCENSE): "You collect the sacred incense. 🕯️",
}

# Offering an item at a location blesses the mapped sacred place
OFFERINGS: dict[tuple[Location, Item], Location] = {
    (Location.COURTYARD, Item.BINYEO): Location.THRONE_HALL,
    (Location.TEMPLE, Item.INCENSE): Location.TEMPLE,
}

# Items that are read rather than offered; usable anywhere
READABLE_ITEMS: frozenset[Item] = frozenset({Item.SCROLL})


def find_route(location: Location, direction: Direction) -> Route | None:
    """Look up the route leaving `location` in `direction`, if any."""
    return ROUTES.get((location, direction))


def exits_from(location: Location) -> dict[Direction, Location]:
    """All directions out of a location and where they lead."""
    return {
        direction: route.destination
        for (origin, direction), route in ROUTES.items()
        if origin == location
    }
