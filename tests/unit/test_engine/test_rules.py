"""Unit tests for the rule tables."""

from gyeongbokgung.engine.rules import (
    OFFERINGS,
    PICKUPS,
    ROUTES,
    exits_from,
    find_route,
)
from gyeongbokgung.models.world import Direction, Item, Location


class TestRoutes:
    """Tests for the route table."""

    def test_ten_routes(self) -> None:
        assert len(ROUTES) == 10

    def test_only_throne_hall_route_is_guarded(self) -> None:
        guarded = [key for key, route in ROUTES.items() if route.requires]

        assert guarded == [(Location.COURTYARD, Direction.NORTH)]
        requires = ROUTES[(Location.COURTYARD, Direction.NORTH)].requires
        assert requires.item == Item.BINYEO
        assert requires.blessed == Location.THRONE_HALL

    def test_find_route(self) -> None:
        assert find_route(Location.GARDEN, Direction.NORTH).destination == Location.TEMPLE

    def test_find_route_missing(self) -> None:
        assert find_route(Location.MAIN_GATE, Direction.SOUTH) is None

    def test_exits_from_courtyard(self) -> None:
        assert exits_from(Location.COURTYARD) == {
            Direction.NORTH: Location.THRONE_HALL,
            Direction.EAST: Location.LIBRARY,
            Direction.SOUTH: Location.MAIN_GATE,
        }

    def test_every_location_reachable_and_leavable(self) -> None:
        destinations = {route.destination for route in ROUTES.values()}
        origins = {origin for origin, _ in ROUTES}

        assert destinations == set(Location)
        assert origins == set(Location)


class TestInteractionTables:
    """Tests for pickups and offerings."""

    def test_each_item_has_one_pickup(self) -> None:
        assert sorted(item.value for _, item in PICKUPS) == ["binyeo", "incense", "scroll"]

    def test_offerings(self) -> None:
        assert OFFERINGS == {
            (Location.COURTYARD, Item.BINYEO): Location.THRONE_HALL,
            (Location.TEMPLE, Item.INCENSE): Location.TEMPLE,
        }
