"""Travel-time metrics between rooms."""

from typing import Iterable, List
from models.room import Room
from config.defaults import VERTICAL_TRAVEL_COST, HORIZONTAL_TRAVEL_COST


def sort_rooms(rooms: Iterable[Room]) -> List[Room]:
    """Order rooms by floor, then by distance from the stairs."""
    return sorted(rooms, key=lambda r: (r.floor, r.position))


def pairwise_travel_time(
    a: Room,
    b: Room,
    vertical_cost: int = VERTICAL_TRAVEL_COST,
    horizontal_cost: int = HORIZONTAL_TRAVEL_COST,
) -> int:
    """Minutes to walk from one room to another.

    Changing floors goes through the stairs/lift, so horizontal distance only
    counts when both rooms are on the same floor.
    """
    vertical = abs(a.floor - b.floor) * vertical_cost
    horizontal = abs(a.position - b.position) * horizontal_cost if a.floor == b.floor else 0
    return vertical + horizontal


def aggregate_travel_time(
    rooms: Iterable[Room],
    vertical_cost: int = VERTICAL_TRAVEL_COST,
    horizontal_cost: int = HORIZONTAL_TRAVEL_COST,
) -> int:
    """Length of the path visiting the rooms in (floor, position) order."""
    ordered = sort_rooms(rooms)
    if len(ordered) <= 1:
        return 0
    return sum(
        pairwise_travel_time(ordered[i], ordered[i + 1], vertical_cost, horizontal_cost)
        for i in range(len(ordered) - 1)
    )
