"""Hotel topology: room numbering and fresh inventory construction."""

from typing import Optional, Sequence
from models.room import Room, RoomStatus
from models.inventory import Inventory
from config.defaults import FLOORS, ROOMS_PER_FLOOR, ROOM_NUMBER_FLOOR_MULTIPLIER


def room_number(floor: int, position: int) -> int:
    """Floors 1-9 give 101..910; floor 10 gives 1001..1007."""
    return floor * ROOM_NUMBER_FLOOR_MULTIPLIER + position


def build_inventory(rooms_per_floor: Optional[Sequence[int]] = None) -> Inventory:
    """Create a fresh inventory with every room Available.

    Without an explicit layout the configured hotel is built, and its floor
    count must agree with FLOORS.
    """
    if rooms_per_floor is None:
        if len(ROOMS_PER_FLOOR) != FLOORS:
            raise ValueError(
                f"Configured layout has {len(ROOMS_PER_FLOOR)} floors, expected {FLOORS}"
            )
        rooms_per_floor = ROOMS_PER_FLOOR
    layout = tuple(int(n) for n in rooms_per_floor)
    if not layout:
        raise ValueError("Hotel layout must have at least one floor.")
    if any(n < 1 or n >= ROOM_NUMBER_FLOOR_MULTIPLIER for n in layout):
        raise ValueError(
            f"Rooms per floor must be between 1 and {ROOM_NUMBER_FLOOR_MULTIPLIER - 1}: {list(layout)}"
        )

    rooms = []
    for floor, rooms_on_floor in enumerate(layout, start=1):
        for position in range(1, rooms_on_floor + 1):
            rooms.append(Room(
                number=room_number(floor, position),
                floor=floor,
                position=position,
                status=RoomStatus.AVAILABLE,
            ))
    return Inventory(rooms=tuple(rooms), rooms_per_floor=layout)
