from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Tuple

from models.room import Room, RoomStatus


@dataclass(frozen=True)
class Inventory:
    """Point-in-time snapshot of every room and its status.

    Rooms are kept in construction order (floor ascending, then position
    ascending). Snapshots are never mutated; mutators return a new Inventory.
    """
    rooms: Tuple[Room, ...]
    rooms_per_floor: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self.rooms)

    @property
    def floors(self) -> List[int]:
        return list(range(1, len(self.rooms_per_floor) + 1))

    def get(self, number: int) -> Room:
        for room in self.rooms:
            if room.number == number:
                return room
        raise KeyError(f"Unknown room number: {number}")

    def on_floor(self, floor: int) -> List[Room]:
        return sorted((r for r in self.rooms if r.floor == floor), key=lambda r: r.position)

    def available_rooms(self) -> List[Room]:
        """Available rooms in inventory order."""
        return [r for r in self.rooms if r.is_available]

    def available_on_floor(self, floor: int) -> List[Room]:
        return [r for r in self.on_floor(floor) if r.is_available]

    def count_by_status(self) -> Dict[RoomStatus, int]:
        counts = Counter(r.status for r in self.rooms)
        return {status: counts.get(status, 0) for status in RoomStatus}

    def with_statuses(self, statuses: Mapping[int, RoomStatus]) -> "Inventory":
        """Return a copy with the given room numbers moved to new statuses."""
        rooms = tuple(
            r.with_status(statuses[r.number]) if r.number in statuses else r
            for r in self.rooms
        )
        return Inventory(rooms=rooms, rooms_per_floor=self.rooms_per_floor)
