from dataclasses import dataclass, replace
from enum import Enum


class RoomStatus(Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    SELECTED = "selected"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Room:
    number: int
    floor: int
    position: int        # 1-based, 1 = closest to stairs/lift
    status: RoomStatus = RoomStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.status is RoomStatus.AVAILABLE

    def with_status(self, status: RoomStatus) -> "Room":
        return replace(self, status=status)
