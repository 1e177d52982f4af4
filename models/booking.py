from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from models.room import Room


class BookingFailure(Enum):
    INVALID_REQUEST = "invalid_request"                      # fewer than one room asked for
    EXCEEDS_MAX_ROOMS = "exceeds_max_rooms"
    INSUFFICIENT_AVAILABILITY = "insufficient_availability"
    NO_VIABLE_COMBINATION = "no_viable_combination"


@dataclass(frozen=True)
class BookingResult:
    rooms: Tuple[Room, ...]
    total_travel_time: int     # minutes; 0 for single-room or failed bookings
    success: bool
    message: str
    requested_count: int = 0
    failure: Optional[BookingFailure] = None
    strategy: Optional[str] = None   # "same_floor", "exhaustive", "greedy"
    explanation_steps: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def room_numbers(self) -> List[int]:
        return [r.number for r in self.rooms]

    @property
    def shows_travel_time(self) -> bool:
        return self.success and self.total_travel_time > 0
