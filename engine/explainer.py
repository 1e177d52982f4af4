"""Generates human-readable messages and explanations for booking results."""

from typing import List, Optional, Sequence
from models.room import Room
from models.booking import BookingFailure
from config.defaults import (
    STRATEGY_SAME_FLOOR, STRATEGY_EXHAUSTIVE, STRATEGY_GREEDY, STRATEGY_LABELS,
)


def failure_message(
    failure: BookingFailure,
    requested_count: int,
    max_rooms: int,
    available_count: int,
) -> str:
    """Message shown to the guest when a booking cannot be made."""
    if failure is BookingFailure.INVALID_REQUEST:
        return f"Please request at least 1 room (got {requested_count})"
    if failure is BookingFailure.EXCEEDS_MAX_ROOMS:
        return f"Maximum {max_rooms} rooms per booking allowed"
    if failure is BookingFailure.INSUFFICIENT_AVAILABILITY:
        noun = "room" if available_count == 1 else "rooms"
        return f"Only {available_count} {noun} available"
    return "Unable to find optimal room combination"


def success_message(requested_count: int, strategy: str, floor: Optional[int] = None) -> str:
    noun = "room" if requested_count == 1 else "rooms"
    if strategy == STRATEGY_SAME_FLOOR:
        return f"Booked {requested_count} {noun} on Floor {floor}"
    return f"Booked {requested_count} {noun} across multiple floors"


def explain_failure(
    failure: BookingFailure,
    requested_count: int,
    max_rooms: int,
    available_count: int,
) -> List[str]:
    steps = [f"Step 1 - Request: {requested_count} room(s), cap is {max_rooms} per booking"]
    if failure is BookingFailure.INVALID_REQUEST:
        steps.append("Step 2 - Rejected: a booking needs at least one room")
    elif failure is BookingFailure.EXCEEDS_MAX_ROOMS:
        steps.append(f"Step 2 - Rejected: {requested_count} exceeds the cap of {max_rooms}")
    elif failure is BookingFailure.INSUFFICIENT_AVAILABILITY:
        steps.append(
            f"Step 2 - Availability: {available_count} room(s) free, "
            f"{requested_count} requested => rejected"
        )
    else:
        steps.append(f"Step 2 - Availability: {available_count} room(s) free")
        steps.append("Step 3 - No strategy produced a complete set of rooms")
    return steps


def explain_booking(
    requested_count: int,
    max_rooms: int,
    available_count: int,
    strategy: str,
    rooms: Sequence[Room],
    total_travel_time: int,
    combinations_checked: int = 0,
    floor: Optional[int] = None,
) -> List[str]:
    """Produce step-by-step explanation for a successful booking."""
    steps = [
        f"Step 1 - Request: {requested_count} room(s), cap is {max_rooms} per booking",
        f"Step 2 - Availability: {available_count} room(s) free",
    ]

    if strategy == STRATEGY_SAME_FLOOR:
        steps.append(
            f"Step 3 - {STRATEGY_LABELS[strategy]}: Floor {floor} is the lowest floor "
            f"with {requested_count} free room(s); taking those closest to the stairs"
        )
    elif strategy == STRATEGY_EXHAUSTIVE:
        steps.append(
            f"Step 3 - {STRATEGY_LABELS[strategy]}: no single floor has {requested_count} "
            f"free rooms; compared {combinations_checked:,} combinations"
        )
    elif strategy == STRATEGY_GREEDY:
        steps.append(
            f"Step 3 - {STRATEGY_LABELS[strategy]}: too many combinations to compare; "
            f"taking the lowest floors and positions (not guaranteed optimal)"
        )

    numbers = ", ".join(str(r.number) for r in rooms)
    steps.append(f"Step 4 - Selected rooms: {numbers}")
    steps.append(f"Step 5 - Total travel time: {total_travel_time} minute(s)")
    return steps
