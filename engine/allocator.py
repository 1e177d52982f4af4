"""Room selection: same-floor search, exhaustive search, greedy fallback."""

from itertools import combinations
from typing import List, Optional, Sequence, Tuple
from models.room import Room
from models.inventory import Inventory
from models.booking import BookingFailure, BookingResult
from engine.travel_time import aggregate_travel_time, sort_rooms
from engine.explainer import (
    explain_booking, explain_failure, failure_message, success_message,
)
from config.defaults import (
    MAX_ROOMS_PER_BOOKING, EXHAUSTIVE_MAX_REQUEST, EXHAUSTIVE_MAX_AVAILABLE,
    VERTICAL_TRAVEL_COST, HORIZONTAL_TRAVEL_COST,
    STRATEGY_SAME_FLOOR, STRATEGY_EXHAUSTIVE, STRATEGY_GREEDY,
)
from config.logging_config import get_logger

logger = get_logger(__name__)


def _failed(
    failure: BookingFailure,
    requested_count: int,
    max_rooms: int,
    available_count: int,
) -> BookingResult:
    logger.info("Booking of %d room(s) failed: %s", requested_count, failure.value)
    return BookingResult(
        rooms=(),
        total_travel_time=0,
        success=False,
        message=failure_message(failure, requested_count, max_rooms, available_count),
        requested_count=requested_count,
        failure=failure,
        explanation_steps=tuple(
            explain_failure(failure, requested_count, max_rooms, available_count)
        ),
    )


def find_same_floor_rooms(
    inventory: Inventory,
    requested_count: int,
) -> Tuple[Optional[int], List[Room]]:
    """Lowest floor with enough free rooms, and the ones closest to the stairs.

    Floors are taken in ascending order; a higher floor is never preferred for
    a shorter walk.
    """
    for floor in inventory.floors:
        floor_rooms = inventory.available_on_floor(floor)
        if len(floor_rooms) >= requested_count:
            return floor, floor_rooms[:requested_count]
    return None, []


def find_best_combination(
    available: Sequence[Room],
    requested_count: int,
    vertical_cost: int = VERTICAL_TRAVEL_COST,
    horizontal_cost: int = HORIZONTAL_TRAVEL_COST,
) -> Tuple[List[Room], int]:
    """Brute-force the combination with the smallest aggregate travel time.

    Combinations are visited in lexicographic order of indices into
    ``available`` and the first minimum found is kept. Returns the rooms and
    the number of combinations checked.
    """
    best: List[Room] = []
    best_time = None
    checked = 0
    for combo in combinations(available, requested_count):
        checked += 1
        travel_time = aggregate_travel_time(combo, vertical_cost, horizontal_cost)
        if best_time is None or travel_time < best_time:
            best_time = travel_time
            best = list(combo)
    return best, checked


def find_greedy_rooms(available: Sequence[Room], requested_count: int) -> List[Room]:
    """Lowest floors first, then closest to the stairs. Not guaranteed optimal."""
    return sort_rooms(available)[:requested_count]


def allocate(
    inventory: Inventory,
    requested_count: int,
    rule_config: Optional[dict] = None,
) -> BookingResult:
    """Pick rooms for one guest. Failures are returned, never raised."""
    cfg = rule_config or {}
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)
    exhaustive_max_request = cfg.get("exhaustive_max_request", EXHAUSTIVE_MAX_REQUEST)
    exhaustive_max_available = cfg.get("exhaustive_max_available", EXHAUSTIVE_MAX_AVAILABLE)
    vertical_cost = cfg.get("vertical_cost", VERTICAL_TRAVEL_COST)
    horizontal_cost = cfg.get("horizontal_cost", HORIZONTAL_TRAVEL_COST)

    available = inventory.available_rooms()

    if requested_count < 1:
        return _failed(BookingFailure.INVALID_REQUEST, requested_count, max_rooms, len(available))
    if requested_count > max_rooms:
        return _failed(BookingFailure.EXCEEDS_MAX_ROOMS, requested_count, max_rooms, len(available))
    if len(available) < requested_count:
        return _failed(
            BookingFailure.INSUFFICIENT_AVAILABILITY, requested_count, max_rooms, len(available)
        )

    # Strategy 1: everything on one floor
    floor, selected = find_same_floor_rooms(inventory, requested_count)
    combinations_checked = 0
    if floor is not None:
        strategy = STRATEGY_SAME_FLOOR
    # Strategy 2: cheapest combination across floors, when small enough to enumerate
    elif requested_count <= exhaustive_max_request or len(available) <= exhaustive_max_available:
        strategy = STRATEGY_EXHAUSTIVE
        selected, combinations_checked = find_best_combination(
            available, requested_count, vertical_cost, horizontal_cost,
        )
    # Strategy 3: greedy fallback
    else:
        strategy = STRATEGY_GREEDY
        selected = find_greedy_rooms(available, requested_count)

    logger.debug(
        "Strategy %s picked %s (%d combinations checked)",
        strategy, [r.number for r in selected], combinations_checked,
    )

    if len(selected) != requested_count:
        return _failed(
            BookingFailure.NO_VIABLE_COMBINATION, requested_count, max_rooms, len(available)
        )

    total_time = aggregate_travel_time(selected, vertical_cost, horizontal_cost)
    explanation = explain_booking(
        requested_count=requested_count,
        max_rooms=max_rooms,
        available_count=len(available),
        strategy=strategy,
        rooms=selected,
        total_travel_time=total_time,
        combinations_checked=combinations_checked,
        floor=floor,
    )

    return BookingResult(
        rooms=tuple(selected),
        total_travel_time=total_time,
        success=True,
        message=success_message(requested_count, strategy, floor),
        requested_count=requested_count,
        strategy=strategy,
        explanation_steps=tuple(explanation),
    )
