"""Applying bookings to the inventory, random occupancy, reset, and per-floor stats."""

import random
from typing import List, Optional
from models.room import RoomStatus
from models.inventory import Inventory
from models.booking import BookingResult
from engine.inventory import build_inventory
from config.defaults import RANDOM_OCCUPANCY_PROBABILITY
from config.logging_config import get_logger

logger = get_logger(__name__)


def commit_booking(inventory: Inventory, result: BookingResult) -> Inventory:
    """Mark the booked rooms Selected. Failed results leave the inventory as is."""
    if not result.success:
        return inventory

    updated = inventory.with_statuses({r.number: RoomStatus.SELECTED for r in result.rooms})
    logger.info("Committed booking of rooms %s", result.room_numbers)
    return updated


def randomize_occupancy(
    inventory: Inventory,
    occupancy_probability: float = RANDOM_OCCUPANCY_PROBABILITY,
    rng: Optional[random.Random] = None,
) -> Inventory:
    """Overwrite every room with Occupied or Available, one draw per room.

    Any Selected room is cleared. Pass a seeded ``random.Random`` for
    reproducible layouts.
    """
    if not 0.0 <= occupancy_probability <= 1.0:
        raise ValueError(
            f"Occupancy probability must be between 0 and 1, got {occupancy_probability}"
        )
    rng = rng or random.Random()

    statuses = {
        room.number: RoomStatus.OCCUPIED if rng.random() < occupancy_probability
        else RoomStatus.AVAILABLE
        for room in inventory
    }
    updated = inventory.with_statuses(statuses)
    logger.info(
        "Randomized occupancy (p=%.2f): %d of %d rooms occupied",
        occupancy_probability,
        updated.count_by_status()[RoomStatus.OCCUPIED],
        len(updated),
    )
    return updated


def reset_all(inventory: Inventory) -> Inventory:
    """Rebuild the same hotel layout with every room Available."""
    logger.info("Reset all %d rooms to available", len(inventory))
    return build_inventory(inventory.rooms_per_floor)


def get_floor_occupancy(inventory: Inventory) -> List[dict]:
    """Compute status counts per floor, lowest floor first."""
    results = []
    for floor in inventory.floors:
        rooms = inventory.on_floor(floor)
        available = sum(1 for r in rooms if r.status is RoomStatus.AVAILABLE)
        occupied = sum(1 for r in rooms if r.status is RoomStatus.OCCUPIED)
        selected = sum(1 for r in rooms if r.status is RoomStatus.SELECTED)
        total = len(rooms)
        results.append({
            "floor": floor,
            "total_rooms": total,
            "available": available,
            "occupied": occupied,
            "selected": selected,
            "occupancy_pct": (occupied + selected) / total if total > 0 else 0,
        })
    return results
