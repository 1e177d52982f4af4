"""Validation of booking requests and inventory snapshots."""

from dataclasses import dataclass, field
from typing import List, Optional
from models.inventory import Inventory
from data.snapshot import inventory_to_frame
from engine.inventory import room_number
from config.defaults import MAX_ROOMS_PER_BOOKING


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate_booking_request(requested_count, rule_config: Optional[dict] = None) -> ValidationResult:
    """Check the number typed into the booking form before allocating."""
    cfg = rule_config or {}
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)
    result = ValidationResult()

    if isinstance(requested_count, bool) or not isinstance(requested_count, int):
        result.is_valid = False
        result.errors.append(f"Number of rooms must be a whole number, got {requested_count!r}.")
        return result

    if requested_count < 1:
        result.is_valid = False
        result.errors.append("Number of rooms must be at least 1.")
    elif requested_count > max_rooms:
        result.is_valid = False
        result.errors.append(f"Maximum {max_rooms} rooms per booking allowed.")
    elif requested_count > 3:
        result.warnings.append(
            "Large requests may be spread over several floors if no single floor has room."
        )
    return result


def validate_inventory(inventory: Inventory) -> ValidationResult:
    """Check the topology: room count, unique numbers, numbering rule, contiguous positions."""
    result = ValidationResult()
    df = inventory_to_frame(inventory)

    expected_total = sum(inventory.rooms_per_floor)
    if len(df) != expected_total:
        result.is_valid = False
        result.errors.append(f"Inventory: expected {expected_total} rooms, found {len(df)}.")

    dupes = df.duplicated(subset=["Room Number"], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(
            f"Inventory: duplicate room numbers: {sorted(df[dupes]['Room Number'].unique().tolist())}"
        )

    mismatched = [
        int(row["Room Number"]) for _, row in df.iterrows()
        if row["Room Number"] != room_number(row["Floor"], row["Position"])
    ]
    if mismatched:
        result.is_valid = False
        result.errors.append(f"Inventory: room numbers do not match floor/position: {mismatched}")

    for floor, rooms_on_floor in enumerate(inventory.rooms_per_floor, start=1):
        positions = sorted(df.loc[df["Floor"] == floor, "Position"].tolist())
        if positions != list(range(1, rooms_on_floor + 1)):
            result.is_valid = False
            result.errors.append(
                f"Inventory: floor {floor} should have positions 1-{rooms_on_floor}, found {positions}."
            )

    if result.is_valid and df.empty:
        result.warnings.append("Inventory: hotel has no rooms.")
    return result


def validate_before_booking(
    inventory: Inventory,
    requested_count,
    rule_config: Optional[dict] = None,
) -> ValidationResult:
    """Request and inventory checks the booking form runs before allocating."""
    result = ValidationResult()
    for check in (validate_booking_request(requested_count, rule_config), validate_inventory(inventory)):
        result.is_valid = result.is_valid and check.is_valid
        result.errors.extend(check.errors)
        result.warnings.extend(check.warnings)
    return result
