"""Typed wrapper around st.session_state for application data."""

import random
import streamlit as st
from typing import List, Optional
from datetime import datetime
from models.room import RoomStatus
from models.inventory import Inventory
from models.booking import BookingResult
from models.audit import AuditEntry
from engine.inventory import build_inventory
from engine.allocator import allocate
from engine.occupancy import commit_booking, randomize_occupancy, reset_all
from config.defaults import (
    MAX_ROOMS_PER_BOOKING, EXHAUSTIVE_MAX_REQUEST, EXHAUSTIVE_MAX_AVAILABLE,
    VERTICAL_TRAVEL_COST, HORIZONTAL_TRAVEL_COST, RANDOM_OCCUPANCY_PROBABILITY,
)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "inventory": build_inventory(),
        "last_booking": None,
        "audit_log": [],
        "rule_config": {
            "max_rooms_per_booking": MAX_ROOMS_PER_BOOKING,
            "exhaustive_max_request": EXHAUSTIVE_MAX_REQUEST,
            "exhaustive_max_available": EXHAUSTIVE_MAX_AVAILABLE,
            "vertical_cost": VERTICAL_TRAVEL_COST,
            "horizontal_cost": HORIZONTAL_TRAVEL_COST,
            "occupancy_probability": RANDOM_OCCUPANCY_PROBABILITY,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_inventory() -> Inventory:
    return st.session_state["inventory"]


def get_last_booking() -> Optional[BookingResult]:
    return st.session_state.get("last_booking")


def get_audit_log() -> List[AuditEntry]:
    return st.session_state.get("audit_log", [])


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


# --- Setters ---

def set_inventory(inventory: Inventory):
    st.session_state["inventory"] = inventory


def set_last_booking(result: Optional[BookingResult]):
    st.session_state["last_booking"] = result


# --- Actions ---

def book_rooms(requested_count: int) -> BookingResult:
    """Allocate against the current snapshot and commit it in the same run."""
    inventory = get_inventory()
    result = allocate(inventory, requested_count, get_rule_config())
    inventory = commit_booking(inventory, result)
    set_inventory(inventory)
    set_last_booking(result)
    add_audit_entry(
        action="book" if result.success else "book_failed",
        detail=result.message,
        room_numbers=tuple(result.room_numbers),
    )
    return result


def generate_random_occupancy(seed: Optional[int] = None):
    probability = get_rule_config().get("occupancy_probability", RANDOM_OCCUPANCY_PROBABILITY)
    rng = random.Random(seed)
    set_inventory(randomize_occupancy(get_inventory(), probability, rng))
    set_last_booking(None)
    detail = f"Random occupancy at {probability:.0%}"
    if seed is not None:
        detail += f" (seed {seed})"
    add_audit_entry(action="randomize", detail=detail)


def reset_bookings():
    set_inventory(reset_all(get_inventory()))
    set_last_booking(None)
    add_audit_entry(action="reset", detail="All rooms reset to available")


# --- Audit ---

def add_audit_entry(action: str, detail: str, room_numbers: tuple = ()):
    entry = AuditEntry(
        timestamp=datetime.now(),
        action=action,
        detail=detail,
        room_numbers=room_numbers,
        available_after=get_inventory().count_by_status()[RoomStatus.AVAILABLE],
    )
    st.session_state["audit_log"].append(entry)
