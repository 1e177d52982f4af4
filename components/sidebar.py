"""Global sidebar: booking controls, administrative actions, status legend."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional
from models.room import RoomStatus
from data.session_store import (
    get_inventory, get_rule_config, book_rooms, generate_random_occupancy, reset_bookings,
)
from data.validator import validate_before_booking
from config.defaults import MAX_ROOMS_PER_BOOKING


@dataclass
class SidebarState:
    requested_rooms: int
    seed: Optional[int]


def render_sidebar() -> SidebarState:
    """Render the booking controls and return current state."""
    cfg = get_rule_config()
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    with st.sidebar:
        st.title("Hotel Reservations")
        st.divider()

        requested = st.number_input(
            "Number of Rooms",
            min_value=1,
            value=1,
            step=1,
            help=f"At most {max_rooms} rooms per booking",
            key="sidebar_requested_rooms",
        )
        requested = int(requested)

        if st.button("Book Rooms", type="primary", use_container_width=True):
            check = validate_before_booking(get_inventory(), requested, cfg)
            for e in check.errors:
                st.error(e)
            if check.is_valid:
                book_rooms(requested)

        st.divider()

        use_seed = st.checkbox("Reproducible occupancy", key="sidebar_use_seed")
        seed = None
        if use_seed:
            seed = int(st.number_input("Seed", min_value=0, value=42, step=1, key="sidebar_seed"))

        if st.button("Generate Random Occupancy", use_container_width=True):
            generate_random_occupancy(seed)
        if st.button("Reset All Bookings", use_container_width=True):
            reset_bookings()

        st.divider()

        counts = get_inventory().count_by_status()
        for status in RoomStatus:
            st.caption(f"{status.label}: {counts[status]}")

    return SidebarState(requested_rooms=requested, seed=seed)
