"""Hotel Layout tab: room grid, per-floor occupancy, travel-time rules."""

import streamlit as st

from data.session_store import get_inventory, get_rule_config
from engine.occupancy import get_floor_occupancy
from components.charts import hotel_layout_grid, floor_occupancy_bar, occupancy_donut
from config.defaults import (
    MAX_ROOMS_PER_BOOKING, VERTICAL_TRAVEL_COST, HORIZONTAL_TRAVEL_COST,
)


def render(sidebar_state):
    """Render the Hotel Layout tab."""
    inventory = get_inventory()
    cfg = get_rule_config()

    st.header("Hotel Layout")
    st.caption(f"{len(inventory)} rooms across {len(inventory.floors)} floors. "
               "Stairs/lift on the left side.")

    st.plotly_chart(hotel_layout_grid(inventory), use_container_width=True)

    st.divider()

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(floor_occupancy_bar(get_floor_occupancy(inventory)), use_container_width=True)
    with col2:
        st.plotly_chart(occupancy_donut(inventory), use_container_width=True)

    st.divider()

    st.subheader("Travel Time Rules")
    horizontal = cfg.get("horizontal_cost", HORIZONTAL_TRAVEL_COST)
    vertical = cfg.get("vertical_cost", VERTICAL_TRAVEL_COST)
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)
    st.markdown(
        f"- **Horizontal travel:** {horizontal} minute per room (same floor)\n"
        f"- **Vertical travel:** {vertical} minutes per floor (stairs/lift)\n"
        f"- **Booking priority:** Same floor first, then minimize total travel time\n"
        f"- **Maximum booking:** {max_rooms} rooms per guest"
    )
