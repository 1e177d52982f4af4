"""Booking tab: outcome of the last request and how the rooms were chosen."""

import streamlit as st
import pandas as pd

from data.session_store import get_inventory, get_last_booking
from components.metrics_cards import render_metric_row, render_booking_alert
from components.tables import render_status_table
from models.room import RoomStatus
from config.defaults import STRATEGY_LABELS


def render(sidebar_state):
    """Render the Booking tab."""
    st.header("Booking")

    counts = get_inventory().count_by_status()
    render_metric_row([
        {"label": status.label, "value": counts[status]} for status in RoomStatus
    ])

    st.divider()

    result = get_last_booking()
    if result is None:
        st.info(f"Choose a number of rooms in the sidebar and press **Book Rooms** "
                f"(currently {sidebar_state.requested_rooms}).")
        return

    render_booking_alert(result)

    if result.strategy:
        st.caption(f"Strategy: {STRATEGY_LABELS[result.strategy]}")

    with st.expander("How these rooms were chosen", expanded=not result.success):
        for step in result.explanation_steps:
            st.markdown(f"- {step}")

    if result.rooms:
        st.subheader("Booked Rooms")
        df = pd.DataFrame([{
            "Room Number": r.number,
            "Floor": r.floor,
            "Position": r.position,
            "Status": RoomStatus.SELECTED.label,
        } for r in result.rooms])
        render_status_table(df)
