"""Reusable KPI metric card widgets."""

import streamlit as st
from models.booking import BookingResult


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_booking_alert(result: BookingResult):
    """Outcome banner; travel time is only shown for multi-room successes."""
    text = result.message
    if result.shows_travel_time:
        text += f"  \nTotal travel time: {result.total_travel_time} minutes"
    if result.success:
        st.success(text, icon="🟢")
    else:
        st.error(text, icon="🔴")
