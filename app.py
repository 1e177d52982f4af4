"""Hotel Room Reservation Planner: Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.logging_config import configure_logging
from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_booking,
    tab_hotel_layout,
    tab_activity_log,
)


def main():
    st.set_page_config(
        page_title="Hotel Room Reservations",
        page_icon="🏨",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    configure_logging()
    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3 = st.tabs([
        "🛎️ Booking",
        "🏨 Hotel Layout",
        "📜 Activity Log",
    ])

    with tab1:
        tab_booking.render(sidebar_state)
    with tab2:
        tab_hotel_layout.render(sidebar_state)
    with tab3:
        tab_activity_log.render(sidebar_state)


if __name__ == "__main__":
    main()
