"""Activity Log tab: audit trail and snapshot export."""

import streamlit as st
import pandas as pd

from data.session_store import get_audit_log, get_inventory
from data.snapshot import inventory_to_frame, snapshot_csv
from components.tables import render_status_table


def render(sidebar_state):
    """Render the Activity Log tab."""
    st.header("Activity Log")

    log = get_audit_log()
    if log:
        audit_df = pd.DataFrame([{
            "Timestamp": e.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            "Action": e.action,
            "Detail": e.detail,
            "Rooms": ", ".join(str(n) for n in e.room_numbers) or "-",
            "Available After": e.available_after,
        } for e in reversed(log)])
        st.dataframe(audit_df, use_container_width=True, hide_index=True)
    else:
        st.info("No activity yet.")

    st.divider()

    st.subheader("Current Snapshot")
    inventory = get_inventory()
    render_status_table(inventory_to_frame(inventory))
    st.download_button(
        "Download snapshot (CSV)",
        data=snapshot_csv(inventory),
        file_name="hotel_rooms.csv",
        mime="text/csv",
    )
