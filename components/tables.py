"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from config.defaults import STATUS_COLORS


def render_status_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render a room table with colour-coded statuses."""
    def color_status(val):
        color = STATUS_COLORS.get(str(val).lower())
        if color:
            return f"background-color: {color}; font-weight: bold"
        return ""

    if status_column in df.columns:
        styled = df.style.map(color_status, subset=[status_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
