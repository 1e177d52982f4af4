"""Plotly chart builders for the Hotel Room Reservation Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List
from models.room import RoomStatus
from models.inventory import Inventory
from data.snapshot import inventory_to_frame, layout_matrix
from config.defaults import STATUS_COLORS

_STATUS_CODES = {status: i for i, status in enumerate(RoomStatus)}


def hotel_layout_grid(inventory: Inventory) -> go.Figure:
    """Floors x positions grid, top floor first, stairs/lift on the left."""
    df = inventory_to_frame(inventory)
    df["Code"] = [_STATUS_CODES[r.status] for r in inventory]

    codes = df.pivot(index="Floor", columns="Position", values="Code").sort_index(ascending=False)
    numbers = layout_matrix(inventory)
    text = numbers.apply(lambda col: col.map(lambda v: "" if pd.isna(v) else str(int(v))))

    # Discrete colour bands, one per status
    n = len(_STATUS_CODES)
    colorscale = []
    for status, code in _STATUS_CODES.items():
        color = STATUS_COLORS[status.value]
        colorscale.append([code / n, color])
        colorscale.append([(code + 1) / n, color])

    fig = go.Figure(data=go.Heatmap(
        z=codes.values,
        x=[f"Pos {p}" for p in codes.columns],
        y=[f"F{f}" for f in codes.index],
        text=text.values,
        texttemplate="%{text}",
        colorscale=colorscale,
        zmin=-0.5,
        zmax=n - 0.5,
        showscale=False,
        xgap=4,
        ygap=4,
        hovertemplate="Room %{text}<extra></extra>",
    ))
    fig.update_layout(
        title="Hotel Layout",
        xaxis_title="Distance from stairs/lift",
        yaxis_title="Floor",
        yaxis_type="category",
        height=max(400, len(codes) * 45),
    )
    return fig


def floor_occupancy_bar(occupancy_data: List[dict]) -> go.Figure:
    """Stacked bar of room statuses per floor."""
    df = pd.DataFrame(occupancy_data)
    df["floor_label"] = df["floor"].map(lambda f: f"F{f}")
    fig = px.bar(
        df, x="floor_label", y=[s.value for s in RoomStatus],
        labels={"value": "Rooms", "floor_label": "Floor", "variable": ""},
        title="Rooms by Status per Floor",
        color_discrete_map=STATUS_COLORS,
    )
    fig.update_layout(legend_title_text="", height=400, barmode="stack")
    return fig


def occupancy_donut(inventory: Inventory, title: str = "Overall Occupancy") -> go.Figure:
    """Donut chart of room statuses across the hotel."""
    counts = inventory.count_by_status()
    available = counts[RoomStatus.AVAILABLE]
    fig = go.Figure(data=[go.Pie(
        labels=[s.label for s in RoomStatus],
        values=[counts[s] for s in RoomStatus],
        hole=0.6,
        marker_colors=[STATUS_COLORS[s.value] for s in RoomStatus],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{available}/{len(inventory)} free", x=0.5, y=0.5,
                          font_size=16, showarrow=False)],
    )
    return fig
