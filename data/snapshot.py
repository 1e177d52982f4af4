"""Inventory snapshot <-> pandas DataFrame conversion for display and export."""

import pandas as pd
from models.inventory import Inventory

SNAPSHOT_COLUMNS = ["Room Number", "Floor", "Position", "Status"]


def inventory_to_frame(inventory: Inventory) -> pd.DataFrame:
    """One row per room, in inventory order."""
    rows = [{
        "Room Number": r.number,
        "Floor": r.floor,
        "Position": r.position,
        "Status": r.status.label,
    } for r in inventory]
    return pd.DataFrame(rows, columns=SNAPSHOT_COLUMNS)


def layout_matrix(inventory: Inventory) -> pd.DataFrame:
    """Floors x positions grid of room numbers, top floor first.

    Positions a floor does not have (e.g. 8-10 on floor 10) are NaN.
    """
    df = inventory_to_frame(inventory)
    matrix = df.pivot(index="Floor", columns="Position", values="Room Number")
    return matrix.sort_index(ascending=False)


def snapshot_csv(inventory: Inventory) -> bytes:
    return inventory_to_frame(inventory).to_csv(index=False).encode("utf-8")
