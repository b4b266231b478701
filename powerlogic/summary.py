from __future__ import annotations
import pandas as pd
from typing import Literal, List, Optional

from .types import Event, PowerDocument

EVENT_COLS = ["entry_id", "parent_id", "node", "root_node", "start", "end", "energy", "cumulative_energy"]
BATTERY_COLS = ["timestamp", "level", "charging"]


def _to_utc(s: pd.Series) -> pd.Series:
    return pd.to_datetime(s, unit="s", utc=True)


def events_frame(doc: PowerDocument) -> pd.DataFrame:
    """
    Flat table of all events.

    Columns: entry_id, parent_id, node, root_node, start, end (tz-aware UTC),
    energy (exclusive), cumulative_energy.
    """
    df = pd.DataFrame(
        [
            {
                "entry_id": ev.entry_id,
                "parent_id": ev.parent_id,
                "node": ev.node.name if ev.node else None,
                "root_node": ev.root_node.name if ev.root_node else None,
                "start": ev.start,
                "end": ev.end,
                "energy": ev.energy,
                "cumulative_energy": ev.cumulative_energy,
            }
            for ev in doc.events
        ],
        columns=EVENT_COLS,
    )
    df["start"] = _to_utc(df["start"])
    df["end"] = _to_utc(df["end"])
    return df


def battery_frame(doc: PowerDocument) -> pd.DataFrame:
    """Battery timeline indexed by tz-aware UTC timestamp."""
    df = pd.DataFrame(
        [
            {"timestamp": s.timestamp, "level": s.level, "charging": s.charging}
            for s in doc.battery
        ],
        columns=BATTERY_COLS,
    )
    df["timestamp"] = _to_utc(df["timestamp"])
    return df.set_index("timestamp")


def energy_by(
    doc: PowerDocument, by: Literal["node", "root_node"] = "node"
) -> pd.Series:
    """Total exclusive energy per node (or root node) name, largest first."""
    if by not in ("node", "root_node"):
        raise ValueError("by must be one of: node, root_node")
    df = events_frame(doc)
    if df.empty:
        return pd.Series(dtype="int64", name="energy")
    # unattributed events are grouped under None -> dropped by groupby
    return df.groupby(by)["energy"].sum().sort_values(ascending=False)


def filter_events(
    doc: PowerDocument,
    *,
    node: Optional[str] = None,
    root_node: Optional[str] = None,
) -> List[Event]:
    """Events attributed to the given node and/or root-node name."""
    out = []
    for ev in doc.events:
        if node is not None and (ev.node is None or ev.node.name != node):
            continue
        if root_node is not None and (
            ev.root_node is None or ev.root_node.name != root_node
        ):
            continue
        out.append(ev)
    return out
