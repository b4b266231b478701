from __future__ import annotations
from typing import Sequence

from . import exceptions
from .types import BatteryStatus, Bounds, Event


def compute_bounds(events: Sequence[Event], battery: Sequence[BatteryStatus]) -> Bounds:
    """
    Inclusive time range covering every event and battery sample.

    ``battery`` must already be sorted by timestamp.
    """
    exceptions.require(
        len(battery) > 0,
        "No battery samples; cannot determine dataset bounds.",
        exceptions.EmptyDatasetError,
    )
    exceptions.require(
        len(events) > 0,
        "No energy events; cannot determine dataset bounds.",
        exceptions.EmptyDatasetError,
    )
    lower = min(battery[0].timestamp, min(ev.start for ev in events))
    upper = max(battery[-1].timestamp, max(ev.end for ev in events))
    return Bounds(lower, upper)
