from __future__ import annotations
from typing import Iterable, List

from .offsets import TimeOffsetIndex
from .rows import Row
from .types import BatteryStatus


def build_timeline(rows: Iterable[Row], offsets: TimeOffsetIndex) -> List[BatteryStatus]:
    """Clock-correct every battery sample and sort by corrected time (stable)."""
    samples = []
    for row in rows:
        timestamp = float(row["timestamp"])
        samples.append(
            BatteryStatus(
                timestamp=timestamp + offsets.offset_for(timestamp),
                level=float(row["Level"]),
                charging=int(row["ExternalConnected"]) != 0,
            )
        )
    return sorted(samples, key=lambda s: s.timestamp)
