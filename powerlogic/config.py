from __future__ import annotations

from dataclasses import dataclass

from . import canon


@dataclass
class IngestConfig:
    # Source tables
    nodes_table: str = canon.NODES_TABLE
    time_offset_table: str = canon.TIME_OFFSET_TABLE
    energy_events_table: str = canon.ENERGY_EVENTS_TABLE
    battery_table: str = canon.BATTERY_TABLE

    # Dummy-event detection: placeholder rows are stamped with the distant past
    distant_past: float = canon.DISTANT_PAST
    dummy_tolerance_s: float = canon.DUMMY_TOLERANCE_S


def default_config() -> IngestConfig:
    return IngestConfig()
