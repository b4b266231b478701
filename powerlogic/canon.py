from __future__ import annotations
from typing import Final

# Vendor table names
NODES_TABLE: Final[str] = "PLAccountingOperator_EventNone_Nodes"
TIME_OFFSET_TABLE: Final[str] = "PLStorageOperator_EventForward_TimeOffset"
ENERGY_EVENTS_TABLE: Final[str] = (
    "PLAccountingOperator_EventInterval_EnergyEstimateEvents"
)
BATTERY_TABLE: Final[str] = "PLBatteryAgent_EventBackward_Battery"

# 0001-01-01 00:00:00 UTC expressed in seconds since the Unix epoch
DISTANT_PAST: Final[float] = -62135769600.0
DUMMY_TOLERANCE_S: Final[float] = 1.0

# Battery level the source writes when no reading was available
UNKNOWN_LEVEL: Final[float] = -1.0
