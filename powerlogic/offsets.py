from __future__ import annotations
from typing import Iterable, Tuple

import numpy as np

from . import exceptions
from .rows import Row


class TimeOffsetIndex:
    """
    Piecewise-constant clock correction keyed by recorded timestamp.

    ``offset_for(t)`` returns the offset of the latest breakpoint strictly
    before ``t``. Anything at or before the first breakpoint gets the first
    offset.
    """

    def __init__(self, pairs: Iterable[Tuple[float, float]]):
        arr = np.asarray(list(pairs), dtype=float).reshape(-1, 2)
        order = np.argsort(arr[:, 0], kind="stable")
        self.timestamps = arr[order, 0]
        self.offsets = arr[order, 1]

    @classmethod
    def from_rows(cls, rows: Iterable[Row]) -> TimeOffsetIndex:
        return cls((float(r["timestamp"]), float(r["system"])) for r in rows)

    def __len__(self) -> int:
        return len(self.timestamps)

    def offset_for(self, timestamp: float) -> float:
        exceptions.require(
            len(self.timestamps) > 0,
            "Time offset table is empty; no clock correction available.",
            exceptions.EmptyDatasetError,
        )
        # first index with ts >= timestamp, minus one -> last ts < timestamp
        pos = int(np.searchsorted(self.timestamps, timestamp, side="left")) - 1
        return float(self.offsets[max(pos, 0)])
