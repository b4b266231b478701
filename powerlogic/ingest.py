from __future__ import annotations
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

import pandas as pd

from . import battery, bounds, events, nodes
from .config import IngestConfig, default_config
from .offsets import TimeOffsetIndex
from .rows import FrameRowSource, RowSource, SQLiteRowSource
from .types import DeviceInfo, PowerDocument

logger = logging.getLogger(__name__)


def from_source(
    source: RowSource,
    *,
    config: Optional[IngestConfig] = None,
    device: Optional[DeviceInfo] = None,
) -> PowerDocument:
    """
    Reconstruct a PowerDocument from any row source.

    Steps:
      - node catalog and time-offset index
      - event forest, then cumulative -> exclusive energy rollup
      - battery timeline
      - overall bounds
    Any failure aborts the whole ingestion; no partial document is returned.
    """
    cfg = config or default_config()

    catalog = nodes.build_catalog(source.rows(cfg.nodes_table))
    offsets = TimeOffsetIndex.from_rows(source.rows(cfg.time_offset_table))

    forest = events.build_forest(
        source.rows(cfg.energy_events_table), catalog, offsets, config=cfg
    )
    events.rollup(forest.roots)

    timeline = battery.build_timeline(source.rows(cfg.battery_table), offsets)
    span = bounds.compute_bounds(forest.events, timeline)

    logger.info(
        "Ingested %d nodes, %d events (%d roots), %d battery samples",
        len(catalog),
        len(forest.events),
        len(forest.roots),
        len(timeline),
    )
    return PowerDocument(
        nodes=MappingProxyType(catalog),
        events=tuple(forest.events),
        roots=tuple(forest.roots),
        battery=tuple(timeline),
        bounds=span,
        device=device or DeviceInfo(),
    )


def from_sqlite(
    path: str | Path,
    *,
    config: Optional[IngestConfig] = None,
    device: Optional[DeviceInfo] = None,
) -> PowerDocument:
    """Open a powerlog database file and reconstruct it."""
    with SQLiteRowSource(path) as source:
        return from_source(source, config=config, device=device)


def from_frames(
    tables: Mapping[str, pd.DataFrame],
    *,
    config: Optional[IngestConfig] = None,
    device: Optional[DeviceInfo] = None,
) -> PowerDocument:
    """Reconstruct from already-loaded tables keyed by vendor table name."""
    return from_source(FrameRowSource(tables), config=config, device=device)
