from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from .config import IngestConfig, default_config
from .offsets import TimeOffsetIndex
from .rows import Row
from .types import Event, Node

logger = logging.getLogger(__name__)


@dataclass
class EventForest:
    events: List[Event] = field(default_factory=list)  # every kept event, source order
    roots: List[Event] = field(default_factory=list)


def _opt_int(value) -> Optional[int]:
    return None if value is None else int(value)


def _is_dummy(ts: float, cfg: IngestConfig) -> bool:
    return abs(ts - cfg.distant_past) < cfg.dummy_tolerance_s


def build_forest(
    rows: Iterable[Row],
    nodes: Mapping[int, Node],
    offsets: TimeOffsetIndex,
    *,
    config: Optional[IngestConfig] = None,
) -> EventForest:
    """
    Assemble energy-estimate rows into a forest of Events in one pass.

    Per row:
      - raw start/end = timestamp + Start/EndOffset (ms)
      - drop placeholder rows stamped at the distant past
      - shift by the clock offset in effect at ``timestamp``
      - drop empty intervals
      - attach to the parent row if it has already been seen

    Energies are left cumulative; call ``rollup`` afterwards.
    """
    cfg = config or default_config()
    forest = EventForest()
    by_id: Dict[int, Event] = {}

    for row in rows:
        timestamp = float(row["timestamp"])
        raw_start = timestamp + float(row["StartOffset"]) / 1000
        raw_end = timestamp + float(row["EndOffset"]) / 1000

        if _is_dummy(raw_start, cfg) or _is_dummy(raw_end, cfg):
            logger.debug("Ignoring dummy event %s: %s..%s", row["ID"], raw_start, raw_end)
            continue

        offset = offsets.offset_for(timestamp)
        start = raw_start + offset
        end = raw_end + offset
        if start == end:
            logger.debug("Ignoring zero-length event %s at %s", row["ID"], start)
            continue
        if end < start:
            logger.warning("Ignoring inverted event %s: %s..%s", row["ID"], start, end)
            continue

        parent_id = _opt_int(row.get("ParentEntryID"))
        parent = by_id.get(parent_id) if parent_id is not None else None
        if parent_id is not None and parent is None:
            logger.debug("Event %s references unknown parent %s", row["ID"], parent_id)

        node_id = _opt_int(row.get("NodeID"))
        root_id = _opt_int(row.get("RootNodeID"))
        event = Event(
            entry_id=int(row["ID"]),
            node=nodes.get(node_id) if node_id is not None else None,
            root_node=nodes.get(root_id) if root_id is not None else None,
            start=start,
            end=end,
            energy=int(row["Energy"]) + int(row.get("CorrectionEnergy") or 0),
            parent_id=parent.entry_id if parent is not None else None,
        )
        if parent is not None:
            parent.children.append(event)
        else:
            forest.roots.append(event)
        forest.events.append(event)
        by_id[event.entry_id] = event

    return forest


def rollup(roots: Iterable[Event]) -> None:
    """
    Convert cumulative energies to exclusive ones, in place.

    Each event subtracts its direct children's cumulative energy, so visit
    order does not matter. Must run exactly once per forest.
    """
    stack = list(roots)
    while stack:
        event = stack.pop()
        event.energy = event.cumulative_energy - sum(
            child.cumulative_energy for child in event.children
        )
        stack.extend(event.children)
