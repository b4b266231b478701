from __future__ import annotations
from typing import Iterator, List, Mapping, NamedTuple, Optional, Tuple
from dataclasses import dataclass, field
from types import MappingProxyType
import time

from pydantic import BaseModel

from . import exceptions


@dataclass(frozen=True)
class Node:
    """A named entity (process, daemon, subsystem) that energy is charged to.

    The numeric id from the node table is not kept here; the name is the
    stable external identifier and the only thing compared.
    """

    name: str

    @property
    def id(self) -> str:
        return self.name


@dataclass(eq=False)
class Event:
    """
    One energy-accounting interval for a node.

    Built with cumulative energy (own + all descendants). The rollup pass
    rewrites ``energy`` to the exclusive value once; ``cumulative_energy``
    keeps what the source recorded.

    The parent is held as an entry id only. Ownership runs parent -> children.
    """

    entry_id: int
    node: Optional[Node]
    root_node: Optional[Node]
    start: float  # seconds since epoch, clock-corrected
    end: float
    energy: int
    parent_id: Optional[int] = None
    children: List[Event] = field(default_factory=list)
    cumulative_energy: int = field(init=False)

    def __post_init__(self) -> None:
        exceptions.require(
            self.start < self.end,
            f"Event {self.entry_id} has an empty or inverted interval "
            f"[{self.start}, {self.end}]",
            exceptions.EventError,
        )
        self.cumulative_energy = self.energy

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def duration(self) -> float:
        return self.end - self.start

    def descendants(self) -> Iterator[Event]:
        """Yield every event below this one, depth first."""
        stack = list(reversed(self.children))
        while stack:
            ev = stack.pop()
            yield ev
            stack.extend(reversed(ev.children))

    def subtree_energy(self) -> int:
        return self.energy + sum(ev.energy for ev in self.descendants())


@dataclass(frozen=True, eq=False)
class BatteryStatus:
    # eq=False: two samples with identical readings are still distinct samples
    timestamp: float
    level: float  # fraction; -1 means the source had no reading
    charging: bool


class Bounds(NamedTuple):
    lower: float
    upper: float

    def __contains__(self, ts: object) -> bool:
        return isinstance(ts, (int, float)) and self.lower <= ts <= self.upper

    @property
    def duration(self) -> float:
        return self.upper - self.lower


class DeviceInfo(BaseModel):
    """Descriptive device metadata carried alongside the reconstructed data."""

    name: Optional[str] = None
    model: Optional[str] = None
    build: Optional[str] = None
    model_config = {"frozen": True}


@dataclass(frozen=True)
class PowerDocument:
    """
    Read-only snapshot of one ingested power-accounting database.

    Holds:
      - nodes: node id -> Node
      - events: every constructed Event, flat, in source order
      - roots: the parentless Events (tree entry points)
      - battery: BatteryStatus samples sorted by timestamp
      - bounds: inclusive time range over events and battery samples
    """

    nodes: Mapping[int, Node]
    events: Tuple[Event, ...]
    roots: Tuple[Event, ...]
    battery: Tuple[BatteryStatus, ...]
    bounds: Bounds
    device: DeviceInfo = field(default_factory=DeviceInfo)

    @classmethod
    def empty(cls) -> PowerDocument:
        now = time.time()
        return cls(
            nodes=MappingProxyType({}),
            events=(),
            roots=(),
            battery=(),
            bounds=Bounds(now, now),
            device=DeviceInfo(name="", model="", build=""),
        )
