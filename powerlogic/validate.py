from __future__ import annotations

from . import exceptions
from .types import PowerDocument


def assert_document(doc: PowerDocument) -> None:
    for ev in doc.events:
        if not ev.start < ev.end:
            raise exceptions.EventError(f"Event {ev.entry_id} has non-positive duration.")
        if ev.start not in doc.bounds or ev.end not in doc.bounds:
            raise exceptions.PowerLogicError(f"Event {ev.entry_id} lies outside bounds.")

    prev = None
    for sample in doc.battery:
        if prev is not None and sample.timestamp < prev:
            raise exceptions.PowerLogicError("Battery samples must be sorted ascending.")
        if sample.timestamp not in doc.bounds:
            raise exceptions.PowerLogicError(
                f"Battery sample at {sample.timestamp} lies outside bounds."
            )
        prev = sample.timestamp

    for root in doc.roots:
        if root.subtree_energy() != root.cumulative_energy:
            raise exceptions.PowerLogicError(
                f"Energy of tree rooted at {root.entry_id} does not add up: "
                f"{root.subtree_energy()} != {root.cumulative_energy}"
            )
