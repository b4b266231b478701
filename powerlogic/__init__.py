from . import (
    canon,
    config,
    exceptions,
    types,
    rows,
    nodes,
    offsets,
    events,
    battery,
    bounds,
    ingest,
    validate,
    summary,
)

__all__ = [
    "canon",
    "config",
    "exceptions",
    "types",
    "rows",
    "nodes",
    "offsets",
    "events",
    "battery",
    "bounds",
    "ingest",
    "validate",
    "summary",
]
