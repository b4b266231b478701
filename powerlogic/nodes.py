from __future__ import annotations
from typing import Dict, Iterable

from . import exceptions
from .rows import Row
from .types import Node


def build_catalog(rows: Iterable[Row]) -> Dict[int, Node]:
    """
    Map node id -> Node from the node table.

    Both ID and Name are non-null in the vendor schema; a null in either is
    treated as a broken database, not skipped.
    """
    nodes: Dict[int, Node] = {}
    for row in rows:
        node_id = row.get("ID")
        name = row.get("Name")
        exceptions.require(
            node_id is not None, "Node row without an ID", exceptions.SchemaError
        )
        exceptions.require(
            name is not None, f"Node {node_id} has no Name", exceptions.SchemaError
        )
        nodes[int(node_id)] = Node(name=str(name))
    return nodes
