"""Second pass over staged nodes: tree ordering, component flags, freezing."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from pydantic import TypeAdapter

from storynav.hierarchy.models import Node, StoriesHash

_node_adapter: TypeAdapter[Any] = TypeAdapter(Node)


def finalize(staged: dict[str, dict[str, Any]]) -> StoriesHash:
    """Order staged nodes depth-first and flag components.

    Each node is emitted once, the first time it is reached. A node is a
    component when it has children and every child is a story.
    """
    ordered: dict[str, dict[str, Any]] = {}

    def add(item: dict[str, Any]) -> None:
        if item["id"] in ordered:
            return
        node = dict(item)
        ordered[node["id"]] = node
        children = node.get("children")
        if children is None:
            return
        child_nodes = [staged[child_id] for child_id in children]
        if node["type"] == "group":
            node["is_component"] = bool(child_nodes) and all(
                child["type"] == "story" for child in child_nodes
            )
        for child in child_nodes:
            add(child)

    for item in staged.values():
        add(item)

    return MappingProxyType(
        {node_id: _node_adapter.validate_python(node) for node_id, node in ordered.items()}
    )
