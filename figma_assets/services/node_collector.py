"""Flatten a Figma document subtree into a list of nodes."""

from typing import Any, Dict, List, Optional

from figma_assets.schemas import Node


def collect_nodes(node: Optional[Dict[str, Any]], nodes: Optional[List[Node]] = None) -> List[Node]:
    """Walk ``node`` depth-first, parent before children, appending each layer to ``nodes``.

    Entries without an ``id`` (and anything that is not a mapping) are
    skipped together with their subtree.
    """
    if nodes is None:
        nodes = []
    if not isinstance(node, dict) or not node.get("id"):
        return nodes

    nodes.append(Node(id=node["id"], name=node.get("name")))

    children = node.get("children")
    if isinstance(children, list):
        for child in children:
            collect_nodes(child, nodes)
    return nodes


def build_name_lookup(nodes: List[Node]) -> Dict[str, Optional[str]]:
    """Map node IDs to layer names; the first occurrence of an ID wins."""
    lookup: Dict[str, Optional[str]] = {}
    for node in nodes:
        lookup.setdefault(node.node_id, node.name)
    return lookup
