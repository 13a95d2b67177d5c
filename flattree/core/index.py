"""Id-based lookup tables for node collections.

Both tables are dense lists sized ``max(id) + 1``, so ids are expected to be
small and mostly contiguous. A single huge id makes the tables
proportionally large. Tables are rebuilt on every call; callers that query
repeatedly should keep them around (see ``FlatTreeAdapter``).

Duplicates never raise. ``index_by_id`` keeps the last node seen for an id and
``parent_index`` keeps the last parent seen for a child.
"""

import logging
from typing import Optional

from .node import IdIndex, NodeId, Nodes, ParentIndex

logger = logging.getLogger("flattree.core.index")


def _table_size(nodes: Nodes) -> int:
    return max((node.id for node in nodes), default=0) + 1


def index_by_id(nodes: Nodes) -> IdIndex:
    """Build the id -> node table.

    Args:
        nodes: Node collection

    Returns:
        List where slot ``i`` holds the node with id ``i``, or None
    """
    index: IdIndex = [None] * _table_size(nodes)
    for node in nodes:
        if node.id < 0:
            logger.debug("Skipping node with negative id %d", node.id)
            continue
        if index[node.id] is not None:
            logger.debug("Duplicate node id %d, keeping the later node", node.id)
        index[node.id] = node
    return index


def parent_index(nodes: Nodes) -> ParentIndex:
    """Build the id -> parent id table.

    A child listed by several nodes ends up with the last of them, in
    collection order. Child ids outside the table are ignored.

    Args:
        nodes: Node collection

    Returns:
        List where slot ``i`` holds a parent id of node ``i``, or None
    """
    parents: ParentIndex = [None] * _table_size(nodes)
    size = len(parents)
    for node in nodes:
        if node.id < 0:
            continue
        for child_id in node.children:
            if not 0 <= child_id < size:
                continue
            previous = parents[child_id]
            if previous is not None and previous != node.id:
                logger.debug(
                    "Node %d already has parent %d, replacing with %d",
                    child_id, previous, node.id
                )
            parents[child_id] = node.id
    return parents


def find_root(nodes: Nodes) -> Optional[NodeId]:
    """Return the id of the only parentless node, if there is exactly one.

    Only nodes actually present in the collection are candidates; an id that
    merely has an empty parent slot is never reported.

    Args:
        nodes: Node collection

    Returns:
        Root id, or None when the collection is empty or has zero or several
        parentless nodes
    """
    if not nodes:
        return None

    parents = parent_index(nodes)
    return _unique_root(nodes, parents)


def _unique_root(nodes: Nodes, parents: ParentIndex) -> Optional[NodeId]:
    root: Optional[NodeId] = None
    for node in nodes:
        if not 0 <= node.id < len(parents):
            continue
        if parents[node.id] is None:
            if root is not None:
                logger.debug("Ambiguous root: both %d and %d have no parent", root, node.id)
                return None
            root = node.id
    return root
