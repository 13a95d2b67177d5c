"""Root-relative queries: breadth-first order, reachability and depth.

All three start from a root id and tolerate non-tree input. Unknown roots and
empty collections give empty or zero answers instead of errors.
"""

import logging
from typing import List

from .adapter import FlatTreeAdapter
from .node import NodeId, Nodes
from .traverser import BreadthFirstTraverser

logger = logging.getLogger("flattree.core.traversal")


def _bfs(nodes: Nodes) -> BreadthFirstTraverser:
    return BreadthFirstTraverser(FlatTreeAdapter(nodes))


def bfs_order(nodes: Nodes, root_id: NodeId) -> List[NodeId]:
    """List ids reachable from ``root_id`` in breadth-first order.

    Root first, then children in stored order level by level. Every reachable
    id appears exactly once even when several parents share a child. Child ids
    with no matching node are skipped.

    Args:
        nodes: Node collection
        root_id: Id to start from

    Returns:
        Ids in first-visit order, or [] if the collection is empty or the root
        is not in it
    """
    if not nodes:
        return []

    traverser = _bfs(nodes)
    if not traverser.adapter.has_node(root_id):
        logger.debug("Root %d not found among %d nodes", root_id, len(nodes))
        return []

    return [node_id for node_id, _ in traverser.traverse(root_id)]


def count_nodes_reachable(nodes: Nodes, root_id: NodeId) -> int:
    """Number of ids ``bfs_order`` would return."""
    return len(bfs_order(nodes, root_id))


def max_depth(nodes: Nodes, root_id: NodeId) -> int:
    """Count the levels below and including ``root_id``.

    The root itself is depth 1, so a single node has depth 1 and a chain of
    five has depth 5. Depth is measured along shortest paths.

    Returns:
        Number of levels, or 0 if the collection is empty or the root is
        missing
    """
    if not nodes:
        return 0

    deepest = 0
    for _, depth in _bfs(nodes).traverse(root_id):
        deepest = max(deepest, depth + 1)
    return deepest
