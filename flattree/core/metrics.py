"""Structural metrics over a whole node collection.

These look at every node in the collection, reachable or not. For metrics
relative to a root see ``flattree.core.traversal``.
"""

from .node import Nodes


def count_edges(nodes: Nodes) -> int:
    """Count stored (parent, child) pairs.

    Self-loops and child ids shared between parents are each counted once per
    listing.
    """
    return sum(len(node.children) for node in nodes)


def count_leaves(nodes: Nodes) -> int:
    """Count nodes with no children."""
    return sum(1 for node in nodes if node.is_leaf())


def count_internal_nodes(nodes: Nodes) -> int:
    """Count nodes with at least one child.

    Always ``len(nodes) - count_leaves(nodes)``.
    """
    return sum(1 for node in nodes if not node.is_leaf())


def count_nodes(nodes: Nodes) -> int:
    return len(nodes)
