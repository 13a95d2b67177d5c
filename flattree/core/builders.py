"""Constructors for canonical tree shapes.

Every builder allocates exactly ``n`` nodes with ids ``0..n-1`` and runs in
linear time. A non-positive ``n`` produces an empty collection.
"""

from .node import Node, Nodes


def _blank_nodes(n: int) -> Nodes:
    return [Node(i) for i in range(max(n, 0))]


def make_chain(n: int) -> Nodes:
    """Build a single path ``0 -> 1 -> ... -> n-1``.

    Args:
        n: Number of nodes

    Returns:
        Node collection where node ``i`` has the single child ``i + 1``
    """
    nodes = _blank_nodes(n)
    for i in range(len(nodes) - 1):
        nodes[i].children.append(i + 1)
    return nodes


def make_star(n: int) -> Nodes:
    """Build a hub (node 0) whose children are ``1..n-1`` in ascending order.

    Args:
        n: Number of nodes, hub included

    Returns:
        Node collection with one internal node and ``n - 1`` leaves
    """
    nodes = _blank_nodes(n)
    if not nodes:
        return nodes

    nodes[0].children.extend(range(1, len(nodes)))
    return nodes


def make_binary_tree(n: int) -> Nodes:
    """Build a complete, heap-shaped binary tree.

    Node ``i`` gets left child ``2i + 1`` and right child ``2i + 2`` when those
    ids are below ``n``, left first.

    Args:
        n: Number of nodes

    Returns:
        Node collection in heap order
    """
    nodes = _blank_nodes(n)
    count = len(nodes)
    for i, node in enumerate(nodes):
        left = 2 * i + 1
        right = 2 * i + 2
        if left < count:
            node.children.append(left)
        if right < count:
            node.children.append(right)
    return nodes
