"""Pointer-linked tree variant.

Some callers hold a tree as real objects whose ``children`` are other node
objects rather than ids. The functions here walk such trees directly. They
accept any object exposing an iterable ``children`` attribute, and ``None``
for an empty tree.

Each walker gives the same answer as its textbook recursive definition, but
runs on an explicit stack so that very deep trees do not hit the recursion
limit. Like the recursive form, a node reachable along two paths is counted
once per path; cyclic structures are not supported.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from .core.adapter import FlatTreeAdapter
from .core.node import NodeId, Nodes
from .core.traverser import BreadthFirstTraverser


@dataclass
class LinkedNode:
    """A tree node that owns references to its children."""

    value: Any = None
    children: List['LinkedNode'] = field(default_factory=list)

    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return f"LinkedNode(value={self.value!r}, children={len(self.children)})"


def count_nodes(root: Optional[Any]) -> int:
    """Count every node in the subtree under ``root``, root included."""
    if root is None:
        return 0

    total = 0
    stack = [root]
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.children)
    return total


def max_depth(root: Optional[Any]) -> int:
    """Length of the longest root-to-leaf path, counting the root as 1.

    Returns:
        0 for an empty tree, 1 for a lone root
    """
    if root is None:
        return 0

    deepest = 0
    stack: List[Tuple[Any, int]] = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in node.children:
            stack.append((child, depth + 1))
    return deepest


def count_leaves(root: Optional[Any]) -> int:
    """Count nodes without children in the subtree under ``root``."""
    if root is None:
        return 0

    leaves = 0
    stack = [root]
    while stack:
        node = stack.pop()
        children = list(node.children)
        if not children:
            leaves += 1
        else:
            stack.extend(children)
    return leaves


def for_each_preorder(root: Optional[Any], visit: Callable[[Any], None]) -> None:
    """Call ``visit`` on every node, parent first, children left to right.

    Args:
        root: Tree root, or None for an empty tree
        visit: Callback receiving each node
    """
    if root is None:
        return

    stack = [root]
    while stack:
        node = stack.pop()
        visit(node)
        # Reversed so the first child is visited next
        stack.extend(reversed(list(node.children)))


def link_nodes(nodes: Nodes, root_id: NodeId) -> Optional[LinkedNode]:
    """Materialize the breadth-first spanning tree of a flat collection.

    Each reachable id becomes one LinkedNode (``value`` is the id), attached
    under the parent that reached it first. The result is always a proper
    tree, even when the collection shares children or has cycles.

    Args:
        nodes: Node collection
        root_id: Id of the tree root

    Returns:
        Linked root, or None if ``root_id`` is not in the collection
    """
    adapter = FlatTreeAdapter(nodes)
    if not adapter.has_node(root_id):
        return None

    linked: Dict[NodeId, LinkedNode] = {}
    for node_id, _ in BreadthFirstTraverser(adapter).traverse(root_id):
        linked[node_id] = LinkedNode(node_id)

    attached = {root_id}
    for node_id in linked:
        parent = linked[node_id]
        for child_id in adapter.get_children(node_id):
            if child_id not in attached:
                attached.add(child_id)
                parent.children.append(linked[child_id])

    return linked[root_id]
