"""Node model for flattree.

A node is a plain data container: an integer id plus the ordered ids of its
direct children. Navigation (who is whose parent, which ids resolve) lives in
the index functions and the FlatTreeAdapter, not on the node itself.
"""

from dataclasses import dataclass, field
from typing import List, Optional

NodeId = int


@dataclass
class Node:
    """One vertex of an array-backed tree.

    ``children`` keeps insertion order, which defines construction and
    traversal order. Nothing stops several nodes from listing the same child
    id, so a collection of nodes is really a directed graph that usually has
    tree shape.
    """

    id: NodeId
    children: List[NodeId] = field(default_factory=list)

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children

    def __str__(self) -> str:
        return str(self.id)


# An ordered collection of nodes, addressed by position rather than by id.
Nodes = List[Node]

# Dense lookup tables sized max(id) + 1.
IdIndex = List[Optional[Node]]
ParentIndex = List[Optional[NodeId]]
