"""FlatTreeAdapter: navigation over a node collection.

The adapter is what traversers talk to. It builds the id and parent tables
once, so a caller running many queries against the same collection pays for
indexing a single time. Navigation is id-based: every method takes and
returns node ids, never positions in the collection.

The adapter takes a snapshot of the tables at construction. If ``children``
lists are changed afterwards, build a new adapter.
"""

from typing import Iterator, Optional, Set

from .index import _unique_root, index_by_id, parent_index
from .node import IdIndex, Node, NodeId, Nodes, ParentIndex


class FlatTreeAdapter:
    """Adapter for navigating an array-backed tree by node id.

    Example:
        adapter = FlatTreeAdapter(make_binary_tree(7))
        list(adapter.get_children(1))   # [3, 4]
        adapter.get_parent(4)           # 1
    """

    def __init__(self, nodes: Nodes):
        """Initialize adapter and build lookup tables.

        Args:
            nodes: Node collection to navigate
        """
        self.nodes = nodes
        self.index: IdIndex = index_by_id(nodes)
        self.parents: ParentIndex = parent_index(nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def has_node(self, node_id: NodeId) -> bool:
        """Check if ``node_id`` resolves to a node in the collection."""
        return self.get_node(node_id) is not None

    def get_node(self, node_id: NodeId) -> Optional[Node]:
        """Look up a node by id.

        Returns:
            The node, or None for unknown or out-of-range ids
        """
        if 0 <= node_id < len(self.index):
            return self.index[node_id]
        return None

    def get_children(self, node_id: NodeId) -> Iterator[NodeId]:
        """Yield child ids of a node that resolve to actual nodes.

        Children keep their stored order. Ids without a node are skipped.

        Args:
            node_id: The parent node id

        Yields:
            Child node ids
        """
        node = self.get_node(node_id)
        if node is None:
            return
        for child_id in node.children:
            if self.has_node(child_id):
                yield child_id

    def get_parent(self, node_id: NodeId) -> Optional[NodeId]:
        """Get the recorded parent of a node.

        With several parents this is the last one in collection order.

        Returns:
            Parent id, or None if the node has no recorded parent
        """
        if 0 <= node_id < len(self.parents):
            return self.parents[node_id]
        return None

    def get_depth(self, node_id: NodeId) -> int:
        """Count parent hops from ``node_id`` up to a parentless node.

        Walking stops if a parent cycle brings us back to a node already seen.

        Returns:
            Depth where a parentless node = 0
        """
        depth = 0
        seen: Set[NodeId] = {node_id}
        current = self.get_parent(node_id)
        while current is not None and current not in seen:
            seen.add(current)
            depth += 1
            current = self.get_parent(current)
        return depth

    def get_siblings(self, node_id: NodeId) -> Iterator[NodeId]:
        """Yield the other children of this node's recorded parent."""
        parent = self.get_parent(node_id)
        if parent is None:
            return
        for child_id in self.get_children(parent):
            if child_id != node_id:
                yield child_id

    def find_root(self) -> Optional[NodeId]:
        """Same answer as ``find_root(nodes)``, reusing the stored tables."""
        if not self.nodes:
            return None
        return _unique_root(self.nodes, self.parents)
