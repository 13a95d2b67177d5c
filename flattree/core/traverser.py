"""Tree traversal strategies for flattree.

Traversers implement different orders for walking a node collection. They
only talk to a FlatTreeAdapter, and they all carry a visited set so shared
children and cycles are emitted once and never loop.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Set, Tuple

from .adapter import FlatTreeAdapter
from .node import NodeId


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    Depth is relative to the starting node, which sits at depth 0.
    """

    def __init__(self, adapter: FlatTreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: FlatTreeAdapter for navigating the collection
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root_id: NodeId,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[NodeId, int]]:
        """Traverse the collection starting from ``root_id``.

        Nothing is yielded when ``root_id`` does not resolve to a node.

        Args:
            root_id: Starting node id
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node_id, depth)
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    A child is marked as seen when it is enqueued, so it is enqueued at most
    once and always reached through its shallowest path.
    """

    def traverse(self,
                 root_id: NodeId,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[NodeId, int]]:
        if not self.adapter.has_node(root_id):
            return

        queue: Deque[Tuple[NodeId, int]] = deque([(root_id, 0)])
        seen: Set[NodeId] = {root_id}

        while queue:
            node_id, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node_id, depth)

            if not self._should_explore(depth, max_depth):
                continue

            for child_id in self.adapter.get_children(node_id):
                if child_id not in seen:
                    seen.add(child_id)
                    queue.append((child_id, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Parent before children, children in stored order. Uses an explicit stack,
    so chain depth is not limited by the interpreter's recursion limit.
    """

    def traverse(self,
                 root_id: NodeId,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[NodeId, int]]:
        if not self.adapter.has_node(root_id):
            return

        stack: List[Tuple[NodeId, int]] = [(root_id, 0)]
        visited: Set[NodeId] = set()

        while stack:
            node_id, depth = stack.pop()

            # Skip if already visited (shared child or cycle)
            if node_id in visited:
                continue
            visited.add(node_id)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node_id, depth)

            if self._should_explore(depth, max_depth):
                children = [c for c in self.adapter.get_children(node_id) if c not in visited]
                # Reversed so the first child is popped first
                for child_id in reversed(children):
                    stack.append((child_id, depth + 1))


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: FlatTreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre)
        adapter: FlatTreeAdapter for the collection

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'preorder': DepthFirstPreOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
