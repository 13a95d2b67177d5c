"""High-level API for flattree.

Simple functional entry points that wrap the adapter / traverser / plan
machinery for the common cases.
"""

from typing import Any, Callable, Dict, Iterator, Optional, Union

from .config import DepthConfig, FilterConfig, TraversalConfig, TraversalStrategy
from .core.adapter import FlatTreeAdapter
from .core.metrics import count_edges, count_internal_nodes, count_leaves
from .core.node import Node, NodeId, Nodes
from .planning import ExecutionPlan


def traverse_tree(
    nodes: Nodes,
    root_id: NodeId,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
    exclude_filter: Optional[Callable[[Node], bool]] = None,
    max_nodes: Optional[int] = None,
) -> Iterator[NodeId]:
    """Simple interface for walking a node collection.

    Args:
        nodes: Node collection
        root_id: Id to start from
        strategy: Traversal strategy (bfs, dfs_pre)
        max_depth: Maximum depth to traverse, root = 0
        min_depth: Minimum depth before yielding nodes
        include_filter: Keep only nodes for which this returns True
        exclude_filter: Drop nodes for which this returns True
        max_nodes: Stop after this many nodes

    Yields:
        Node ids in traversal order

    Raises:
        ConfigurationError: If the options are inconsistent
        ValueError: If the strategy name is unknown

    Example:
        >>> list(traverse_tree(make_binary_tree(7), 0, strategy="dfs_pre"))
        [0, 1, 3, 4, 2, 5, 6]
    """
    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter
        ),
        max_nodes=max_nodes,
    )
    plan = ExecutionPlan(config, FlatTreeAdapter(nodes))

    for node_id, _ in plan.execute(root_id):
        yield node_id


def get_leaf_nodes(nodes: Nodes, root_id: NodeId, **kwargs) -> Iterator[NodeId]:
    """Yield the reachable leaves under ``root_id``.

    Args:
        nodes: Node collection
        root_id: Id to start from
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Ids of nodes without stored children
    """
    kwargs['include_filter'] = Node.is_leaf
    yield from traverse_tree(nodes, root_id, **kwargs)


def get_tree_stats(nodes: Nodes, root_id: Optional[NodeId] = None) -> Dict[str, Any]:
    """Get statistics about a node collection.

    Whole-collection counts are always filled in. The root-relative fields
    (``reachable_nodes``, ``max_depth``, ``depths``) use ``root_id``, or the
    collection's unique root when ``root_id`` is None, and stay empty when
    there is no root.

    Args:
        nodes: Node collection
        root_id: Optional root to measure from

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(make_star(4))
        >>> stats['root'], stats['leaf_nodes'], stats['max_depth']
        (0, 3, 2)
    """
    adapter = FlatTreeAdapter(nodes)
    if root_id is None:
        root_id = adapter.find_root()

    stats: Dict[str, Any] = {
        'total_nodes': len(nodes),
        'edges': count_edges(nodes),
        'leaf_nodes': count_leaves(nodes),
        'internal_nodes': count_internal_nodes(nodes),
        'root': root_id,
        'reachable_nodes': 0,
        'max_depth': 0,
        'depths': {},
    }

    if root_id is None:
        return stats

    plan = ExecutionPlan(TraversalConfig(), adapter)
    for _, depth in plan.execute(root_id):
        level = depth + 1
        stats['reachable_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], level)
        stats['depths'][level] = stats['depths'].get(level, 0) + 1

    return stats


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'preorder': TraversalStrategy.DEPTH_FIRST_PRE,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
