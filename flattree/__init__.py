"""flattree - utilities for array-backed trees.

A tree is a list of ``Node(id, children)`` records where ``children`` holds
child ids. flattree builds canonical shapes, measures them, indexes them by
id and walks them breadth-first, tolerating shared children and cycles.

Two flavours:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Flat, id-indexed collections:
    from flattree import make_chain, bfs_order, find_root

Pointer-linked node objects:
    from flattree.linked import count_nodes, max_depth, for_each_preorder
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from . import linked
from .core import (
    Node,
    Nodes,
    NodeId,
    IdIndex,
    ParentIndex,
    make_chain,
    make_star,
    make_binary_tree,
    count_edges,
    count_leaves,
    count_internal_nodes,
    count_nodes,
    index_by_id,
    parent_index,
    find_root,
    FlatTreeAdapter,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
    bfs_order,
    count_nodes_reachable,
    max_depth,
)
from .config import TraversalConfig, TraversalStrategy, DepthConfig, FilterConfig
from .planning import ExecutionPlan, ConfigurationError
from .api import traverse_tree, get_leaf_nodes, get_tree_stats

__all__ = [
    "__version__",
    "linked",
    # Model
    "Node",
    "Nodes",
    "NodeId",
    "IdIndex",
    "ParentIndex",
    # Builders
    "make_chain",
    "make_star",
    "make_binary_tree",
    # Metrics
    "count_edges",
    "count_leaves",
    "count_internal_nodes",
    "count_nodes",
    # Index
    "index_by_id",
    "parent_index",
    "find_root",
    "FlatTreeAdapter",
    # Traversal
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "create_traverser",
    "bfs_order",
    "count_nodes_reachable",
    "max_depth",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "DepthConfig",
    "FilterConfig",
    "ExecutionPlan",
    "ConfigurationError",
    # API
    "traverse_tree",
    "get_leaf_nodes",
    "get_tree_stats",
]
