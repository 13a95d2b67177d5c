"""Core of flattree: the node model and the functions over it.

Everything in here is pure. Functions read node collections and return fresh
values; nothing is cached between calls.
"""

from .node import Node, Nodes, NodeId, IdIndex, ParentIndex
from .builders import make_chain, make_star, make_binary_tree
from .metrics import count_edges, count_leaves, count_internal_nodes, count_nodes
from .index import index_by_id, parent_index, find_root
from .adapter import FlatTreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
)
from .traversal import bfs_order, count_nodes_reachable, max_depth

__all__ = [
    "Node",
    "Nodes",
    "NodeId",
    "IdIndex",
    "ParentIndex",
    "make_chain",
    "make_star",
    "make_binary_tree",
    "count_edges",
    "count_leaves",
    "count_internal_nodes",
    "count_nodes",
    "index_by_id",
    "parent_index",
    "find_root",
    "FlatTreeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "create_traverser",
    "bfs_order",
    "count_nodes_reachable",
    "max_depth",
]
