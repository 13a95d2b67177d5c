#!/usr/bin/env python3
"""
Walking the same tree in its flat and linked forms.

This example demonstrates:
- Breadth-first and pre-order walks over a heap-shaped binary tree
- Root discovery and depth on a collection with a shared child
- Converting a flat collection to linked nodes
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from flattree import (
    Node,
    make_binary_tree,
    bfs_order,
    find_root,
    max_depth,
    traverse_tree,
    get_tree_stats,
    linked,
)


def main():
    nodes = make_binary_tree(7)
    print("Binary tree of 7 nodes")
    print("-" * 50)
    print(f"  BFS:      {bfs_order(nodes, 0)}")
    print(f"  Preorder: {list(traverse_tree(nodes, 0, strategy='dfs_pre'))}")
    print(f"  Depth:    {max_depth(nodes, 0)}")

    # Node 3 is listed by both 1 and 2
    shared = [Node(0, [1, 2]), Node(1, [3]), Node(2, [3]), Node(3)]
    print("\nDiamond with a shared child")
    print("-" * 50)
    print(f"  Root:     {find_root(shared)}")
    print(f"  BFS:      {bfs_order(shared, 0)}")
    print(f"  Stats:    {get_tree_stats(shared)}")

    tree = linked.link_nodes(shared, 0)
    visited = []
    linked.for_each_preorder(tree, lambda n: visited.append(n.value))
    print(f"  Linked preorder: {visited}")
    print(f"  Linked size:     {linked.count_nodes(tree)}")


if __name__ == "__main__":
    main()
