"""Unit tests for traversal strategy classes."""

import unittest

from flattree import (
    Node,
    FlatTreeAdapter,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
    make_binary_tree,
    make_chain,
)


class TestBreadthFirstTraverser(unittest.TestCase):

    def setUp(self):
        self.adapter = FlatTreeAdapter(make_binary_tree(15))
        self.traverser = BreadthFirstTraverser(self.adapter)

    def test_depths_start_at_zero(self):
        pairs = list(self.traverser.traverse(0))
        self.assertEqual(pairs[:3], [(0, 0), (1, 1), (2, 1)])
        self.assertEqual(pairs[-1], (14, 3))

    def test_max_depth_limits_exploration(self):
        ids = [node_id for node_id, _ in self.traverser.traverse(0, max_depth=1)]
        self.assertEqual(ids, [0, 1, 2])

    def test_min_depth_skips_upper_levels(self):
        pairs = list(self.traverser.traverse(0, min_depth=3))
        self.assertEqual([d for _, d in pairs], [3] * 8)

    def test_unknown_root_yields_nothing(self):
        self.assertEqual(list(self.traverser.traverse(100)), [])


class TestDepthFirstPreOrderTraverser(unittest.TestCase):

    def test_binary_tree_preorder(self):
        traverser = DepthFirstPreOrderTraverser(FlatTreeAdapter(make_binary_tree(7)))
        self.assertEqual(
            list(traverser.traverse(0)),
            [(0, 0), (1, 1), (3, 2), (4, 2), (2, 1), (5, 2), (6, 2)]
        )

    def test_shared_child_visited_once(self):
        nodes = [Node(0, [1, 2]), Node(1, [3]), Node(2, [3]), Node(3)]
        traverser = DepthFirstPreOrderTraverser(FlatTreeAdapter(nodes))
        self.assertEqual([i for i, _ in traverser.traverse(0)], [0, 1, 3, 2])

    def test_cycle_terminates(self):
        nodes = [Node(0, [1]), Node(1, [0])]
        traverser = DepthFirstPreOrderTraverser(FlatTreeAdapter(nodes))
        self.assertEqual([i for i, _ in traverser.traverse(1)], [1, 0])

    def test_deep_chain_does_not_recurse(self):
        traverser = DepthFirstPreOrderTraverser(FlatTreeAdapter(make_chain(5000)))
        pairs = list(traverser.traverse(0))
        self.assertEqual(len(pairs), 5000)
        self.assertEqual(pairs[-1], (4999, 4999))

    def test_max_depth(self):
        traverser = DepthFirstPreOrderTraverser(FlatTreeAdapter(make_binary_tree(7)))
        self.assertEqual([i for i, _ in traverser.traverse(0, max_depth=1)], [0, 1, 2])


class TestCreateTraverser(unittest.TestCase):

    def test_known_names(self):
        adapter = FlatTreeAdapter(make_chain(2))
        self.assertIsInstance(create_traverser("bfs", adapter), BreadthFirstTraverser)
        self.assertIsInstance(create_traverser("BFS", adapter), BreadthFirstTraverser)
        self.assertIsInstance(create_traverser("dfs_pre", adapter), DepthFirstPreOrderTraverser)
        self.assertIsInstance(create_traverser("preorder", adapter), DepthFirstPreOrderTraverser)

    def test_unknown_name(self):
        with self.assertRaises(ValueError) as ctx:
            create_traverser("zigzag", FlatTreeAdapter([]))
        self.assertIn("zigzag", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
