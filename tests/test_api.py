"""Tests for the high-level API and execution planning."""

import pytest

from flattree import (
    Node,
    FlatTreeAdapter,
    TraversalConfig,
    TraversalStrategy,
    DepthConfig,
    FilterConfig,
    ExecutionPlan,
    ConfigurationError,
    make_binary_tree,
    make_chain,
    make_star,
    bfs_order,
    traverse_tree,
    get_leaf_nodes,
    get_tree_stats,
)


class TestTraverseTree:

    def test_default_matches_bfs_order(self):
        nodes = make_binary_tree(12)
        assert list(traverse_tree(nodes, 0)) == bfs_order(nodes, 0)

    def test_preorder_strategy(self):
        nodes = make_binary_tree(7)
        assert list(traverse_tree(nodes, 0, strategy="dfs_pre")) == [0, 1, 3, 4, 2, 5, 6]
        assert list(traverse_tree(nodes, 0, strategy=TraversalStrategy.DEPTH_FIRST_PRE)) == [
            0, 1, 3, 4, 2, 5, 6
        ]

    def test_depth_bounds(self):
        nodes = make_binary_tree(15)
        assert list(traverse_tree(nodes, 0, min_depth=1, max_depth=1)) == [1, 2]

    def test_filters(self):
        nodes = make_chain(6)
        evens = list(traverse_tree(nodes, 0, include_filter=lambda n: n.id % 2 == 0))
        assert evens == [0, 2, 4]

        no_three = list(traverse_tree(nodes, 0, exclude_filter=lambda n: n.id == 3))
        assert no_three == [0, 1, 2, 4, 5]

    def test_exclusion_wins_over_inclusion(self):
        nodes = make_chain(4)
        result = traverse_tree(
            nodes, 0,
            include_filter=lambda n: True,
            exclude_filter=lambda n: n.id == 0
        )
        assert list(result) == [1, 2, 3]

    def test_max_nodes(self):
        assert list(traverse_tree(make_chain(10), 0, max_nodes=3)) == [0, 1, 2]

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            list(traverse_tree(make_chain(2), 0, strategy="zigzag"))

    def test_invalid_options(self):
        with pytest.raises(ConfigurationError, match="max_nodes must be positive"):
            list(traverse_tree(make_chain(2), 0, max_nodes=0))

    def test_missing_root(self):
        assert list(traverse_tree(make_chain(2), 5)) == []


def test_get_leaf_nodes():
    assert list(get_leaf_nodes(make_binary_tree(7), 0)) == [3, 4, 5, 6]
    assert list(get_leaf_nodes(make_binary_tree(7), 2)) == [5, 6]
    assert list(get_leaf_nodes(make_chain(4), 0, strategy="dfs_pre")) == [3]


class TestGetTreeStats:

    def test_star(self):
        stats = get_tree_stats(make_star(4))
        assert stats == {
            'total_nodes': 4,
            'edges': 3,
            'leaf_nodes': 3,
            'internal_nodes': 1,
            'root': 0,
            'reachable_nodes': 4,
            'max_depth': 2,
            'depths': {1: 1, 2: 3},
        }

    def test_binary_tree_histogram(self):
        stats = get_tree_stats(make_binary_tree(7))
        assert stats['depths'] == {1: 1, 2: 2, 3: 4}
        assert stats['max_depth'] == 3

    def test_without_root(self):
        nodes = [Node(0, [1]), Node(1), Node(2)]
        stats = get_tree_stats(nodes)
        assert stats['root'] is None
        assert stats['reachable_nodes'] == 0
        assert stats['max_depth'] == 0
        assert stats['depths'] == {}
        assert stats['total_nodes'] == 3

    def test_explicit_root(self):
        nodes = [Node(0, [1]), Node(1), Node(2)]
        stats = get_tree_stats(nodes, root_id=0)
        assert stats['root'] == 0
        assert stats['reachable_nodes'] == 2

    def test_empty(self):
        stats = get_tree_stats([])
        assert stats['total_nodes'] == 0
        assert stats['root'] is None


class TestExecutionPlan:

    def test_summary(self):
        config = TraversalConfig.shallow_scan(max_depth=2)
        plan = ExecutionPlan(config, FlatTreeAdapter(make_binary_tree(7)))
        summary = plan.get_summary()
        assert summary['strategy'] == "bfs"
        assert summary['max_depth'] == 2
        assert summary['node_count'] == 7
        assert summary['traverser'] == "BreadthFirstTraverser"

    def test_nodes_processed_reset_per_run(self):
        plan = ExecutionPlan(TraversalConfig(), FlatTreeAdapter(make_chain(5)))
        assert len(list(plan.execute(0))) == 5
        assert plan.nodes_processed == 5
        assert len(list(plan.execute(3))) == 2
        assert plan.nodes_processed == 2

    def test_invalid_config_raises(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=3, max_depth=1))
        with pytest.raises(ConfigurationError) as excinfo:
            ExecutionPlan(config, FlatTreeAdapter([]))
        assert "max_depth cannot be less than min_depth" in str(excinfo.value)

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    def test_depth_config_decides_what_is_yielded(self):
        config = TraversalConfig(
            strategy=TraversalStrategy.DEPTH_FIRST_PRE,
            depth=DepthConfig(min_depth=2, max_depth=2)
        )
        plan = ExecutionPlan(config, FlatTreeAdapter(make_binary_tree(15)))
        assert list(plan.execute(0)) == [(3, 2), (4, 2), (5, 2), (6, 2)]
        assert plan.nodes_processed == 4

    def test_filter_config_does_not_prune(self):
        config = TraversalConfig(filter=FilterConfig(exclude_filter=lambda n: n.id == 1))
        plan = ExecutionPlan(config, FlatTreeAdapter(make_chain(3)))
        assert [i for i, _ in plan.execute(0)] == [0, 2]
