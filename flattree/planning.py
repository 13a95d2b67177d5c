"""Execution planning for flattree.

The ExecutionPlan checks a TraversalConfig up front and then drives the
selected traverser, applying filters and limits as nodes come out.
"""

import logging
from typing import Any, Dict, Iterator, Tuple

from .config import TraversalConfig, TraversalStrategy
from .core.adapter import FlatTreeAdapter
from .core.node import NodeId
from .core.traverser import TreeTraverser, create_traverser

logger = logging.getLogger("flattree.planning")


class ConfigurationError(ValueError):
    """Raised when a TraversalConfig is inconsistent."""
    pass


class ExecutionPlan:
    """Validated execution plan for one traversal configuration.

    A plan can be executed any number of times, from any root.
    """

    def __init__(self, config: TraversalConfig, adapter: FlatTreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration
            adapter: Adapter over the node collection

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.nodes_processed = 0

        logger.debug(
            "Planned %s traversal over %d nodes", config.strategy.value, len(adapter)
        )

    def _select_traverser(self) -> TreeTraverser:
        strategy_map = {
            TraversalStrategy.BREADTH_FIRST: "bfs",
            TraversalStrategy.DEPTH_FIRST_PRE: "dfs_pre",
        }
        return create_traverser(strategy_map[self.config.strategy], self.adapter)

    def _check_limits(self) -> bool:
        """Check if another node may be yielded."""
        if self.config.max_nodes is None:
            return True
        return self.nodes_processed < self.config.max_nodes

    def execute(self, root_id: NodeId) -> Iterator[Tuple[NodeId, int]]:
        """Execute the traversal plan.

        Args:
            root_id: Id to start from

        Yields:
            Tuples of (node_id, depth) that pass the depth bounds and filters
        """
        self.nodes_processed = 0

        # The traverser only bounds exploration; DepthConfig decides what is yielded
        for node_id, depth in self.traverser.traverse(
            root_id,
            max_depth=self.config.depth.max_depth
        ):
            if not self.config.depth.should_yield(depth):
                continue

            if not self._check_limits():
                break

            node = self.adapter.get_node(node_id)
            if not self.config.filter.should_include(node):
                continue

            self.nodes_processed += 1
            yield (node_id, depth)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.max_nodes,
            'node_count': len(self.adapter),
            'traverser': self.traverser.__class__.__name__,
        }
