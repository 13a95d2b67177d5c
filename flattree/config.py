"""Configuration system for flattree.

This module defines how users describe a traversal: which order to walk in,
which depths to report, which nodes to keep and when to stop.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from .core.node import Node


class TraversalStrategy(Enum):
    """How to walk the collection."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering.

    Depths are relative to the traversal root, which is depth 0.
    """

    min_depth: int = 0                # Minimum depth to yield
    max_depth: Optional[int] = None   # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True


@dataclass
class FilterConfig:
    """Predicates deciding which nodes are reported.

    Filters never prune: children of a rejected node are still explored.
    """

    include_filter: Optional[Callable[[Node], bool]] = None
    exclude_filter: Optional[Callable[[Node], bool]] = None

    def should_include(self, node: Node) -> bool:
        """Check if a node passes the filters. Exclusion takes precedence."""
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return self.include_filter(node)

        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    The ExecutionPlan validates this before walking anything.
    """

    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST
    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    max_nodes: Optional[int] = None   # Stop after yielding this many nodes

    @classmethod
    def shallow_scan(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for a breadth-first scan of the top levels.

        Args:
            max_depth: How deep to scan (default 1 = root and its children)

        Returns:
            TraversalConfig for shallow scanning
        """
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        return errors
