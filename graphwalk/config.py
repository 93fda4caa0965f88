"""Configuration system for GraphWalk.

This module defines how users specify their walk requirements: which
traversal order to use, whether the structure is a tree or a graph, and how
visited nodes are tracked.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union


class TraversalStrategy(Enum):
    """Order in which a walk emits nodes."""
    PRE_ORDER = "pre_order"         # Parent before children, depth first
    POST_ORDER = "post_order"       # Children before parent, depth first
    BREADTH_FIRST = "breadth_first"  # Level by level


_STRATEGY_ALIASES = {
    'pre': TraversalStrategy.PRE_ORDER,
    'preorder': TraversalStrategy.PRE_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'dfs': TraversalStrategy.PRE_ORDER,
    'dfs_pre': TraversalStrategy.PRE_ORDER,
    'depth_first_pre': TraversalStrategy.PRE_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'postorder': TraversalStrategy.POST_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'dfs_post': TraversalStrategy.POST_ORDER,
    'depth_first_post': TraversalStrategy.POST_ORDER,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'level': TraversalStrategy.BREADTH_FIRST,
    'level_order': TraversalStrategy.BREADTH_FIRST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or one of the accepted aliases

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


@dataclass
class WalkConfig:
    """Complete configuration for a walk.

    This is the primary way users of the functional API describe what they
    want from a traversal. ``tree=True`` disables visited-node tracking
    entirely, so it cannot be combined with a custom ``tracker``.
    """

    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER
    tree: bool = False
    tracker: Optional[Callable[[Any], bool]] = None
    limit: Optional[int] = None  # Maximum nodes to emit (None = unlimited)

    @classmethod
    def tree_walk(cls, strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
                  limit: Optional[int] = None) -> 'WalkConfig':
        """Create config for walking a structure known to be acyclic."""
        return cls(strategy=strategy, tree=True, limit=limit)

    @classmethod
    def shared(cls, tracker: Callable[[Any], bool],
               strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER) -> 'WalkConfig':
        """Create config whose walks all report to the same tracker."""
        return cls(strategy=strategy, tracker=tracker)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        try:
            parse_strategy(self.strategy)
        except ValueError as e:
            errors.append(str(e))

        if self.tree and self.tracker is not None:
            errors.append("tracker cannot be used when tree is True")

        if self.tracker is not None and not callable(self.tracker):
            errors.append("tracker must be callable")

        if self.limit is not None and self.limit < 0:
            errors.append("limit cannot be negative")

        return errors

    def build_walker(self, find_successors: Callable[[Any], Any]):
        """Create the Walker described by this configuration.

        Raises:
            ValueError: If the configuration is invalid
        """
        errors = self.validate()
        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

        # Imported here to keep config free of core imports
        from .core.walker import Walker

        if self.tree:
            return Walker.in_tree(find_successors)
        return Walker.in_graph(find_successors, self.tracker)
