"""GraphWalk - Lazy Graph and Tree Walking Library.

GraphWalk walks any structure you can describe with a successor function,
in pre-order, post-order or breadth-first order, one node at a time.
Graphs may be infinite and may contain cycles.

Choose your entry point:
━━━━━━━━━━━━━━━━━━━━━━━━
Reusable walker:
    from graphwalk import Walker

One-off walks:
    from graphwalk import walk_graph
━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import TraversalStrategy, WalkConfig, parse_strategy
from .core import (
    Walker,
    Tracker,
    SetTracker,
    KeyedTracker,
    LockingTracker,
    always_visit,
    as_tracker,
)
from .shortest_path import (
    ShortestPath,
    unweighted_shortest_paths_from,
    unweighted_shortest_cycles_from,
)
from .cycles import detect_cycle_in_graph
from .api import (
    walk_graph,
    walk_graph_from_all,
    walk_with_config,
    walk_with_config_from_all,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    has_cycle,
)

__all__ = [
    "__version__",
    # Config
    "TraversalStrategy",
    "WalkConfig",
    "parse_strategy",
    # Core
    "Walker",
    "Tracker",
    "SetTracker",
    "KeyedTracker",
    "LockingTracker",
    "always_visit",
    "as_tracker",
    # Algorithms
    "ShortestPath",
    "unweighted_shortest_paths_from",
    "unweighted_shortest_cycles_from",
    "detect_cycle_in_graph",
    # API
    "walk_graph",
    "walk_graph_from_all",
    "walk_with_config",
    "walk_with_config_from_all",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "has_cycle",
]
