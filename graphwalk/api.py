"""High-level API for GraphWalk.

This module provides simple, functional interfaces for common walking
operations. These functions wrap Walker and WalkConfig for ease of use in
simple cases.
"""

from itertools import islice
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from .config import TraversalStrategy, WalkConfig
from .cycles import detect_cycle_in_graph

SuccessorFunction = Callable[[Any], Optional[Iterable[Any]]]


def walk_graph(
    start: Any,
    find_successors: SuccessorFunction,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    tree: bool = False,
    tracker: Optional[Callable[[Any], bool]] = None,
    limit: Optional[int] = None,
) -> Iterator[Any]:
    """Simple interface for walking a graph.

    Args:
        start: Starting node. Any value is a single node, including tuples;
            use walk_graph_from_all for several starting nodes.
        find_successors: Function returning the successors of a node
        strategy: Traversal strategy (pre_order, post_order, breadth_first
            or an alias such as dfs, dfs_post, bfs)
        tree: Skip visited-node tracking (structure must be acyclic)
        tracker: Custom tracker shared by this walk
        limit: Maximum number of nodes to emit

    Returns:
        Lazy iterator over the walked nodes

    Raises:
        ValueError: If the configuration is invalid or start is None

    Example:
        >>> graph = {1: [2, 3], 2: [4], 3: [], 4: []}
        >>> list(walk_graph(1, graph.get, strategy="bfs"))
        [1, 2, 3, 4]
    """
    config = WalkConfig(strategy=strategy, tree=tree, tracker=tracker, limit=limit)
    return walk_with_config(start, find_successors, config)


def walk_graph_from_all(
    start_nodes: Iterable[Any],
    find_successors: SuccessorFunction,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    tree: bool = False,
    tracker: Optional[Callable[[Any], bool]] = None,
    limit: Optional[int] = None,
) -> Iterator[Any]:
    """Like walk_graph, starting from every node in ``start_nodes``.

    Example:
        >>> graph = {1: [2], 2: [], 3: [2]}
        >>> list(walk_graph_from_all([1, 3], graph.get))
        [1, 2, 3]
    """
    config = WalkConfig(strategy=strategy, tree=tree, tracker=tracker, limit=limit)
    return walk_with_config_from_all(start_nodes, find_successors, config)


def walk_with_config(start: Any, find_successors: SuccessorFunction,
                     config: WalkConfig) -> Iterator[Any]:
    """Walk a graph from one node as described by ``config``."""
    walker = config.build_walker(find_successors)
    return _limited(walker.walk(config.strategy, start), config)


def walk_with_config_from_all(start_nodes: Iterable[Any], find_successors: SuccessorFunction,
                              config: WalkConfig) -> Iterator[Any]:
    """Walk a graph from several nodes as described by ``config``."""
    walker = config.build_walker(find_successors)
    return _limited(walker.walk_all(config.strategy, start_nodes), config)


def _limited(nodes: Iterator[Any], config: WalkConfig) -> Iterator[Any]:
    if config.limit is not None:
        return islice(nodes, config.limit)
    return nodes


def count_nodes(start: Any, find_successors: SuccessorFunction, **kwargs) -> int:
    """Count nodes reachable from ``start``.

    Only terminates for finite graphs, unless ``limit`` is given.

    Args:
        start: Starting node
        find_successors: Function returning the successors of a node
        **kwargs: Walk options (see walk_graph)

    Returns:
        Number of nodes walked
    """
    count = 0
    for _ in walk_graph(start, find_successors, **kwargs):
        count += 1
    return count


def find_nodes(start: Any, find_successors: SuccessorFunction,
               predicate: Callable[[Any], bool], **kwargs) -> Iterator[Any]:
    """Find nodes that match a predicate.

    Non-matching nodes are still expanded; only the output is filtered.

    Yields:
        Nodes for which predicate returns True, in walk order
    """
    for node in walk_graph(start, find_successors, **kwargs):
        if predicate(node):
            yield node


def get_leaf_nodes(start: Any, find_successors: SuccessorFunction, **kwargs) -> Iterator[Any]:
    """Get nodes without successors.

    The successor function is called a second time for every walked node,
    so it should be cheap and idempotent.

    Yields:
        Leaf nodes, in walk order
    """
    for node in walk_graph(start, find_successors, **kwargs):
        successors = find_successors(node)
        if successors is None or next(iter(successors), _MISSING) is _MISSING:
            yield node


def has_cycle(start: Any, find_successors: SuccessorFunction) -> bool:
    """Check whether a cycle is reachable from ``start``.

    Hangs on infinite acyclic graphs, like detect_cycle_in_graph.
    """
    return next(detect_cycle_in_graph(find_successors, start), _MISSING) is not _MISSING


_MISSING = object()
