"""Walker: reusable entry point for graph and tree walks.

The Walker binds a successor function and a node tracking policy. It holds
no traversal state itself; every ``*_from`` call starts a fresh Traversal,
so independent walks from the same Walker never interfere (unless they were
deliberately given a shared tracker).

Example:
    graph = {'a': ['b', 'c'], 'b': ['d'], 'c': [], 'd': []}
    walker = Walker.in_graph(graph.get)
    list(walker.pre_order_from('a'))   # ['a', 'b', 'd', 'c']
"""

import logging
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from ..config import TraversalStrategy, parse_strategy
from .tracker import SetTracker, always_visit
from .traversal import Traversal

logger = logging.getLogger(__name__)


class Walker:
    """Generic pre-order, post-order and breadth-first walks.

    All walks are lazy: they may be infinite when the graph has infinite
    depth or breadth, and can be short-circuited by simply not consuming
    any further. None of the returned iterators may be consumed from more
    than one thread.

    Use the ``in_tree`` and ``in_graph`` factories rather than the
    constructor.
    """

    def __init__(self, new_traversal: Callable[[], Traversal]):
        self._new_traversal = new_traversal

    @classmethod
    def in_tree(cls, find_children: Callable[[Any], Optional[Iterable[Any]]]) -> 'Walker':
        """Walker for tree structures (no cycles).

        No node tracking happens, so no memory is spent remembering visited
        nodes. WARNING: if ``find_children`` turns out to be cyclic, walks
        go around the cycle forever.

        Args:
            find_children: Function returning the children of a node.
                No children if None or an empty iterable is returned.
        """
        return cls.in_graph(find_children, always_visit)

    @classmethod
    def in_graph(cls,
                 find_successors: Callable[[Any], Optional[Iterable[Any]]],
                 tracker: Optional[Callable[[Any], bool]] = None) -> 'Walker':
        """Walker for graph structures, possibly with cycles.

        Without ``tracker``, each walk remembers the nodes it visited in a
        private set, so nodes must be hashable and memory is linear in the
        number of nodes visited.

        With ``tracker``, it is called before visiting any node and the node
        is skipped if it returns False. The same tracker is used by every
        walk this Walker starts, which allows custom equivalence
        (KeyedTracker), walks on several threads cooperating over one graph
        (LockingTracker), or approximate tracking with bounded memory
        (as_tracker over a Bloom filter).

        Args:
            find_successors: Function returning the successors of a node.
                No successors if None or an empty iterable is returned.
            tracker: Test-and-mark predicate, see ``graphwalk.core.tracker``

        Raises:
            TypeError: If find_successors or tracker is not callable
        """
        if not callable(find_successors):
            raise TypeError(
                f"find_successors must be callable, got {type(find_successors).__name__}"
            )
        if tracker is None:
            return cls(lambda: Traversal(find_successors, SetTracker()))
        if not callable(tracker):
            raise TypeError(f"tracker must be callable, got {type(tracker).__name__}")
        return cls(lambda: Traversal(find_successors, tracker))

    def pre_order_from(self, *start_nodes: Any) -> Iterator[Any]:
        """Start from ``start_nodes`` and walk depth first in pre-order.

        The result may be infinite if the graph has infinite depth or
        infinite breadth, or both.

        Raises:
            ValueError: If any start node is None
        """
        return self._start().pre_order(_non_none(start_nodes))

    def pre_order_from_all(self, start_nodes: Iterable[Any]) -> Iterator[Any]:
        """Like ``pre_order_from``, with start nodes from an iterable."""
        return self._start().pre_order(_checked(start_nodes))

    def post_order_from(self, *start_nodes: Any) -> Iterator[Any]:
        """Start from ``start_nodes`` and walk depth first in post-order.

        The result may be infinite if the graph has infinite breadth. It
        loops forever without emitting anything when it runs into a node
        with infinite depth.

        Raises:
            ValueError: If any start node is None
        """
        return self._start().post_order(_non_none(start_nodes))

    def post_order_from_all(self, start_nodes: Iterable[Any]) -> Iterator[Any]:
        """Like ``post_order_from``, with start nodes from an iterable."""
        return self._start().post_order(_checked(start_nodes))

    def breadth_first_from(self, *start_nodes: Any) -> Iterator[Any]:
        """Start from ``start_nodes`` and walk in breadth-first order.

        The result may be infinite if the graph has infinite depth or
        infinite breadth, or both.

        Raises:
            ValueError: If any start node is None
        """
        return self._start().breadth_first(_non_none(start_nodes))

    def breadth_first_from_all(self, start_nodes: Iterable[Any]) -> Iterator[Any]:
        """Like ``breadth_first_from``, with start nodes from an iterable."""
        return self._start().breadth_first(_checked(start_nodes))

    def walk(self, strategy: Union[TraversalStrategy, str], *start_nodes: Any) -> Iterator[Any]:
        """Walk from ``start_nodes`` in the order named by ``strategy``.

        Raises:
            ValueError: If strategy is unknown or any start node is None
        """
        strategy = parse_strategy(strategy)
        if strategy is TraversalStrategy.PRE_ORDER:
            return self.pre_order_from(*start_nodes)
        if strategy is TraversalStrategy.POST_ORDER:
            return self.post_order_from(*start_nodes)
        return self.breadth_first_from(*start_nodes)

    def walk_all(self, strategy: Union[TraversalStrategy, str],
                 start_nodes: Iterable[Any]) -> Iterator[Any]:
        """Like ``walk``, with start nodes from an iterable."""
        strategy = parse_strategy(strategy)
        if strategy is TraversalStrategy.PRE_ORDER:
            return self.pre_order_from_all(start_nodes)
        if strategy is TraversalStrategy.POST_ORDER:
            return self.post_order_from_all(start_nodes)
        return self.breadth_first_from_all(start_nodes)

    def _start(self) -> Traversal:
        traversal = self._new_traversal()
        logger.debug("Starting traversal session %#x", id(traversal))
        return traversal


def _non_none(values: tuple) -> list:
    for i, value in enumerate(values):
        if value is None:
            raise ValueError(f"start node at index {i} is None")
    return list(values)


def _checked(start_nodes: Iterable[Any]) -> Iterator[Any]:
    if start_nodes is None:
        raise TypeError("start_nodes must be an iterable, got None")
    # Drawn lazily, so start_nodes may itself be infinite
    return (_require_node(node) for node in start_nodes)


def _require_node(node: Any) -> Any:
    if node is None:
        raise ValueError("start node is None")
    return node
