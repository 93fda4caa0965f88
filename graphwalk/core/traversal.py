"""Traversal sessions for GraphWalk.

A Traversal is one stateful, single-use run of a walk. It holds the
frontier ("horizon") of pending successor iterators and expands it one node
per pull, so walks over infinite graphs make progress without ever
materializing more than what the consumer asked for.

Traversals are created by Walker; they are not part of the public API.
"""

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional


class Traversal:
    """Single-use traversal session.

    The horizon is a deque of iterators, one per expanded node (plus one for
    the start nodes). Pre-order treats it as a stack, breadth-first as a
    queue. Post-order treats it as a stack and additionally keeps the
    ancestors whose emission is deferred until their successors are done.

    A session must be consumed from a single thread. Exceptions raised by
    the successor function or the tracker propagate out of the pull that
    triggered them and leave the session unusable.
    """

    def __init__(self,
                 find_successors: Callable[[Any], Optional[Iterable[Any]]],
                 tracker: Callable[[Any], bool]):
        """Initialize a traversal session.

        Args:
            find_successors: Function returning the successors of a node
                (None or empty means no successors)
            tracker: Test-and-mark predicate; nodes it rejects are skipped
        """
        self._find_successors = find_successors
        self._tracker = tracker
        self._horizon: Deque[Iterator[Any]] = deque()
        self._visited: Any = None

    def pre_order(self, start_nodes: Iterable[Any]) -> Iterator[Any]:
        """Walk depth first, emitting each node before its successors."""
        self._horizon.appendleft(iter(start_nodes))
        return self._top_down(self._horizon.appendleft)

    def breadth_first(self, start_nodes: Iterable[Any]) -> Iterator[Any]:
        """Walk level by level."""
        self._horizon.append(iter(start_nodes))
        return self._top_down(self._horizon.append)

    def post_order(self, start_nodes: Iterable[Any]) -> Iterator[Any]:
        """Walk depth first, emitting each node after its successors.

        A node cannot be emitted until everything below it has been, so a
        node with infinite depth means nothing is ever emitted.
        """
        self._horizon.appendleft(iter(start_nodes))
        return self._bottom_up()

    def _top_down(self, insert: Callable[[Iterator[Any]], None]) -> Iterator[Any]:
        while self._horizon:
            if self._visit_next():
                node = self._visited
                successors = self._find_successors(node)
                if successors is not None:
                    insert(iter(successors))
                yield node

    def _bottom_up(self) -> Iterator[Any]:
        ancestors: Deque[Any] = deque()
        while self._horizon:
            if self._visit_next():
                node = self._visited
                successors = self._find_successors(node)
                if successors is None:
                    yield node
                else:
                    self._horizon.appendleft(iter(successors))
                    ancestors.appendleft(node)
            elif ancestors:
                # The layer just exhausted held the successors of this node
                yield ancestors.popleft()

    def _visit_next(self) -> bool:
        """Advance the front layer to its next trackable node.

        Returns:
            True with the node staged in ``_visited``, or False after
            discarding the exhausted front layer
        """
        top = self._horizon[0]
        for node in top:
            if node is None:
                raise ValueError("successor function produced None as a node")
            if self._tracker(node):
                self._visited = node
                return True
        self._horizon.popleft()
        return False
