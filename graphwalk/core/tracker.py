"""Node trackers for GraphWalk.

A tracker is consulted every time a walk is about to visit a node. It answers
one question, "should this node be visited?", and records the node as a side
effect so that the next time the same node shows up the answer is no.

Trackers are plain callables; any function or bound method with the
signature ``tracker(node) -> bool`` will do (``set().add`` is NOT one, since
it returns None). The classes here cover the common cases.
"""

import threading
from typing import Any, Callable, Hashable, Optional, Protocol, Set, Sized


class Tracker(Protocol):
    """Test-and-mark predicate deciding whether a node should be visited."""

    def __call__(self, node: Any) -> bool:
        ...


def always_visit(node: Any) -> bool:
    """Tracker for tree walks: never skips anything."""
    return True


class SetTracker:
    """Default tracker remembering visited nodes in a set.

    Nodes must be hashable. Memory grows linearly with the number of
    distinct nodes visited.
    """

    def __init__(self):
        self._seen: Set[Hashable] = set()

    def __call__(self, node: Hashable) -> bool:
        if node in self._seen:
            return False
        self._seen.add(node)
        return True

    def __contains__(self, node: Hashable) -> bool:
        return node in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(seen={len(self._seen)})"


class KeyedTracker(SetTracker):
    """Tracker using a custom equivalence.

    Two nodes are considered the same when ``key`` maps them to equal values.
    Useful for nodes that are not hashable themselves, or for coarser
    equivalences such as case-insensitive names.

    Example:
        tracker = KeyedTracker(str.lower)
        Walker.in_graph(find_links, tracker)
    """

    def __init__(self, key: Callable[[Any], Hashable]):
        if not callable(key):
            raise TypeError(f"key must be callable, got {type(key).__name__}")
        super().__init__()
        self._key = key

    def __call__(self, node: Any) -> bool:
        return super().__call__(self._key(node))

    def __contains__(self, node: Any) -> bool:
        return super().__contains__(self._key(node))


class LockingTracker:
    """Wraps a tracker so it can be shared by walks on different threads.

    The wrapped tracker's test-and-mark runs under a lock, so two threads
    can never both be told to visit the same node. ``len()`` works only
    when the wrapped tracker is sized, as SetTracker and KeyedTracker are.

    Example:
        shared = LockingTracker()
        walker = Walker.in_graph(building_map, shared)
        # thread 1: walker.pre_order_from(roof)
        # thread 2: walker.breadth_first_from(main_entrance)
    """

    def __init__(self, tracker: Optional[Callable[[Any], bool]] = None):
        if tracker is not None and not callable(tracker):
            raise TypeError(f"tracker must be callable, got {type(tracker).__name__}")
        self._tracker = tracker if tracker is not None else SetTracker()
        self._lock = threading.Lock()

    def __call__(self, node: Any) -> bool:
        with self._lock:
            return self._tracker(node)

    def __len__(self) -> int:
        """Number of nodes recorded; only available for sized trackers."""
        if not isinstance(self._tracker, Sized):
            raise TypeError(
                f"wrapped tracker {type(self._tracker).__name__} does not report its size"
            )
        with self._lock:
            return len(self._tracker)


def as_tracker(container: Any) -> Callable[[Any], bool]:
    """Adapt a set-like container into a tracker.

    ``container`` needs ``__contains__`` and ``add``. This is how an
    approximate membership structure (a Bloom filter, say) is plugged in:
    false positives cause some nodes to be skipped, but since such
    structures have no false negatives the walk can never loop forever.

    Args:
        container: Object supporting ``node in container`` and ``container.add(node)``

    Returns:
        Tracker callable backed by the container
    """
    if not (hasattr(container, '__contains__') and hasattr(container, 'add')):
        raise TypeError(
            f"{type(container).__name__} must support 'in' and add() to be used as a tracker"
        )

    def track(node: Any) -> bool:
        if node in container:
            return False
        container.add(node)
        return True

    return track
