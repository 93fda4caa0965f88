"""Unweighted shortest paths for GraphWalk.

Breadth-first search over a successor function, yielding shortest paths
lazily in order of increasing length. Used by cycle detection to turn a
node known to be on a cycle into a concrete, minimal cycle.

Nodes must be hashable: the search remembers how it reached each node.
"""

from collections import deque
from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple


class ShortestPath:
    """A path from a start node to an end node, with cumulative distances.

    Each step is a ``(node, distance)`` pair where distance is measured from
    the start node. For unweighted paths the distance of a step is its
    index.
    """

    def __init__(self, steps: List[Tuple[Any, float]]):
        if not steps:
            raise ValueError("a path has at least one node")
        self._steps = tuple(steps)

    @classmethod
    def unweighted(cls, nodes: Iterable[Any]) -> 'ShortestPath':
        """Create a path where every edge has length 1."""
        return cls([(node, i) for i, node in enumerate(nodes)])

    def start(self) -> Any:
        return self._steps[0][0]

    def end(self) -> Any:
        return self._steps[-1][0]

    def distance(self) -> float:
        """Total distance from start to end."""
        return self._steps[-1][1]

    def steps(self) -> Tuple[Tuple[Any, float], ...]:
        return self._steps

    def nodes(self) -> List[Any]:
        return [node for node, _ in self._steps]

    def __iter__(self) -> Iterator[Any]:
        return (node for node, _ in self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShortestPath):
            return NotImplemented
        return self._steps == other._steps

    def __hash__(self) -> int:
        return hash(self._steps)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({' -> '.join(map(repr, self.nodes()))})"


def unweighted_shortest_paths_from(
        start: Hashable,
        find_successors: Callable[[Any], Optional[Iterable[Any]]]) -> Iterator[ShortestPath]:
    """Find shortest paths from ``start`` to every reachable node.

    Paths are yielded lazily in non-decreasing length, beginning with the
    zero-length path to ``start`` itself.

    Args:
        start: Node to search from
        find_successors: Function returning the successors of a node
            (None or empty means no successors)

    Raises:
        ValueError: If start is None
        TypeError: If find_successors is not callable
    """
    _check_arguments(start, find_successors)
    return _search(start, find_successors, cycles=False)


def unweighted_shortest_cycles_from(
        start: Hashable,
        find_successors: Callable[[Any], Optional[Iterable[Any]]]) -> Iterator[ShortestPath]:
    """Find shortest cycles through ``start``.

    Each result starts and ends at ``start``; they are yielded lazily,
    shortest first. A self loop is the cycle ``[start, start]``. The
    iterator is empty if ``start`` is not on any cycle and the reachable
    graph is finite; it never terminates if the reachable graph is infinite.

    Raises:
        ValueError: If start is None
        TypeError: If find_successors is not callable
    """
    _check_arguments(start, find_successors)
    return _search(start, find_successors, cycles=True)


def _check_arguments(start: Any, find_successors: Any) -> None:
    if start is None:
        raise ValueError("start node is None")
    if not callable(find_successors):
        raise TypeError(
            f"find_successors must be callable, got {type(find_successors).__name__}"
        )


def _search(start: Hashable,
            find_successors: Callable[[Any], Optional[Iterable[Any]]],
            cycles: bool) -> Iterator[ShortestPath]:
    predecessors: Dict[Hashable, Optional[Hashable]] = {start: None}
    queue = deque([start])
    if not cycles:
        yield ShortestPath.unweighted([start])
    while queue:
        node = queue.popleft()
        successors = find_successors(node)
        if successors is None:
            continue
        for successor in successors:
            if cycles and successor == start:
                yield ShortestPath.unweighted(_path_to(node, predecessors) + [start])
            if successor in predecessors:
                continue
            predecessors[successor] = node
            queue.append(successor)
            if not cycles:
                yield ShortestPath.unweighted(_path_to(successor, predecessors))


def _path_to(node: Hashable, predecessors: Dict[Hashable, Optional[Hashable]]) -> List[Any]:
    path = []
    while node is not None:
        path.append(node)
        node = predecessors[node]
    path.reverse()
    return path
