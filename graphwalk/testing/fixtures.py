"""Test fixtures for GraphWalk consumers.

These fixtures describe small graphs in a compact form and let tests
observe how a walk drives the successor function, without every test
suite re-inventing its own adjacency dicts and call counters.
"""

from collections import Counter
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Tuple


class GraphFixture:
    """Adjacency-list graph usable as a successor function.

    Example:
        graph = GraphFixture({'A': ['B', 'C'], 'B': ['D']})
        list(Walker.in_graph(graph).pre_order_from('A'))  # ['A', 'B', 'D', 'C']

    Nodes missing from the mapping have no successors. With
    ``none_for_leaves=True`` such nodes report None rather than an empty
    list, which the walks treat the same way.
    """

    def __init__(self, edges: Dict[Hashable, Iterable[Hashable]], none_for_leaves: bool = False):
        self._edges: Dict[Hashable, List[Hashable]] = {
            node: list(successors) for node, successors in edges.items()
        }
        self._none_for_leaves = none_for_leaves

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[Hashable, Hashable]], **kwargs) -> 'GraphFixture':
        """Build from ``(source, target)`` pairs, keeping their order."""
        adjacency: Dict[Hashable, List[Hashable]] = {}
        for source, target in edges:
            adjacency.setdefault(source, []).append(target)
        return cls(adjacency, **kwargs)

    @classmethod
    def chain(cls, *nodes: Hashable) -> 'GraphFixture':
        """Build ``nodes[0] -> nodes[1] -> ... -> nodes[-1]``."""
        return cls.from_edges(zip(nodes, nodes[1:]))

    @classmethod
    def ring(cls, *nodes: Hashable) -> 'GraphFixture':
        """Build a chain whose last node points back to the first."""
        return cls.from_edges(zip(nodes, nodes[1:] + nodes[:1]))

    def __call__(self, node: Hashable) -> Optional[List[Hashable]]:
        successors = self._edges.get(node)
        if successors:
            return list(successors)
        return None if self._none_for_leaves else []

    def nodes(self) -> List[Hashable]:
        """All nodes mentioned by the graph, sources first."""
        seen = dict.fromkeys(self._edges)
        for successors in self._edges.values():
            seen.update(dict.fromkeys(successors))
        return list(seen)


class RecordingSuccessors:
    """Wraps a successor function and records every node it is asked about.

    Useful for checking that a walk is lazy, i.e. that it only expands the
    nodes it has actually emitted.
    """

    def __init__(self, find_successors: Callable[[Any], Optional[Iterable[Any]]]):
        self._find_successors = find_successors
        self.calls: List[Any] = []

    def __call__(self, node: Any) -> Optional[Iterable[Any]]:
        self.calls.append(node)
        return self._find_successors(node)

    @property
    def call_counts(self) -> Counter:
        return Counter(self.calls)

    def reset(self) -> None:
        self.calls.clear()


def naturals(n: int) -> List[int]:
    """Infinite chain successor function: ``n -> [n + 1]``."""
    return [n + 1]
