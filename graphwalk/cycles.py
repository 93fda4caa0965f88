"""Cycle detection for GraphWalk.

Floyd's tortoise and hare, built from two tree-mode pre-order walks of the
same graph. No visited set is kept, so memory stays proportional to the
walk frontier rather than to the number of nodes seen.
"""

import logging
from itertools import islice
from typing import Any, Callable, Hashable, Iterable, Iterator, Optional

from .core.walker import Walker
from .shortest_path import unweighted_shortest_cycles_from

logger = logging.getLogger(__name__)


def detect_cycle_in_graph(find_successors: Callable[[Any], Optional[Iterable[Any]]],
                          start_node: Hashable) -> Iterator[Any]:
    """Detect a cycle reachable from ``start_node``.

    The slow walk (tortoise) advances one node per step and the fast walk
    (hare) two nodes per step, both in pre-order. If they ever land on the
    same node, the hare has lapped the tortoise and that node lies on a
    cycle, which is then extracted as a shortest cycle through it. Walks
    over a graph that reaches one node along two paths can also meet there;
    such meetings are skipped and the walks carry on.

    This hangs if the graph is infinite without a cycle (for example the
    natural numbers with ``n -> [n + 1]``). Callers walking structures that
    may be infinite must bound the search themselves.

    Args:
        find_successors: Function returning the successors of a node. Must be
            deterministic and idempotent, since it is called repeatedly for
            the same nodes.
        start_node: Node to start walking from

    Returns:
        Iterator over the nodes of a cycle that starts and ends at the same
        node, or an empty iterator if there is no cycle.

    Raises:
        TypeError: If find_successors is not callable
        ValueError: If start_node is None
    """
    walker = Walker.in_tree(find_successors)
    slower = walker.pre_order_from(start_node)
    faster = islice(walker.pre_order_from(start_node), 1, None, 2)
    for tortoise, hare in zip(slower, faster):
        if tortoise == hare:
            cycle = next(unweighted_shortest_cycles_from(tortoise, find_successors), None)
            if cycle is not None:
                logger.debug("Walks met at %r, extracting cycle", tortoise)
                return iter(cycle.nodes())
            # Repeated descendant reached along two paths, not a cycle
            logger.debug("Walks met at %r, which is not on a cycle", tortoise)
    logger.debug("No cycle reachable from %r", start_node)
    return iter(())
