"""Depth-first reachability search."""

import logging
from typing import Hashable, Iterator, List, Tuple

from ...state import SearchState
from ..base import GraphSearch
from ..path_models import PerformanceMetrics
from ..utils import checked_neighbors

logger = logging.getLogger(__name__)


class ReachabilityFinder(GraphSearch[bool]):
    """
    Decide whether one vertex can be reached from another.

    The search goes depth-first, following neighbors in the order the graph
    storage yields them. Pending work is an explicit stack of
    ``(vertex, neighbor iterator)`` frames, so arbitrarily deep graphs are
    handled without recursion. Runs in O(V + E).
    """

    operation = "is_reachable"

    def is_reachable(self, start: Hashable, end: Hashable) -> bool:
        """Return True if a path leads from ``start`` to ``end``."""
        return self.run(start, end)

    def _search(
        self, start: Hashable, end: Hashable, state: SearchState, metrics: PerformanceMetrics
    ) -> bool:
        state.mark_visited(start)
        metrics.nodes_explored = 1
        if start == end:
            metrics.found = True
            return True

        stack: List[Tuple[Hashable, Iterator[Hashable]]] = [
            (start, iter(checked_neighbors(self.graph, start, state)))
        ]
        while stack:
            self.memory_manager.tick()
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if state.is_visited(neighbor):
                    continue
                state.mark_visited(neighbor)
                metrics.nodes_explored += 1
                logger.debug("Visiting %r from %r", neighbor, vertex)
                if neighbor == end:
                    metrics.found = True
                    return True
                stack.append((neighbor, iter(checked_neighbors(self.graph, neighbor, state))))
                break
            else:
                # All neighbors of this vertex exhausted
                stack.pop()

        return False
