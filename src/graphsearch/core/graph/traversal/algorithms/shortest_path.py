"""
Dijkstra's algorithm for minimum weight paths.
"""

import logging
from typing import Hashable, Optional

from ...state import SearchState
from ..base import PathFinder
from ..path_models import PathResult, PerformanceMetrics
from ..utils import IndexedPriorityQueue, checked_neighbors

# Configure logging
logger = logging.getLogger(__name__)


class DijkstraFinder(PathFinder):
    """
    Find a path with the minimum total edge weight.

    Edge weights must be non-negative; this is not re-checked here.
    ``BaseGraph`` refuses negative weights when edges are added.

    Every vertex is queued up front at infinite cost, except the start at
    zero cost. Each pop finalizes the cheapest unvisited vertex and relaxes
    its unvisited neighbors, re-prioritizing them with a decrease-key. The
    whole reachable component is settled even after the end vertex is, and
    the path is then read off the predecessor chain. Runs in O(E log V).
    """

    operation = "minimum_weight_path"

    def _search(
        self, start: Hashable, end: Hashable, state: SearchState, metrics: PerformanceMetrics
    ) -> Optional[PathResult]:
        infinity = self.config.infinity
        queue = IndexedPriorityQueue()
        for vertex in state:
            queue.add_or_update(vertex, infinity)
        state.set_cost(start, self.config.zero)
        queue.decrease_key(start, self.config.zero)

        while not queue.empty():
            self.memory_manager.tick()
            current_cost, current = queue.pop()
            if current_cost == infinity:
                # Everything left in the queue is unreachable from the start
                break

            state.mark_visited(current)
            metrics.nodes_explored += 1
            logger.debug("Settled %r at cost %s", current, current_cost)

            for neighbor in checked_neighbors(self.graph, current, state):
                if state.is_visited(neighbor):
                    continue
                candidate = current_cost + self.graph.get_edge_weight(current, neighbor)
                if state.relax(neighbor, candidate, current):
                    queue.decrease_key(neighbor, candidate)
                    logger.debug("  Relaxed %r to %s via %r", neighbor, candidate, current)

        vertices = state.reconstruct_path(start, end)
        if vertices is None:
            return None
        return self._create_path_result(vertices, metrics, total_weight=state.cost(end))
