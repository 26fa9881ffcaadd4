"""Breadth-first search for paths with the fewest edges."""

import logging
from collections import deque
from typing import Deque, Hashable, Optional

from ...state import SearchState
from ..base import PathFinder
from ..path_models import PathResult, PerformanceMetrics
from ..utils import checked_neighbors

logger = logging.getLogger(__name__)


class BreadthFirstFinder(PathFinder):
    """
    Find a path with the minimum number of edges.

    Vertices leave the FIFO frontier in non-decreasing hop distance from the
    start, and each vertex records the vertex it was first reached from. The
    first time the end vertex leaves the frontier, following those records
    back to the start gives a minimum edge-count path. Runs in O(V + E).
    """

    operation = "shortest_path"

    def _search(
        self, start: Hashable, end: Hashable, state: SearchState, metrics: PerformanceMetrics
    ) -> Optional[PathResult]:
        frontier: Deque[Hashable] = deque([start])
        state.mark_visited(start)

        while frontier:
            self.memory_manager.tick()
            vertex = frontier.popleft()
            metrics.nodes_explored += 1

            if vertex == end:
                vertices = state.reconstruct_path(start, end)
                if vertices is None:
                    return None
                return self._create_path_result(vertices, metrics)

            for neighbor in checked_neighbors(self.graph, vertex, state):
                if not state.is_visited(neighbor):
                    state.set_previous(neighbor, vertex)
                    state.mark_visited(neighbor)
                    frontier.append(neighbor)
                    logger.debug("Queued %r via %r", neighbor, vertex)

        return None
