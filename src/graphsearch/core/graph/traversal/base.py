"""Base classes for graph search algorithms."""

import logging
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Generic, Hashable, List, Optional, TypeVar

from graphsearch.core.config import SearchConfig
from graphsearch.core.exceptions import InvalidArgumentError, VertexNotFoundError
from ..base import GraphPrimitive
from ..state import SearchState
from .path_models import PathResult, PerformanceMetrics
from .utils import MemoryManager, calculate_path_weight, timer

logger = logging.getLogger(__name__)

# Type variable for search results
T = TypeVar("T")


class GraphSearch(ABC, Generic[T]):
    """
    Abstract base class for graph searches.

    ``run`` is the only entry point: it validates both endpoints, builds a
    search state reset for every vertex in the graph, and then hands over to
    the algorithm in ``_search``. Subclasses never touch the graph storage
    except through its read-only interface.
    """

    operation = "search"

    def __init__(self, graph: GraphPrimitive, config: Optional[SearchConfig] = None):
        """Initialize search with graph and optional configuration."""
        self.graph = graph
        self.config = config if config is not None else SearchConfig()
        self.memory_manager = MemoryManager(
            self.config.max_memory_mb, self.config.memory_check_interval
        )
        self.metrics: Optional[PerformanceMetrics] = None

    def validate_vertices(self, start: Hashable, end: Hashable) -> None:
        """
        Validate that both endpoints are usable.

        Raises:
            InvalidArgumentError: If either vertex is None
            VertexNotFoundError: If either vertex is not in the graph
        """
        if start is None:
            raise InvalidArgumentError("Start vertex must not be None")
        if end is None:
            raise InvalidArgumentError("End vertex must not be None")
        if not self.graph.has_vertex(start):
            raise VertexNotFoundError(f"Start vertex '{start}' not found")
        if not self.graph.has_vertex(end):
            raise VertexNotFoundError(f"End vertex '{end}' not found")

    def prepare_state(self, start: Hashable, end: Hashable) -> SearchState:
        """Validate endpoints and return a state reset for every vertex."""
        self.validate_vertices(start, end)
        state: SearchState = SearchState(infinity=self.config.infinity)
        state.reset(self.graph.get_vertices())
        return state

    @contextmanager
    def _search_context(self):
        """Context manager for search operations."""
        self.memory_manager.reset_peak_memory()
        try:
            yield
        finally:
            self.memory_manager.check_memory()

    def run(self, start: Hashable, end: Hashable) -> T:
        """
        Run the search from ``start`` to ``end``.

        Raises:
            InvalidArgumentError: If either endpoint is invalid; nothing is searched
        """
        state = self.prepare_state(start, end)
        metrics = PerformanceMetrics(operation=self.operation, start_time=time.time())
        self.metrics = metrics

        label = f"{self.operation} {start!r} -> {end!r}" if self.config.log_timings else ""
        with timer(label, logging.INFO), self._search_context():
            try:
                result = self._search(start, end, state, metrics)
            finally:
                metrics.end_time = time.time()
                metrics.max_memory_used = int(self.memory_manager.peak_memory_mb * 1024 * 1024)

        logger.debug(
            "%s from %r to %r: found=%s, explored=%d",
            self.operation,
            start,
            end,
            metrics.found,
            metrics.nodes_explored,
        )
        return result

    @abstractmethod
    def _search(
        self, start: Hashable, end: Hashable, state: SearchState, metrics: PerformanceMetrics
    ) -> T:
        """Run the algorithm on a freshly reset state."""
        pass


class PathFinder(GraphSearch[Optional[PathResult]]):
    """Search that produces a path, or None when the end is unreachable."""

    def find_path(self, start: Hashable, end: Hashable) -> Optional[PathResult]:
        """Find a path between two vertices."""
        return self.run(start, end)

    def _create_path_result(
        self, vertices: List[Hashable], metrics: PerformanceMetrics, total_weight: Any = None
    ) -> PathResult:
        """Wrap reconstructed vertices in a result, recording metrics."""
        if total_weight is None:
            total_weight = calculate_path_weight(self.graph, vertices, self.config.zero)
        result = PathResult(vertices=vertices, total_weight=total_weight)
        if self.config.validate_results:
            result.validate(self.graph, vertices[0], vertices[-1], self.config.zero)
        metrics.found = True
        metrics.path_length = result.length
        return result
