"""
Searchable graph facade.

``SearchableGraph`` pairs a graph storage with the three searches and is the
object callers normally work with. It answers:

- ``is_reachable``: can the end vertex be reached at all (depth-first)
- ``shortest_path``: a path with the fewest edges (breadth-first)
- ``minimum_weight_path``: a path with the lowest total weight (Dijkstra)

Queries and mutations made through the facade hold one re-entrant lock, so a
graph instance runs one query at a time and never changes mid-query.
"""

from threading import RLock
from typing import Any, Hashable, Iterable, List, Optional, Sequence, Tuple

from ..config import SearchConfig
from ..exceptions import InvalidArgumentError
from .base import BaseGraph, GraphPrimitive
from .traversal.algorithms.breadth_first import BreadthFirstFinder
from .traversal.algorithms.reachability import ReachabilityFinder
from .traversal.algorithms.shortest_path import DijkstraFinder
from .traversal.base import GraphSearch
from .traversal.path_models import PathResult, PerformanceMetrics
from .traversal.utils import calculate_path_weight


class SearchableGraph:
    """
    High-level graph interface combining storage and search.

    Attributes:
        storage (GraphPrimitive): The underlying graph storage
        config (SearchConfig): Configuration used for every query
        last_metrics (Optional[PerformanceMetrics]): Metrics of the most recent query
    """

    def __init__(
        self,
        storage: Optional[GraphPrimitive] = None,
        directed: bool = False,
        weighted: bool = False,
        config: Optional[SearchConfig] = None,
    ):
        """
        Initialize the searchable graph.

        Args:
            storage: Existing graph storage. If None, a new empty
                ``BaseGraph`` is created with ``directed``/``weighted``.
            directed (bool): Whether a newly created storage is directed
            weighted (bool): Whether a newly created storage is weighted
            config: Search configuration; defaults to ``SearchConfig()``
        """
        self.storage: GraphPrimitive = (
            storage if storage is not None else BaseGraph(directed=directed, weighted=weighted)
        )
        self.config = config if config is not None else SearchConfig()
        self.last_metrics: Optional[PerformanceMetrics] = None
        self._lock = RLock()

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Any, ...]],
        directed: bool = False,
        weighted: bool = False,
        vertices: Optional[Iterable[Hashable]] = None,
        config: Optional[SearchConfig] = None,
    ) -> "SearchableGraph":
        """Create a searchable graph over a new ``BaseGraph`` built from edges."""
        storage = BaseGraph.from_edges(edges, directed=directed, weighted=weighted, vertices=vertices)
        return cls(storage, config=config)

    @property
    def directed(self) -> Optional[bool]:
        """Whether the storage is directed, or None if it does not say."""
        return getattr(self.storage, "directed", None)

    @property
    def weighted(self) -> Optional[bool]:
        """Whether the storage is weighted, or None if it does not say."""
        return getattr(self.storage, "weighted", None)

    def _base(self) -> BaseGraph:
        if not isinstance(self.storage, BaseGraph):
            raise InvalidArgumentError(
                f"{type(self.storage).__name__} storage does not support mutation"
            )
        return self.storage

    # Storage delegation

    def add_vertex(self, vertex: Hashable) -> bool:
        with self._lock:
            return self._base().add_vertex(vertex)

    def add_edge(self, from_vertex: Hashable, to_vertex: Hashable, weight: Any = None) -> None:
        with self._lock:
            self._base().add_edge(from_vertex, to_vertex, weight)

    def remove_edge(self, from_vertex: Hashable, to_vertex: Hashable) -> Any:
        with self._lock:
            return self._base().remove_edge(from_vertex, to_vertex)

    def remove_vertex(self, vertex: Hashable) -> None:
        with self._lock:
            self._base().remove_vertex(vertex)

    def get_vertices(self) -> List[Hashable]:
        return self.storage.get_vertices()

    def get_neighbors(self, vertex: Hashable) -> List[Hashable]:
        return self.storage.get_neighbors(vertex)

    def get_edge_weight(self, from_vertex: Hashable, to_vertex: Hashable) -> Any:
        return self.storage.get_edge_weight(from_vertex, to_vertex)

    def has_vertex(self, vertex: Hashable) -> bool:
        return self.storage.has_vertex(vertex)

    def __contains__(self, vertex: object) -> bool:
        return self.storage.has_vertex(vertex)

    def __len__(self) -> int:
        return len(self.storage.get_vertices())

    # Queries

    def _run(self, search: GraphSearch, start: Hashable, end: Hashable) -> Any:
        with self._lock:
            try:
                return search.run(start, end)
            finally:
                self.last_metrics = search.metrics

    def is_reachable(self, start: Hashable, end: Hashable) -> bool:
        """
        Check whether ``end`` can be reached from ``start``.

        Raises:
            InvalidArgumentError: If either vertex is None or not in the graph
        """
        return self._run(ReachabilityFinder(self.storage, self.config), start, end)

    def find_shortest_path(self, start: Hashable, end: Hashable) -> Optional[PathResult]:
        """Find a minimum edge-count path as a ``PathResult``, or None."""
        return self._run(BreadthFirstFinder(self.storage, self.config), start, end)

    def find_minimum_weight_path(self, start: Hashable, end: Hashable) -> Optional[PathResult]:
        """Find a minimum total-weight path as a ``PathResult``, or None."""
        return self._run(DijkstraFinder(self.storage, self.config), start, end)

    def shortest_path(self, start: Hashable, end: Hashable) -> Optional[List[Hashable]]:
        """
        Find a path from ``start`` to ``end`` with the fewest edges.

        Returns:
            Vertices from ``start`` to ``end`` inclusive, or None if unreachable

        Raises:
            InvalidArgumentError: If either vertex is None or not in the graph
        """
        result = self.find_shortest_path(start, end)
        return result.vertices if result is not None else None

    def minimum_weight_path(self, start: Hashable, end: Hashable) -> Optional[List[Hashable]]:
        """
        Find a path from ``start`` to ``end`` with the lowest total weight.

        Edge weights must be non-negative.

        Returns:
            Vertices from ``start`` to ``end`` inclusive, or None if unreachable

        Raises:
            InvalidArgumentError: If either vertex is None or not in the graph
        """
        result = self.find_minimum_weight_path(start, end)
        return result.vertices if result is not None else None

    def path_weight(self, path: Sequence[Hashable]) -> Any:
        """
        Sum the edge weights along a vertex sequence.

        Raises:
            EdgeNotFoundError: If two consecutive vertices are not joined by an edge
        """
        if not path:
            raise InvalidArgumentError("Path must contain at least one vertex")
        return calculate_path_weight(self.storage, list(path), self.config.zero)
