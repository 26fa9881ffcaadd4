"""
Data models for graph path finding.

This module provides the core data structures used throughout the path finding package:
- PathResult: Container for path finding results with validation
- PerformanceMetrics: Container for query performance metrics
- PathValidationError: Exception for path validation failures

Example:
    >>> result = PathResult(vertices=["A", "C", "B"], total_weight=2)
    >>> result.length
    2
    >>> result.edges
    [('A', 'C'), ('C', 'B')]
"""

from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..base import GraphPrimitive


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Empty paths
    - Endpoints not matching the query
    - Consecutive vertices without an edge between them
    - Weight inconsistencies
    """

    pass


@dataclass
class PathResult:
    """
    Container for path finding results.

    Attributes:
        vertices: Vertices from start to end, inclusive
        total_weight: Sum of edge weights along the path

    Example:
        >>> result = PathResult(vertices=["A", "B", "C"], total_weight=2)
        >>> result.validate(graph)  # Verify path consistency
        >>> print(f"{result.start} reaches {result.end} in {result.length} hops")
    """

    vertices: List[Hashable]
    total_weight: Any

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.vertices, list):
            raise TypeError("vertices must be a list")

        if not self.vertices:
            raise PathValidationError("path must contain at least one vertex")

        if any(vertex is None for vertex in self.vertices):
            raise TypeError("vertices cannot contain None values")

    def __len__(self) -> int:
        """Return the number of vertices in the path."""
        return len(self.vertices)

    def __getitem__(self, index: int) -> Hashable:
        return self.vertices[index]

    def __iter__(self):
        return iter(self.vertices)

    @property
    def start(self) -> Hashable:
        return self.vertices[0]

    @property
    def end(self) -> Hashable:
        return self.vertices[-1]

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return len(self.vertices) - 1

    @property
    def edges(self) -> List[Tuple[Hashable, Hashable]]:
        """Consecutive ``(from, to)`` vertex pairs along the path."""
        return list(zip(self.vertices, self.vertices[1:]))

    def validate(
        self,
        graph: "GraphPrimitive",
        start: Optional[Hashable] = None,
        end: Optional[Hashable] = None,
        zero: Any = 0,
    ) -> None:
        """
        Validate the path's consistency.

        Performs validation checks:
        - Endpoints match ``start``/``end`` when given
        - Every vertex exists in the graph
        - Every consecutive pair is an edge of the graph
        - Total weight matches the sum of edge weights

        Args:
            graph: The graph the path was found in
            start: Expected first vertex
            end: Expected last vertex
            zero: Weight of the single-vertex path, in the cost type of the query

        Raises:
            PathValidationError: If any validation check fails
        """
        if start is not None and self.start != start:
            raise PathValidationError(f"Path starts at {self.start}, expected {start}")
        if end is not None and self.end != end:
            raise PathValidationError(f"Path ends at {self.end}, expected {end}")

        for vertex in self.vertices:
            if not graph.has_vertex(vertex):
                raise PathValidationError(f"Vertex {vertex} not found in graph")

        for i, (from_vertex, to_vertex) in enumerate(self.edges):
            if to_vertex not in graph.get_neighbors(from_vertex):
                raise PathValidationError(
                    f"Path discontinuity at step {i}: no edge from {from_vertex} to {to_vertex}"
                )

        from .utils import calculate_path_weight

        calculated = calculate_path_weight(graph, self.vertices, zero)
        if calculated != self.total_weight:
            raise PathValidationError(
                f"Weight mismatch: calculated {calculated} != stored {self.total_weight}"
            )


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the query
        start_time: Query start timestamp
        end_time: Query end timestamp (0.0 if not completed)
        path_length: Edge count of the found path (if applicable)
        found: Whether the query succeeded
        nodes_explored: Number of vertices taken off the frontier
        max_memory_used: Peak memory usage during the query (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="shortest_path", start_time=time())
        >>> # ... perform operation ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    found: bool = False
    nodes_explored: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if not isinstance(self.end_time, (int, float)):
            raise TypeError("end_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, bool, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "found": self.found,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }
