"""
Graph storage with an adjacency list representation.

This module provides the ``GraphPrimitive`` protocol, the read-only interface the
search algorithms consume, and ``BaseGraph``, an in-memory implementation of it.
``BaseGraph`` can be configured directed or undirected and weighted or unweighted.
Vertex enumeration and neighbor lists follow insertion order, so traversal order
is reproducible for a given sequence of insertions.

The implementation is pure storage: search state (visited flags, predecessors,
costs) never lives here and queries never mutate it.
"""

import math
from collections import defaultdict
from dataclasses import dataclass, field
from decimal import Decimal
from numbers import Rational, Real
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Protocol, Set, Tuple

from ..exceptions import EdgeNotFoundError, InvalidArgumentError, VertexNotFoundError

DEFAULT_EDGE_WEIGHT = 1


class GraphPrimitive(Protocol):
    """Read-only interface the searches use to inspect a graph."""

    def get_vertices(self) -> List[Any]:
        """Return every vertex currently in the graph."""

    def get_neighbors(self, vertex: Any) -> List[Any]:
        """Return vertices reachable from ``vertex`` by one edge."""

    def get_edge_weight(self, from_vertex: Any, to_vertex: Any) -> Any:
        """Return the weight of the edge ``from_vertex -> to_vertex``."""

    def has_vertex(self, vertex: Any) -> bool:
        """Check whether ``vertex`` is in the graph."""


def check_weight(weight: Any) -> None:
    """
    Check that a value is usable as an edge weight.

    Args:
        weight: Candidate weight

    Raises:
        InvalidArgumentError: If the weight is not a finite, non-negative number
    """
    if isinstance(weight, bool) or not isinstance(weight, (Real, Decimal)):
        raise InvalidArgumentError(f"Edge weight must be numeric, got {weight!r}")
    # Rationals are always finite and may not fit in a float
    if isinstance(weight, Decimal):
        finite = weight.is_finite()
    elif isinstance(weight, Rational):
        finite = True
    else:
        finite = math.isfinite(weight)
    if not finite:
        raise InvalidArgumentError("Edge weight must be finite number")
    if weight < 0:
        raise InvalidArgumentError(f"Edge weight must be non-negative, got {weight}")


@dataclass
class BaseGraph:
    """
    In-memory graph storage using an adjacency list representation.

    Undirected edges are stored once in each direction but counted once.
    Adding an edge for an ordered pair that already has one replaces its
    weight, so there is at most one edge per ordered pair.

    Attributes:
        directed (bool): Whether edges are one-way
        weighted (bool): Whether edges carry explicit weights
        _adjacency (Dict[Hashable, Dict[Hashable, Any]]): vertex -> {neighbor: weight}
        _reverse_index (Dict[Hashable, Set[Hashable]]): vertex -> vertices with an edge to it
        _vertices (Dict[Hashable, None]): Insertion-ordered vertex set
        _edge_count (int): Total number of edges
    """

    directed: bool = False
    weighted: bool = False
    _adjacency: Dict[Hashable, Dict[Hashable, Any]] = field(
        default_factory=lambda: defaultdict(dict)
    )
    _reverse_index: Dict[Hashable, Set[Hashable]] = field(
        default_factory=lambda: defaultdict(set)
    )
    _vertices: Dict[Hashable, None] = field(default_factory=dict)
    _edge_count: int = 0

    def add_vertex(self, vertex: Hashable) -> bool:
        """
        Add a vertex to the graph.

        Args:
            vertex (Hashable): The vertex identity

        Returns:
            bool: True if the vertex was added, False if it was already present

        Raises:
            InvalidArgumentError: If the vertex is None
        """
        if vertex is None:
            raise InvalidArgumentError("Vertex must not be None")
        if vertex in self._vertices:
            return False
        self._vertices[vertex] = None
        return True

    def add_vertices(self, vertices: Iterable[Hashable]) -> None:
        """Add several vertices, skipping those already present."""
        for vertex in vertices:
            self.add_vertex(vertex)

    def add_edge(self, from_vertex: Hashable, to_vertex: Hashable, weight: Any = None) -> None:
        """
        Add an edge, adding its endpoints if needed.

        Args:
            from_vertex (Hashable): Source vertex
            to_vertex (Hashable): Target vertex
            weight: Edge weight. Required on weighted graphs, rejected on
                unweighted graphs where every edge weighs 1.

        Raises:
            InvalidArgumentError: If a vertex is None or the weight is invalid
        """
        if from_vertex is None or to_vertex is None:
            raise InvalidArgumentError("Edge endpoints must not be None")
        if self.weighted:
            if weight is None:
                raise InvalidArgumentError("Weighted graph edges require a weight")
            check_weight(weight)
        else:
            if weight is not None:
                raise InvalidArgumentError("Unweighted graph edges cannot carry a weight")
            weight = DEFAULT_EDGE_WEIGHT

        self.add_vertex(from_vertex)
        self.add_vertex(to_vertex)

        if to_vertex not in self._adjacency[from_vertex]:
            self._edge_count += 1
        self._link(from_vertex, to_vertex, weight)
        if not self.directed:
            self._link(to_vertex, from_vertex, weight)

    def _link(self, from_vertex: Hashable, to_vertex: Hashable, weight: Any) -> None:
        self._adjacency[from_vertex][to_vertex] = weight
        self._reverse_index[to_vertex].add(from_vertex)

    def _unlink(self, from_vertex: Hashable, to_vertex: Hashable) -> None:
        del self._adjacency[from_vertex][to_vertex]
        self._reverse_index[to_vertex].discard(from_vertex)

        # Clean up empty adjacency entries
        if not self._adjacency[from_vertex]:
            del self._adjacency[from_vertex]
        if not self._reverse_index[to_vertex]:
            del self._reverse_index[to_vertex]

    def add_edges_batch(self, edges: Iterable[Tuple[Any, ...]]) -> None:
        """
        Add multiple edges to the graph.

        Args:
            edges: ``(from, to)`` pairs, or ``(from, to, weight)`` triples on
                weighted graphs
        """
        for edge in edges:
            self.add_edge(*edge)

    def remove_edge(self, from_vertex: Hashable, to_vertex: Hashable) -> Any:
        """
        Remove an edge from the graph.

        Args:
            from_vertex (Hashable): Source vertex
            to_vertex (Hashable): Target vertex

        Returns:
            The weight of the removed edge

        Raises:
            EdgeNotFoundError: If the edge doesn't exist
        """
        if not self.has_edge(from_vertex, to_vertex):
            raise EdgeNotFoundError(f"No edge exists from '{from_vertex}' to '{to_vertex}'")

        weight = self._adjacency[from_vertex][to_vertex]
        self._unlink(from_vertex, to_vertex)
        if not self.directed and from_vertex != to_vertex:
            self._unlink(to_vertex, from_vertex)
        self._edge_count -= 1
        return weight

    def remove_vertex(self, vertex: Hashable) -> None:
        """
        Remove a vertex and every edge touching it.

        Raises:
            VertexNotFoundError: If the vertex is not in the graph
        """
        if not self.has_vertex(vertex):
            raise VertexNotFoundError(f"Vertex '{vertex}' not found in the graph")

        for neighbor in list(self._adjacency.get(vertex, {})):
            if self.has_edge(vertex, neighbor):
                self.remove_edge(vertex, neighbor)
        for source in list(self._reverse_index.get(vertex, set())):
            if self.has_edge(source, vertex):
                self.remove_edge(source, vertex)
        del self._vertices[vertex]

    def get_neighbors(self, vertex: Hashable, reverse: bool = False) -> List[Hashable]:
        """
        Get all neighbors of a vertex.

        Args:
            vertex (Hashable): The vertex to get neighbors for
            reverse (bool): If True, get vertices with an edge into ``vertex``

        Returns:
            List[Hashable]: Neighbor vertices, outgoing ones in insertion order
        """
        if reverse:
            return list(self._reverse_index.get(vertex, set()))
        return list(self._adjacency.get(vertex, {}))

    def get_edge_weight(self, from_vertex: Hashable, to_vertex: Hashable) -> Any:
        """
        Get the weight of the edge between two vertices.

        Returns:
            The edge weight; 1 on unweighted graphs

        Raises:
            EdgeNotFoundError: If the edge doesn't exist
        """
        try:
            return self._adjacency[from_vertex][to_vertex]
        except KeyError:
            raise EdgeNotFoundError(f"No edge exists from '{from_vertex}' to '{to_vertex}'")

    def has_edge(self, from_vertex: Hashable, to_vertex: Hashable) -> bool:
        """Check if an edge exists between two vertices."""
        return to_vertex in self._adjacency.get(from_vertex, {})

    def has_vertex(self, vertex: Hashable) -> bool:
        """Check if a vertex exists in the graph."""
        if vertex is None:
            return False
        try:
            return vertex in self._vertices
        except TypeError:
            # Unhashable values can never be vertices
            return False

    def get_degree(self, vertex: Hashable, reverse: bool = False) -> int:
        """
        Get the degree of a vertex.

        Args:
            vertex (Hashable): The vertex to get degree for
            reverse (bool): If True, get in-degree instead of out-degree
        """
        if reverse:
            return len(self._reverse_index.get(vertex, set()))
        return len(self._adjacency.get(vertex, {}))

    def get_vertices(self) -> List[Hashable]:
        """Get all vertices in insertion order."""
        return list(self._vertices)

    def get_edges(self) -> Iterator[Tuple[Hashable, Hashable, Any]]:
        """
        Get all edges in the graph.

        Undirected edges are yielded once, oriented the way they were first added.

        Returns:
            Iterator[Tuple[Hashable, Hashable, Any]]: ``(from, to, weight)`` triples
        """
        seen: Set[Tuple[Hashable, Hashable]] = set()
        for from_vertex, targets in self._adjacency.items():
            for to_vertex, weight in targets.items():
                if not self.directed:
                    if (to_vertex, from_vertex) in seen:
                        continue
                    seen.add((from_vertex, to_vertex))
                yield from_vertex, to_vertex, weight

    def get_vertex_count(self) -> int:
        """Get the total number of vertices in the graph."""
        return len(self._vertices)

    def get_edge_count(self) -> int:
        """Get the total number of edges in the graph."""
        return self._edge_count

    def clear(self) -> None:
        """Clear all vertices and edges from the graph."""
        self._adjacency.clear()
        self._reverse_index.clear()
        self._vertices.clear()
        self._edge_count = 0

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Any, ...]],
        directed: bool = False,
        weighted: bool = False,
        vertices: Optional[Iterable[Hashable]] = None,
    ) -> "BaseGraph":
        """
        Create a new graph from a list of edges.

        Args:
            edges: Edge tuples accepted by :meth:`add_edges_batch`
            directed (bool): Whether edges are one-way
            weighted (bool): Whether edges carry weights
            vertices: Extra vertices to add first, e.g. isolated ones

        Returns:
            BaseGraph: New graph instance containing the edges
        """
        graph = cls(directed=directed, weighted=weighted)
        if vertices is not None:
            graph.add_vertices(vertices)
        graph.add_edges_batch(edges)
        return graph
