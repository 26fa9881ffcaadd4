"""
Per-query vertex search state.

Searches keep their bookkeeping (visited flags, predecessors and costs) in a
side-table keyed by vertex identity instead of in the graph storage. A fresh
table is built and reset for every vertex at the start of each query and dropped
when the query returns, so results never leak between queries and the storage
stays free of query-specific mutation.

Each vertex follows a one-way state machine within a query: it starts unvisited
and may be relaxed (cost and predecessor rewritten) any number of times, then is
marked visited exactly once, after which its cost and predecessor are frozen.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Generic, Hashable, Iterable, Iterator, List, Optional, TypeVar

from ..exceptions import StateAccessError

V = TypeVar("V", bound=Hashable)


@dataclass
class VertexState(Generic[V]):
    """Transient search record for one vertex."""

    __slots__ = ("visited", "previous", "cost")

    visited: bool
    previous: Optional[V]
    cost: Any


class SearchState(Generic[V]):
    """
    Side-table mapping vertex identity to its :class:`VertexState`.

    Attributes:
        infinity: Default cost for vertices not yet reached
        _states (Dict[V, VertexState]): State per vertex in the last reset
    """

    def __init__(self, infinity: Any = math.inf):
        self.infinity = infinity
        self._states: Dict[V, VertexState[V]] = {}

    def reset(self, vertices: Iterable[V]) -> None:
        """Reset state to defaults for exactly the given vertices."""
        self._states = {
            vertex: VertexState(visited=False, previous=None, cost=self.infinity)
            for vertex in vertices
        }

    def _get(self, vertex: V) -> VertexState[V]:
        try:
            return self._states[vertex]
        except KeyError:
            raise StateAccessError(f"Vertex '{vertex}' has no search state in this query")

    def __getitem__(self, vertex: V) -> VertexState[V]:
        return self._get(vertex)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[V]:
        return iter(self._states)

    def is_visited(self, vertex: V) -> bool:
        return self._get(vertex).visited

    def mark_visited(self, vertex: V) -> None:
        """
        Move a vertex to the visited state.

        Raises:
            StateAccessError: If the vertex was already visited in this query
        """
        state = self._get(vertex)
        if state.visited:
            raise StateAccessError(f"Vertex '{vertex}' is already visited")
        state.visited = True

    def previous(self, vertex: V) -> Optional[V]:
        return self._get(vertex).previous

    def cost(self, vertex: V) -> Any:
        return self._get(vertex).cost

    def set_previous(self, vertex: V, previous: V) -> None:
        """
        Record the predecessor of an unvisited vertex.

        Raises:
            StateAccessError: If the vertex is already visited
        """
        state = self._get(vertex)
        if state.visited:
            raise StateAccessError(f"Cannot change predecessor of visited vertex '{vertex}'")
        state.previous = previous

    def set_cost(self, vertex: V, cost: Any) -> None:
        """
        Record the tentative cost of an unvisited vertex.

        Raises:
            StateAccessError: If the vertex is already visited
        """
        state = self._get(vertex)
        if state.visited:
            raise StateAccessError(f"Cannot change cost of visited vertex '{vertex}'")
        state.cost = cost

    def relax(self, vertex: V, cost: Any, previous: V) -> bool:
        """
        Lower a vertex's cost if ``cost`` improves on it.

        Args:
            vertex: Vertex being reached
            cost: Candidate cost through ``previous``
            previous: Vertex the candidate path arrives from

        Returns:
            bool: True if the cost and predecessor were updated
        """
        state = self._get(vertex)
        if state.visited:
            raise StateAccessError(f"Cannot relax visited vertex '{vertex}'")
        if not cost < state.cost:
            return False
        state.cost = cost
        state.previous = previous
        return True

    def reconstruct_path(self, start: V, end: V) -> Optional[List[V]]:
        """
        Rebuild the path ``start -> end`` from predecessor links.

        The walk begins at ``end`` and follows predecessors. The chain is only
        accepted if it stops exactly at ``start``; a chain that runs out of
        predecessors anywhere else, or that revisits a vertex, yields None.

        Returns:
            Optional[List[V]]: Vertices from ``start`` to ``end`` inclusive
        """
        path = [end]
        seen = {end}
        current = end
        while current != start:
            previous = self._get(current).previous
            if previous is None or previous in seen:
                return None
            path.append(previous)
            seen.add(previous)
            current = previous
        path.reverse()
        return path
