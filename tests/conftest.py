"""Shared test fixtures."""

import random
from typing import Any, Dict, Hashable, Iterator, List

import pytest

from graphsearch.core.config import SearchConfig
from graphsearch.core.graph.base import BaseGraph
from graphsearch.core.graph.searchable import SearchableGraph


def simple_paths(graph: BaseGraph, start: Hashable, end: Hashable) -> Iterator[List[Hashable]]:
    """Enumerate every simple path between two vertices by exhaustive search."""
    if start == end:
        yield [start]
        return

    def extend(path: List[Hashable]) -> Iterator[List[Hashable]]:
        for neighbor in graph.get_neighbors(path[-1]):
            if neighbor in path:
                continue
            if neighbor == end:
                yield path + [neighbor]
            else:
                yield from extend(path + [neighbor])

    yield from extend([start])


def path_weight(graph: BaseGraph, path: List[Hashable]) -> Any:
    return sum(graph.get_edge_weight(a, b) for a, b in zip(path, path[1:]))


def random_graph(seed: int, directed: bool = True, weighted: bool = True) -> BaseGraph:
    """Build a small random graph with some isolated structure."""
    rng = random.Random(seed)
    vertex_count = rng.randint(2, 8)
    graph = BaseGraph(directed=directed, weighted=weighted)
    graph.add_vertices(range(vertex_count))
    for _ in range(rng.randint(0, vertex_count * 2)):
        a = rng.randrange(vertex_count)
        b = rng.randrange(vertex_count)
        graph.add_edge(a, b, rng.randint(0, 9) if weighted else None)
    return graph


@pytest.fixture
def chain_graph() -> SearchableGraph:
    """
    Directed, unweighted graph:
    A -> B -> C    D (isolated)
    """
    return SearchableGraph.from_edges(
        [("A", "B"), ("B", "C")], directed=True, vertices=["A", "B", "C", "D"]
    )


@pytest.fixture
def flight_graph() -> SearchableGraph:
    """
    Directed, weighted graph where the direct edge is the expensive one:
    A -(5)-> B
    A -(1)-> C -(1)-> B
    """
    return SearchableGraph.from_edges(
        [("A", "B", 5), ("A", "C", 1), ("C", "B", 1)], directed=True, weighted=True
    )


@pytest.fixture
def cyclic_graph() -> SearchableGraph:
    """
    Directed, weighted graph with cycles:
    A -> B -> C -> A
    |         |
    v         v
    D ------> E
    """
    return SearchableGraph.from_edges(
        [
            ("A", "B", 1),
            ("B", "C", 1),
            ("C", "A", 1),
            ("A", "D", 4),
            ("C", "E", 1),
            ("D", "E", 4),
        ],
        directed=True,
        weighted=True,
    )


@pytest.fixture
def social_graph() -> SearchableGraph:
    """Undirected, unweighted co-star graph for degrees of separation."""
    return SearchableGraph.from_edges(
        [
            ("Kevin Bacon", "Tom Hanks"),
            ("Tom Hanks", "Meg Ryan"),
            ("Meg Ryan", "Billy Crystal"),
            ("Kevin Bacon", "Julia Roberts"),
            ("Julia Roberts", "Billy Crystal"),
            ("Billy Crystal", "Robin Williams"),
        ],
        vertices=["Greta Garbo"],
    )


@pytest.fixture
def default_config() -> SearchConfig:
    return SearchConfig()


@pytest.fixture
def graph_document() -> Dict[str, Any]:
    """Graph document for a small flight network."""
    return {
        "directed": True,
        "weighted": True,
        "vertices": ["HNL"],
        "edges": [
            {"from": "SEA", "to": "PDX", "weight": 120},
            {"from": "SEA", "to": "SFO", "weight": 300},
            {"from": "PDX", "to": "SFO", "weight": 110},
            {"from": "SFO", "to": "LAX", "weight": 90},
        ],
    }


@pytest.fixture
def exhaustive_paths():
    """Enumerate all simple paths; reference answer for the searches."""
    return simple_paths


@pytest.fixture
def make_random_graph():
    return random_graph
