"""
Tests for the searchable graph facade.
"""

from threading import Thread

import pytest

from graphsearch import SearchableGraph
from graphsearch.core.config import SearchConfig
from graphsearch.core.exceptions import (
    EdgeNotFoundError,
    InvalidArgumentError,
    VertexNotFoundError,
)
from graphsearch.core.graph.traversal.path_models import PathResult


class DictGraph:
    """Read-only adjacency-dict storage that is not a BaseGraph."""

    def __init__(self, adjacency):
        self.adjacency = adjacency

    def get_vertices(self):
        return list(self.adjacency)

    def get_neighbors(self, vertex):
        return list(self.adjacency[vertex])

    def get_edge_weight(self, from_vertex, to_vertex):
        return self.adjacency[from_vertex][to_vertex]

    def has_vertex(self, vertex):
        return vertex in self.adjacency


def test_query_scenarios(chain_graph, flight_graph):
    assert chain_graph.shortest_path("A", "C") == ["A", "B", "C"]
    assert chain_graph.shortest_path("A", "D") is None
    assert chain_graph.is_reachable("A", "C") is True
    assert chain_graph.is_reachable("A", "D") is False
    assert flight_graph.minimum_weight_path("A", "B") == ["A", "C", "B"]
    assert flight_graph.minimum_weight_path("A", "A") == ["A"]


def test_result_objects(flight_graph):
    result = flight_graph.find_minimum_weight_path("A", "B")
    assert isinstance(result, PathResult)
    assert result.total_weight == 2

    hops = flight_graph.find_shortest_path("A", "B")
    assert hops.vertices == ["A", "B"]
    assert hops.total_weight == 5


def test_last_metrics_tracks_latest_query(flight_graph):
    assert flight_graph.last_metrics is None
    flight_graph.minimum_weight_path("A", "B")
    assert flight_graph.last_metrics.operation == "minimum_weight_path"
    assert flight_graph.last_metrics.found is True

    flight_graph.is_reachable("B", "A")
    assert flight_graph.last_metrics.operation == "is_reachable"
    assert flight_graph.last_metrics.found is False
    assert flight_graph.last_metrics.duration >= 0


def test_last_metrics_cleared_by_rejected_query(flight_graph):
    flight_graph.shortest_path("A", "B")
    with pytest.raises(VertexNotFoundError):
        flight_graph.shortest_path("A", "Z")
    assert flight_graph.last_metrics is None


def test_path_weight(flight_graph):
    assert flight_graph.path_weight(["A", "C", "B"]) == 2
    assert flight_graph.path_weight(["A"]) == 0
    with pytest.raises(EdgeNotFoundError):
        flight_graph.path_weight(["B", "A"])
    with pytest.raises(InvalidArgumentError):
        flight_graph.path_weight([])


def test_mutations_are_seen_by_later_queries(chain_graph):
    assert chain_graph.is_reachable("A", "D") is False
    chain_graph.add_edge("C", "D")
    assert chain_graph.shortest_path("A", "D") == ["A", "B", "C", "D"]

    chain_graph.remove_edge("B", "C")
    assert chain_graph.shortest_path("A", "D") is None

    chain_graph.remove_vertex("B")
    assert "B" not in chain_graph
    assert len(chain_graph) == 3
    with pytest.raises(VertexNotFoundError):
        chain_graph.is_reachable("B", "A")

    assert chain_graph.add_vertex("E") is True
    assert chain_graph.add_vertex("E") is False


def test_empty_facade():
    graph = SearchableGraph(directed=True, weighted=True)
    assert graph.directed is True
    assert graph.weighted is True
    assert len(graph) == 0
    graph.add_edge("x", "y", 2.5)
    assert graph.minimum_weight_path("x", "y") == ["x", "y"]
    assert graph.get_edge_weight("x", "y") == 2.5


def test_custom_storage():
    storage = DictGraph({"a": {"b": 4, "c": 1}, "b": {}, "c": {"b": 1}})
    graph = SearchableGraph(storage)
    assert graph.minimum_weight_path("a", "b") == ["a", "c", "b"]
    assert graph.shortest_path("a", "b") == ["a", "b"]
    assert graph.is_reachable("b", "a") is False
    assert graph.has_vertex("c")
    assert graph.get_neighbors("a") == ["b", "c"]
    assert graph.directed is None
    assert graph.weighted is None


def test_custom_storage_cannot_be_mutated():
    graph = SearchableGraph(DictGraph({"a": {}}))
    with pytest.raises(InvalidArgumentError, match="does not support mutation"):
        graph.add_vertex("b")


def test_config_is_shared_by_queries(flight_graph):
    graph = SearchableGraph(flight_graph.storage, config=SearchConfig(validate_results=True))
    assert graph.config.validate_results is True
    assert graph.minimum_weight_path("A", "B") == ["A", "C", "B"]


def test_repeated_queries_are_deterministic(social_graph):
    first = [social_graph.shortest_path("Kevin Bacon", "Robin Williams") for _ in range(5)]
    assert all(path == first[0] for path in first)


def test_concurrent_queries(cyclic_graph):
    results = []

    def query():
        for _ in range(20):
            results.append(cyclic_graph.minimum_weight_path("A", "E"))

    threads = [Thread(target=query) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 80
    assert all(path == ["A", "B", "C", "E"] for path in results)
