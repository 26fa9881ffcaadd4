"""
Graph module for the graphsearch system.

This module provides:
- Graph storage with an adjacency list representation
- Per-query vertex search state
- Reachability, fewest-edges and minimum-weight path searches
- The ``SearchableGraph`` facade tying storage and search together
"""

from .base import BaseGraph, GraphPrimitive
from .searchable import SearchableGraph
from .state import SearchState, VertexState
from .traversal import (
    BreadthFirstFinder,
    DijkstraFinder,
    GraphSearch,
    PathFinder,
    PathResult,
    PathValidationError,
    PerformanceMetrics,
    ReachabilityFinder,
)

__all__ = [
    "BaseGraph",
    "GraphPrimitive",
    "SearchableGraph",
    "SearchState",
    "VertexState",
    "GraphSearch",
    "PathFinder",
    "ReachabilityFinder",
    "BreadthFirstFinder",
    "DijkstraFinder",
    "PathResult",
    "PathValidationError",
    "PerformanceMetrics",
]
