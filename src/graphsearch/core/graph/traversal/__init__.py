"""
Graph search algorithms and path finding functionality.
"""

from .algorithms.breadth_first import BreadthFirstFinder
from .algorithms.reachability import ReachabilityFinder
from .algorithms.shortest_path import DijkstraFinder
from .base import GraphSearch, PathFinder
from .path_models import PathResult, PathValidationError, PerformanceMetrics
from .utils import IndexedPriorityQueue, MemoryManager, calculate_path_weight

# Re-export types and classes
__all__ = [
    "PathResult",
    "PathValidationError",
    "PerformanceMetrics",
    "GraphSearch",
    "PathFinder",
    "ReachabilityFinder",
    "BreadthFirstFinder",
    "DijkstraFinder",
    "IndexedPriorityQueue",
    "MemoryManager",
    "calculate_path_weight",
]
