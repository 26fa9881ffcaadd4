"""Search algorithm implementations."""

from .breadth_first import BreadthFirstFinder
from .reachability import ReachabilityFinder
from .shortest_path import DijkstraFinder

__all__ = [
    "BreadthFirstFinder",
    "DijkstraFinder",
    "ReachabilityFinder",
]
