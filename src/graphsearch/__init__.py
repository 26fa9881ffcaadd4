"""
graphsearch: reachability, fewest-edges and minimum-weight path queries over
generic directed or undirected, weighted or unweighted graphs.
"""

from .core.config import SearchConfig
from .core.exceptions import InvalidArgumentError, VertexNotFoundError
from .core.graph import BaseGraph, PathResult, SearchableGraph

__version__ = "0.1.0"

__all__ = [
    "BaseGraph",
    "InvalidArgumentError",
    "PathResult",
    "SearchConfig",
    "SearchableGraph",
    "VertexNotFoundError",
    "__version__",
]
