"""Core graph search components."""

from .config import SearchConfig
from .exceptions import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    InvalidArgumentError,
    ResourceNotFoundError,
    StateAccessError,
    ValidationError,
    VertexNotFoundError,
)

__all__ = [
    "SearchConfig",
    "ConfigurationError",
    "EdgeNotFoundError",
    "GraphOperationError",
    "InvalidArgumentError",
    "ResourceNotFoundError",
    "StateAccessError",
    "ValidationError",
    "VertexNotFoundError",
]
