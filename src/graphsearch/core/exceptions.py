"""
Custom exceptions for the graph search system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle invalid input, storage lookups and configuration problems in a structured
way. Failing to find a path is not an error: path queries return ``None`` and the
reachability query returns ``False`` in that case.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as malformed graph documents or invalid edge weights.

    Examples:
        * Graph document not matching the schema
        * Negative or non-finite edge weights
        * Path results inconsistent with the graph
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidArgumentError(ValidationError, ValueError):
    """
    Raised when a query or storage operation receives an invalid argument.

    Every query validates both endpoints before any traversal begins; a query
    failing validation performs no work.

    Examples:
        * ``None`` passed as a vertex
        * Explicit weight on an unweighted graph
    """


class VertexNotFoundError(InvalidArgumentError):
    """
    Raised when a vertex is not present in the graph.

    Examples:
        * Query endpoint never added to the graph
        * Removal of an unknown vertex
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Edge not found
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * Weight lookup for a missing edge
        * Removal of a missing edge
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    Examples:
        * Graph primitive returning neighbors it does not contain
        * Traversal aborted on a broken storage contract
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class StateAccessError(Exception):
    """
    Raised when per-vertex search state is used against its state machine.

    A vertex moves from unvisited to visited exactly once per query, and its
    cost and predecessor are frozen once it is visited.

    Examples:
        * Relaxing a vertex that was already finalized
        * Reading state for a vertex that was not part of the reset
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Negative memory limit
        * Non-positive memory check interval
        * Infinity sentinel not greater than zero
    """
