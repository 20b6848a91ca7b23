"""
Custom exceptions for the graph system.

This module defines the hierarchy of exceptions raised by the graph store and
the graph algorithms. Every exception is a caller-input error: it is raised
synchronously, before any state is mutated, and is never retried.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    Base class for every error raised by the graph store and the graph
    algorithms, so callers can catch the whole family at once.

    Examples:
        * Invalid vertex operations
        * Edge creation failures
        * Searches over vertices the graph does not hold
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class DuplicateVertexError(GraphOperationError):
    """
    Raised when attempting to add a vertex that is already in the graph.

    Vertices have no identity beyond value equality, so a second vertex
    comparing equal to an existing one is rejected.
    """


class InvalidEdgeError(GraphOperationError):
    """
    Raised when an edge operation references invalid data.

    Examples:
        * Edge whose source or target is not a vertex of the graph
        * Edge with a negative weight
        * Weight lookup against a missing vertex
    """


class VertexNotFoundError(GraphOperationError):
    """
    Raised when a requested vertex is not in the graph.

    Examples:
        * Search started from a vertex that was never added
        * Search target that was never added
        * Neighbor lookup for a missing vertex
    """


class NoPathError(GraphOperationError):
    """Raised when a shortest-path run never reaches its end vertex."""
