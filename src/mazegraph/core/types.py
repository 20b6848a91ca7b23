"""
Core type definitions and protocols.

This module provides the protocol the graph algorithms rely on, so that the
algorithm classes can be written against the graph's read-only surface
without importing the graph store itself.
"""

from typing import Hashable, List, Protocol, TypeVar

from .models import Edge

V = TypeVar("V", bound=Hashable)


class GraphProtocol(Protocol[V]):
    """Protocol defining the graph operations algorithms need."""

    def contains_vertex(self, vertex: V) -> bool:
        """Check whether a vertex is in the graph."""
        ...

    def vertices(self) -> List[V]:
        """Get all vertices in insertion order."""
        ...

    def neighbors(self, vertex: V) -> List[V]:
        """Get outgoing neighbors of a vertex in traversal order."""
        ...

    def outgoing(self, vertex: V) -> List[Edge[V]]:
        """Get outgoing edges of a vertex in traversal order."""
        ...
