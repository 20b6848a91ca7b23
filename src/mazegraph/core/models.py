"""
Data models for the graph system.

This module defines the value objects shared by the graph store and the
algorithms:
- Edge: a directed, weighted connection between two vertices
- PathResult: the outcome of a shortest-path computation

Example:
    >>> edge = Edge(source="A", target="B", weight=3)
    >>> edge.key
    ('A', 'B')
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, Hashable, List, Tuple, TypeVar

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class Edge(Generic[V]):
    """
    A directed, weighted connection from ``source`` to ``target``.

    Edges are immutable. Overwriting the weight of a connection replaces the
    stored Edge with a new one.

    Attributes:
        source: Vertex the edge leaves from
        target: Vertex the edge points to
        weight: Non-negative integer cost of traversing the edge
    """

    source: V
    target: V
    weight: int

    def __post_init__(self):
        """Validate edge weight."""
        if not isinstance(self.weight, int) or isinstance(self.weight, bool):
            raise TypeError("weight must be an integer")
        if self.weight < 0:
            raise ValueError("weight must be non-negative")

    @property
    def key(self) -> Tuple[V, V]:
        """Ordered (source, target) pair identifying this edge."""
        return (self.source, self.target)

    def reversed(self) -> "Edge[V]":
        """Return the edge pointing the opposite way with the same weight."""
        return Edge(self.target, self.source, self.weight)


@dataclass
class PathResult(Generic[V]):
    """
    Container for shortest-path results.

    Attributes:
        path: Vertices from start to end, both included
        total_cost: Sum of edge weights along ``path``
        costs: Final minimum cost of every vertex reachable from start

    Example:
        >>> result = graph.shortest_path("A", "C")
        >>> result.path
        ['A', 'B', 'C']
        >>> result.costs["B"]
        1
    """

    path: List[V]
    total_cost: int
    costs: Dict[V, int] = field(default_factory=dict)

    @property
    def start(self) -> V:
        """First vertex of the path."""
        return self.path[0]

    @property
    def end(self) -> V:
        """Last vertex of the path."""
        return self.path[-1]

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return len(self.path) - 1
