"""
Directed, edge-weighted graph with observable search algorithms.

This module provides WeightedGraph, a general directed graph over any
hashable vertex type. Edges carry non-negative integer weights and there is
at most one edge per ordered vertex pair. The graph can run breadth-first
search, depth-first search and Dijkstra's algorithm, notifying its registered
observers as each algorithm progresses.

The graph exclusively owns its state. Queries return copies or immutable Edge
records, never the internal maps. Nothing here is thread-safe: callers that
share a graph across threads must serialize access themselves.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Hashable, Iterator, List, Optional, TypeVar

from .config import GraphConfig, NeighborOrder
from .events import AlgorithmEventManager, Observer
from .exceptions import DuplicateVertexError, InvalidEdgeError, VertexNotFoundError
from .models import Edge, PathResult
from .shortest_path import ShortestPathFinder
from .traversal import BreadthFirstSearch, DepthFirstSearch

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


@dataclass
class GraphState(Generic[V]):
    """Encapsulates the state of a graph."""

    adjacency: Dict[V, Dict[V, Edge[V]]] = field(default_factory=dict)
    edge_count: int = 0


class WeightedGraph(Generic[V]):
    """
    General directed graph with non-negative integer edge weights.

    Vertices are identified by value equality and never duplicated. Adding an
    edge for an ordered pair that already has one silently replaces its
    weight.

    Attributes:
        config (GraphConfig): Behavior options, see GraphConfig
        _state (GraphState): Vertices and their outgoing edges
        _events (AlgorithmEventManager): Registered algorithm observers

    Example:
        >>> graph = WeightedGraph()
        >>> for vertex in "ABC":
        ...     graph.add_vertex(vertex)
        >>> graph.add_edge("A", "B", 1)
        >>> graph.add_edge("B", "C", 2)
        >>> graph.shortest_path("A", "C").path
        ['A', 'B', 'C']
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config (Optional[GraphConfig]): Behavior options, defaults apply if omitted
        """
        self.config = config or GraphConfig()
        self._state: GraphState[V] = GraphState()
        self._events = AlgorithmEventManager()

    def add_observer(self, observer: Observer) -> None:
        """
        Add an observer notified by every algorithm run on this graph.

        Observers are never removed and duplicates are not detected.
        """
        self._events.add_observer(observer)

    def add_vertex(self, vertex: V) -> None:
        """
        Add a vertex with no outgoing edges.

        Raises:
            DuplicateVertexError: If the vertex is already in the graph
        """
        if self.contains_vertex(vertex):
            logger.debug(f"Rejected duplicate vertex {vertex!r}")
            raise DuplicateVertexError(f"Vertex {vertex!r} is already in the graph")
        self._state.adjacency[vertex] = {}
        logger.debug(f"Added vertex {vertex!r}")

    def contains_vertex(self, vertex: V) -> bool:
        """Check if a vertex exists in the graph."""
        return vertex in self._state.adjacency

    def add_edge(self, source: V, target: V, weight: int) -> None:
        """
        Add the directed edge source -> target, replacing any existing weight.

        Only the outgoing edges of ``source`` change; no reverse edge is added.
        The graph is left untouched when validation fails.

        Args:
            source: Vertex the edge leaves from
            target: Vertex the edge points to
            weight: Non-negative integer weight

        Raises:
            InvalidEdgeError: If either vertex is missing or the weight is invalid
        """
        self._require_vertices(source, target)
        if not isinstance(weight, int) or isinstance(weight, bool):
            logger.debug(f"Rejected edge {source!r} -> {target!r} with weight {weight!r}")
            raise InvalidEdgeError(f"Edge weight must be an integer, got {weight!r}")
        if weight < 0:
            logger.debug(f"Rejected edge {source!r} -> {target!r} with weight {weight}")
            raise InvalidEdgeError(f"Edge weight must be non-negative, got {weight}")

        outgoing = self._state.adjacency[source]
        if target not in outgoing:
            self._state.edge_count += 1
        outgoing[target] = Edge(source, target, weight)
        logger.debug(f"Added edge {source!r} -> {target!r} ({weight})")

    def get_weight(self, source: V, target: V) -> Optional[int]:
        """
        Get the weight of the edge source -> target.

        Returns:
            The weight, or None if both vertices exist but are not connected

        Raises:
            InvalidEdgeError: If either vertex is missing
        """
        self._require_vertices(source, target)
        edge = self._state.adjacency[source].get(target)
        return edge.weight if edge is not None else None

    def has_edge(self, source: V, target: V) -> bool:
        """Check if an edge exists between two vertices."""
        return target in self._state.adjacency.get(source, {})

    def vertices(self) -> List[V]:
        """Get all vertices in the order they were added."""
        return list(self._state.adjacency)

    def neighbors(self, vertex: V) -> List[V]:
        """
        Get the outgoing neighbors of a vertex in traversal order.

        Raises:
            VertexNotFoundError: If the vertex is missing
        """
        return [edge.target for edge in self.outgoing(vertex)]

    def outgoing(self, vertex: V) -> List[Edge[V]]:
        """
        Get the outgoing edges of a vertex in traversal order.

        Raises:
            VertexNotFoundError: If the vertex is missing
        """
        if not self.contains_vertex(vertex):
            raise VertexNotFoundError(f"Vertex {vertex!r} not found in the graph")
        edges = list(self._state.adjacency[vertex].values())
        if self.config.neighbor_order is NeighborOrder.SORTED:
            edges.sort(key=lambda edge: edge.target)
        return edges

    def edges(self) -> Iterator[Edge[V]]:
        """Get all edges in the graph."""
        for outgoing in self._state.adjacency.values():
            yield from list(outgoing.values())

    @property
    def edge_count(self) -> int:
        """Total number of directed edges."""
        return self._state.edge_count

    def bfs(self, start: V, end: V) -> List[V]:
        """
        Perform a breadth-first search from start, stopping once end is visited.

        Returns:
            Vertices in visit order

        Raises:
            VertexNotFoundError: If start or end is not in the graph
        """
        return BreadthFirstSearch(self, self._events).run(start, end)

    def dfs(self, start: V, end: V) -> List[V]:
        """
        Perform a depth-first search from start, stopping once end is visited.

        Returns:
            Vertices in visit order

        Raises:
            VertexNotFoundError: If start or end is not in the graph
        """
        return DepthFirstSearch(self, self._events).run(start, end)

    def shortest_path(self, start: V, end: V) -> PathResult[V]:
        """
        Perform Dijkstra's algorithm from start.

        The algorithm does not stop when end is finished; every vertex
        reachable from start is finished before the path to end is reported.

        Raises:
            VertexNotFoundError: If start or end is not in the graph
            NoPathError: If end is not reachable from start
        """
        return ShortestPathFinder(self, self._events).run(start, end)

    def _require_vertices(self, source: V, target: V) -> None:
        if not self.contains_vertex(source):
            raise InvalidEdgeError(f"Source vertex {source!r} not found in the graph")
        if not self.contains_vertex(target):
            raise InvalidEdgeError(f"Target vertex {target!r} not found in the graph")

    def __contains__(self, vertex: object) -> bool:
        return self.contains_vertex(vertex)  # type: ignore[arg-type]

    def __len__(self) -> int:
        """Return number of vertices."""
        return len(self._state.adjacency)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self)}, edges={self.edge_count})"
