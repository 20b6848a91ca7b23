"""
Graph search algorithms with observer notifications.

This module provides breadth-first and depth-first search between a start and
an end vertex. Both share one contract and differ only in their frontier:
BFS takes the oldest discovered vertex (FIFO), DFS the newest (LIFO).

Notification protocol:
    1. A begin event (BFS_BEGUN or DFS_BEGUN) before anything is processed.
    2. VISITED for each vertex the first time it leaves the frontier.
    3. SEARCH_OVER right after the end vertex is visited, after which the
       search stops without touching the rest of the frontier.

If the end vertex is unreachable the frontier simply runs dry: no
SEARCH_OVER is sent and no error is raised.
"""

import logging
from abc import abstractmethod
from collections import deque
from typing import Deque, Hashable, List, Set, TypeVar

from .base import GraphAlgorithm
from .events import AlgorithmEvent

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


class GraphSearch(GraphAlgorithm[V]):
    """Base class for frontier-driven searches."""

    name = "search"

    @abstractmethod
    def begin_event(self) -> AlgorithmEvent[V]:
        """Event announcing the start of this search."""
        pass

    @abstractmethod
    def take(self, frontier: Deque[V]) -> V:
        """Remove and return the next vertex to process from the frontier."""
        pass

    def run(self, start: V, end: V) -> List[V]:
        """
        Search from start until end is visited or the frontier is empty.

        Vertices may sit in the frontier more than once; the visited check is
        made when a vertex is taken, so each vertex is visited at most once.

        Args:
            start: Vertex the search begins at
            end: The search terminates just after this vertex is visited

        Returns:
            Vertices in the order they were visited

        Raises:
            VertexNotFoundError: If start or end is not in the graph
        """
        self.validate_vertices(start, end)
        logger.debug(f"Starting {self.name} from {start!r} to {end!r}")
        self.notify(self.begin_event())

        frontier: Deque[V] = deque([start])
        visited: Set[V] = set()
        order: List[V] = []

        while frontier:
            vertex = self.take(frontier)
            if vertex in visited:
                continue

            visited.add(vertex)
            order.append(vertex)
            logger.debug(f"Visiting {vertex!r}")
            self.notify(AlgorithmEvent.visited(vertex))

            if vertex == end:
                logger.info(f"{self.name} reached {end!r} after {len(order)} visit(s)")
                self.notify(AlgorithmEvent.search_over())
                return order

            for neighbor in self.graph.neighbors(vertex):
                if neighbor not in visited:
                    frontier.append(neighbor)

        logger.info(f"{self.name} exhausted frontier without reaching {end!r}")
        return order


class BreadthFirstSearch(GraphSearch[V]):
    """Breadth-first search: explores vertices by increasing edge count."""

    name = "BFS"

    def begin_event(self) -> AlgorithmEvent[V]:
        return AlgorithmEvent.bfs_begun()

    def take(self, frontier: Deque[V]) -> V:
        return frontier.popleft()


class DepthFirstSearch(GraphSearch[V]):
    """Depth-first search: follows the most recently discovered vertex."""

    name = "DFS"

    def begin_event(self) -> AlgorithmEvent[V]:
        return AlgorithmEvent.dfs_begun()

    def take(self, frontier: Deque[V]) -> V:
        return frontier.pop()
