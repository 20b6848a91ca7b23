"""
Dijkstra's single-source shortest path with observer notifications.

The algorithm does not terminate when the end vertex is reached. It keeps
finishing vertices until every vertex reachable from the start has a final
cost, so observers (and the returned PathResult) see full-graph cost
information. Only then is the least-cost path to the end rebuilt and
reported.

Vertices that have not been reached yet are simply absent from the cost map;
there is no numeric stand-in for infinity, so arbitrarily large path costs
relax correctly. Correctness relies on non-negative weights, which the graph
store enforces.
"""

import logging
from heapq import heappop, heappush
from typing import Dict, Hashable, List, Tuple, TypeVar

from .base import GraphAlgorithm
from .events import AlgorithmEvent
from .exceptions import NoPathError
from .models import PathResult

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


class ShortestPathFinder(GraphAlgorithm[V]):
    """
    Heap-based Dijkstra over a GraphProtocol.

    Among unfinished vertices of equal cost, the one added to the graph first
    is finished first, so runs on an unmodified graph are repeatable.

    Complexity:
        O(E log V) over the vertices reachable from the start.
    """

    def run(self, start: V, end: V) -> PathResult[V]:
        """
        Compute least-cost paths from start and report the one to end.

        Args:
            start: Source vertex, finished first with cost 0
            end: Vertex whose least-cost path is reported to observers

        Returns:
            PathResult with the path to end and the cost of every reachable vertex

        Raises:
            VertexNotFoundError: If start or end is not in the graph
            NoPathError: If end is not reachable from start
        """
        self.validate_vertices(start, end)
        logger.debug(f"Starting Dijkstra's algorithm from {start!r} to {end!r}")
        self.notify(AlgorithmEvent.dijkstra_begun())

        costs, predecessors = self._finish_all(start)

        if end not in costs:
            logger.info(f"No path from {start!r} to {end!r}")
            raise NoPathError(f"No path exists between {start!r} and {end!r}")

        path = self._rebuild_path(start, end, predecessors)
        logger.info(f"Least-cost path to {end!r} costs {costs[end]} over {len(path) - 1} edge(s)")
        self.notify(AlgorithmEvent.path_computed(path))
        return PathResult(path=path, total_cost=costs[end], costs=costs)

    def _finish_all(self, start: V) -> Tuple[Dict[V, int], Dict[V, V]]:
        """Run the relaxation loop until no reached vertex is left unfinished."""
        rank = {vertex: index for index, vertex in enumerate(self.graph.vertices())}

        tentative: Dict[V, int] = {start: 0}
        predecessors: Dict[V, V] = {}
        finished: Dict[V, int] = {}
        queue: List[Tuple[int, int, V]] = [(0, rank[start], start)]

        while queue:
            cost, _, vertex = heappop(queue)

            # Skip outdated entries
            if vertex in finished or cost != tentative[vertex]:
                continue

            finished[vertex] = cost
            logger.debug(f"Finished {vertex!r} with cost {cost}")
            self.notify(AlgorithmEvent.vertex_finished(vertex, cost))

            for edge in self.graph.outgoing(vertex):
                neighbor = edge.target
                if neighbor in finished:
                    continue
                candidate = cost + edge.weight
                known = tentative.get(neighbor)
                if known is None or candidate < known:
                    tentative[neighbor] = candidate
                    predecessors[neighbor] = vertex
                    heappush(queue, (candidate, rank[neighbor], neighbor))

        return finished, predecessors

    @staticmethod
    def _rebuild_path(start: V, end: V, predecessors: Dict[V, V]) -> List[V]:
        """Walk predecessor links back from end to start."""
        path = [end]
        while path[-1] != start:
            path.append(predecessors[path[-1]])
        path.reverse()
        return path
