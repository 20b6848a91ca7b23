"""
Graph algorithm event system.

This module provides the observer protocol of the graph algorithms. Each
lifecycle point of a search is described by a single tagged event type,
AlgorithmEvent, and broadcast to every registered observer. An observer is any
callable accepting one event; GraphAlgorithmObserver is an optional base class
that routes events to one method per event kind.

Dispatch is synchronous and happens inline in the algorithm's control flow.
Observers are called in registration order and exceptions they raise are not
caught: they propagate to the caller and abort the algorithm in progress.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Generic, Hashable, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


class AlgorithmEventType(Enum):
    """Events that can occur while an algorithm runs."""

    BFS_BEGUN = auto()
    DFS_BEGUN = auto()
    DIJKSTRA_BEGUN = auto()
    VISITED = auto()
    SEARCH_OVER = auto()
    VERTEX_FINISHED = auto()
    PATH_COMPUTED = auto()


@dataclass(frozen=True)
class AlgorithmEvent(Generic[V]):
    """
    A single algorithm lifecycle event.

    Only the payload fields relevant to ``kind`` are set:
    VISITED carries ``vertex``, VERTEX_FINISHED carries ``vertex`` and
    ``cost``, PATH_COMPUTED carries ``path``. The begin events and
    SEARCH_OVER carry nothing.

    Attributes:
        kind (AlgorithmEventType): Type of event that occurred
        vertex (Optional[V]): Vertex visited or finished
        cost (Optional[int]): Final cost of a finished vertex
        path (Optional[Tuple[V, ...]]): Ordered path from start to end
    """

    kind: AlgorithmEventType
    vertex: Optional[V] = None
    cost: Optional[int] = None
    path: Optional[Tuple[V, ...]] = None

    @classmethod
    def bfs_begun(cls) -> "AlgorithmEvent[V]":
        return cls(AlgorithmEventType.BFS_BEGUN)

    @classmethod
    def dfs_begun(cls) -> "AlgorithmEvent[V]":
        return cls(AlgorithmEventType.DFS_BEGUN)

    @classmethod
    def dijkstra_begun(cls) -> "AlgorithmEvent[V]":
        return cls(AlgorithmEventType.DIJKSTRA_BEGUN)

    @classmethod
    def visited(cls, vertex: V) -> "AlgorithmEvent[V]":
        return cls(AlgorithmEventType.VISITED, vertex=vertex)

    @classmethod
    def search_over(cls) -> "AlgorithmEvent[V]":
        return cls(AlgorithmEventType.SEARCH_OVER)

    @classmethod
    def vertex_finished(cls, vertex: V, cost: int) -> "AlgorithmEvent[V]":
        return cls(AlgorithmEventType.VERTEX_FINISHED, vertex=vertex, cost=cost)

    @classmethod
    def path_computed(cls, path: List[V]) -> "AlgorithmEvent[V]":
        return cls(AlgorithmEventType.PATH_COMPUTED, path=tuple(path))


Observer = Callable[[AlgorithmEvent], Any]


@dataclass
class AlgorithmEventManager:
    """
    Holds algorithm observers and broadcasts events to them.

    The observer list only grows: there is no removal and no duplicate
    detection, so an observer registered twice is notified twice.

    Attributes:
        _observers (List[Observer]): Registered observers, in registration order
    """

    _observers: List[Observer] = field(default_factory=list)

    def add_observer(self, observer: Observer) -> None:
        """
        Register an observer.

        Args:
            observer (Observer): Callable receiving every AlgorithmEvent

        Raises:
            TypeError: If observer is not callable
        """
        if not callable(observer):
            raise TypeError(f"Observer must be callable, got {type(observer).__name__}")
        self._observers.append(observer)

    @property
    def observers(self) -> List[Observer]:
        """Registered observers, in registration order."""
        return list(self._observers)

    def notify(self, event: AlgorithmEvent) -> None:
        """
        Notify all observers of an event, in registration order.

        Args:
            event (AlgorithmEvent): The event that occurred
        """
        logger.debug(f"Dispatching {event.kind.name} to {len(self._observers)} observer(s)")
        for observer in self._observers:
            observer(event)

    def __len__(self) -> int:
        return len(self._observers)


class GraphAlgorithmObserver(Generic[V]):
    """
    Observer base class with one method per lifecycle event.

    Subclasses override the methods they care about; the rest are no-ops.
    Instances are callable and can be passed straight to
    ``WeightedGraph.add_observer``.

    Example:
        >>> class Printer(GraphAlgorithmObserver):
        ...     def on_visit(self, vertex):
        ...         print("visiting", vertex)
        >>> graph.add_observer(Printer())
    """

    def __call__(self, event: AlgorithmEvent[V]) -> None:
        kind = event.kind
        if kind is AlgorithmEventType.BFS_BEGUN:
            self.on_bfs_begun()
        elif kind is AlgorithmEventType.DFS_BEGUN:
            self.on_dfs_begun()
        elif kind is AlgorithmEventType.DIJKSTRA_BEGUN:
            self.on_dijkstra_begun()
        elif kind is AlgorithmEventType.VISITED:
            self.on_visit(event.vertex)
        elif kind is AlgorithmEventType.SEARCH_OVER:
            self.on_search_over()
        elif kind is AlgorithmEventType.VERTEX_FINISHED:
            self.on_vertex_finished(event.vertex, event.cost)
        elif kind is AlgorithmEventType.PATH_COMPUTED:
            self.on_path_computed(list(event.path or ()))

    def on_bfs_begun(self) -> None:
        """Called once before a breadth-first search processes anything."""

    def on_dfs_begun(self) -> None:
        """Called once before a depth-first search processes anything."""

    def on_dijkstra_begun(self) -> None:
        """Called once before Dijkstra's relaxation loop starts."""

    def on_visit(self, vertex: V) -> None:
        """Called each time a search visits a vertex."""

    def on_search_over(self) -> None:
        """Called when a search visits its end vertex."""

    def on_vertex_finished(self, vertex: V, cost: int) -> None:
        """Called when Dijkstra commits the final cost of a vertex."""

    def on_path_computed(self, path: List[V]) -> None:
        """Called once with the least-cost path from start to end."""


class EventRecorder(Generic[V]):
    """Observer that keeps every event it receives, in order."""

    def __init__(self):
        self.events: List[AlgorithmEvent[V]] = []

    def __call__(self, event: AlgorithmEvent[V]) -> None:
        self.events.append(event)

    @property
    def kinds(self) -> List[AlgorithmEventType]:
        """Kinds of the recorded events."""
        return [event.kind for event in self.events]

    @property
    def visited(self) -> List[V]:
        """Vertices from VISITED events, in visit order."""
        return [e.vertex for e in self.events if e.kind is AlgorithmEventType.VISITED]

    @property
    def finished(self) -> List[Tuple[V, int]]:
        """(vertex, cost) pairs from VERTEX_FINISHED events."""
        return [
            (e.vertex, e.cost)
            for e in self.events
            if e.kind is AlgorithmEventType.VERTEX_FINISHED
        ]

    def clear(self) -> None:
        """Forget all recorded events."""
        self.events.clear()
