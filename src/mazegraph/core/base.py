from abc import ABC, abstractmethod
from typing import Any, Generic, Hashable, TypeVar

from .events import AlgorithmEvent, AlgorithmEventManager
from .exceptions import VertexNotFoundError
from .types import GraphProtocol

V = TypeVar("V", bound=Hashable)


class GraphAlgorithm(ABC, Generic[V]):
    """Abstract base class for algorithms that report progress to observers."""

    def __init__(self, graph: GraphProtocol[V], events: AlgorithmEventManager):
        """Initialize algorithm with graph and the event manager to notify."""
        self.graph = graph
        self.events = events

    @abstractmethod
    def run(self, start: V, end: V) -> Any:
        """Run the algorithm from start towards end."""
        pass

    def notify(self, event: AlgorithmEvent[V]) -> None:
        """Broadcast an event to every registered observer."""
        self.events.notify(event)

    def validate_vertices(self, start: V, end: V) -> None:
        """Validate that vertices exist in graph."""
        if not self.graph.contains_vertex(start):
            raise VertexNotFoundError(f"Start vertex {start!r} not found")
        if not self.graph.contains_vertex(end):
            raise VertexNotFoundError(f"End vertex {end!r} not found")
