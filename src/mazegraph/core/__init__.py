"""Core graph functionality."""

from .config import GraphConfig, NeighborOrder
from .events import (
    AlgorithmEvent,
    AlgorithmEventManager,
    AlgorithmEventType,
    EventRecorder,
    GraphAlgorithmObserver,
    Observer,
)
from .exceptions import (
    DuplicateVertexError,
    GraphOperationError,
    InvalidEdgeError,
    NoPathError,
    VertexNotFoundError,
)
from .models import Edge, PathResult
from .types import GraphProtocol
from .graph import WeightedGraph
from .traversal import BreadthFirstSearch, DepthFirstSearch
from .shortest_path import ShortestPathFinder

__all__ = [
    "AlgorithmEvent",
    "AlgorithmEventManager",
    "AlgorithmEventType",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DuplicateVertexError",
    "Edge",
    "EventRecorder",
    "GraphAlgorithmObserver",
    "GraphConfig",
    "GraphOperationError",
    "GraphProtocol",
    "InvalidEdgeError",
    "NeighborOrder",
    "NoPathError",
    "Observer",
    "PathResult",
    "ShortestPathFinder",
    "VertexNotFoundError",
    "WeightedGraph",
]
