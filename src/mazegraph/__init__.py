"""
mazegraph - Observable graph search over weighted mazes

This package provides a generic directed, edge-weighted graph with
breadth-first search, depth-first search and Dijkstra's algorithm, each of
which reports its progress to registered observers. It includes:

- The graph store and its algorithms
- A tagged event type and observer helpers
- Construction of a graph from a grid-with-walls maze model
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("mazegraph requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core import (
    AlgorithmEvent,
    AlgorithmEventType,
    DuplicateVertexError,
    Edge,
    EventRecorder,
    GraphAlgorithmObserver,
    GraphConfig,
    GraphOperationError,
    InvalidEdgeError,
    NeighborOrder,
    NoPathError,
    PathResult,
    VertexNotFoundError,
    WeightedGraph,
)
from .maze import Juncture, MazeGraph, MazeModel, build_from_grid

__all__ = [
    "AlgorithmEvent",
    "AlgorithmEventType",
    "DuplicateVertexError",
    "Edge",
    "EventRecorder",
    "GraphAlgorithmObserver",
    "GraphConfig",
    "GraphOperationError",
    "InvalidEdgeError",
    "Juncture",
    "MazeGraph",
    "MazeModel",
    "NeighborOrder",
    "NoPathError",
    "PathResult",
    "VertexNotFoundError",
    "WeightedGraph",
    "build_from_grid",
]
