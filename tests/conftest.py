"""Shared test fixtures."""

import pytest

from mazegraph.core.events import EventRecorder
from mazegraph.core.graph import WeightedGraph


@pytest.fixture
def recorder() -> EventRecorder:
    """Fixture providing an observer that records every event."""
    return EventRecorder()


@pytest.fixture
def diamond_graph(recorder) -> WeightedGraph:
    """
    Fixture providing a diamond-shaped graph with a recorder attached.

    A -> B -> C and A -> D -> C, all with weight 1.
    """
    graph = WeightedGraph()
    for vertex in "ABCD":
        graph.add_vertex(vertex)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 1)
    graph.add_edge("A", "D", 1)
    graph.add_edge("D", "C", 1)
    graph.add_observer(recorder)
    return graph


@pytest.fixture
def weighted_graph(recorder) -> WeightedGraph:
    """
    Fixture providing a small weighted graph with a recorder attached.

    A -> B (1), A -> C (4), B -> C (1); D has no edges.
    """
    graph = WeightedGraph()
    for vertex in "ABCD":
        graph.add_vertex(vertex)
    graph.add_edge("A", "B", 1)
    graph.add_edge("A", "C", 4)
    graph.add_edge("B", "C", 1)
    graph.add_observer(recorder)
    return graph
