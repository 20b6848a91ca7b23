"""Tests for the algorithm event system."""

import pytest

from mazegraph.core.events import (
    AlgorithmEvent,
    AlgorithmEventManager,
    AlgorithmEventType,
    EventRecorder,
    GraphAlgorithmObserver,
)


class CallLog(GraphAlgorithmObserver):
    """Observer that logs which handler method was called."""

    def __init__(self):
        self.calls = []

    def on_bfs_begun(self):
        self.calls.append(("bfs_begun",))

    def on_dfs_begun(self):
        self.calls.append(("dfs_begun",))

    def on_dijkstra_begun(self):
        self.calls.append(("dijkstra_begun",))

    def on_visit(self, vertex):
        self.calls.append(("visit", vertex))

    def on_search_over(self):
        self.calls.append(("search_over",))

    def on_vertex_finished(self, vertex, cost):
        self.calls.append(("vertex_finished", vertex, cost))

    def on_path_computed(self, path):
        self.calls.append(("path_computed", path))


def test_event_payloads():
    """Test that constructors set only the relevant payload."""
    visited = AlgorithmEvent.visited("A")
    assert visited.kind is AlgorithmEventType.VISITED
    assert visited.vertex == "A"
    assert visited.cost is None
    assert visited.path is None

    finished = AlgorithmEvent.vertex_finished("B", 7)
    assert (finished.vertex, finished.cost) == ("B", 7)

    computed = AlgorithmEvent.path_computed(["A", "B"])
    assert computed.path == ("A", "B")
    assert computed.vertex is None


def test_events_are_immutable():
    """Test that events cannot be modified by observers."""
    event = AlgorithmEvent.visited("A")
    with pytest.raises(AttributeError):
        event.vertex = "B"


def test_manager_notifies_in_registration_order():
    """Test broadcast order across observers."""
    manager = AlgorithmEventManager()
    calls = []
    manager.add_observer(lambda event: calls.append(("first", event.kind)))
    manager.add_observer(lambda event: calls.append(("second", event.kind)))

    manager.notify(AlgorithmEvent.bfs_begun())
    manager.notify(AlgorithmEvent.search_over())

    assert calls == [
        ("first", AlgorithmEventType.BFS_BEGUN),
        ("second", AlgorithmEventType.BFS_BEGUN),
        ("first", AlgorithmEventType.SEARCH_OVER),
        ("second", AlgorithmEventType.SEARCH_OVER),
    ]
    assert len(manager) == 2


def test_manager_does_not_isolate_errors():
    """Test that an observer error stops the broadcast."""
    manager = AlgorithmEventManager()
    recorder = EventRecorder()

    def failing(event):
        raise KeyError("boom")

    manager.add_observer(failing)
    manager.add_observer(recorder)

    with pytest.raises(KeyError):
        manager.notify(AlgorithmEvent.dfs_begun())
    assert recorder.events == []


def test_manager_observers_is_a_copy():
    """Test that the observer list cannot be changed from outside."""
    manager = AlgorithmEventManager()
    manager.add_observer(EventRecorder())
    manager.observers.clear()
    assert len(manager) == 1


def test_manager_rejects_non_callable():
    """Test that only callables can observe."""
    manager = AlgorithmEventManager()
    with pytest.raises(TypeError):
        manager.add_observer(42)


def test_observer_dispatch():
    """Test that each event kind reaches its handler method."""
    log = CallLog()
    for event in [
        AlgorithmEvent.bfs_begun(),
        AlgorithmEvent.dfs_begun(),
        AlgorithmEvent.dijkstra_begun(),
        AlgorithmEvent.visited("A"),
        AlgorithmEvent.search_over(),
        AlgorithmEvent.vertex_finished("A", 0),
        AlgorithmEvent.path_computed(["A", "B"]),
    ]:
        log(event)

    assert log.calls == [
        ("bfs_begun",),
        ("dfs_begun",),
        ("dijkstra_begun",),
        ("visit", "A"),
        ("search_over",),
        ("vertex_finished", "A", 0),
        ("path_computed", ["A", "B"]),
    ]


def test_observer_defaults_are_noops():
    """Test that unimplemented handlers ignore events."""
    observer = GraphAlgorithmObserver()
    observer(AlgorithmEvent.visited("A"))
    observer(AlgorithmEvent.path_computed(["A"]))


def test_observer_on_graph(diamond_graph):
    """Test a method-per-event observer attached to a graph."""
    log = CallLog()
    diamond_graph.add_observer(log)

    diamond_graph.shortest_path("A", "C")

    assert log.calls[0] == ("dijkstra_begun",)
    assert log.calls[-1] == ("path_computed", ["A", "B", "C"])


def test_recorder_views(recorder):
    """Test the convenience views of EventRecorder."""
    recorder(AlgorithmEvent.bfs_begun())
    recorder(AlgorithmEvent.visited("A"))
    recorder(AlgorithmEvent.vertex_finished("A", 0))

    assert recorder.kinds == [
        AlgorithmEventType.BFS_BEGUN,
        AlgorithmEventType.VISITED,
        AlgorithmEventType.VERTEX_FINISHED,
    ]
    assert recorder.visited == ["A"]
    assert recorder.finished == [("A", 0)]

    recorder.clear()
    assert recorder.events == []
