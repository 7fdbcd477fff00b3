"""Tests for graph event notifications."""

import logging

import pytest

from graphwalk.core.graph import Graph, GraphEvent
from graphwalk.core.models import Edge


class RecordingListener:
    def __init__(self):
        self.events = []

    def on_state_change(self, event, details):
        self.events.append((event, details))


class FailingListener:
    def on_state_change(self, event, details):
        raise RuntimeError("listener broke")


def test_mutations_emit_events():
    """Test that each mutation notifies listeners with the affected nodes."""
    graph = Graph(weighted=True)
    listener = RecordingListener()
    graph.add_listener(listener)

    a = graph.add_node((0.0, 0.0), "A")
    b = graph.add_node((1.0, 0.0), "B")
    graph.add_edge(a, b, 2.0)
    graph.move_node(a, (3.0, 3.0))
    graph.remove_edge(Edge(a, b))
    graph.reset()
    graph.remove_node(b)

    kinds = [event for event, _ in listener.events]
    assert kinds == [
        GraphEvent.NODE_ADDED,
        GraphEvent.NODE_ADDED,
        GraphEvent.EDGE_ADDED,
        GraphEvent.NODE_MOVED,
        GraphEvent.EDGE_REMOVED,
        GraphEvent.GRAPH_RESET,
        GraphEvent.NODE_REMOVED,
    ]
    edge_added = listener.events[2][1]
    assert edge_added["nodes"] == [a, b]
    assert {"source": a, "target": b, "weight": 2.0} in edge_added["edges"]


def test_removing_missing_edge_is_silent():
    graph = Graph()
    listener = RecordingListener()
    a = graph.add_node((0.0, 0.0), "A")
    b = graph.add_node((1.0, 0.0), "B")
    graph.add_listener(listener)

    graph.remove_edge(Edge(a, b))

    assert listener.events == []


def test_rejected_add_node_emits_nothing():
    graph = Graph(weighted=True)
    listener = RecordingListener()
    a = graph.add_node((0.0, 0.0), "A")
    graph.add_listener(listener)

    with pytest.raises(ValueError):
        graph.add_node((1.0, 0.0), "B", [(a, float("nan"))])

    assert listener.events == []
    assert graph.node_count == 1


def test_failing_listener_does_not_block_others(caplog):
    """Test that a listener error is logged and the next listener still runs."""
    graph = Graph()
    recorder = RecordingListener()
    graph.add_listener(FailingListener())
    graph.add_listener(recorder)

    with caplog.at_level(logging.ERROR):
        graph.add_node((0.0, 0.0), "A")

    assert len(recorder.events) == 1
    assert "Error notifying listener" in caplog.text


def test_remove_listener():
    graph = Graph()
    listener = RecordingListener()
    graph.add_listener(listener)
    graph.add_listener(listener)
    assert graph.event_manager.listener_count == 1

    graph.remove_listener(listener)
    graph.add_node((0.0, 0.0), "A")

    assert listener.events == []
