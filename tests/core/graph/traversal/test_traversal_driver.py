"""Tests for the traversal driver lifecycle and step timing."""

import pytest

from graphwalk.config import DriverSettings
from graphwalk.core.enums import NodeState, TraversalAlgorithm
from graphwalk.core.exceptions import InvalidOperationError
from graphwalk.core.graph import TraversalDriver
from graphwalk.core.graph.traversal import path_nodes, path_weight


def test_start_without_nodes_is_ignored(line_graph):
    """Test that an unset start or end node leaves the driver untouched."""
    driver = TraversalDriver()
    driver.start(None, 2, line_graph)
    driver.start(0, None, line_graph)
    assert driver.traversal is None
    assert not driver.currently_running


def test_start_with_unknown_node_is_ignored(line_graph):
    driver = TraversalDriver()
    driver.start(0, 99, line_graph)
    assert driver.traversal is None
    assert not line_graph.locked


def test_manual_mode_only_steps_on_request(line_graph, clock):
    """Test that ticks in manual mode never step spontaneously."""
    driver = TraversalDriver(clock=clock)
    driver.start(0, 2, line_graph)

    for _ in range(5):
        clock.advance(10.0)
        assert driver.tick(line_graph) is False
    assert driver.traversal.steps == 0

    driver.request_step()
    driver.tick(line_graph)
    driver.tick(line_graph)
    assert driver.traversal.steps == 1
    assert line_graph.get_metadata(0).state is NodeState.START


def test_auto_mode_waits_for_delay(line_graph, clock):
    """Test that auto stepping happens at most once per delay interval."""
    driver = TraversalDriver(auto=True, step_delay=0.5, clock=clock)
    driver.start(0, 2, line_graph)

    assert driver.tick(line_graph) is False
    assert driver.traversal.steps == 1

    clock.advance(0.2)
    driver.tick(line_graph)
    assert driver.traversal.steps == 1

    clock.advance(0.3)
    driver.tick(line_graph)
    assert driver.traversal.steps == 2

    clock.advance(0.5)
    assert driver.tick(line_graph) is True
    assert driver.traversal.steps == 3
    assert not driver.currently_running


def test_completion_clears_running_and_reports_path(line_graph):
    driver = TraversalDriver()
    driver.start(0, 2, line_graph)
    driver.run_to_completion(line_graph)

    assert driver.is_finished
    assert driver.reached_goal(line_graph)
    assert path_nodes(driver.path(line_graph)) == [0, 1, 2]
    assert driver.tick(line_graph) is True


def test_failed_run_has_no_path(disconnected_graph):
    driver = TraversalDriver(algorithm=TraversalAlgorithm.DIJKSTRA)
    driver.start(0, 3, disconnected_graph)
    driver.run_to_completion(disconnected_graph)

    assert driver.is_finished
    assert not driver.reached_goal(disconnected_graph)
    assert driver.path(disconnected_graph) == []


def test_stop_cancels_and_resets(line_graph):
    """Test that stopping mid-run discards the run and clears all metadata."""
    driver = TraversalDriver()
    driver.start(0, 2, line_graph)
    driver.step(line_graph)
    assert line_graph.locked

    driver.stop(line_graph)

    assert driver.traversal is None
    assert not driver.currently_running
    assert not line_graph.locked
    assert all(line_graph.get_metadata(i).is_default for i in line_graph.node_indices)


def test_stop_then_reset_is_idempotent(line_graph):
    driver = TraversalDriver()
    driver.start(0, 2, line_graph)
    driver.step(line_graph)

    driver.stop(line_graph)
    line_graph.reset()
    once = [line_graph.get_metadata(i) for i in line_graph.node_indices]
    once = [(m.state, m.predecessor, m.path_length) for m in once]

    driver.stop(line_graph)
    line_graph.reset()
    twice = [line_graph.get_metadata(i) for i in line_graph.node_indices]
    twice = [(m.state, m.predecessor, m.path_length) for m in twice]

    assert once == twice


def test_running_driver_locks_graph_edits(line_graph):
    driver = TraversalDriver()
    driver.start(0, 2, line_graph)
    with pytest.raises(InvalidOperationError):
        line_graph.add_edge(0, 2)
    driver.run_to_completion(line_graph)
    line_graph.add_edge(0, 2)
    assert 2 in line_graph.neighbors(0)


def test_restart_resets_previous_run(line_graph):
    """Test that starting a new run clears the metadata of the previous one."""
    driver = TraversalDriver()
    driver.start(0, 2, line_graph)
    driver.run_to_completion(line_graph)

    driver.algorithm = TraversalAlgorithm.DEPTH_FIRST
    driver.start(2, 0, line_graph)

    assert driver.traversal.algorithm is TraversalAlgorithm.DEPTH_FIRST
    assert all(line_graph.get_metadata(i).is_default for i in line_graph.node_indices)


def test_restart_without_stop_relaxes_from_scratch(weighted_triangle):
    """Test that a finished run's path lengths never leak into the next run."""
    driver = TraversalDriver(algorithm=TraversalAlgorithm.DIJKSTRA)
    driver.start(1, 0, weighted_triangle)
    driver.run_to_completion(weighted_triangle)

    driver.start(0, 1, weighted_triangle)
    driver.run_to_completion(weighted_triangle)

    path = driver.path(weighted_triangle)
    assert path_nodes(path) == [0, 2, 1]
    assert path_weight(path) == pytest.approx(4.0)
    assert weighted_triangle.get_metadata(0).predecessor is None


def test_starting_on_another_graph_unlocks_the_first(line_graph, weighted_triangle):
    driver = TraversalDriver()
    driver.start(0, 2, line_graph)
    driver.start(0, 2, weighted_triangle)

    assert not line_graph.locked
    assert weighted_triangle.locked
    line_graph.add_edge(0, 2)
    assert 2 in line_graph.neighbors(0)

    driver.run_to_completion(weighted_triangle)
    assert not weighted_triangle.locked


def test_stop_unlocks_the_bound_graph(line_graph, weighted_triangle):
    driver = TraversalDriver()
    driver.start(0, 2, line_graph)
    driver.stop(weighted_triangle)

    assert not line_graph.locked
    line_graph.add_edge(0, 2)


def test_debug_view_names(line_graph):
    driver = TraversalDriver()
    assert driver.frontier_names(line_graph) == []
    driver.start(0, 2, line_graph)
    driver.step(line_graph)
    assert driver.frontier_names(line_graph) == ["B"]
    assert driver.visited_names(line_graph) == ["A"]


def test_from_settings(clock):
    settings = DriverSettings(algorithm=TraversalAlgorithm.A_STAR, auto=True, step_delay_ms=40)
    driver = TraversalDriver.from_settings(settings, clock=clock)
    assert driver.algorithm is TraversalAlgorithm.A_STAR
    assert driver.auto
    assert driver.step_delay == pytest.approx(0.04)


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        TraversalDriver(step_delay=-1.0)
