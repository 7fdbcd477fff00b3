"""Tests for the connectivity probe."""

from graphwalk.core.graph import Graph, is_connected, reachable_nodes


def test_reachable_nodes_in_split_graph(disconnected_graph):
    assert reachable_nodes(disconnected_graph, 0) == {0, 1}
    assert reachable_nodes(disconnected_graph, 3) == {2, 3}
    assert not is_connected(disconnected_graph)


def test_directed_graph_connectivity_ignores_direction(directed_chain):
    """Test that a node only reachable against edge direction still counts."""
    assert reachable_nodes(directed_chain, 0) == {0, 1, 2, 3}
    assert is_connected(directed_chain)


def test_probe_leaves_metadata_reset(line_graph):
    reachable_nodes(line_graph, 0)
    assert all(line_graph.get_metadata(i).is_default for i in line_graph.node_indices)


def test_trivial_graphs_are_connected():
    graph = Graph()
    assert is_connected(graph)
    graph.add_node((0.0, 0.0), "solo")
    assert is_connected(graph)
