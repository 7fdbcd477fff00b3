"""Shared test fixtures."""

import pytest

from graphwalk.core.graph import Graph


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def line_graph() -> Graph:
    """Undirected unweighted A-B-C (indices 0, 1, 2)."""
    graph = Graph(name="line")
    a = graph.add_node((0.0, 0.0), "A")
    b = graph.add_node((10.0, 0.0), "B")
    c = graph.add_node((20.0, 0.0), "C")
    graph.add_edge(a, b)
    graph.add_edge(b, c)
    return graph


@pytest.fixture
def weighted_triangle() -> Graph:
    """Undirected weighted A-B=5, B-C=1, A-C=3."""
    graph = Graph(name="triangle", weighted=True)
    a = graph.add_node((0.0, 0.0), "A")
    b = graph.add_node((0.0, 10.0), "B")
    c = graph.add_node((10.0, 0.0), "C")
    graph.add_edge(a, b, 5.0)
    graph.add_edge(b, c, 1.0)
    graph.add_edge(a, c, 3.0)
    return graph


@pytest.fixture
def directed_chain() -> Graph:
    """Directed A->B->C plus D->C, so C is a dead end and D is only reachable backwards."""
    graph = Graph(name="chain", directed=True)
    a = graph.add_node((0.0, 0.0), "A")
    b = graph.add_node((1.0, 0.0), "B")
    c = graph.add_node((2.0, 0.0), "C")
    d = graph.add_node((3.0, 0.0), "D")
    graph.add_edge(a, b)
    graph.add_edge(b, c)
    graph.add_edge(d, c)
    return graph


@pytest.fixture
def disconnected_graph() -> Graph:
    """Undirected A-B and a separate C-D."""
    graph = Graph(name="split")
    for i, name in enumerate("ABCD"):
        graph.add_node((float(i), 0.0), name)
    graph.add_edge(0, 1)
    graph.add_edge(2, 3)
    return graph
