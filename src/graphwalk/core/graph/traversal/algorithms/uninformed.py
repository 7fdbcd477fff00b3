"""Breadth-first, depth-first and the direction-agnostic connectivity breadth-first step."""

from typing import TYPE_CHECKING, List

from graphwalk.core.enums import TraversalAlgorithm
from ..base import StepPolicy, parent_length

if TYPE_CHECKING:
    from graphwalk.core.graph.base import Graph
    from ..state import TraversalState


class _HopCountPolicy(StepPolicy):
    """
    Shared expansion of the unweighted algorithms.

    Neighbors already visited or already queued are skipped at insertion
    time, so a node is in the frontier at most once. Path length is the hop
    count from the start.
    """

    def candidates(self, graph: "Graph", index: int) -> List[int]:
        return graph.neighbors(index)

    def discover(self, state: "TraversalState", graph: "Graph", index: int) -> List[int]:
        length = parent_length(graph.get_metadata(index)) + 1.0
        skip = state.visited | self.queued(state)
        discovered: List[int] = []
        for neighbor in self.candidates(graph, index):
            if neighbor in skip:
                continue
            skip.add(neighbor)
            metadata = graph.get_metadata(neighbor)
            metadata.view()
            metadata.relax(index, length)
            discovered.append(neighbor)
        return discovered


class BreadthFirstPolicy(_HopCountPolicy):
    """FIFO frontier: new neighbors go to the back."""

    algorithm = TraversalAlgorithm.BREADTH_FIRST

    def expand(self, state: "TraversalState", graph: "Graph", index: int, priority: float) -> None:
        state.frontier.extend((0.0, neighbor) for neighbor in self.discover(state, graph, index))


class DepthFirstPolicy(_HopCountPolicy):
    """Stack-like frontier: new neighbors go before the remaining entries."""

    algorithm = TraversalAlgorithm.DEPTH_FIRST

    def expand(self, state: "TraversalState", graph: "Graph", index: int, priority: float) -> None:
        discovered = [(0.0, neighbor) for neighbor in self.discover(state, graph, index)]
        state.frontier[:0] = discovered


class SimpleBreadthPolicy(BreadthFirstPolicy):
    """
    Breadth-first over ``connections``, treating a directed graph as undirected.

    Used internally to test connectivity.
    """

    algorithm = TraversalAlgorithm.SIMPLE_BREADTH
    marks_start = False

    def candidates(self, graph: "Graph", index: int) -> List[int]:
        return graph.connections(index)
