"""
Dijkstra and A* steps.

The frontier is a list re-sorted by ascending priority after every
expansion, so the front entry is always the cheapest candidate. A node can be
queued several times; entries for nodes already finalized are discarded when
popped. Edge weights are assumed non-negative.
"""

from operator import itemgetter
from typing import TYPE_CHECKING

from graphwalk.core.enums import TraversalAlgorithm
from graphwalk.core.models import Node, euclidean_distance
from ..base import StepPolicy, parent_length

if TYPE_CHECKING:
    from graphwalk.core.graph.base import Graph
    from ..state import TraversalState


class DijkstraPolicy(StepPolicy):
    """Priority is the cumulative path length of the candidate."""

    algorithm = TraversalAlgorithm.DIJKSTRA
    discards_visited = True

    def priority(self, candidate: float, current: Node, neighbor: Node) -> float:
        return candidate

    def expand(self, state: "TraversalState", graph: "Graph", index: int, priority: float) -> None:
        current = graph.get_node(index)
        length = parent_length(graph.get_metadata(index))

        for edge in current.edges:
            neighbor = edge.other(index)
            if neighbor in state.visited:
                continue

            metadata = graph.get_metadata(neighbor)
            metadata.view()
            candidate = length + edge.weight
            if metadata.improves(candidate):
                metadata.relax(index, candidate)

            state.frontier.append(
                (self.priority(candidate, current, graph.get_node(neighbor)), neighbor)
            )

        state.frontier.sort(key=itemgetter(0))


class AStarPolicy(DijkstraPolicy):
    """
    Dijkstra with a euclidean term added to the priority.

    The term is the distance from the node being expanded to the candidate
    neighbor, not from the neighbor to the goal.
    """

    algorithm = TraversalAlgorithm.A_STAR

    def priority(self, candidate: float, current: Node, neighbor: Node) -> float:
        return candidate + euclidean_distance(current.position, neighbor.position)
