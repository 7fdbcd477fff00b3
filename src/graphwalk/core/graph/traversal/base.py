"""Base class for single-step traversal algorithms."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from graphwalk.core.enums import TraversalAlgorithm
from graphwalk.core.models import TraversalMetadata

if TYPE_CHECKING:
    from graphwalk.core.graph.base import Graph
    from .state import TraversalState

logger = logging.getLogger(__name__)


def parent_length(metadata: TraversalMetadata) -> float:
    """Path length to extend from; the start node has none recorded and counts as 0."""
    return 0.0 if metadata.path_length is None else metadata.path_length


class StepPolicy(ABC):
    """
    One node expansion of a traversal algorithm.

    Every call to ``step`` removes exactly one entry from the front of the
    frontier, finalizes that node, expands its neighbors into the frontier
    according to the subclass's ordering rule and reports whether the run is
    finished: the frontier is empty or the goal was just finalized.
    """

    algorithm: ClassVar[TraversalAlgorithm]
    # The internal connectivity probe paints its start node like any other.
    marks_start: ClassVar[bool] = True
    # Priority based algorithms can queue a node more than once.
    discards_visited: ClassVar[bool] = False

    def step(self, state: "TraversalState", graph: "Graph") -> bool:
        if state.finished or not state.frontier:
            state.finished = True
            return True

        priority, index = state.frontier.pop(0)
        state.steps += 1

        if self.discards_visited and index in state.visited:
            logger.debug(f"{self.algorithm.name}: discarding stale entry for node {index}")
            state.finished = not state.frontier
            return state.finished

        metadata = graph.get_metadata(index)
        if self.marks_start and index == state.start_node:
            metadata.mark_start()
        else:
            metadata.visit()
        state.visited.add(index)

        if state.end_node is not None and index == state.end_node:
            metadata.mark_goal()
            state.goal_reached = True
            state.finished = True
            logger.debug(f"{self.algorithm.name}: reached goal {index} after {state.steps} steps")
            return True

        self.expand(state, graph, index, priority)
        logger.debug(
            f"{self.algorithm.name}: expanded node {index}, "
            f"frontier={len(state.frontier)} visited={len(state.visited)}"
        )
        state.finished = not state.frontier
        return state.finished

    @abstractmethod
    def expand(
        self, state: "TraversalState", graph: "Graph", index: int, priority: float
    ) -> None:
        """Discover the neighbors of the just finalized node ``index``."""

    @staticmethod
    def queued(state: "TraversalState") -> set[int]:
        return {index for _, index in state.frontier}
