"""
Resumable traversal state.

A ``TraversalState`` is one run of one algorithm between a fixed start and
goal. It holds nothing but its frontier and visited set; everything a
renderer shows (display states, predecessors, path lengths) is written into
the graph's metadata table as the run advances, one node expansion per
``step`` call.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Set, Tuple

from graphwalk.core.enums import TraversalAlgorithm
from .algorithms import get_step_policy
from .base import StepPolicy

if TYPE_CHECKING:
    from graphwalk.core.graph.base import Graph

logger = logging.getLogger(__name__)

FrontierEntry = Tuple[float, int]


@dataclass
class TraversalState:
    """
    Frontier and visited set of a single run.

    Attributes:
        algorithm (TraversalAlgorithm): Algorithm driving the run
        start_node (int): Index the run starts from
        end_node (Optional[int]): Goal index; None explores until the frontier is empty
        frontier (List[FrontierEntry]): Ordered ``(priority, index)`` candidates
        visited (Set[int]): Finalized nodes
        steps (int): Number of entries popped so far
        goal_reached (bool): Whether the goal has been finalized
        finished (bool): Whether the run has completed
    """

    algorithm: TraversalAlgorithm
    start_node: int
    end_node: Optional[int]
    frontier: List[FrontierEntry] = field(default_factory=list)
    visited: Set[int] = field(default_factory=set)
    steps: int = 0
    goal_reached: bool = False
    finished: bool = False
    _policy: StepPolicy = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._policy = get_step_policy(self.algorithm)

    @classmethod
    def new(
        cls, start_node: int, end_node: Optional[int], algorithm: TraversalAlgorithm
    ) -> "TraversalState":
        """Create a run whose frontier holds only the start node."""
        logger.debug(
            f"New {algorithm.display_name} traversal from {start_node} to {end_node}"
        )
        return cls(
            algorithm=algorithm,
            start_node=start_node,
            end_node=end_node,
            frontier=[(0.0, start_node)],
        )

    def step(self, graph: "Graph") -> bool:
        """
        Advance the run by one node expansion.

        Returns:
            bool: True once the frontier is exhausted or the goal was finalized.
                Stepping a finished run does nothing and returns True.
        """
        return self._policy.step(self, graph)

    def run_to_completion(self, graph: "Graph", max_steps: Optional[int] = None) -> int:
        """
        Step until the run finishes, or ``max_steps`` steps have been taken.

        Returns:
            int: Number of steps taken by this call
        """
        taken = 0
        while not self.finished and (max_steps is None or taken < max_steps):
            self.step(graph)
            taken += 1
        return taken

    @property
    def frontier_nodes(self) -> List[int]:
        return [index for _, index in self.frontier]
