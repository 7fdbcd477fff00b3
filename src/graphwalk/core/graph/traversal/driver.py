"""
Traversal driver.

The driver decides when a traversal advances. It is ticked once per external
frame and performs at most one step per tick: in automatic mode once the
configured delay has elapsed since the previous step, in manual mode only
when a step was requested. Suspension is a plain monotonic clock comparison.
"""

import logging
import time
from typing import TYPE_CHECKING, Callable, List, Optional

from graphwalk.core.enums import NodeState, TraversalAlgorithm
from graphwalk.core.models import Edge
from .state import TraversalState
from .utils import reconstruct_path

if TYPE_CHECKING:
    from graphwalk.config import DriverSettings
    from graphwalk.core.graph.base import Graph

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

DEFAULT_STEP_DELAY = 0.25


class TraversalDriver:
    """
    Owns the lifecycle of one traversal run at a time.

    While a run is active the graph it steps over is locked against
    topology edits; the lock is released when the run finishes or is stopped.

    Attributes:
        algorithm (TraversalAlgorithm): Algorithm used by the next ``start``
        auto (bool): Step automatically on ``tick``
        traversal (Optional[TraversalState]): Active or last finished run
        currently_running (bool): Whether the run still has steps to take
        last_step_at (Optional[float]): Clock reading of the previous step
    """

    def __init__(
        self,
        algorithm: TraversalAlgorithm = TraversalAlgorithm.BREADTH_FIRST,
        auto: bool = False,
        step_delay: float = DEFAULT_STEP_DELAY,
        clock: Clock = time.monotonic,
    ):
        self.algorithm = algorithm
        self.auto = auto
        self.step_delay = step_delay
        self.traversal: Optional[TraversalState] = None
        self.currently_running = False
        self.last_step_at: Optional[float] = None
        self._clock = clock
        self._step_requested = False
        self._graph: Optional["Graph"] = None

    @classmethod
    def from_settings(
        cls, settings: "DriverSettings", clock: Clock = time.monotonic
    ) -> "TraversalDriver":
        return cls(
            algorithm=settings.algorithm,
            auto=settings.auto,
            step_delay=settings.step_delay_ms / 1000.0,
            clock=clock,
        )

    @property
    def step_delay(self) -> float:
        """Minimum number of seconds between automatic steps."""
        return self._step_delay

    @step_delay.setter
    def step_delay(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"step_delay must be non-negative, got {value}")
        self._step_delay = float(value)

    # Lifecycle

    def start(
        self,
        start_node: Optional[int],
        end_node: Optional[int],
        graph: "Graph",
    ) -> None:
        """
        Begin a new run from ``start_node`` to ``end_node`` over ``graph``.

        Does nothing when either node is unset or not held by ``graph``.
        Otherwise the graph previously bound to this driver is unlocked,
        ``graph`` is reset and locked, and a fresh run begins on it.
        """
        if start_node is None or end_node is None:
            logger.debug("Ignoring traversal start without both a start and an end node")
            return
        if not (graph.has_node(start_node) and graph.has_node(end_node)):
            logger.debug(f"Ignoring traversal start for unknown nodes {start_node}, {end_node}")
            return

        self._release()
        graph.reset()
        graph.locked = True
        self._graph = graph

        self.traversal = TraversalState.new(start_node, end_node, self.algorithm)
        self.currently_running = True
        self.last_step_at = None
        self._step_requested = False
        logger.info(
            f"Started {self.algorithm.display_name} from node {start_node} to node {end_node}"
        )

    def stop(self, graph: "Graph") -> None:
        """Abandon the run and clear every node's traversal metadata."""
        if self.traversal is not None:
            logger.info(f"Stopped {self.traversal.algorithm.display_name} traversal")
        self.traversal = None
        self.currently_running = False
        self.last_step_at = None
        self._step_requested = False
        self._release()
        graph.locked = False
        graph.reset()

    def _release(self) -> None:
        """Unlock the graph of the current or last run, if any."""
        if self._graph is not None:
            self._graph.locked = False
            self._graph = None

    # Stepping

    def request_step(self) -> None:
        """Ask for exactly one step on the next manual-mode ``tick``."""
        if self.currently_running:
            self._step_requested = True

    def tick(self, graph: "Graph") -> bool:
        """
        Called once per frame; performs one step or none.

        Returns:
            bool: True when no run is in progress (finished, stopped or never started)
        """
        if not self.currently_running:
            return True

        if self.auto:
            if self.last_step_at is not None and self._clock() - self.last_step_at < self.step_delay:
                return False
        elif not self._step_requested:
            return False

        self._step_requested = False
        return self._advance(graph)

    def step(self, graph: "Graph") -> bool:
        """Take exactly one step now, regardless of mode and delay."""
        if not self.currently_running:
            return True
        self._step_requested = False
        return self._advance(graph)

    def run_to_completion(self, graph: "Graph") -> None:
        """Step until the active run finishes."""
        while self.currently_running:
            self.step(graph)

    def _advance(self, graph: "Graph") -> bool:
        assert self.traversal is not None, "a running driver always holds a traversal"
        done = self.traversal.step(graph)
        self.last_step_at = self._clock()
        if done:
            self.currently_running = False
            self._release()
            outcome = "reached the goal" if self.traversal.goal_reached else "exhausted the frontier"
            logger.info(
                f"{self.traversal.algorithm.display_name} {outcome} "
                f"after {self.traversal.steps} steps"
            )
        return done

    # Queries

    @property
    def is_finished(self) -> bool:
        """Whether a run exists and has completed."""
        return self.traversal is not None and not self.currently_running

    def reached_goal(self, graph: "Graph") -> bool:
        if self.traversal is None or self.traversal.end_node is None:
            return False
        metadata = graph.try_get_metadata(self.traversal.end_node)
        return metadata is not None and metadata.state is NodeState.GOAL

    def path(self, graph: "Graph") -> List[Edge]:
        """Start-to-goal edges of the run, empty unless the goal was reached."""
        if not self.reached_goal(graph):
            return []
        assert self.traversal is not None and self.traversal.end_node is not None
        return reconstruct_path(graph, self.traversal.end_node)

    def frontier_names(self, graph: "Graph") -> List[str]:
        if self.traversal is None:
            return []
        return graph.names(self.traversal.frontier_nodes)

    def visited_names(self, graph: "Graph") -> List[str]:
        if self.traversal is None:
            return []
        return graph.names(sorted(self.traversal.visited))
