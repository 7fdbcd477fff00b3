"""
Connectivity checks built on the direction-agnostic breadth-first step.
"""

import logging
from typing import TYPE_CHECKING, Set

from graphwalk.core.enums import TraversalAlgorithm
from .state import TraversalState

if TYPE_CHECKING:
    from graphwalk.core.graph.base import Graph

logger = logging.getLogger(__name__)


def reachable_nodes(graph: "Graph", start: int) -> Set[int]:
    """
    Nodes reachable from ``start`` when edge direction is ignored.

    Runs a goal-less simple breadth-first traversal until its frontier is
    exhausted. The graph's traversal metadata is reset afterwards.
    """
    graph.reset()
    state = TraversalState.new(start, None, TraversalAlgorithm.SIMPLE_BREADTH)
    try:
        state.run_to_completion(graph)
        return set(state.visited)
    finally:
        graph.reset()


def is_connected(graph: "Graph") -> bool:
    """Whether every node is reachable from the first one, ignoring direction."""
    indices = graph.node_indices
    if not indices:
        return True
    reached = reachable_nodes(graph, indices[0])
    logger.debug(f"Connectivity probe reached {len(reached)} of {len(indices)} nodes")
    return len(reached) == len(indices)
