"""
Enumeration types for the graph traversal system.

This module defines the closed sets of values used across the system:
the per-node display state written by a traversal run and the traversal
algorithms a run can be driven with.
"""

from enum import Enum


class NodeState(str, Enum):
    """Visitation state of a node during a traversal run."""

    UNVISITED = "unvisited"
    START = "start"
    SEEN = "seen"
    VISITED = "visited"
    GOAL = "goal"


class TraversalAlgorithm(str, Enum):
    """
    Algorithms available to a traversal run.

    SIMPLE_BREADTH is internal: it ignores edge direction and is only used
    for connectivity checks, so it is not part of ``values()``.
    """

    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"
    DIJKSTRA = "dijkstra"
    A_STAR = "a_star"
    SIMPLE_BREADTH = "simple_breadth"

    @property
    def display_name(self) -> str:
        """Human readable name for menus and logs."""
        return _DISPLAY_NAMES[self]

    @property
    def is_weighted(self) -> bool:
        """Whether the algorithm orders its frontier by path cost."""
        return self in (TraversalAlgorithm.DIJKSTRA, TraversalAlgorithm.A_STAR)

    @classmethod
    def values(cls) -> tuple["TraversalAlgorithm", ...]:
        """User selectable algorithms, in menu order."""
        return (cls.DEPTH_FIRST, cls.BREADTH_FIRST, cls.DIJKSTRA, cls.A_STAR)


_DISPLAY_NAMES = {
    TraversalAlgorithm.DEPTH_FIRST: "Depth First Search",
    TraversalAlgorithm.BREADTH_FIRST: "Breadth First Search",
    TraversalAlgorithm.DIJKSTRA: "Dijkstra's Shortest Path",
    TraversalAlgorithm.A_STAR: "A*",
    TraversalAlgorithm.SIMPLE_BREADTH: "Simple Breadth First Search",
}
