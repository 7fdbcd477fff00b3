"""
Utility functions for traversal results.
"""

import logging
import math
from typing import TYPE_CHECKING, List

from graphwalk.core.exceptions import EdgeNotFoundError, GraphOperationError
from graphwalk.core.models import Edge

if TYPE_CHECKING:
    from graphwalk.core.graph.base import Graph

logger = logging.getLogger(__name__)


def hop_edge(graph: "Graph", predecessor: int, node: int) -> Edge:
    """
    The edge a run used to go from ``predecessor`` to ``node``.

    The predecessor's own records are preferred; the node's records are only
    consulted for hops the direction-agnostic probe took against an edge's
    direction. Among parallel records the lightest wins.
    """
    for owner, other in ((predecessor, node), (node, predecessor)):
        records = [e for e in graph.get_node(owner).edges if e.connects(owner, other)]
        if records:
            weight = min(record.weight for record in records)
            return Edge(source=predecessor, target=node, weight=weight)
    raise EdgeNotFoundError(f"No edge joins {predecessor} and {node}")


def reconstruct_path(graph: "Graph", goal: int) -> List[Edge]:
    """
    Follow predecessors back from ``goal`` and return the hops in start-to-goal order.

    Returns an empty list when the goal was never reached (or is the start).

    Raises:
        GraphOperationError: If the predecessor chain loops
    """
    path: List[Edge] = []
    seen = {goal}
    current = goal
    predecessor = graph.get_metadata(current).predecessor

    while predecessor is not None:
        if predecessor in seen:
            raise GraphOperationError(f"Predecessor chain from {goal} loops at node {predecessor}")
        seen.add(predecessor)
        path.append(hop_edge(graph, predecessor, current))
        current = predecessor
        predecessor = graph.get_metadata(current).predecessor

    path.reverse()
    return path


def path_nodes(path: List[Edge]) -> List[int]:
    """Node indices visited by a start-to-goal path of edges."""
    if not path:
        return []
    return [path[0].source] + [edge.target for edge in path]


def path_weight(path: List[Edge]) -> float:
    """Total weight of a path."""
    total = 0.0
    for edge in path:
        total += edge.weight
        if math.isinf(total) or math.isnan(total):
            raise ValueError("Path cost overflow")
    return total
