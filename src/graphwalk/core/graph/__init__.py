"""
Graph module for the graphwalk system.

This module provides the graph model and its traversal engine:
- Per-node edge lists for directed and undirected graphs
- A per-node traversal metadata table mutated in place by the active run
- Event notifications for graph modifications
- Resumable, single-step depth-first, breadth-first, Dijkstra and A* runs
"""

from .base import Connection, Graph
from .events import GraphEvent, GraphEventDetails, GraphEventListener, GraphEventManager
from .traversal import (
    TraversalDriver,
    TraversalState,
    is_connected,
    path_weight,
    reachable_nodes,
    reconstruct_path,
)
from ..exceptions import EdgeNotFoundError, NodeNotFoundError

__all__ = [
    "Graph",
    "Connection",
    "GraphEvent",
    "GraphEventDetails",
    "GraphEventListener",
    "GraphEventManager",
    "TraversalDriver",
    "TraversalState",
    "is_connected",
    "reachable_nodes",
    "reconstruct_path",
    "path_weight",
    "EdgeNotFoundError",
    "NodeNotFoundError",
]
