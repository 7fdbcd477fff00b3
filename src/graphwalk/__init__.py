"""
graphwalk - Graph model and step-by-step search animation engine

This package provides the core of an interactive graph search visualizer:

- A graph model with per-node edge lists for directed and undirected graphs
- Resumable depth-first, breadth-first, Dijkstra and A* traversals that
  advance one node expansion at a time
- A driver for manual or timed stepping, safe to cancel mid-run
- Random graph generation with connectivity repair
"""

__version__ = "0.1.0"
__author__ = "graphwalk Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("graphwalk requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core.enums import NodeState, TraversalAlgorithm
from .core.graph import Graph, TraversalDriver, TraversalState
from .core.models import Edge, Node

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "NodeState",
    "TraversalAlgorithm",
    "TraversalDriver",
    "TraversalState",
]
