"""
Core domain models package for the graph traversal system.

This package provides the fundamental data structures that represent nodes,
edges and the per-run traversal metadata of a graph.
"""

from .base import (
    DEFAULT_WEIGHT,
    Position,
    euclidean_distance,
    validate_index,
    validate_weight,
)
from .edge import Edge
from .metadata import TraversalMetadata
from .node import Node

__all__ = [
    # Base utilities
    "DEFAULT_WEIGHT",
    "Position",
    "euclidean_distance",
    "validate_index",
    "validate_weight",
    # Models
    "Node",
    "Edge",
    "TraversalMetadata",
]
