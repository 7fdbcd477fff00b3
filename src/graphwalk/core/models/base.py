"""
Core domain models base module for the graph traversal system.

This module provides the validation helpers shared by the node and edge
models, plus the geometry used by the A* heuristic.
"""

import math
from typing import Tuple

Position = Tuple[float, float]

DEFAULT_WEIGHT = 1.0


def validate_weight(weight: float) -> None:
    """Validate that an edge weight is a finite number."""
    if not isinstance(weight, (int, float)) or math.isnan(weight) or math.isinf(weight):
        raise ValueError(f"Edge weight must be finite number, got {weight!r}")


def validate_index(name: str, index: int) -> None:
    """Validate that a node index is a non-negative integer."""
    if not isinstance(index, int) or isinstance(index, bool) or index < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {index!r}")


def euclidean_distance(a: Position, b: Position) -> float:
    """Straight line distance between two positions."""
    return math.hypot(a[0] - b[0], a[1] - b[1])
