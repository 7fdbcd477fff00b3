"""
Single-step graph traversal: per-run state, step policies and the driver.
"""

from .algorithms import (
    STEP_POLICIES,
    AStarPolicy,
    BreadthFirstPolicy,
    DepthFirstPolicy,
    DijkstraPolicy,
    SimpleBreadthPolicy,
    get_step_policy,
)
from .base import StepPolicy
from .connectivity import is_connected, reachable_nodes
from .driver import TraversalDriver
from .state import FrontierEntry, TraversalState
from .utils import hop_edge, path_nodes, path_weight, reconstruct_path

__all__ = [
    "StepPolicy",
    "STEP_POLICIES",
    "get_step_policy",
    "BreadthFirstPolicy",
    "DepthFirstPolicy",
    "SimpleBreadthPolicy",
    "DijkstraPolicy",
    "AStarPolicy",
    "TraversalState",
    "FrontierEntry",
    "TraversalDriver",
    "reachable_nodes",
    "is_connected",
    "reconstruct_path",
    "hop_edge",
    "path_nodes",
    "path_weight",
]
