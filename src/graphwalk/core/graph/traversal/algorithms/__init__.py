"""Step policies, one per traversal algorithm."""

from typing import Dict, Type

from graphwalk.core.enums import TraversalAlgorithm
from ..base import StepPolicy
from .uninformed import BreadthFirstPolicy, DepthFirstPolicy, SimpleBreadthPolicy
from .weighted import AStarPolicy, DijkstraPolicy

STEP_POLICIES: Dict[TraversalAlgorithm, Type[StepPolicy]] = {
    policy.algorithm: policy
    for policy in (
        BreadthFirstPolicy,
        DepthFirstPolicy,
        DijkstraPolicy,
        AStarPolicy,
        SimpleBreadthPolicy,
    )
}


def get_step_policy(algorithm: TraversalAlgorithm) -> StepPolicy:
    """Instantiate the step policy for ``algorithm``."""
    return STEP_POLICIES[algorithm]()


__all__ = [
    "STEP_POLICIES",
    "get_step_policy",
    "BreadthFirstPolicy",
    "DepthFirstPolicy",
    "SimpleBreadthPolicy",
    "DijkstraPolicy",
    "AStarPolicy",
]
