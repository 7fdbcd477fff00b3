"""
Traversal metadata for the graph traversal system.

Each node has one ``TraversalMetadata`` entry in its graph's metadata table.
The active run mutates these entries in place, which is what makes the paused
state of a run renderable: it is nothing more than the current table.
"""

from dataclasses import dataclass
from typing import Optional

from ..enums import NodeState


@dataclass
class TraversalMetadata:
    """
    Per-run state of a single node.

    ``predecessor`` and ``path_length`` are only ever written together through
    ``relax`` and cleared together through ``reset``.

    Attributes:
        state (NodeState): Display state of the node
        predecessor (Optional[int]): Node this one was reached from
        path_length (Optional[float]): Best known path length from the start
    """

    state: NodeState = NodeState.UNVISITED
    predecessor: Optional[int] = None
    path_length: Optional[float] = None

    def view(self) -> None:
        self.state = NodeState.SEEN

    def visit(self) -> None:
        self.state = NodeState.VISITED

    def mark_start(self) -> None:
        self.state = NodeState.START

    def mark_goal(self) -> None:
        self.state = NodeState.GOAL

    def relax(self, predecessor: int, path_length: float) -> None:
        """Record the node this one was reached from and the length of that path."""
        self.predecessor = predecessor
        self.path_length = path_length

    def improves(self, candidate: float) -> bool:
        """Whether ``candidate`` beats the recorded path length (or none is recorded)."""
        return self.path_length is None or candidate < self.path_length

    def reset(self) -> None:
        self.state = NodeState.UNVISITED
        self.predecessor = None
        self.path_length = None

    @property
    def is_default(self) -> bool:
        return (
            self.state is NodeState.UNVISITED
            and self.predecessor is None
            and self.path_length is None
        )
