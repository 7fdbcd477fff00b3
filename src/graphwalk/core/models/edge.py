"""
Edge models for the graph traversal system.

Edges are stored per node: each node holds the records touching it. In an
undirected graph the same connection is stored twice, once in each endpoint's
list with that endpoint as ``source``; in a directed graph only the source
node owns the record.
"""

from dataclasses import dataclass

from .base import DEFAULT_WEIGHT, validate_index, validate_weight


@dataclass(frozen=True)
class Edge:
    """
    Connection between two nodes.

    Attributes:
        source (int): Index of the node owning the record
        target (int): Index of the other endpoint
        weight (float): Edge cost, 1.0 for unweighted graphs
    """

    source: int
    target: int
    weight: float = DEFAULT_WEIGHT

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_index("source", self.source)
        validate_index("target", self.target)
        validate_weight(self.weight)

    @property
    def nodes(self) -> tuple[int, int]:
        """Endpoints as a ``(source, target)`` pair."""
        return self.source, self.target

    def other(self, index: int) -> int:
        """Return the endpoint that is not ``index``."""
        return self.target if self.source == index else self.source

    def connects(self, a: int, b: int) -> bool:
        """Whether this record joins ``a`` and ``b`` in either orientation."""
        return {self.source, self.target} == {a, b}

    def reversed(self) -> "Edge":
        """The mirror record stored in the target's list of an undirected graph."""
        return Edge(source=self.target, target=self.source, weight=self.weight)
