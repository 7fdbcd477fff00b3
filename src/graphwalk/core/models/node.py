"""
Node models for the graph traversal system.

A node carries its identity, its position on the canvas, a display name and
the edge records it owns. Per-run traversal state lives in the graph's
metadata table, not on the node.
"""

from dataclasses import dataclass, field
from typing import List

from .base import Position, validate_index
from .edge import Edge


@dataclass
class Node:
    """
    Vertex of a graph.

    Attributes:
        index (int): Stable handle allocated by the graph, never reused
        position (Position): Canvas coordinates as supplied, used by the A* heuristic
        name (str): Display name
        edges (List[Edge]): Incident edge records owned by this node
    """

    index: int
    position: Position
    name: str
    edges: List[Edge] = field(default_factory=list)

    def __post_init__(self):
        """Validate node after initialization."""
        validate_index("index", self.index)

    def neighbors(self) -> List[int]:
        """Indices reachable through one of this node's own edge records."""
        return [edge.other(self.index) for edge in self.edges]

    def add_edge(self, other: int, weight: float) -> Edge:
        """Append a record from this node to ``other``."""
        edge = Edge(source=self.index, target=other, weight=weight)
        self.edges.append(edge)
        return edge

    def remove_edges_to(self, other: int) -> List[Edge]:
        """Drop every record joining this node and ``other``; return the dropped records."""
        removed = [edge for edge in self.edges if edge.connects(self.index, other)]
        if removed:
            self.edges = [edge for edge in self.edges if not edge.connects(self.index, other)]
        return removed

    def edge_to(self, other: int) -> Edge | None:
        """First record joining this node and ``other``, if any."""
        for edge in self.edges:
            if edge.connects(self.index, other):
                return edge
        return None
