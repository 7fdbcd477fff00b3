"""
Core graph data structure with per-node edge lists.

This module provides the ``Graph`` class. Nodes are kept in allocation order
and own the edge records touching them: an undirected connection is stored in
both endpoints' lists, a directed one only in its source's list, so direction
is encoded by which node owns the record. Alongside the topology the graph
owns a metadata table (node index -> ``TraversalMetadata``) that the active
traversal run mutates in place.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..exceptions import InvalidOperationError, NodeNotFoundError
from ..models import (
    DEFAULT_WEIGHT,
    Edge,
    Node,
    Position,
    TraversalMetadata,
    validate_weight,
)
from .events import GraphEvent, GraphEventDetails, GraphEventListener, GraphEventManager

logger = logging.getLogger(__name__)

Connection = Tuple[int, Optional[float]]


class Graph:
    """
    Graph of positioned, named nodes with per-node edge lists.

    Node indices are handed out in increasing order and never reused, even
    after the node they named has been removed.

    Attributes:
        name (str): Display name of the graph
        directed (bool): Whether edges are one-way
        weighted (bool): Whether edges carry caller supplied weights
        locked (bool): When set, topology edits raise ``InvalidOperationError``
    """

    def __init__(self, name: str = "", directed: bool = False, weighted: bool = False):
        self.name = name
        self.directed = directed
        self.weighted = weighted
        self.locked = False
        self._nodes: Dict[int, Node] = {}
        self._metadata: Dict[int, TraversalMetadata] = {}
        self._next_index = 0
        self.event_manager = GraphEventManager()

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph(name={self.name!r}, {kind}, weighted={self.weighted}, nodes={len(self._nodes)})"

    # Listeners

    def add_listener(self, listener: GraphEventListener) -> None:
        self.event_manager.add_listener(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        self.event_manager.remove_listener(listener)

    def _dispatch(self, event: GraphEvent, details: GraphEventDetails) -> None:
        self.event_manager.notify(event, details)

    def _check_unlocked(self, operation: str) -> None:
        if self.locked:
            raise InvalidOperationError(f"Cannot {operation} while a traversal is running")

    # Mutation

    def add_node(
        self, position: Position, name: str, connections: Iterable[Connection] = ()
    ) -> int:
        """
        Add a node and wire its initial connections.

        Each ``(target, weight)`` pair is wired exactly like
        ``add_edge(new_index, target, weight)``. Targets and weights are
        checked before anything is written, so a rejected call leaves the
        graph untouched. Position and name are stored as given.

        Args:
            position (Position): Canvas coordinates of the node
            name (str): Display name
            connections (Iterable[Connection]): Initial ``(target, weight)`` pairs

        Returns:
            int: The index allocated to the new node

        Raises:
            NodeNotFoundError: If a connection targets a node this graph does not hold
        """
        self._check_unlocked("add a node")
        connections = list(connections)
        for target, weight in connections:
            self.get_node(target)
            if self.weighted and weight is not None:
                validate_weight(weight)

        index = self._next_index
        self._next_index += 1
        self._nodes[index] = Node(index=index, position=position, name=name)
        self._metadata[index] = TraversalMetadata()

        details = GraphEventDetails()
        details.add_node(index)
        self._dispatch(GraphEvent.NODE_ADDED, details)

        for target, weight in connections:
            self.add_edge(index, target, weight)
        return index

    def remove_node(self, index: int) -> None:
        """Remove a node together with every edge record pointing at it."""
        self._check_unlocked("remove a node")
        node = self.get_node(index)
        details = GraphEventDetails()
        details.add_node(index)
        for edge in node.edges:
            details.add_edge(edge)
        for other in self._nodes.values():
            if other.index != index:
                for edge in other.remove_edges_to(index):
                    details.add_edge(edge)

        del self._nodes[index]
        del self._metadata[index]
        self._dispatch(GraphEvent.NODE_REMOVED, details)

    def move_node(self, index: int, position: Position) -> None:
        """Move a node, e.g. while it is being dragged on the canvas."""
        node = self.get_node(index)
        node.position = position

        details = GraphEventDetails()
        details.add_node(index)
        details.add_metadata("position", node.position)
        self._dispatch(GraphEvent.NODE_MOVED, details)

    def add_edge(self, a: int, b: int, weight: Optional[float] = None) -> None:
        """
        Connect ``a`` to ``b``.

        Self loops are silently ignored. In an unweighted graph the weight is
        always 1.0; in a weighted one a missing weight defaults to 1.0.
        """
        if a == b:
            logger.debug(f"Ignoring self loop on node {a}")
            return
        self._check_unlocked("add an edge")
        if not self.weighted or weight is None:
            weight = DEFAULT_WEIGHT

        source = self.get_node(a)
        target = self.get_node(b)
        details = GraphEventDetails()
        details.add_edge(source.add_edge(b, weight))
        if not self.directed:
            details.add_edge(target.add_edge(a, weight))
        self._dispatch(GraphEvent.EDGE_ADDED, details)

    def remove_edge(self, edge: Edge) -> None:
        """Remove the records joining the edge's endpoints."""
        self._check_unlocked("remove an edge")
        a, b = edge.nodes
        details = GraphEventDetails()
        for removed in self.get_node(a).remove_edges_to(b):
            details.add_edge(removed)
        if not self.directed:
            for removed in self.get_node(b).remove_edges_to(a):
                details.add_edge(removed)
        if details.edges:
            self._dispatch(GraphEvent.EDGE_REMOVED, details)

    def reset(self) -> None:
        """Clear the traversal metadata of every node. Topology is untouched."""
        for metadata in self._metadata.values():
            metadata.reset()
        self._dispatch(GraphEvent.GRAPH_RESET, GraphEventDetails())

    # Lookup

    def get_node(self, index: int) -> Node:
        """
        Get a node that is known to exist.

        Raises:
            NodeNotFoundError: If ``index`` does not name a node of this graph
        """
        try:
            return self._nodes[index]
        except KeyError as exc:
            raise NodeNotFoundError(f"Node {index} not found in graph {self.name!r}") from exc

    def try_get_node(self, index: int) -> Optional[Node]:
        """Get a node, or None if ``index`` does not name one."""
        return self._nodes.get(index)

    def get_metadata(self, index: int) -> TraversalMetadata:
        """
        Get the traversal metadata of a node that is known to exist.

        Raises:
            NodeNotFoundError: If ``index`` does not name a node of this graph
        """
        try:
            return self._metadata[index]
        except KeyError as exc:
            raise NodeNotFoundError(f"Node {index} not found in graph {self.name!r}") from exc

    def try_get_metadata(self, index: int) -> Optional[TraversalMetadata]:
        return self._metadata.get(index)

    def has_node(self, index: int) -> bool:
        return index in self._nodes

    @property
    def nodes(self) -> List[Node]:
        """Nodes in allocation order."""
        return list(self._nodes.values())

    @property
    def node_indices(self) -> List[int]:
        return list(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def edges(self) -> Iterator[Edge]:
        """Every stored edge record, grouped by owning node."""
        for node in self._nodes.values():
            yield from node.edges

    def get_edge(self, a: int, b: int) -> Optional[Edge]:
        """The record owned by ``a`` that joins it to ``b``, if any."""
        return self.get_node(a).edge_to(b)

    def has_edge(self, a: int, b: int) -> bool:
        return self.get_edge(a, b) is not None

    def neighbors(self, index: int) -> List[int]:
        """Other endpoints of the node's own edge records."""
        return self.get_node(index).neighbors()

    def connections(self, index: int) -> List[int]:
        """
        Neighbors of a node ignoring edge direction.

        For an undirected graph these are just the neighbors. For a directed
        graph, nodes with an edge into ``index`` (found by scanning every node)
        come first, followed by the outbound neighbors, without duplicates.
        """
        if not self.directed:
            return self.neighbors(index)

        inbound = [
            node.index
            for node in self._nodes.values()
            if node.index != index and index in node.neighbors()
        ]
        return list(dict.fromkeys(inbound + self.neighbors(index)))

    def names(self, indices: Sequence[int]) -> List[str]:
        """Display names of ``indices``, in order."""
        return [self.get_node(index).name for index in indices]

    def find_by_name(self, name: str) -> Optional[int]:
        """Index of the first node called ``name``, if any."""
        for node in self._nodes.values():
            if node.name == name:
                return node.index
        return None
