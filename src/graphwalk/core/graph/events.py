"""
Graph event system.

This module provides an event system for graph operations, allowing components
such as a renderer or a menu to subscribe to and be notified of changes in the
graph. Listeners are notified synchronously, in registration order.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Protocol, Set

from ..models.edge import Edge

logger = logging.getLogger(__name__)


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    NODE_ADDED = auto()
    NODE_REMOVED = auto()
    NODE_MOVED = auto()
    EDGE_ADDED = auto()
    EDGE_REMOVED = auto()
    GRAPH_RESET = auto()


class GraphEventListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Called when the graph state changes.

        Args:
            event (GraphEvent): Type of event that occurred
            details (Dict[str, Any]): Additional information about the event
        """
        ...


@dataclass
class GraphEventDetails:
    """
    Container for graph event details.

    Attributes:
        nodes (Set[int]): Affected node indices
        edges (List[Edge]): Affected edge records
        metadata (Dict): Additional event metadata
    """

    nodes: Set[int] = field(default_factory=set)
    edges: List[Edge] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_node(self, node: int) -> None:
        """Add an affected node."""
        self.nodes.add(node)

    def add_edge(self, edge: Edge) -> None:
        """Add an affected edge and both of its endpoints."""
        self.edges.append(edge)
        self.nodes.update(edge.nodes)

    def add_metadata(self, key: str, value: Any) -> None:
        """Add additional metadata."""
        self.metadata[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert event details to dictionary format."""
        return {
            "nodes": sorted(self.nodes),
            "edges": [
                {"source": edge.source, "target": edge.target, "weight": edge.weight}
                for edge in self.edges
            ],
            "metadata": self.metadata,
        }


@dataclass
class GraphEventManager:
    """
    Manages graph event subscriptions and notifications.

    Attributes:
        _listeners (List[GraphEventListener]): Registered event listeners
    """

    _listeners: List[GraphEventListener] = field(default_factory=list)

    def add_listener(self, listener: GraphEventListener) -> None:
        """Add a listener for graph events."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Remove a graph event listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, event: GraphEvent, details: GraphEventDetails) -> None:
        """
        Notify all listeners of a graph event.

        A listener that raises is logged and skipped; the remaining listeners
        are still notified.

        Args:
            event (GraphEvent): The type of event that occurred
            details (GraphEventDetails): Information about the event
        """
        payload = details.to_dict()
        for listener in self._listeners.copy():
            try:
                listener.on_state_change(event, payload)
            except Exception:
                logger.exception(f"Error notifying listener {listener!r} of {event.name}")

    def clear_listeners(self) -> None:
        """Remove all event listeners."""
        self._listeners.clear()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
