"""
Random graph generation.

Nodes are scattered uniformly over the canvas and joined by random edges
without self loops or parallel records. A connected graph is requested by
making node ``i`` the source of edge ``i`` for the first ``node_count`` edges
and then repairing the result with the connectivity probe: every node the
probe cannot reach from node 0 is joined to one it can.
"""

import logging
import random
from typing import List, Optional

from graphwalk.config import CANVAS_MAX, CANVAS_MIN, RandomGraphSettings
from graphwalk.core.exceptions import GraphOperationError
from graphwalk.core.graph import Graph
from graphwalk.core.graph.traversal import is_connected, reachable_nodes
from .base import GraphGenerator

logger = logging.getLogger(__name__)


class RandomGraphGenerator(GraphGenerator):
    """Builds random graphs from ``RandomGraphSettings``."""

    def __init__(
        self,
        settings: Optional[RandomGraphSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or RandomGraphSettings()
        self.rng = rng or random.Random(self.settings.seed)

    @property
    def name(self) -> str:
        return "Random Graph"

    def generate(self) -> Graph:
        settings = self.settings
        graph = Graph(name=settings.name, directed=settings.directed, weighted=settings.weighted)

        for i in range(settings.node_count):
            position = (
                self.rng.uniform(CANVAS_MIN, CANVAS_MAX),
                self.rng.uniform(CANVAS_MIN, CANVAS_MAX),
            )
            graph.add_node(position, str(i))

        indices = graph.node_indices
        for i in range(settings.edge_count):
            if settings.connected and i < len(indices):
                source = indices[i]
            else:
                source = self.rng.choice(indices)

            targets = self._free_targets(graph, source)
            if not targets:
                source = self._source_with_room(graph)
                targets = self._free_targets(graph, source)
            graph.add_edge(source, self.rng.choice(targets), self._weight())

        if settings.connected:
            self._connect(graph)

        graph.reset()
        logger.info(
            f"Generated random graph {settings.name!r} with {graph.node_count} nodes "
            f"and {sum(1 for _ in graph.edges())} edge records"
        )
        return graph

    def _weight(self) -> Optional[float]:
        if not self.settings.weighted:
            return None
        low, high = self.settings.weight_lower_bound, self.settings.weight_upper_bound
        return round(self.rng.uniform(low, high), 2)

    @staticmethod
    def _joined(graph: Graph, a: int, b: int) -> bool:
        # Undirected graphs mirror every record, so a's own list is enough.
        return graph.has_edge(a, b)

    def _free_targets(self, graph: Graph, source: int) -> List[int]:
        return [
            target
            for target in graph.node_indices
            if target != source and not self._joined(graph, source, target)
        ]

    def _source_with_room(self, graph: Graph) -> int:
        candidates = [index for index in graph.node_indices if self._free_targets(graph, index)]
        if not candidates:
            raise GraphOperationError(f"Graph {graph.name!r} cannot hold another edge")
        return self.rng.choice(candidates)

    def _connect(self, graph: Graph) -> None:
        """Join every node outside the reach of the first node to one inside it."""
        first = graph.node_indices[0]
        while not is_connected(graph):
            reached = reachable_nodes(graph, first)
            for index in graph.node_indices:
                if index in reached:
                    continue
                anchor = self.rng.choice(sorted(reached))
                logger.debug(f"Joining unreached node {index} to node {anchor}")
                graph.add_edge(anchor, index, self._weight())
                reached.add(index)
