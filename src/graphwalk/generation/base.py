"""Graph generator interface and the empty graph generator."""

from abc import ABC, abstractmethod

from graphwalk.core.graph import Graph


class GraphGenerator(ABC):
    """Produces a new graph each time ``generate`` is called."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the generator."""

    @abstractmethod
    def generate(self) -> Graph:
        """Build a new graph."""


class EmptyGraphGenerator(GraphGenerator):
    """Creates a graph with no nodes."""

    def __init__(self, graph_name: str = "", directed: bool = False, weighted: bool = False):
        self.graph_name = graph_name
        self.directed = directed
        self.weighted = weighted

    @property
    def name(self) -> str:
        return "Empty Graph"

    def generate(self) -> Graph:
        return Graph(name=self.graph_name, directed=self.directed, weighted=self.weighted)
