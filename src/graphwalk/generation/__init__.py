"""
Graph generators.

Generators build fresh graphs for the application: an empty graph to be
edited by hand, or a random graph whose connectivity is checked with the
traversal engine.
"""

from .base import EmptyGraphGenerator, GraphGenerator
from .random import RandomGraphGenerator


def generators() -> list[GraphGenerator]:
    """One instance of every available generator, in menu order."""
    return [EmptyGraphGenerator(), RandomGraphGenerator()]


__all__ = [
    "GraphGenerator",
    "EmptyGraphGenerator",
    "RandomGraphGenerator",
    "generators",
]
