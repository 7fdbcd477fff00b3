"""Whole-run properties checked over a batch of seeded random graphs."""

import pytest

from graphwalk.config import RandomGraphSettings
from graphwalk.core.enums import NodeState, TraversalAlgorithm
from graphwalk.core.graph import Graph, TraversalState, path_weight, reconstruct_path
from graphwalk.core.graph.traversal import path_nodes
from graphwalk.generation import RandomGraphGenerator

SEEDS = range(12)


def random_graph(seed: int, directed: bool = False, weighted: bool = True) -> Graph:
    settings = RandomGraphSettings(
        node_count=7,
        edge_count=9,
        directed=directed,
        weighted=weighted,
        connected=True,
        weight_lower_bound=0.5,
        weight_upper_bound=9.0,
        seed=seed,
    )
    return RandomGraphGenerator(settings).generate()


def simple_path_costs(graph: Graph, start: int, goal: int) -> list[tuple[int, float]]:
    """(hops, weight) of every simple path from start to goal, by exhaustive search."""
    results = []

    def walk(node: int, seen: set[int], hops: int, weight: float) -> None:
        if node == goal:
            results.append((hops, weight))
            return
        for edge in graph.get_node(node).edges:
            nxt = edge.other(node)
            if nxt not in seen:
                walk(nxt, seen | {nxt}, hops + 1, weight + edge.weight)

    walk(start, {start}, 0, 0.0)
    return results


def run(graph: Graph, algorithm: TraversalAlgorithm, start: int, goal: int) -> TraversalState:
    graph.reset()
    state = TraversalState.new(start, goal, algorithm)
    state.run_to_completion(graph, max_steps=10_000)
    assert state.finished
    return state


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("directed", [False, True])
@pytest.mark.parametrize("algorithm", list(TraversalAlgorithm.values()))
def test_reachable_goal_is_marked_with_acyclic_chain(seed, directed, algorithm):
    """Test that every algorithm reaches a reachable goal via a loop-free chain."""
    graph = random_graph(seed, directed=directed)
    start, goal = 0, graph.node_indices[-1]
    reachable = bool(simple_path_costs(graph, start, goal))

    run(graph, algorithm, start, goal)

    goal_state = graph.get_metadata(goal).state
    if not reachable:
        assert goal_state is not NodeState.GOAL
        return
    assert goal_state is NodeState.GOAL
    nodes = path_nodes(reconstruct_path(graph, goal))
    assert nodes[0] == start and nodes[-1] == goal
    assert len(nodes) == len(set(nodes))


@pytest.mark.parametrize("seed", SEEDS)
def test_breadth_first_hop_count_is_minimal(seed):
    graph = random_graph(seed, weighted=False)
    start, goal = 0, graph.node_indices[-1]
    best_hops = min(hops for hops, _ in simple_path_costs(graph, start, goal))

    run(graph, TraversalAlgorithm.BREADTH_FIRST, start, goal)

    assert len(reconstruct_path(graph, goal)) == best_hops


@pytest.mark.parametrize("seed", SEEDS)
def test_dijkstra_weight_is_minimal(seed):
    """Test that Dijkstra's path is no heavier than BFS, DFS or any simple path."""
    graph = random_graph(seed)
    start, goal = 0, graph.node_indices[-1]
    best_weight = min(weight for _, weight in simple_path_costs(graph, start, goal))

    run(graph, TraversalAlgorithm.DIJKSTRA, start, goal)
    dijkstra_weight = path_weight(reconstruct_path(graph, goal))
    assert dijkstra_weight == pytest.approx(best_weight)

    for algorithm in (TraversalAlgorithm.BREADTH_FIRST, TraversalAlgorithm.DEPTH_FIRST):
        run(graph, algorithm, start, goal)
        assert dijkstra_weight <= path_weight(reconstruct_path(graph, goal)) + 1e-9


@pytest.mark.parametrize("seed", SEEDS)
def test_reset_after_any_number_of_runs(seed):
    graph = random_graph(seed)
    for algorithm in TraversalAlgorithm:
        state = TraversalState.new(0, graph.node_indices[-1], algorithm)
        state.run_to_completion(graph, max_steps=10_000)

    graph.reset()

    assert all(graph.get_metadata(i).is_default for i in graph.node_indices)
