"""Command Line Interface for graphwalk.

This module provides a headless way to watch a traversal: it generates a random
graph from settings, replays the chosen algorithm one step per line and prints
the reconstructed path.

The CLI supports the following commands:
    - run: Generate a graph and replay a traversal over it
    - algorithms: List the selectable algorithms

Settings can be provided either as a direct JSON string or as a file path
prefixed with '@'. When using file paths, both absolute paths and paths
relative to the current directory are supported.

Example Usage:
    graphwalk run --settings '{"graph": {"node_count": 6, "edge_count": 8, "seed": 3}}'
    graphwalk run --settings @settings.json --algorithm a_star --start 0 --end 5
    python -m graphwalk algorithms
"""

import argparse
import json
import logging
import os
import sys
import time
from typing import Any, Dict, List, Optional

from graphwalk.config import DriverSettings, load_settings
from graphwalk.core.enums import TraversalAlgorithm
from graphwalk.core.exceptions import ConfigurationError
from graphwalk.core.graph import Graph, TraversalDriver, path_weight
from graphwalk.generation import RandomGraphGenerator

logger = logging.getLogger(__name__)


def parse_json_input(json_str: str) -> Dict[str, Any]:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.

    Returns:
        dict: Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)
        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")
        with open(file_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def resolve_node(graph: Graph, name: Optional[str], default: Optional[int]) -> Optional[int]:
    """Look a node up by display name, falling back to ``default`` when no name is given."""
    if name is None:
        return default
    return graph.find_by_name(name)


def describe_step(step: int, driver: TraversalDriver, graph: Graph) -> str:
    return (
        f"step {step:>3}: frontier={driver.frontier_names(graph)} "
        f"visited={driver.visited_names(graph)}"
    )


def replay(
    graph: Graph,
    driver: TraversalDriver,
    start: Optional[int],
    end: Optional[int],
) -> List[str]:
    """Run a traversal to completion, returning one line per step plus a summary."""
    driver.start(start, end, graph)
    if not driver.currently_running:
        return ["No traversal started: pick a start and an end node that exist"]

    lines = [f"{driver.algorithm.display_name} on {graph!r}"]
    traversal = driver.traversal
    while driver.currently_running:
        before = traversal.steps
        if not driver.auto:
            driver.request_step()
        driver.tick(graph)
        if traversal.steps > before:
            lines.append(describe_step(traversal.steps, driver, graph))
        else:
            time.sleep(min(driver.step_delay, 0.01))

    path = driver.path(graph)
    if path:
        names = graph.names([path[0].source] + [edge.target for edge in path])
        lines.append(f"path: {' -> '.join(names)} (weight {path_weight(path):g})")
    elif driver.reached_goal(graph):
        lines.append("path: start is the goal")
    else:
        lines.append("path: goal not reachable")
    return lines


def run(args: argparse.Namespace) -> int:
    data = parse_json_input(args.settings) if args.settings else {}
    driver_settings, graph_settings = load_settings(data)
    if args.algorithm:
        driver_settings = DriverSettings(
            algorithm=TraversalAlgorithm(args.algorithm),
            auto=driver_settings.auto,
            step_delay_ms=driver_settings.step_delay_ms,
        )
    if args.auto:
        driver_settings = DriverSettings(
            algorithm=driver_settings.algorithm,
            auto=True,
            step_delay_ms=driver_settings.step_delay_ms,
        )

    graph = RandomGraphGenerator(graph_settings).generate()
    indices = graph.node_indices
    start = resolve_node(graph, args.start, indices[0])
    end = resolve_node(graph, args.end, indices[-1])

    driver = TraversalDriver.from_settings(driver_settings)
    for line in replay(graph, driver, start, end):
        print(line)
    return 0


def list_algorithms(args: argparse.Namespace) -> int:
    for algorithm in TraversalAlgorithm.values():
        print(f"{algorithm.value:<14} {algorithm.display_name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphwalk", description="Replay graph search algorithms step by step"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Generate a graph and replay a traversal")
    run_parser.add_argument("--settings", help="Settings as JSON or @path/to/settings.json")
    run_parser.add_argument(
        "--algorithm",
        choices=[algorithm.value for algorithm in TraversalAlgorithm.values()],
        help="Override the algorithm from the settings",
    )
    run_parser.add_argument("--start", help="Name of the start node (default: first node)")
    run_parser.add_argument("--end", help="Name of the end node (default: last node)")
    run_parser.add_argument("--auto", action="store_true", help="Step on a timer")
    run_parser.set_defaults(handler=run)

    algorithms_parser = subparsers.add_parser("algorithms", help="List available algorithms")
    algorithms_parser.set_defaults(handler=list_algorithms)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the ``graphwalk`` command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.handler(args)
    except ConfigurationError as e:
        for error in e.errors or [str(e)]:
            print(f"Error: {error}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
