"""
Configuration for the traversal driver and the random graph generator.

Settings arrive as decoded JSON (from the CLI or an embedding application),
are checked against JSON schemas, and are turned into typed dataclasses.
Rules spanning several fields are enforced by the dataclasses themselves, so
settings built directly in code get the same checks.

A settings document has two optional sections::

    {
        "driver": {"algorithm": "dijkstra", "auto": true, "step_delay_ms": 100},
        "graph": {"node_count": 8, "edge_count": 12, "weighted": true, "seed": 7}
    }
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from .core.enums import TraversalAlgorithm
from .core.exceptions import ConfigurationError
from .utils.validation import SchemaValidator

logger = logging.getLogger(__name__)

MAX_NODE_COUNT = 30
MAX_STEP_DELAY_MS = 10_000
CANVAS_MIN = 5.0
CANVAS_MAX = 995.0

DRIVER_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "algorithm": {"enum": [algorithm.value for algorithm in TraversalAlgorithm.values()]},
        "auto": {"type": "boolean"},
        "step_delay_ms": {"type": "number", "minimum": 0, "maximum": MAX_STEP_DELAY_MS},
    },
    "additionalProperties": False,
}

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "node_count": {"type": "integer", "minimum": 1, "maximum": MAX_NODE_COUNT},
        "edge_count": {"type": "integer", "minimum": 0},
        "directed": {"type": "boolean"},
        "weighted": {"type": "boolean"},
        "connected": {"type": "boolean"},
        "weight_lower_bound": {"type": "number"},
        "weight_upper_bound": {"type": "number"},
        "seed": {"type": ["integer", "null"]},
    },
    "additionalProperties": False,
}

SETTINGS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {"driver": {"type": "object"}, "graph": {"type": "object"}},
    "additionalProperties": False,
}


def build_validator() -> SchemaValidator:
    """Validator with the schema of every settings section registered."""
    validator = SchemaValidator()
    validator.register_schema("settings", SETTINGS_SCHEMA)
    validator.register_schema("driver", DRIVER_SCHEMA)
    validator.register_schema("graph", GRAPH_SCHEMA)
    return validator


def max_edge_count(node_count: int, directed: bool) -> int:
    """Number of distinct non-loop edges a simple graph of ``node_count`` nodes can hold."""
    pairs = node_count * (node_count - 1)
    return pairs if directed else pairs // 2


@dataclass(frozen=True)
class DriverSettings:
    """
    Settings of the traversal driver.

    Attributes:
        algorithm (TraversalAlgorithm): Algorithm of new runs
        auto (bool): Step automatically instead of on request
        step_delay_ms (float): Minimum milliseconds between automatic steps
    """

    algorithm: TraversalAlgorithm = TraversalAlgorithm.BREADTH_FIRST
    auto: bool = False
    step_delay_ms: float = 250.0

    def __post_init__(self):
        if self.algorithm not in TraversalAlgorithm.values():
            raise ConfigurationError(
                f"algorithm {self.algorithm.value!r} is not user selectable",
                [f"driver.algorithm: {self.algorithm.value!r} is not user selectable"],
            )
        if not 0 <= self.step_delay_ms <= MAX_STEP_DELAY_MS:
            raise ConfigurationError(
                f"step_delay_ms must be between 0 and {MAX_STEP_DELAY_MS}",
                [f"driver.step_delay_ms: {self.step_delay_ms} is out of range"],
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DriverSettings":
        values = dict(data)
        if "algorithm" in values:
            values["algorithm"] = TraversalAlgorithm(values["algorithm"])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["algorithm"] = self.algorithm.value
        return data


@dataclass(frozen=True)
class RandomGraphSettings:
    """
    Settings of the random graph generator.

    Attributes:
        name (str): Name of the generated graph
        node_count (int): Number of nodes, 1 to ``MAX_NODE_COUNT``
        edge_count (int): Number of random edges
        directed (bool): Generate a directed graph
        weighted (bool): Draw random weights instead of using 1.0
        connected (bool): Keep adding edges until the graph is weakly connected
        weight_lower_bound (float): Smallest weight drawn
        weight_upper_bound (float): Largest weight drawn
        seed (Optional[int]): Seed for reproducible graphs
    """

    name: str = ""
    node_count: int = 3
    edge_count: int = 3
    directed: bool = False
    weighted: bool = False
    connected: bool = False
    weight_lower_bound: float = 1.0
    weight_upper_bound: float = 5.0
    seed: Optional[int] = None

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ConfigurationError("Invalid random graph settings", errors)

    def validate(self) -> List[str]:
        """Rules the schema cannot express; returns one message per violation."""
        errors = []
        if not 1 <= self.node_count <= MAX_NODE_COUNT:
            errors.append(f"graph.node_count: must be between 1 and {MAX_NODE_COUNT}")
            return errors

        limit = max_edge_count(self.node_count, self.directed)
        if not 0 <= self.edge_count <= limit:
            errors.append(f"graph.edge_count: must be between 0 and {limit} for this graph")
        if self.connected and self.edge_count < self.node_count - 1:
            errors.append(
                f"graph.edge_count: a connected graph of {self.node_count} nodes "
                f"needs at least {self.node_count - 1} edges"
            )
        if self.weighted and self.weight_upper_bound < self.weight_lower_bound:
            errors.append("graph.weight_upper_bound: must not be below weight_lower_bound")
        if self.weighted and self.weight_lower_bound < 0:
            errors.append("graph.weight_lower_bound: weights must be non-negative")
        return errors

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RandomGraphSettings":
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_settings(data: Dict[str, Any]) -> Tuple[DriverSettings, RandomGraphSettings]:
    """
    Build driver and generator settings from a decoded settings document.

    Missing sections and keys fall back to their defaults.

    Raises:
        ConfigurationError: If the document violates a schema or a cross-field rule
    """
    validator = build_validator()
    result = validator.validate("settings", data)
    if result.is_valid:
        result = result.merge(validator.validate("driver", data.get("driver", {})))
        result = result.merge(validator.validate("graph", data.get("graph", {})))
    if not result.is_valid:
        for error in result.errors:
            logger.error(f"Invalid settings: {error}")
        raise ConfigurationError("Settings failed schema validation", result.errors)

    driver = DriverSettings.from_dict(data.get("driver", {}))
    graph = RandomGraphSettings.from_dict(data.get("graph", {}))
    logger.debug(f"Loaded settings driver={driver.to_dict()} graph={graph.to_dict()}")
    return driver, graph
