"""
Custom exceptions for the graph traversal system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle the error conditions that can occur while editing graphs, configuring
traversals and generating graphs. Most traversal failures are not errors at all
(a step with nothing to do simply reports completion), so the hierarchy is small.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the graph structure encounter
    errors that cannot be silently ignored.

    Examples:
        * Generator asked for more edges than the graph can hold
        * Graph integrity violations
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    This exception is raised when driver or generator settings fail schema
    validation or violate a rule spanning several fields.

    Attributes:
        errors (list[str]): Every validation message collected for the settings

    Examples:
        * Missing required settings
        * Invalid configuration values
        * Weight bounds in the wrong order
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = list(errors or [])


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on a
    resource that does not exist in the graph.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Node indices are only ever handed out by the graph itself, so internally
    this signals a program logic error. Boundary code that accepts indices
    from a user should use the ``try_get_*`` accessors instead.

    Examples:
        * Node lookup by an index that was never allocated
        * Node lookup by the index of a removed node
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * Weight lookup for a hop that has no stored edge record
    """


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Editing a graph while a traversal is running over it
    """
