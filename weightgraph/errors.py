"""Errors raised by graph containers and graph algorithms."""


class GraphError(Exception):
    """Base class for all weightgraph failures."""


class DuplicateIdError(GraphError, ValueError):
    """Raised when a node or edge id is already registered in a graph."""


class InvalidEdgeTypeError(GraphError, TypeError):
    """Raised when a directed graph is given an undirected edge."""


class NegativeWeightError(GraphError, ValueError):
    """Raised when Dijkstra is run on a graph holding a negative edge weight."""


class NegativeCycleError(GraphError, ValueError):
    """Raised when Bellman-Ford finds a negative weight cycle."""


class CycleError(GraphError, ValueError):
    """Raised when an acyclic-only operation is run on a cyclic graph."""
