"""
Edge representations connecting two nodes.

pyedge is the undirected connection; pydirectededge reads the same two
endpoints as source and target.
"""

from typing import List, Optional

from .node import pynode


class pyedge:
    """
    Weighted connection between two nodes.

    The id defaults to "{node_a}-{node_b}" and, like the endpoints, never
    changes once the edge exists. Weights may be negative; algorithms check
    their own preconditions.
    """

    def __init__(self, node_a: pynode, node_b: pynode, weight: float = 0.0,
                 edge_id: Optional[str] = None):
        """
        Initialize an edge.

        Args:
            node_a: First endpoint (source for directed edges)
            node_b: Second endpoint (target for directed edges)
            weight: Edge weight, 0.0 when omitted
            edge_id: Explicit id, derived from the endpoint ids when omitted
        """
        self._node_a = node_a
        self._node_b = node_b
        self.weight = float(weight)
        if edge_id is None:
            edge_id = f"{node_a.get_id()}-{node_b.get_id()}"
        self._id = edge_id

    @property
    def id(self) -> str:
        return self._id

    @property
    def node_a(self) -> pynode:
        return self._node_a

    @property
    def node_b(self) -> pynode:
        return self._node_b

    def get_id(self) -> str:
        return self._id

    def get_nodes(self) -> List[pynode]:
        return [self._node_a, self._node_b]

    def get_weight(self) -> float:
        return self.weight

    def set_weight(self, weight: float) -> 'pyedge':
        """Replace the weight and return the edge for chaining."""
        self.weight = float(weight)
        return self

    def get_node_a(self) -> pynode:
        return self._node_a

    def get_node_b(self) -> pynode:
        return self._node_b

    def is_directed(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r}, weight={self.weight})"


class pydirectededge(pyedge):
    """Edge read as node_a -> node_b."""

    def get_source(self) -> pynode:
        return self._node_a

    def get_target(self) -> pynode:
        return self._node_b

    def is_directed(self) -> bool:
        return True
