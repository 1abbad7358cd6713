"""
Edge orientation policy for graph containers.
"""

from enum import Enum

from .edge import pyedge


class Orientation(Enum):
    """How a graph container reads the endpoints of its edges."""
    UNDIRECTED = "undirected"
    DIRECTED = "directed"

    @property
    def is_directed(self) -> bool:
        return self is Orientation.DIRECTED

    def accepts(self, edge: pyedge) -> bool:
        """
        Check whether an edge may be stored under this orientation.

        Undirected containers take any edge; directed containers only take
        directed edges.
        """
        if self is Orientation.DIRECTED:
            return edge.is_directed()
        return True
