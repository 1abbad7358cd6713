"""
Node representation for weighted graphs.
"""

from typing import Any


class pynode:
    """
    A uniquely identified vertex carrying an opaque payload.

    The id is fixed at construction. Graphs keep a reference to the node and
    never copy it, so the payload can be changed from anywhere.
    """

    def __init__(self, node_id: str, data: Any = None):
        """
        Initialize a node.

        Args:
            node_id: Identifier, unique within any graph the node joins
            data: Optional payload
        """
        self._id = str(node_id)
        self.data = data

    @property
    def id(self) -> str:
        return self._id

    def get_id(self) -> str:
        return self._id

    def get_data(self) -> Any:
        return self.data

    def set_data(self, data: Any) -> 'pynode':
        """Replace the payload and return the node for chaining."""
        self.data = data
        return self

    def __repr__(self) -> str:
        return f"pynode({self._id!r})"
