"""
Core graph data structure for weighted graphs.

This module provides the fundamental graph storage without high-level algorithms.
"""

import logging
from typing import List, Dict, Tuple, Optional, DefaultDict, Iterator
from collections import defaultdict

from ..classes.node import pynode
from ..classes.edge import pyedge
from ..classes.orientation import Orientation
from ..errors import DuplicateIdError, InvalidEdgeTypeError

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Core graph data structure shared by every graph facade.

    Nodes and edges live in an arena addressed by integer handles. The store
    provides:
    - Node id interning and handle management
    - Edge registration with duplicate id checks
    - Outgoing and incoming adjacency lists keyed by node handle
    - Cascading removal of incident edges

    Node ids are interned the first time they are seen, either through
    add_node or as an edge endpoint, so edges may reference nodes that were
    never registered. Only registered nodes appear in id_to_node.
    """

    def __init__(self, orientation: Orientation = Orientation.UNDIRECTED):
        """
        Initialize an empty graph store.

        Args:
            orientation: Edge orientation policy for this store
        """
        self.orientation = orientation

        # Node mappings
        self.node_to_id: Dict[str, int] = {}
        self.id_to_name: Dict[int, str] = {}
        self.id_to_node: Dict[int, pynode] = {}

        # Edge mappings
        self.edge_to_id: Dict[str, int] = {}
        self.id_to_edge: Dict[int, pyedge] = {}
        self.aEdge_endpoints: Dict[int, Tuple[int, int]] = {}

        # Graph structure, entries are (neighbor handle, edge handle)
        self.adjacency_list: DefaultDict[int, List[Tuple[int, int]]] = defaultdict(list)
        self.reverse_adjacency: DefaultDict[int, List[Tuple[int, int]]] = defaultdict(list)

        self._node_counter = 0
        self._edge_counter = 0

    @property
    def is_directed(self) -> bool:
        return self.orientation.is_directed

    # ------------------------------------------------------------------
    # Node handles
    # ------------------------------------------------------------------

    def intern(self, node_id: str) -> int:
        """
        Get the handle for a node id, allocating one if it is new.

        Args:
            node_id: Node identifier

        Returns:
            Integer handle for the id
        """
        handle = self.node_to_id.get(node_id)
        if handle is None:
            handle = self._node_counter
            self.node_to_id[node_id] = handle
            self.id_to_name[handle] = node_id
            self._node_counter += 1
        return handle

    def get_handle(self, node_id: str) -> Optional[int]:
        """Get the handle for a node id, or None if the id is not in use."""
        return self.node_to_id.get(node_id)

    def get_node_id(self, handle: int) -> str:
        """Get the node id an interned handle stands for."""
        return self.id_to_name[handle]

    def is_registered(self, handle: int) -> bool:
        return handle in self.id_to_node

    def _release_if_unused(self, handle: int) -> None:
        # A handle lives while its node is registered or an edge touches it
        for adjacency in (self.adjacency_list, self.reverse_adjacency):
            if handle in adjacency and not adjacency[handle]:
                del adjacency[handle]
        if handle in self.id_to_node or handle not in self.id_to_name:
            return
        if handle in self.adjacency_list or handle in self.reverse_adjacency:
            return
        del self.node_to_id[self.id_to_name.pop(handle)]

    def get_node_by_id(self, node_id: str) -> Optional[pynode]:
        """
        Get a registered node by its id.

        Args:
            node_id: Node identifier

        Returns:
            The node object, or None if not registered
        """
        handle = self.node_to_id.get(node_id)
        if handle is None:
            return None
        return self.id_to_node.get(handle)

    def get_nodes(self) -> List[pynode]:
        """Get the registered nodes in registration order."""
        return list(self.id_to_node.values())

    def get_node_count(self) -> int:
        return len(self.id_to_node)

    # ------------------------------------------------------------------
    # Node mutation
    # ------------------------------------------------------------------

    def add_node(self, node: pynode) -> int:
        """
        Register a node.

        Args:
            node: Node to register

        Returns:
            Handle of the registered node

        Raises:
            DuplicateIdError: If a node with the same id is already registered
        """
        node_id = node.get_id()
        handle = self.intern(node_id)
        if handle in self.id_to_node:
            raise DuplicateIdError(f"A node with the ID '{node_id}' already exists.")

        self.id_to_node[handle] = node
        logger.debug(f"Registered node '{node_id}' as handle {handle}")
        return handle

    def remove_node(self, node_id: str) -> int:
        """
        Unregister a node and every edge incident to it.

        Removing an unknown id is a no-op. Edges touching the id are removed
        even when the node itself was never registered.
        The handle is released once nothing references it.

        Args:
            node_id: Node identifier

        Returns:
            Number of incident edges removed
        """
        handle = self.node_to_id.get(node_id)
        if handle is None:
            return 0

        self.id_to_node.pop(handle, None)

        incident = [edge_handle for _, edge_handle in self.adjacency_list.get(handle, [])]
        if self.is_directed:
            incident.extend(edge_handle for _, edge_handle in self.reverse_adjacency.get(handle, []))

        nRemoved = 0
        for edge_handle in dict.fromkeys(incident):
            if self._remove_edge_handle(edge_handle):
                nRemoved += 1

        self._release_if_unused(handle)
        logger.debug(f"Removed node '{node_id}' and {nRemoved} incident edges")
        return nRemoved

    # ------------------------------------------------------------------
    # Edge mutation
    # ------------------------------------------------------------------

    def add_edge(self, edge: pyedge) -> int:
        """
        Register an edge and index it in the adjacency lists.

        Args:
            edge: Edge to register

        Returns:
            Handle of the registered edge

        Raises:
            InvalidEdgeTypeError: If the orientation policy rejects the edge
            DuplicateIdError: If an edge with the same id is already registered
        """
        if not self.orientation.accepts(edge):
            raise InvalidEdgeTypeError("Only directed edges are allowed in a directed graph")

        edge_id = edge.get_id()
        if edge_id in self.edge_to_id:
            raise DuplicateIdError(f"An edge with the ID '{edge_id}' already exists.")

        start_id = self.intern(edge.get_node_a().get_id())
        end_id = self.intern(edge.get_node_b().get_id())

        handle = self._edge_counter
        self._edge_counter += 1
        self.edge_to_id[edge_id] = handle
        self.id_to_edge[handle] = edge
        self.aEdge_endpoints[handle] = (start_id, end_id)

        self.adjacency_list[start_id].append((end_id, handle))
        if self.is_directed:
            self.reverse_adjacency[end_id].append((start_id, handle))
        elif start_id != end_id:
            self.adjacency_list[end_id].append((start_id, handle))

        logger.debug(f"Registered edge '{edge_id}' ({start_id} -> {end_id}) as handle {handle}")
        return handle

    def remove_edge_by_id(self, edge_id: str) -> bool:
        """
        Unregister an edge by id.

        Args:
            edge_id: Edge identifier

        Returns:
            True if an edge was removed, False if the id was unknown
        """
        handle = self.edge_to_id.get(edge_id)
        if handle is None:
            return False
        return self._remove_edge_handle(handle)

    def _remove_edge_handle(self, handle: int) -> bool:
        edge = self.id_to_edge.pop(handle, None)
        if edge is None:
            return False

        del self.edge_to_id[edge.get_id()]
        start_id, end_id = self.aEdge_endpoints.pop(handle)

        self.adjacency_list[start_id].remove((end_id, handle))
        if self.is_directed:
            self.reverse_adjacency[end_id].remove((start_id, handle))
        elif start_id != end_id:
            self.adjacency_list[end_id].remove((start_id, handle))
        self._release_if_unused(start_id)
        self._release_if_unused(end_id)

        logger.debug(f"Removed edge '{edge.get_id()}'")
        return True

    # ------------------------------------------------------------------
    # Edge queries
    # ------------------------------------------------------------------

    def get_edge_by_id(self, edge_id: str) -> Optional[pyedge]:
        handle = self.edge_to_id.get(edge_id)
        if handle is None:
            return None
        return self.id_to_edge[handle]

    def get_edges(self) -> List[pyedge]:
        """Get the registered edges in insertion order."""
        return list(self.id_to_edge.values())

    def get_edge_count(self) -> int:
        return len(self.id_to_edge)

    def iter_edges(self) -> Iterator[Tuple[int, int, pyedge]]:
        """
        Iterate over registered edges in insertion order.

        Yields:
            Tuples of (start handle, end handle, edge)
        """
        for handle, edge in self.id_to_edge.items():
            start_id, end_id = self.aEdge_endpoints[handle]
            yield start_id, end_id, edge

    def find_edge(self, source_id: str, target_id: str) -> Optional[pyedge]:
        """
        Find the first edge joining two nodes.

        Directed stores only match source -> target. Undirected stores match
        either orientation.

        Args:
            source_id: Id of the first node
            target_id: Id of the second node

        Returns:
            The first matching edge in insertion order, or None
        """
        start_id = self.node_to_id.get(source_id)
        end_id = self.node_to_id.get(target_id)
        if start_id is None or end_id is None:
            return None

        for neighbor_id, edge_handle in self.adjacency_list.get(start_id, []):
            if neighbor_id == end_id:
                return self.id_to_edge[edge_handle]
        return None

    def find_edge_id(self, source_id: str, target_id: str) -> Optional[str]:
        """
        Find the id of the first edge stored as source_id -> target_id.

        The match is on the stored endpoint order even for undirected stores.
        """
        start_id = self.node_to_id.get(source_id)
        end_id = self.node_to_id.get(target_id)
        if start_id is None or end_id is None:
            return None

        for _, edge_handle in self.adjacency_list.get(start_id, []):
            if self.aEdge_endpoints[edge_handle] == (start_id, end_id):
                return self.id_to_edge[edge_handle].get_id()
        return None

    # ------------------------------------------------------------------
    # Adjacency queries
    # ------------------------------------------------------------------

    def neighbor_entries(self, handle: int) -> List[Tuple[int, int]]:
        """Outgoing (neighbor handle, edge handle) pairs for a node handle."""
        return self.adjacency_list.get(handle, [])

    def predecessor_entries(self, handle: int) -> List[Tuple[int, int]]:
        """Incoming (neighbor handle, edge handle) pairs for a node handle."""
        if self.is_directed:
            return self.reverse_adjacency.get(handle, [])
        return self.adjacency_list.get(handle, [])

    def get_neighbors(self, node_id: str) -> List[pynode]:
        """
        Get the nodes reached from a node, one entry per edge.

        Args:
            node_id: Node identifier

        Returns:
            Neighbor nodes in edge insertion order, duplicates kept
        """
        handle = self.node_to_id.get(node_id)
        if handle is None:
            return []
        return [self._endpoint(edge_handle, neighbor_id)
                for neighbor_id, edge_handle in self.neighbor_entries(handle)]

    def get_predecessors(self, node_id: str) -> List[pynode]:
        """
        Get the nodes with an edge into a node, one entry per edge.

        Args:
            node_id: Node identifier

        Returns:
            Predecessor nodes in edge insertion order, duplicates kept
        """
        handle = self.node_to_id.get(node_id)
        if handle is None:
            return []
        return [self._endpoint(edge_handle, neighbor_id)
                for neighbor_id, edge_handle in self.predecessor_entries(handle)]

    def _endpoint(self, edge_handle: int, node_handle: int) -> pynode:
        """Get the node object an edge holds for the given endpoint handle."""
        edge = self.id_to_edge[edge_handle]
        start_id, _ = self.aEdge_endpoints[edge_handle]
        if start_id == node_handle:
            return edge.get_node_a()
        return edge.get_node_b()

    def get_sources(self) -> List[pynode]:
        """Get registered nodes with no incoming edges."""
        return [node for handle, node in self.id_to_node.items()
                if not self.predecessor_entries(handle)]

    def get_sinks(self) -> List[pynode]:
        """Get registered nodes with no outgoing edges."""
        return [node for handle, node in self.id_to_node.items()
                if not self.neighbor_entries(handle)]

    def copy(self) -> 'GraphStore':
        """
        Build a new store with the same orientation, nodes and edges.

        Node and edge objects are shared with the original, only the
        container maps are new.
        """
        clone = GraphStore(self.orientation)
        for node in self.id_to_node.values():
            clone.add_node(node)
        for edge in self.id_to_edge.values():
            clone.add_edge(edge)
        return clone
