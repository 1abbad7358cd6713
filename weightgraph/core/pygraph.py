"""
Facade classes for weighted graphs.

This module provides the pygraph, pydigraph and pydag classes that expose the
public graph API while delegating to the store and the algorithm modules.
"""

import logging
from typing import Any, Dict, List, Optional

from ..classes.node import pynode
from ..classes.edge import pyedge
from ..classes.orientation import Orientation
from .graph import GraphStore
from ..analysis.detection import CycleDetector
from ..analysis.pathfinding import PathFinder
from ..operations import acyclic
from ..operations import matrix

logger = logging.getLogger(__name__)


class pygraph:
    """
    Undirected weighted graph.

    Node and edge objects are held by reference; removing them only
    unregisters them from this graph. Mutating methods return the graph so
    calls can be chained.
    """

    def __init__(self):
        """Initialize an empty undirected graph. Use pydigraph for directed edges."""
        self._attach(GraphStore(Orientation.UNDIRECTED))

    def _attach(self, store: GraphStore):
        """Bind the store and the analysis components reading it."""
        self._graph = store
        self._detector = CycleDetector(store)
        self._pathfinder = PathFinder(store, self._detector)

    @property
    def store(self) -> GraphStore:
        return self._graph

    @property
    def orientation(self) -> Orientation:
        return self._graph.orientation

    # ========================================================================
    # NODE OPERATIONS
    # ========================================================================

    def add_node(self, node: pynode) -> 'pygraph':
        """Register a node, raising DuplicateIdError if its id is taken."""
        self._graph.add_node(node)
        return self

    def remove_node(self, node: pynode) -> 'pygraph':
        """Unregister a node together with every edge incident to it."""
        self._graph.remove_node(node.get_id())
        return self

    def remove_node_by_id(self, node_id: str) -> 'pygraph':
        self._graph.remove_node(node_id)
        return self

    def get_node_by_id(self, node_id: str) -> Optional[pynode]:
        return self._graph.get_node_by_id(node_id)

    def get_nodes(self) -> Dict[str, pynode]:
        """Get registered nodes keyed by id, in registration order."""
        return {node.get_id(): node for node in self._graph.get_nodes()}

    def get_node_count(self) -> int:
        return self._graph.get_node_count()

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    def add_edge(self, edge: pyedge) -> 'pygraph':
        """Register an edge, raising DuplicateIdError if its id is taken."""
        self._graph.add_edge(edge)
        return self

    def remove_edge(self, edge: pyedge) -> 'pygraph':
        self._graph.remove_edge_by_id(edge.get_id())
        return self

    def remove_edge_by_id(self, edge_id: str) -> 'pygraph':
        self._graph.remove_edge_by_id(edge_id)
        return self

    def get_edge_by_id(self, edge_id: str) -> Optional[pyedge]:
        return self._graph.get_edge_by_id(edge_id)

    def get_edges(self) -> Dict[str, pyedge]:
        """Get registered edges keyed by id, in insertion order."""
        return {edge.get_id(): edge for edge in self._graph.get_edges()}

    def get_edge_count(self) -> int:
        return self._graph.get_edge_count()

    def get_edge(self, node_a: pynode, node_b: pynode) -> Optional[pyedge]:
        """
        Get the first edge joining two nodes.

        Undirected graphs match either orientation; directed graphs only
        node_a -> node_b.
        """
        return self._graph.find_edge(node_a.get_id(), node_b.get_id())

    def get_edge_weight(self, node_a: pynode, node_b: pynode) -> float:
        """Get the weight of get_edge(node_a, node_b), or inf without an edge."""
        edge = self.get_edge(node_a, node_b)
        if edge is None:
            return float('inf')
        return edge.get_weight()

    def find_edge_id(self, source_id: str, target_id: str) -> Optional[str]:
        """Find the id of the first edge stored as source_id -> target_id."""
        return self._graph.find_edge_id(source_id, target_id)

    # ========================================================================
    # STRUCTURE QUERIES
    # ========================================================================

    def get_neighbors(self, node: pynode) -> List[pynode]:
        """
        Get adjacent nodes, one entry per edge.

        Undirected graphs return the other endpoint of every incident edge;
        directed graphs return targets of outgoing edges.
        """
        return self._graph.get_neighbors(node.get_id())

    def get_adjacency_matrix(self) -> Dict[str, Dict[str, Optional[float]]]:
        """
        Get matrix[source_id][target_id] over registered nodes.

        Cells hold the edge weight, or None when there is no edge.
        """
        return matrix.adjacency_matrix(self._graph)

    def transitive_closure(self) -> Dict[str, Dict[str, int]]:
        """Get closure[source_id][target_id] as 1 when reachable, else 0."""
        return matrix.transitive_closure(self._graph)

    # ========================================================================
    # ALGORITHMS
    # ========================================================================

    def contains_negative_weight(self) -> bool:
        return self._detector.contains_negative_weight()

    def has_cycle(self) -> bool:
        """
        Check for a cycle.

        Undirected graphs use a parent-skip DFS, so two parallel edges
        between the same nodes count as a cycle. Directed graphs use a
        recursion-stack DFS.
        """
        return self._detector.has_cycle()

    def shortest_path_dijkstra(self, start: pynode, end: pynode) -> Dict[str, Any]:
        """Cheapest path as {'path': [node ids], 'cost': float}."""
        return self._pathfinder.shortest_path_dijkstra(start, end)

    # ========================================================================
    # UTILITIES
    # ========================================================================

    def copy(self) -> 'pygraph':
        """Build a graph of the same kind sharing this graph's nodes and edges."""
        clone = type(self).__new__(type(self))
        clone._attach(self._graph.copy())
        return clone

    def __str__(self) -> str:
        output = "Graph:\n"
        for node in self._graph.get_nodes():
            aNeighbor_id = [neighbor.get_id() for neighbor in self.get_neighbors(node)]
            output += f"{node.get_id()} -> {', '.join(aNeighbor_id)}\n"
        return output

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(nodes={self.get_node_count()}, "
                f"edges={self.get_edge_count()})")


class pydigraph(pygraph):
    """
    Weighted directed graph.

    Only directed edges are accepted; anything else raises
    InvalidEdgeTypeError.
    """

    def __init__(self):
        self._attach(GraphStore(Orientation.DIRECTED))

    def get_predecessors(self, node: pynode) -> List[pynode]:
        """Get sources of edges into node, one entry per edge."""
        return self._graph.get_predecessors(node.get_id())

    def get_sources(self) -> List[pynode]:
        """Get registered nodes without incoming edges."""
        return self._graph.get_sources()

    def get_sinks(self) -> List[pynode]:
        """Get registered nodes without outgoing edges."""
        return self._graph.get_sinks()

    def bellman_ford(self, source: pynode) -> Dict[str, Dict[str, Any]]:
        """Distances and predecessors from source; raises NegativeCycleError."""
        return self._pathfinder.bellman_ford(source)

    def shortest_path_bellman_ford(self, source: pynode, destination: pynode) -> Dict[str, Any]:
        """Cheapest path as {'path': [node ids], 'cost': float}, negative weights allowed."""
        return self._pathfinder.shortest_path_bellman_ford(source, destination)


class pydag:
    """
    Acyclic-only operations over a directed graph.

    Wraps a pydigraph and checks it for cycles before every operation; a
    cyclic graph raises CycleError and is left untouched. The wrapped graph
    stays available as .graph for every other query.
    """

    def __init__(self, graph: Optional[pydigraph] = None):
        """
        Initialize the wrapper.

        Args:
            graph: Directed graph to wrap, a new empty one when omitted
        """
        self.graph = graph if graph is not None else pydigraph()

    def add_node(self, node: pynode) -> 'pydag':
        self.graph.add_node(node)
        return self

    def add_edge(self, edge: pyedge) -> 'pydag':
        self.graph.add_edge(edge)
        return self

    def get_edge(self, node_a: pynode, node_b: pynode) -> Optional[pyedge]:
        return self.graph.get_edge(node_a, node_b)

    def has_cycle(self) -> bool:
        return self.graph.has_cycle()

    def require_acyclic(self) -> None:
        """Raise CycleError if the wrapped graph holds a cycle."""
        acyclic.require_acyclic(self.graph.store, "DAG operations")

    def transitive_reduction(self) -> 'pydag':
        """
        Remove every edge implied by a longer path, in place.

        Copy the graph first to keep the original edge set.
        """
        acyclic.transitive_reduction(self.graph.store)
        return self

    def topological_sort(self) -> List[pynode]:
        """Get nodes ordered so every edge points from earlier to later."""
        return acyclic.topological_sort(self.graph.store)

    def __repr__(self) -> str:
        return f"pydag({self.graph!r})"
