"""
Shortest path algorithms for weighted graphs.

This module provides Dijkstra and Bellman-Ford over a graph store.
"""

import heapq
import itertools
import logging
import math
from typing import Any, Dict, List, Optional

from ..classes.node import pynode
from ..core.graph import GraphStore
from ..errors import NegativeCycleError, NegativeWeightError
from .detection import CycleDetector

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Shortest path algorithms for graph stores.

    This class provides methods for:
    - Single pair shortest paths with Dijkstra (non-negative weights)
    - Single source distances with Bellman-Ford (negative weights allowed)
    - Path reconstruction from predecessor maps

    Distances are tracked for registered nodes plus the start node. Edges to
    unregistered endpoints are skipped.
    """

    def __init__(self, graph: GraphStore, detector: Optional[CycleDetector] = None):
        """
        Initialize the path finder.

        Args:
            graph: GraphStore instance to search
            detector: CycleDetector used for the negative weight precondition
        """
        self.graph = graph
        self.detector = detector if detector is not None else CycleDetector(graph)

    def shortest_path_dijkstra(self, start: pynode, end: pynode) -> Dict[str, Any]:
        """
        Find the cheapest path between two nodes using Dijkstra's algorithm.

        The whole graph is rejected up front when any edge is negative, even
        if that edge cannot be reached from start. Undirected stores follow
        edges both ways, directed stores only source -> target.

        Args:
            start: Node the path starts at
            end: Node the path ends at

        Returns:
            Dictionary with 'path' (list of node ids, empty when unreachable)
            and 'cost' (float, inf when unreachable)

        Raises:
            NegativeWeightError: If any edge in the graph has a negative weight
        """
        if self.detector.contains_negative_weight():
            logger.warning("Dijkstra requested on a graph with negative edge weights")
            raise NegativeWeightError(
                "Dijkstra's algorithm cannot handle graphs with negative edge weights."
            )

        if start.get_id() == end.get_id():
            return {'path': [start.get_id()], 'cost': 0.0}

        start_id = self.graph.get_handle(start.get_id())
        end_id = self.graph.get_handle(end.get_id())
        if start_id is None or end_id is None:
            return {'path': [], 'cost': math.inf}

        distances, previous = self._initial_state(start_id)

        # Heap entries carry a push counter so equal distances pop in push order
        counter = itertools.count()
        queue = [(0.0, next(counter), start_id)]
        visited = set()

        while queue:
            distance, _, current_id = heapq.heappop(queue)
            if current_id in visited:
                continue
            visited.add(current_id)

            if current_id == end_id:
                break

            for neighbor_id, edge_handle in self.graph.neighbor_entries(current_id):
                if neighbor_id in visited or neighbor_id not in distances:
                    continue

                alt = distance + self.graph.id_to_edge[edge_handle].get_weight()
                if alt < distances[neighbor_id]:
                    distances[neighbor_id] = alt
                    previous[neighbor_id] = current_id
                    heapq.heappush(queue, (alt, next(counter), neighbor_id))

        logger.debug(f"Dijkstra settled {len(visited)} nodes")

        cost = distances.get(end_id, math.inf)
        if cost == math.inf:
            return {'path': [], 'cost': math.inf}

        return {'path': self._reconstruct_path(previous, end_id), 'cost': cost}

    def bellman_ford(self, source: pynode) -> Dict[str, Dict[str, Any]]:
        """
        Compute single source shortest distances using Bellman-Ford.

        Every edge is relaxed source -> target up to |V| - 1 times, then one
        more pass checks for a negative weight cycle.

        Args:
            source: Node the distances are measured from

        Returns:
            Dictionary with 'distances' (node id -> float) and 'previous'
            (node id -> predecessor node id or None)

        Raises:
            NegativeCycleError: If a negative cycle is reachable from source
        """
        source_id = self.graph.get_handle(source.get_id())
        if source_id is None:
            distances: Dict[str, float] = {node.get_id(): math.inf for node in self.graph.get_nodes()}
            distances[source.get_id()] = 0.0
            return {'distances': distances, 'previous': {node_id: None for node_id in distances}}

        distances, previous = self._initial_state(source_id)

        aEdge = [(start_id, end_id, edge.get_weight())
                 for start_id, end_id, edge in self.graph.iter_edges()
                 if start_id in distances and end_id in distances]

        nPass = 0
        for _ in range(len(distances) - 1):
            nPass += 1
            changed = False
            for start_id, end_id, weight in aEdge:
                if distances[start_id] != math.inf and distances[start_id] + weight < distances[end_id]:
                    distances[end_id] = distances[start_id] + weight
                    previous[end_id] = start_id
                    changed = True
            if not changed:
                break

        logger.debug(f"Bellman-Ford ran {nPass} relaxation passes over {len(aEdge)} edges")

        for start_id, end_id, weight in aEdge:
            if distances[start_id] != math.inf and distances[start_id] + weight < distances[end_id]:
                logger.warning(f"Negative weight cycle reachable from '{source.get_id()}'")
                raise NegativeCycleError("Graph contains a negative weight cycle")

        get_node_id = self.graph.get_node_id
        return {
            'distances': {get_node_id(handle): distance for handle, distance in distances.items()},
            'previous': {get_node_id(handle): (None if prev is None else get_node_id(prev))
                         for handle, prev in previous.items()},
        }

    def shortest_path_bellman_ford(self, source: pynode, destination: pynode) -> Dict[str, Any]:
        """
        Find the cheapest path between two nodes using Bellman-Ford.

        Args:
            source: Node the path starts at
            destination: Node the path ends at

        Returns:
            Dictionary with 'path' (list of node ids, empty when unreachable)
            and 'cost' (float, inf when unreachable)

        Raises:
            NegativeCycleError: If a negative cycle is reachable from source
        """
        result = self.bellman_ford(source)
        destination_id = destination.get_id()

        cost = result['distances'].get(destination_id, math.inf)
        if cost == math.inf:
            return {'path': [], 'cost': math.inf}

        path = []
        current: Optional[str] = destination_id
        while current is not None:
            path.append(current)
            current = result['previous'][current]
        path.reverse()

        return {'path': path, 'cost': cost}

    def _initial_state(self, start_id: int):
        """Distances at infinity and no predecessors, except start at zero."""
        distances: Dict[int, float] = {handle: math.inf for handle in self.graph.id_to_node}
        previous: Dict[int, Optional[int]] = {handle: None for handle in self.graph.id_to_node}
        distances[start_id] = 0.0
        previous[start_id] = None
        return distances, previous

    def _reconstruct_path(self, previous: Dict[int, Optional[int]], end_id: int) -> List[str]:
        """
        Walk a predecessor map back from end_id.

        Args:
            previous: Node handle -> predecessor handle
            end_id: Handle the path ends at

        Returns:
            Node ids from the first node to end_id
        """
        path = []
        current: Optional[int] = end_id
        while current is not None:
            path.append(self.graph.get_node_id(current))
            current = previous.get(current)
        path.reverse()
        return path
