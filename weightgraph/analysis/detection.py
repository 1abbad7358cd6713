"""
Cycle and weight detection for weighted graphs.

This module provides the structural checks algorithms rely on before running.
"""

import logging
from typing import List, Optional, Set, Tuple, Iterator

from ..core.graph import GraphStore

logger = logging.getLogger(__name__)


class CycleDetector:
    """
    Detects cycles and negative weights in a graph store.

    This class provides methods for:
    - Undirected cycle detection (DFS with parent skip)
    - Directed cycle detection (DFS with recursion stack)
    - Negative weight detection
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the cycle detector.

        Args:
            graph: GraphStore instance to analyze
        """
        self.graph = graph

    def has_cycle(self) -> bool:
        """Run the cycle check matching the store's orientation."""
        if self.graph.is_directed:
            return self.has_directed_cycle()
        return self.has_undirected_cycle()

    def has_undirected_cycle(self) -> bool:
        """
        Detect a cycle treating every edge as undirected.

        Any edge back to an already visited node other than the DFS parent
        counts as a cycle. Two parallel edges between the same pair therefore
        report a cycle.

        Returns:
            True if a cycle exists
        """
        visited: Set[int] = set()

        for root_id in self.graph.id_to_node:
            if root_id in visited:
                continue

            visited.add(root_id)
            # Frames are (node, parent, iterator over neighbor entries)
            stack: List[Tuple[int, Optional[int], Iterator[Tuple[int, int]]]] = [
                (root_id, None, iter(self.graph.neighbor_entries(root_id)))
            ]
            while stack:
                current_id, parent_id, entries = stack[-1]
                advanced = False
                for neighbor_id, _ in entries:
                    if neighbor_id not in visited:
                        visited.add(neighbor_id)
                        stack.append((neighbor_id, current_id,
                                      iter(self.graph.neighbor_entries(neighbor_id))))
                        advanced = True
                        break
                    if neighbor_id != parent_id:
                        logger.debug(f"Undirected cycle closed at handle {neighbor_id}")
                        return True
                if not advanced:
                    stack.pop()

        return False

    def has_directed_cycle(self) -> bool:
        """
        Detect a cycle following edges from source to target.

        Uses DFS with a recursion stack; reaching a node that is still on the
        stack is a back edge.

        Returns:
            True if a cycle exists
        """
        return self.find_directed_cycle() is not None

    def find_directed_cycle(self) -> Optional[List[int]]:
        """
        Find one directed cycle.

        Returns:
            Node handles along the cycle with the first handle repeated at the
            end, or None if the graph is acyclic
        """
        visited: Set[int] = set()
        rec_stack: Set[int] = set()

        for root_id in self.graph.id_to_node:
            if root_id in visited:
                continue

            visited.add(root_id)
            rec_stack.add(root_id)
            path = [root_id]
            stack = [iter(self.graph.neighbor_entries(root_id))]
            while stack:
                advanced = False
                for neighbor_id, _ in stack[-1]:
                    if neighbor_id not in visited:
                        visited.add(neighbor_id)
                        rec_stack.add(neighbor_id)
                        path.append(neighbor_id)
                        stack.append(iter(self.graph.neighbor_entries(neighbor_id)))
                        advanced = True
                        break
                    if neighbor_id in rec_stack:
                        cycle_start = path.index(neighbor_id)
                        return path[cycle_start:] + [neighbor_id]
                if not advanced:
                    stack.pop()
                    rec_stack.discard(path.pop())

        return None

    def contains_negative_weight(self) -> bool:
        """Check whether any registered edge has a weight below zero."""
        for edge in self.graph.id_to_edge.values():
            if edge.get_weight() < 0:
                return True
        return False
