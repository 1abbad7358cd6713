"""
Operations defined only on directed acyclic graphs.

Each operation checks the store for a directed cycle first and refuses to run
on a cyclic graph, so no partial result or partial mutation is produced.
"""

import logging
from typing import List

import numpy as np

from ..classes.node import pynode
from ..core.graph import GraphStore
from ..analysis.detection import CycleDetector
from ..errors import CycleError
from .matrix import reachability_array

logger = logging.getLogger(__name__)


def require_acyclic(graph: GraphStore, operation: str = "this operation") -> None:
    """
    Raise if the store holds a directed cycle.

    Args:
        graph: GraphStore to check
        operation: Name of the operation, used in the error message

    Raises:
        CycleError: If a directed cycle is found
    """
    cycle = CycleDetector(graph).find_directed_cycle()
    if cycle is not None:
        readable = ' -> '.join(graph.get_node_id(handle) for handle in cycle)
        logger.warning(f"Refusing {operation}, cycle found: {readable}")
        raise CycleError(f"The graph contains a cycle ({readable}) and does not support {operation}.")


def transitive_reduction(graph: GraphStore) -> GraphStore:
    """
    Remove every direct edge implied by a longer path, in place.

    An edge i -> j is dropped when some k other than i and j has i reaching
    k and k reaching j in the transitive closure. Reachability is unchanged.

    Args:
        graph: Directed GraphStore to reduce

    Returns:
        The same store, reduced

    Raises:
        CycleError: If the store holds a directed cycle
    """
    require_acyclic(graph, "transitive reduction")

    aNode_id, tc = reachability_array(graph)
    index = {graph.node_to_id[node_id]: i for i, node_id in enumerate(aNode_id)}

    aEdge_redundant = []
    for start_id, end_id, edge in graph.iter_edges():
        i = index.get(start_id)
        j = index.get(end_id)
        if i is None or j is None:
            continue
        via = tc[i, :] & tc[:, j]
        via[i] = False
        via[j] = False
        if np.any(via):
            aEdge_redundant.append(edge.get_id())

    for edge_id in aEdge_redundant:
        graph.remove_edge_by_id(edge_id)

    logger.info(f"Transitive reduction removed {len(aEdge_redundant)} redundant edges")
    return graph


def topological_sort(graph: GraphStore) -> List[pynode]:
    """
    Order registered nodes so every edge points forward.

    Depth first search pushes a node after all of its unvisited successors,
    then the stack is read from the top. The result is deterministic for a
    fixed registration and edge insertion order.

    Args:
        graph: Directed GraphStore to sort

    Returns:
        Nodes with every predecessor before its successors

    Raises:
        CycleError: If the store holds a directed cycle
    """
    require_acyclic(graph, "topological sort")

    visited = set()
    stack: List[int] = []

    for root_id in graph.id_to_node:
        if root_id in visited:
            continue

        visited.add(root_id)
        frames = [(root_id, iter(graph.neighbor_entries(root_id)))]
        while frames:
            current_id, entries = frames[-1]
            for neighbor_id, _ in entries:
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    frames.append((neighbor_id, iter(graph.neighbor_entries(neighbor_id))))
                    break
            else:
                frames.pop()
                stack.append(current_id)

    return [graph.id_to_node[handle] for handle in reversed(stack) if handle in graph.id_to_node]
