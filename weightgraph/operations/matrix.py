"""
Adjacency and reachability matrices for graph stores.

Arrays are indexed by registered node in registration order. The dictionary
views key rows and columns by node id.
"""

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..core.graph import GraphStore

logger = logging.getLogger(__name__)

# Cell value for "no edge" in the dictionary adjacency matrix, distinct from a 0.0 weight
NO_EDGE = None


def adjacency_array(graph: GraphStore) -> Tuple[List[str], np.ndarray]:
    """
    Build a weighted adjacency array over the registered nodes.

    Missing edges are NaN so a zero weight stays distinguishable. When two
    nodes are joined by parallel edges the first inserted edge wins.
    Undirected stores produce a symmetric array.

    Args:
        graph: GraphStore to read

    Returns:
        Tuple of (node ids in row order, float array of shape (n, n))
    """
    aHandle = list(graph.id_to_node.keys())
    index = {handle: i for i, handle in enumerate(aHandle)}
    n = len(aHandle)

    weights = np.full((n, n), np.nan, dtype=float)
    for start_id, end_id, edge in graph.iter_edges():
        i = index.get(start_id)
        j = index.get(end_id)
        if i is None or j is None:
            continue
        if np.isnan(weights[i, j]):
            weights[i, j] = edge.get_weight()
        if not graph.is_directed and np.isnan(weights[j, i]):
            weights[j, i] = edge.get_weight()

    return [graph.get_node_id(handle) for handle in aHandle], weights


def adjacency_matrix(graph: GraphStore) -> Dict[str, Dict[str, Optional[float]]]:
    """
    Build the adjacency matrix as nested dictionaries keyed by node id.

    Args:
        graph: GraphStore to read

    Returns:
        matrix[source_id][target_id] is the edge weight or NO_EDGE
    """
    aNode_id, weights = adjacency_array(graph)
    matrix: Dict[str, Dict[str, Optional[float]]] = {}
    for i, source_id in enumerate(aNode_id):
        matrix[source_id] = {
            target_id: (NO_EDGE if np.isnan(weights[i, j]) else float(weights[i, j]))
            for j, target_id in enumerate(aNode_id)
        }
    return matrix


def reachability_array(graph: GraphStore) -> Tuple[List[str], np.ndarray]:
    """
    Compute the transitive closure with Floyd-Warshall.

    The boolean array is seeded with direct adjacency, then for every k
    tc[i][j] |= tc[i][k] & tc[k][j]. O(V^3) time, O(V^2) space.

    Args:
        graph: GraphStore to read

    Returns:
        Tuple of (node ids in row order, boolean array of shape (n, n))
    """
    aNode_id, weights = adjacency_array(graph)
    tc = ~np.isnan(weights)

    for k in range(len(aNode_id)):
        tc |= np.outer(tc[:, k], tc[k, :])

    logger.debug(f"Computed transitive closure over {len(aNode_id)} nodes")
    return aNode_id, tc


def transitive_closure(graph: GraphStore) -> Dict[str, Dict[str, int]]:
    """
    Compute the transitive closure as nested dictionaries keyed by node id.

    Args:
        graph: GraphStore to read

    Returns:
        closure[source_id][target_id] is 1 when target is reachable, else 0
    """
    aNode_id, tc = reachability_array(graph)
    return {
        source_id: {target_id: int(tc[i, j]) for j, target_id in enumerate(aNode_id)}
        for i, source_id in enumerate(aNode_id)
    }
