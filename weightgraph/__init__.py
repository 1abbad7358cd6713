"""
weightgraph - Weighted Graph Data Structures and Algorithms

A Python library for building weighted undirected and directed graphs and
running classical algorithms on them: shortest paths, cycle detection,
topological ordering, transitive closure and transitive reduction.

Main Classes:
    pygraph: Undirected weighted graph (facade)
    pydigraph: Directed weighted graph (facade)
    pydag: Acyclic-only operations over a directed graph
    pynode: Node representation
    pyedge: Undirected edge between two nodes
    pydirectededge: Directed edge from source to target

Example:
    >>> from weightgraph import pydigraph, pynode, pydirectededge
    >>> a, b = pynode('A'), pynode('B')
    >>> graph = pydigraph().add_node(a).add_node(b)
    >>> graph = graph.add_edge(pydirectededge(a, b, 2.0))
    >>> graph.bellman_ford(a)['distances']['B']
    2.0
"""

__version__ = "0.1.0"

from weightgraph.classes.node import pynode
from weightgraph.classes.edge import pyedge, pydirectededge
from weightgraph.classes.orientation import Orientation
from weightgraph.core.graph import GraphStore
from weightgraph.core.pygraph import pygraph, pydigraph, pydag
from weightgraph.errors import (
    GraphError,
    DuplicateIdError,
    InvalidEdgeTypeError,
    NegativeWeightError,
    NegativeCycleError,
    CycleError,
)

__all__ = [
    'pygraph',
    'pydigraph',
    'pydag',
    'pynode',
    'pyedge',
    'pydirectededge',
    'Orientation',
    'GraphStore',
    'GraphError',
    'DuplicateIdError',
    'InvalidEdgeTypeError',
    'NegativeWeightError',
    'NegativeCycleError',
    'CycleError',
]
