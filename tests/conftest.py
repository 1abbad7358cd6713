"""Pytest configuration and fixtures."""

import pytest

from weightgraph import pydigraph, pydirectededge, pyedge, pygraph, pynode


@pytest.fixture
def nodes():
    """Nodes A through F keyed by id."""
    return {node_id: pynode(node_id) for node_id in "ABCDEF"}


@pytest.fixture
def road_graph(nodes):
    """Undirected weighted graph where the cheapest A to D route goes through C."""
    a, b, c, d = nodes["A"], nodes["B"], nodes["C"], nodes["D"]
    graph = pygraph()
    for node in (a, b, c, d):
        graph.add_node(node)
    graph.add_edge(pyedge(a, b, 4.0))
    graph.add_edge(pyedge(a, c, 2.0))
    graph.add_edge(pyedge(c, b, 5.0))
    graph.add_edge(pyedge(b, d, 10.0))
    graph.add_edge(pyedge(c, d, 3.0))
    return graph


@pytest.fixture
def triangle_digraph(nodes):
    """Directed graph A->B(5), A->C(10), B->C(2)."""
    a, b, c = nodes["A"], nodes["B"], nodes["C"]
    graph = pydigraph()
    graph.add_node(a).add_node(b).add_node(c)
    graph.add_edge(pydirectededge(a, b, 5.0))
    graph.add_edge(pydirectededge(a, c, 10.0))
    graph.add_edge(pydirectededge(b, c, 2.0))
    return graph


@pytest.fixture
def cyclic_digraph(nodes):
    """Directed cycle A->B->C->A."""
    a, b, c = nodes["A"], nodes["B"], nodes["C"]
    graph = pydigraph()
    graph.add_node(a).add_node(b).add_node(c)
    graph.add_edge(pydirectededge(a, b))
    graph.add_edge(pydirectededge(b, c))
    graph.add_edge(pydirectededge(c, a))
    return graph
