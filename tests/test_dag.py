"""Tests for acyclic-only operations."""

import pytest

from weightgraph import CycleError, pydag, pydigraph, pydirectededge
from weightgraph.operations import acyclic


def build_dag(nodes, edges):
    """Build a pydag over the given node ids and (source, target) pairs."""
    dag = pydag()
    for node_id in sorted({node_id for pair in edges for node_id in pair}):
        dag.add_node(nodes[node_id])
    for source, target in edges:
        dag.add_edge(pydirectededge(nodes[source], nodes[target]))
    return dag


def assert_topological(order, edges):
    position = {node.get_id(): i for i, node in enumerate(order)}
    for source, target in edges:
        assert position[source] < position[target]


class TestTransitiveReduction:
    """Tests for in-place transitive reduction."""

    def test_removes_redundant_edge(self, nodes):
        dag = build_dag(nodes, [("A", "B"), ("B", "C"), ("A", "C")])

        result = dag.transitive_reduction()

        assert result is dag
        assert dag.get_edge(nodes["A"], nodes["C"]) is None
        assert dag.graph.get_edge_by_id("A-C") is None
        assert sorted(dag.graph.get_edges()) == ["A-B", "B-C"]

    def test_no_redundant_edges(self, nodes):
        dag = build_dag(nodes, [("A", "B"), ("B", "C")])
        original = dag.graph.get_edges()

        dag.transitive_reduction()

        assert dag.graph.get_edges() == original

    def test_with_cycle_raises_without_mutation(self, nodes):
        dag = build_dag(nodes, [("A", "B"), ("B", "A"), ("A", "C"), ("B", "C")])

        with pytest.raises(CycleError, match="cycle"):
            dag.transitive_reduction()

        assert dag.graph.get_edge_count() == 4

    def test_preserves_reachability(self, nodes):
        edges = [("A", "B"), ("B", "C"), ("C", "D"), ("A", "C"), ("A", "D"),
                 ("B", "D"), ("A", "E"), ("E", "D")]
        dag = build_dag(nodes, edges)
        before = dag.graph.transitive_closure()
        count_before = dag.graph.get_edge_count()

        dag.transitive_reduction()

        assert dag.graph.transitive_closure() == before
        assert dag.graph.get_edge_count() <= count_before
        assert sorted(dag.graph.get_edges()) == ["A-B", "A-E", "B-C", "C-D", "E-D"]

    def test_diamond_keeps_both_branches(self, nodes):
        dag = build_dag(nodes, [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("A", "D")])

        dag.transitive_reduction()

        assert sorted(dag.graph.get_edges()) == ["A-B", "A-C", "B-D", "C-D"]

    def test_reduction_on_copy_keeps_original(self, nodes):
        dag = build_dag(nodes, [("A", "B"), ("B", "C"), ("A", "C")])

        reduced = pydag(dag.graph.copy()).transitive_reduction()

        assert reduced.graph.get_edge_count() == 2
        assert dag.graph.get_edge_count() == 3

    def test_reduction_is_logged(self, nodes, caplog):
        dag = build_dag(nodes, [("A", "B"), ("B", "C"), ("A", "C")])

        with caplog.at_level("INFO", logger="weightgraph"):
            dag.transitive_reduction()

        assert "removed 1 redundant edges" in caplog.text


class TestTopologicalSort:
    """Tests for DFS topological ordering."""

    def test_linear_dag(self, nodes):
        dag = build_dag(nodes, [("A", "B"), ("B", "C")])

        order = dag.topological_sort()

        assert [node.get_id() for node in order] == ["A", "B", "C"]

    def test_complex_dag(self, nodes):
        edges = [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("D", "E"), ("F", "C")]
        dag = build_dag(nodes, edges)

        order = dag.topological_sort()

        assert len(order) == 6
        assert order[0] in (nodes["A"], nodes["F"])
        assert_topological(order, edges)

    def test_registration_order_drives_ties(self, nodes):
        dag = pydag()
        for node_id in "CBA":
            dag.add_node(nodes[node_id])

        order = dag.topological_sort()

        assert [node.get_id() for node in order] == ["A", "B", "C"]

    def test_returns_node_objects(self, nodes):
        dag = build_dag(nodes, [("A", "B")])

        assert dag.topological_sort() == [nodes["A"], nodes["B"]]

    def test_graph_with_cycle_raises(self, cyclic_digraph):
        with pytest.raises(CycleError):
            pydag(cyclic_digraph).topological_sort()

    def test_cyclic_graph_refuses_both_operations(self, cyclic_digraph):
        dag = pydag(cyclic_digraph)

        assert dag.has_cycle()
        with pytest.raises(CycleError):
            dag.topological_sort()
        with pytest.raises(CycleError):
            dag.transitive_reduction()
        assert cyclic_digraph.get_edge_count() == 3


class TestRequireAcyclic:
    """Tests for the acyclicity guard."""

    def test_acyclic_graph_passes(self, triangle_digraph):
        pydag(triangle_digraph).require_acyclic()

    def test_cyclic_graph_names_the_cycle(self, cyclic_digraph):
        with pytest.raises(CycleError, match="A -> B -> C -> A"):
            pydag(cyclic_digraph).require_acyclic()

    def test_free_functions_accept_store(self, nodes):
        graph = pydigraph().add_node(nodes["A"]).add_node(nodes["B"]).add_node(nodes["C"])
        graph.add_edge(pydirectededge(nodes["A"], nodes["B"]))
        graph.add_edge(pydirectededge(nodes["B"], nodes["C"]))
        graph.add_edge(pydirectededge(nodes["A"], nodes["C"]))

        acyclic.transitive_reduction(graph.store)

        assert graph.find_edge_id("A", "C") is None
        assert [node.get_id() for node in acyclic.topological_sort(graph.store)] == ["A", "B", "C"]

    def test_closure_of_dag_is_reflexive_free(self, nodes):
        dag = build_dag(nodes, [("A", "B"), ("B", "C"), ("C", "D")])

        tc = dag.graph.transitive_closure()

        for node_id, row in tc.items():
            assert row[node_id] == 0
        for i in tc:
            for j in tc:
                for k in tc:
                    if tc[i][j] and tc[j][k]:
                        assert tc[i][k] == 1
