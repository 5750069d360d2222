"""Tests for the directed graph container and its algorithms."""

import pytest

from declang.digraph import DiGraph


def _graph(vertices, edges):
    graph = DiGraph()
    for vertex in vertices:
        graph.add_vertex(vertex)
    for src, dst in edges:
        graph.add_edge(src, dst)
    return graph


class TestVertices:
    def test_add_vertex_is_idempotent(self):
        graph = DiGraph()

        assert graph.add_vertex("a")
        assert not graph.add_vertex("a")
        assert graph.vertex_count() == 1

    def test_remove_vertex_drops_inbound_edges(self):
        graph = _graph("abc", [("a", "b"), ("c", "b"), ("b", "c")])

        assert graph.remove_vertex("b")

        assert graph.vertices() == ["a", "c"]
        assert graph.edge_count() == 0

    def test_remove_missing_vertex(self):
        assert not DiGraph().remove_vertex("x")


class TestEdges:
    def test_add_edge_is_idempotent(self):
        graph = _graph("ab", [("a", "b")])

        assert not graph.add_edge("a", "b")
        assert graph.edge_count() == 1

    def test_edge_needs_known_vertices(self):
        graph = _graph("a", [])

        with pytest.raises(KeyError):
            graph.add_edge("a", "z")

    def test_edges_are_directed(self):
        graph = _graph("ab", [("a", "b")])

        assert graph.has_edge("a", "b")
        assert not graph.has_edge("b", "a")
        assert not graph.has_edge("missing", "a")

    def test_remove_edge(self):
        graph = _graph("ab", [("a", "b")])

        assert graph.remove_edge("a", "b")
        assert not graph.remove_edge("a", "b")
        assert graph.edge_count() == 0

    def test_neighbors_and_predecessors(self):
        graph = _graph("abc", [("a", "b"), ("a", "c"), ("b", "c")])

        assert graph.neighbors("a") == ["b", "c"]
        assert graph.predecessors("c") == ["a", "b"]

    def test_neighbors_of_unknown_vertex(self):
        with pytest.raises(KeyError):
            DiGraph().neighbors("x")


class TestDepthFirstSearch:
    def test_first_started_finishes_last(self):
        graph = _graph("abc", [("a", "b"), ("b", "c")])

        assert graph.depth_first_search() == ["a", "b", "c"]

    def test_visits_disconnected_vertices(self):
        graph = _graph("abc", [("a", "b")])

        assert set(graph.depth_first_search()) == {"a", "b", "c"}

    def test_long_chain_keeps_finish_order(self):
        size = 3000
        graph = _graph(range(size), [(i, i + 1) for i in range(size - 1)])

        assert graph.depth_first_search() == list(range(size))

    def test_branching_finish_order(self):
        graph = _graph("abcd", [("a", "b"), ("a", "c"), ("b", "d")])

        # a finishes last; c finishes after b's subtree
        assert graph.depth_first_search() == ["a", "c", "b", "d"]


class TestTranspose:
    def test_reverses_every_edge(self):
        graph = _graph("abc", [("a", "b"), ("b", "c")])

        transposed = graph.transpose()

        assert transposed.has_edge("b", "a")
        assert transposed.has_edge("c", "b")
        assert not transposed.has_edge("a", "b")
        assert transposed.vertex_count() == 3

    def test_source_graph_is_unchanged(self):
        graph = _graph("ab", [("a", "b")])

        graph.transpose()

        assert graph.has_edge("a", "b")


class TestStronglyConnectedComponents:
    def test_kosaraju_example(self):
        graph = _graph(
            "abcdefg",
            [
                ("a", "b"),
                ("b", "c"),
                ("c", "d"),
                ("d", "a"),
                ("c", "e"),
                ("f", "g"),
                ("g", "f"),
            ],
        )

        components = {frozenset(c) for c in graph.strongly_connected_components()}

        assert components == {
            frozenset("abcd"),
            frozenset("e"),
            frozenset("fg"),
        }

    def test_chain_has_singleton_components(self):
        graph = _graph("abcd", [("a", "b"), ("b", "c"), ("c", "d")])

        components = graph.strongly_connected_components()

        assert len(components) == 4
        assert all(len(c) == 1 for c in components)

    def test_empty_graph(self):
        assert DiGraph().strongly_connected_components() == []

    def test_long_cycle_is_one_component(self):
        size = 3000
        edges = [(i, (i + 1) % size) for i in range(size)]
        graph = _graph(range(size), edges)

        components = graph.strongly_connected_components()

        assert len(components) == 1
        assert sorted(components[0]) == list(range(size))
