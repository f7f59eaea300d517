"""Tests for the graph model (Direction, GraphNode, Graph).

Test categories:
- TestDirection: opposite mapping
- TestGraphNodes: lazy materialization, lookups, arena handles
- TestUndirectedEdges: symmetry, idempotence, self-loops, removal
- TestGraphNodeCapabilities: directed operations on undirected nodes
"""

from __future__ import annotations

import pytest

from gridpath import (
    Direction,
    Graph,
    GraphNode,
    GridPathError,
    NodeKind,
    NodeNotFoundError,
    UnsupportedNodeOperationError,
)


class TestDirection:
    """Direction.opposite is total and an involution."""

    @pytest.mark.parametrize(
        "direction, expected",
        [
            (Direction.LEFT, Direction.RIGHT),
            (Direction.RIGHT, Direction.LEFT),
            (Direction.TOP, Direction.BOTTOM),
            (Direction.BOTTOM, Direction.TOP),
            (Direction.NONE, Direction.NONE),
        ],
    )
    def test_opposite(self, direction, expected):
        assert direction.opposite() is expected

    def test_opposite_twice_is_identity(self):
        for direction in Direction:
            assert direction.opposite().opposite() is direction


class TestGraphNodes:
    """Node creation and lookup."""

    def test_get_or_create_is_idempotent(self):
        graph = Graph()
        first = graph.get_or_create_node("a")
        second = graph.get_or_create_node("a")
        assert first is second
        assert len(graph) == 1

    def test_new_nodes_get_sequential_handles(self):
        graph = Graph()
        a = graph.get_or_create_node("a")
        b = graph.get_or_create_node("b")
        assert (a.handle, b.handle) == (0, 1)
        assert graph.node_at(1) is b

    def test_nodes_take_the_graph_kind(self):
        node = Graph().get_or_create_node("a")
        assert node.kind is NodeKind.UNDIRECTED
        assert not node.is_orientational

    def test_get_node_does_not_materialize(self):
        graph = Graph()
        assert graph.get_node("missing") is None
        assert "missing" not in graph
        assert len(graph) == 0

    def test_node_at_unknown_handle_raises(self):
        graph = Graph()
        graph.get_or_create_node("a")
        with pytest.raises(NodeNotFoundError):
            graph.node_at(5)
        with pytest.raises(KeyError):
            graph.node_at(-1)

    def test_contains_tolerates_unhashable_values(self):
        assert [1, 2] not in Graph()

    def test_get_all_nodes_is_a_snapshot(self):
        graph = Graph()
        graph.add_edge("a", "b")
        nodes = graph.get_all_nodes()
        assert isinstance(nodes, tuple)
        assert {n.value for n in nodes} == {"a", "b"}
        graph.get_or_create_node("c")
        assert len(nodes) == 2

    def test_tuple_values_are_distinct_nodes(self):
        graph = Graph()
        graph.add_edge((0, 0), (0, 1))
        assert graph.get_node((0, 0)) is not graph.get_node((0, 1))


class TestUndirectedEdges:
    """add_edge / remove_edge semantics."""

    def test_add_edge_is_symmetric(self):
        graph = Graph()
        graph.add_edge("a", "b")
        assert [n.value for n in graph.neighbors("a")] == ["b"]
        assert [n.value for n in graph.neighbors("b")] == ["a"]

    def test_reverse_add_is_idempotent(self):
        graph = Graph()
        graph.add_edge("a", "b")
        graph.add_edge("b", "a")
        a, b = graph.get_node("a"), graph.get_node("b")
        assert a.neighbor_handles == frozenset({b.handle})
        assert b.neighbor_handles == frozenset({a.handle})

    def test_self_loop_is_ignored(self):
        graph = Graph()
        graph.add_edge("a", "a")
        node = graph.get_node("a")
        assert node is not None
        assert node.handle not in node.neighbor_handles
        assert graph.neighbors("a") == []

    def test_remove_edge_is_symmetric(self):
        graph = Graph()
        graph.add_edge("a", "b")
        graph.add_edge("a", "c")
        graph.remove_edge("b", "a")
        assert [n.value for n in graph.neighbors("a")] == ["c"]
        assert graph.neighbors("b") == []

    def test_remove_edge_with_unknown_endpoint_is_noop(self):
        graph = Graph()
        graph.add_edge("a", "b")
        graph.remove_edge("a", "zzz")
        graph.remove_edge("zzz", "a")
        assert len(graph) == 2
        assert [n.value for n in graph.neighbors("a")] == ["b"]

    def test_neighbors_of_unknown_value_is_empty(self):
        assert Graph().neighbors("nobody") == []

    def test_cycle_is_representable(self):
        graph = Graph()
        graph.add_edge("a", "b")
        graph.add_edge("b", "c")
        graph.add_edge("c", "a")
        for value in "abc":
            assert len(graph.neighbors(value)) == 2


class TestGraphNodeCapabilities:
    """Undirected nodes reject directed operations."""

    def test_directed_ops_on_undirected_node_raise(self):
        node = GraphNode(handle=0, value="a")
        with pytest.raises(UnsupportedNodeOperationError):
            node.set_directed_neighbor(Direction.LEFT, 1)
        with pytest.raises(UnsupportedNodeOperationError):
            node.directed_handles  # noqa: B018
        with pytest.raises(GridPathError):
            node.remove_directed_neighbor(Direction.LEFT)

    def test_orientational_node_set_and_remove(self):
        node = GraphNode(handle=0, value="a", kind=NodeKind.ORIENTATIONAL)
        assert node.set_directed_neighbor(Direction.LEFT, 3) is True
        assert node.directed_neighbor(Direction.LEFT) == 3
        assert node.remove_directed_neighbor(Direction.LEFT) == 3
        assert node.remove_directed_neighbor(Direction.LEFT) is None

    def test_directed_handles_view_is_read_only(self):
        node = GraphNode(handle=0, value="a", kind=NodeKind.ORIENTATIONAL)
        node.set_directed_neighbor(Direction.TOP, 1)
        with pytest.raises(TypeError):
            node.directed_handles[Direction.TOP] = 2  # type: ignore[index]
