"""Tests for GraphStore identity and cascade rules."""

import pytest

from mapgraph.core.annotation import Edge, Graph, GraphStore, Node, UnknownNode


@pytest.fixture
def store():
    return GraphStore()


def test_add_node_assigns_sequential_ids(store):
    a = store.add_node(1, 2)
    b = store.add_node(3, 4)
    assert (a.id, a.x, a.y) == ("n1", 1, 2)
    assert b.id == "n2"
    assert store.nodes == [a, b]


def test_ids_are_not_reused_after_removal(store):
    store.add_node(0, 0)
    store.add_node(0, 0)
    store.remove_node("n2")
    assert store.add_node(0, 0).id == "n3"

    store.remove_node("n1")
    store.remove_node("n3")
    assert store.add_node(0, 0).id == "n4"


def test_add_edge_keeps_creation_order(store):
    store.add_node(0, 0)
    store.add_node(5, 5)
    edge = store.add_edge("n2", "n1")
    assert edge == Edge(from_id="n2", to_id="n1")
    assert store.edges == [edge]


def test_parallel_edges_are_kept(store):
    store.add_node(0, 0)
    store.add_node(5, 5)
    store.add_edge("n1", "n2")
    store.add_edge("n1", "n2")
    store.add_edge("n2", "n1")
    assert len(store.edges) == 3


def test_add_edge_rejects_self_loop(store):
    store.add_node(0, 0)
    with pytest.raises(ValueError):
        store.add_edge("n1", "n1")
    assert store.edges == []


def test_add_edge_rejects_unknown_node(store):
    store.add_node(0, 0)
    with pytest.raises(UnknownNode):
        store.add_edge("n1", "n7")
    with pytest.raises(UnknownNode):
        store.add_edge("n7", "n1")
    assert store.edges == []


def test_remove_node_cascades_to_edges(store):
    for _ in range(3):
        store.add_node(0, 0)
    store.add_edge("n1", "n2")
    store.add_edge("n3", "n1")
    store.add_edge("n2", "n3")

    dropped = store.remove_node("n1")

    assert dropped == [Edge("n1", "n2"), Edge("n3", "n1")]
    assert [n.id for n in store.nodes] == ["n2", "n3"]
    assert store.edges == [Edge("n2", "n3")]


def test_remove_unknown_node(store):
    with pytest.raises(UnknownNode):
        store.remove_node("n1")


def test_remove_edge_is_directional(store):
    store.add_node(0, 0)
    store.add_node(5, 5)
    store.add_edge("n1", "n2")

    assert store.remove_edge("n2", "n1") is None
    assert len(store.edges) == 1

    assert store.remove_edge("n1", "n2") == Edge("n1", "n2")
    assert store.edges == []


def test_remove_edge_removes_latest_match(store):
    for _ in range(3):
        store.add_node(0, 0)
    store.add_edge("n1", "n2")
    store.add_edge("n1", "n3")
    store.add_edge("n1", "n2")

    store.remove_edge("n1", "n2")

    assert store.edges == [Edge("n1", "n2"), Edge("n1", "n3")]


def test_clear_empties_and_restarts_numbering(store):
    store.add_node(0, 0)
    store.add_node(5, 5)
    store.add_edge("n1", "n2")

    store.clear()

    assert store.graph.is_empty()
    assert store.add_node(1, 1).id == "n1"


def test_replace_continues_after_highest_id():
    graph = Graph(nodes=[Node("n1", 0, 0), Node("n7", 1, 1), Node("gate", 2, 2)])
    store = GraphStore(graph)
    assert store.add_node(3, 3).id == "n8"


def test_replace_copies_lists():
    graph = Graph(nodes=[Node("n1", 0, 0)])
    store = GraphStore(graph)
    store.add_node(1, 1)
    assert len(graph.nodes) == 1
