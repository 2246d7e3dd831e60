import pytest

from delivery_network.domain.errors import DeliveryNetworkError, NodeIndexError
from delivery_network.domain.models import Edge
from delivery_network.graph.network import (
    FACILITY_NAMES,
    NODE_COUNT,
    REFERENCE_EDGES,
    build_graph,
    facility_directory,
)


def test_reference_graph_has_one_slot_per_facility(graph):
    assert len(graph) == NODE_COUNT == 13
    assert len(graph.adjacency) == NODE_COUNT
    assert graph.edge_count == len(REFERENCE_EDGES) == 17


def test_adjacency_preserves_insertion_order(graph):
    assert graph.neighbors(0) == ((2, 31), (3, 19))
    assert graph.neighbors(2) == ((0, 31), (3, 16), (4, 28), (5, 5))
    assert graph.neighbors(7) == ((5, 12), (4, 12), (8, 13), (9, 7), (10, 21), (12, 15))


def test_adjacency_is_symmetric(graph):
    for u in range(graph.node_count):
        for v, weight in graph.adjacency[u]:
            assert (u, weight) in graph.adjacency[v]


def test_inactive_facilities_are_isolated(graph):
    assert graph.is_isolated(1)
    assert graph.is_isolated(6)
    assert list(graph.connected_nodes()) == [0, 2, 3, 4, 5, 7, 8, 9, 10, 11, 12]


def test_build_graph_with_no_edges():
    graph = build_graph([], node_count=3)

    assert graph.adjacency == ((), (), ())
    assert graph.edge_count == 0


def test_self_loop_is_inserted_twice():
    graph = build_graph([Edge(1, 1, 4)], node_count=2)

    assert graph.neighbors(1) == ((1, 4), (1, 4))


def test_out_of_range_edge_fails_fast():
    with pytest.raises(NodeIndexError) as excinfo:
        build_graph([Edge(0, 1, 2), Edge(1, 5, 3)], node_count=3)

    assert excinfo.value.node == 5
    assert excinfo.value.node_count == 3
    assert isinstance(excinfo.value, DeliveryNetworkError)


def test_negative_weight_is_rejected():
    with pytest.raises(ValueError):
        Edge(0, 1, -1)


def test_check_node_rejects_negative_index(graph):
    with pytest.raises(NodeIndexError):
        graph.neighbors(-1)


def test_facility_directory_is_index_aligned():
    facilities = facility_directory()

    assert len(facilities) == len(FACILITY_NAMES) == NODE_COUNT
    assert facilities[0].label == "Facility 0 (Central Distribution Center)"
    assert all(f.node == i for i, f in enumerate(facilities))
