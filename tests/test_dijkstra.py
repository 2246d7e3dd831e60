import math

import pytest

from delivery_network.domain.errors import NodeIndexError
from delivery_network.domain.models import UNREACHABLE, Edge
from delivery_network.graph.dijkstra import shortest_paths
from delivery_network.graph.network import build_graph


def _brute_force_distance(graph, start, end):
    """Minimum weight over every simple path, or inf."""
    best = math.inf

    def walk(node, seen, total):
        nonlocal best
        if node == end:
            best = min(best, total)
            return
        for v, weight in graph.adjacency[node]:
            if v not in seen:
                walk(v, seen | {v}, total + weight)

    walk(start, {start}, 0)
    return best


def test_start_distance_is_zero(graph):
    for start in range(graph.node_count):
        assert shortest_paths(graph, start).distance_to(start) == 0


def test_reference_distances_from_central_hub(graph):
    result = shortest_paths(graph, 0)

    assert result.distances == (
        0, UNREACHABLE, 31, 19, 49, 36, UNREACHABLE, 48, 61, 55, 69, 80, 63,
    )


def test_west_hub_goes_through_north_warehouse(graph):
    result = shortest_paths(graph, 0)

    assert result.distance_to(5) == 36
    assert result.path_to(5) == (0, 2, 5)
    assert result.path_to(11) == (0, 2, 5, 7, 10, 11)
    assert result.path_to(0) == (0,)


def test_distances_match_brute_force(graph):
    for start in (0, 4, 11):
        result = shortest_paths(graph, start)
        for end in range(graph.node_count):
            assert result.distance_to(end) == _brute_force_distance(graph, start, end)


def test_unreachable_facilities(graph):
    result = shortest_paths(graph, 0)

    assert not result.is_reachable(1)
    assert not result.is_reachable(6)
    assert result.path_to(6) == ()
    assert list(result.reachable_nodes()) == [0, 2, 3, 4, 5, 7, 8, 9, 10, 11, 12]


def test_stale_heap_entries_are_skipped():
    # 1 is first reached directly (10) then improved via 2 (1 + 1)
    graph = build_graph(
        [Edge(0, 1, 10), Edge(0, 2, 1), Edge(2, 1, 1), Edge(1, 3, 1)],
        node_count=4,
    )

    result = shortest_paths(graph, 0)

    assert result.distances == (0, 2, 1, 3)
    assert result.predecessors == (None, 2, 0, 1)


def test_zero_weight_routes():
    graph = build_graph([Edge(0, 1, 0), Edge(1, 2, 0)], node_count=3)

    assert shortest_paths(graph, 0).distances == (0, 0, 0)


def test_shortest_paths_is_repeatable(graph):
    assert shortest_paths(graph, 0) == shortest_paths(graph, 0)


def test_out_of_range_start(graph):
    with pytest.raises(NodeIndexError):
        shortest_paths(graph, 99)
