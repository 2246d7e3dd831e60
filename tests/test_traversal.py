import pytest

from delivery_network.domain.errors import NodeIndexError
from delivery_network.domain.models import Edge, TraversalStep
from delivery_network.graph.dijkstra import shortest_paths
from delivery_network.graph.network import REFERENCE_EDGES, build_graph
from delivery_network.graph.traversal import breadth_first, depth_first


def test_depth_first_order_from_central_hub(graph):
    result = depth_first(graph, 0)

    assert result.order == (0, 2, 3, 4, 5, 7, 8, 9, 10, 11, 12)
    assert result.steps[0] == TraversalStep(source=0, target=2, weight=31)
    assert result.step_to(4) == TraversalStep(source=2, target=4, weight=28)
    assert result.step_to(0) is None


def test_breadth_first_order_from_central_hub(graph):
    result = breadth_first(graph, 0)

    assert result.order == (0, 2, 3, 4, 5, 7, 8, 9, 10, 12, 11)


def test_breadth_first_steps_carry_route_weight(graph):
    result = breadth_first(graph, 0)

    assert result.steps_from(2) == (
        TraversalStep(source=2, target=4, weight=28),
        TraversalStep(source=2, target=5, weight=5),
    )
    assert result.step_to(11) == TraversalStep(source=8, target=11, weight=50)


def test_dfs_and_bfs_reach_the_same_facilities(graph):
    for start in range(graph.node_count):
        assert depth_first(graph, start).visited == breadth_first(graph, start).visited


def test_isolated_start_visits_only_itself(graph):
    assert depth_first(graph, 1).order == (1,)
    assert breadth_first(graph, 6).order == (6,)
    assert breadth_first(graph, 6).steps == ()


def test_breadth_first_visits_by_layer(graph):
    # hop counts: shortest paths over the same routes with every weight set to 1
    unit = build_graph(
        [Edge(edge.src, edge.dest, 1) for edge in REFERENCE_EDGES], node_count=graph.node_count
    )
    hops = shortest_paths(unit, 0)

    order = breadth_first(graph, 0).order
    layers = [hops.distance_to(node) for node in order]
    assert layers == sorted(layers)
    assert layers == [0, 1, 1, 2, 2, 3, 4, 4, 4, 4, 5]


def test_every_node_visited_once():
    edges = [Edge(0, 1, 1), Edge(1, 2, 1), Edge(2, 0, 1), Edge(2, 3, 1)]
    graph = build_graph(edges, node_count=5)

    for traverse in (depth_first, breadth_first):
        order = traverse(graph, 0).order
        assert len(order) == len(set(order)) == 4


def test_depth_first_backtracks_like_recursion():
    # 0-1, 0-2, 1-3: recursion enters 1, then 3, then backtracks to 2
    graph = build_graph([Edge(0, 1, 1), Edge(0, 2, 1), Edge(1, 3, 1)], node_count=4)

    assert depth_first(graph, 0).order == (0, 1, 3, 2)
    assert breadth_first(graph, 0).order == (0, 1, 2, 3)


def test_deep_chain_does_not_hit_recursion_limit():
    size = 5000
    edges = [Edge(i, i + 1, 1) for i in range(size - 1)]
    graph = build_graph(edges, node_count=size)

    assert depth_first(graph, 0).order == tuple(range(size))


def test_traversals_are_repeatable(graph):
    assert depth_first(graph, 0) == depth_first(graph, 0)
    assert breadth_first(graph, 0) == breadth_first(graph, 0)


@pytest.mark.parametrize("start", [-1, 13])
def test_out_of_range_start(graph, start):
    with pytest.raises(NodeIndexError):
        depth_first(graph, start)
    with pytest.raises(NodeIndexError):
        breadth_first(graph, start)
