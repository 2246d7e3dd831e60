"""Shortest travel times using Dijkstra's algorithm.

This module computes single-source shortest travel times from one
facility to every other facility of the delivery network. Weights are
assumed non-negative; ``Edge`` rejects negative ones at construction.
"""

import heapq
from typing import List, Optional, Tuple

from ..domain.models import UNREACHABLE, Distance, NodeId, ShortestPathResult
from .network import Graph


def shortest_paths(graph: Graph, start: NodeId) -> ShortestPathResult:
    """Compute the shortest travel time from ``start`` to every facility.

    Parameters
    ----------
    graph:
        Delivery network as produced by ``build_graph``.
    start:
        Identifier of the departure facility.

    Returns
    -------
    ShortestPathResult
        ``distances[v]`` is the minimal total travel time, or
        ``UNREACHABLE`` when no route leads to ``v``. ``predecessors``
        allows rebuilding one shortest route per facility.
    """
    graph.check_node(start)

    distances: List[Distance] = [UNREACHABLE] * graph.node_count
    previous: List[Optional[NodeId]] = [None] * graph.node_count
    distances[start] = 0

    heap: List[Tuple[Distance, NodeId]] = [(0, start)]

    while heap:
        current_distance, u = heapq.heappop(heap)

        # stale entry, a shorter route to u was already settled
        if current_distance > distances[u]:
            continue

        for v, weight in graph.adjacency[u]:
            new_distance = current_distance + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    return ShortestPathResult(
        start=start,
        distances=tuple(distances),
        predecessors=tuple(previous),
    )
