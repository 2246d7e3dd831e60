"""Depth-first and breadth-first traversal of the delivery network.

Both functions return a ``TraversalResult``: the visitation order and
the route through which each facility was first reached. They own
their ``visited`` state, so repeated calls are independent.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Tuple

from ..domain.models import NodeId, TraversalResult, TraversalStep
from .network import Graph, Neighbor


def depth_first(graph: Graph, start: NodeId) -> TraversalResult:
    """Visit every facility reachable from ``start`` in depth-first pre-order.

    Parameters
    ----------
    graph:
        Delivery network as produced by ``build_graph``.
    start:
        Facility to start from.

    Returns
    -------
    TraversalResult
        Facilities in the order they were inspected. ``steps`` holds the
        route followed into each facility except ``start``.

    Notes
    -----
    Uses an explicit stack of ``(node, neighbor iterator)`` frames. The
    order is the one a recursive walk produces: the first unvisited
    neighbor in adjacency order is entered before backtracking.
    """
    graph.check_node(start)

    visited = [False] * graph.node_count
    order: List[NodeId] = [start]
    steps: List[TraversalStep] = []

    visited[start] = True
    stack: List[Tuple[NodeId, Iterator[Neighbor]]] = [
        (start, iter(graph.adjacency[start]))
    ]

    while stack:
        node, pending = stack[-1]

        for dest, weight in pending:
            if not visited[dest]:
                visited[dest] = True
                order.append(dest)
                steps.append(TraversalStep(source=node, target=dest, weight=weight))
                stack.append((dest, iter(graph.adjacency[dest])))
                break
        else:
            stack.pop()

    return TraversalResult(start=start, order=tuple(order), steps=tuple(steps))


def breadth_first(graph: Graph, start: NodeId) -> TraversalResult:
    """Visit every facility reachable from ``start`` layer by layer.

    Parameters
    ----------
    graph:
        Delivery network as produced by ``build_graph``.
    start:
        Facility to start from.

    Returns
    -------
    TraversalResult
        Facilities in dequeue order, i.e. by non-decreasing hop count.
        Each step carries the travel time of the route from the
        dequeued facility to the neighbor it discovered.
    """
    graph.check_node(start)

    visited = [False] * graph.node_count
    order: List[NodeId] = []
    steps: List[TraversalStep] = []

    visited[start] = True
    queue: Deque[NodeId] = deque([start])

    while queue:
        node = queue.popleft()
        order.append(node)

        for dest, weight in graph.adjacency[node]:
            if not visited[dest]:
                visited[dest] = True
                queue.append(dest)
                steps.append(TraversalStep(source=node, target=dest, weight=weight))

    return TraversalResult(start=start, order=tuple(order), steps=tuple(steps))

