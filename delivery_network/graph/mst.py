"""Minimum spanning forest using Prim's algorithm.

The delivery network may be disconnected (inactive facilities have no
routes), so Prim's algorithm is seeded once per connected component.
"""

from __future__ import annotations

import heapq
from typing import List, Optional, Set, Tuple

from ..domain.models import UNREACHABLE, Distance, NodeId, SpanningEdge, SpanningForest
from .network import Graph


def minimum_spanning_forest(graph: Graph) -> SpanningForest:
    """Compute one minimum spanning tree per connected component.

    Every facility not yet in a tree and with at least one route seeds
    a new tree, in index order. Isolated facilities are skipped and get
    no parent edge.

    Returns
    -------
    SpanningForest
        ``(node, parent, weight)`` for every facility that was attached
        to a tree, ordered by ``node``. A component of ``k`` facilities
        contributes ``k - 1`` edges.
    """
    in_tree = [False] * graph.node_count
    key: List[Distance] = [UNREACHABLE] * graph.node_count
    parent: List[Optional[NodeId]] = [None] * graph.node_count

    roots: List[NodeId] = []
    components: List[frozenset[NodeId]] = []

    for root in range(graph.node_count):
        if in_tree[root] or not graph.adjacency[root]:
            continue

        members: Set[NodeId] = set()
        key[root] = 0
        heap: List[Tuple[Distance, NodeId]] = [(0, root)]

        while heap:
            _, u = heapq.heappop(heap)

            if in_tree[u]:
                continue
            in_tree[u] = True
            members.add(u)

            for v, weight in graph.adjacency[u]:
                if not in_tree[v] and weight < key[v]:
                    key[v] = weight
                    parent[v] = u
                    heapq.heappush(heap, (weight, v))

        roots.append(root)
        components.append(frozenset(members))

    edges = tuple(
        SpanningEdge(node=v, parent=p, weight=int(key[v]))
        for v, p in enumerate(parent)
        if p is not None
    )
    return SpanningForest(edges=edges, roots=tuple(roots), components=tuple(components))
