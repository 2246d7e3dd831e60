"""Graph construction for the package delivery network.

This module defines the Graph type used throughout the project, the
hard-coded reference network (facilities and routes) and the function
that builds an adjacency list from a sequence of edges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..domain.errors import NodeIndexError
from ..domain.models import Edge, Facility, NodeId

logger = logging.getLogger(__name__)

NODE_COUNT = 13

FACILITY_NAMES: Tuple[str, ...] = (
    "Central Distribution Center",
    "Legacy Hub (Inactive)",  # no roads attached
    "North Warehouse",
    "East Warehouse",
    "South Hub",
    "West Hub",
    "Decommissioned Facility",  # no roads attached
    "Regional Airport",
    "Port Terminal",
    "Downtown Micro-Hub",
    "Cross-Docking Center",
    "Retail Consolidation Center",
    "Outlet Cluster",
)

# (src, dest, travel time in minutes)
REFERENCE_EDGES: Tuple[Edge, ...] = tuple(
    Edge(src, dest, weight)
    for src, dest, weight in (
        (0, 2, 31),
        (0, 3, 19),
        (2, 3, 16),
        (4, 5, 13),
        (2, 4, 28),
        (2, 5, 5),
        (5, 7, 12),
        (4, 7, 12),
        (7, 8, 13),
        (7, 9, 7),
        (8, 9, 12),
        (8, 10, 13),
        (7, 10, 21),
        (10, 11, 11),
        (8, 11, 50),
        (11, 12, 18),
        (7, 12, 15),
    )
)

Neighbor = Tuple[NodeId, int]


@dataclass(frozen=True)
class Graph:
    """Undirected weighted graph over facilities ``0..node_count-1``.

    ``adjacency[v]`` lists ``(neighbor, weight)`` pairs in insertion
    order. The graph is never mutated after ``build_graph`` returns.
    """

    node_count: int
    adjacency: Tuple[Tuple[Neighbor, ...], ...]

    def __len__(self) -> int:
        return self.node_count

    def check_node(self, node: NodeId) -> NodeId:
        """Return ``node`` unchanged, or raise if it is out of range."""
        if not 0 <= node < self.node_count:
            raise NodeIndexError(
                f"Facility {node} is outside the network (0..{self.node_count - 1})",
                node=node,
                node_count=self.node_count,
            )
        return node

    def neighbors(self, node: NodeId) -> Tuple[Neighbor, ...]:
        return self.adjacency[self.check_node(node)]

    def is_isolated(self, node: NodeId) -> bool:
        return not self.neighbors(node)

    def connected_nodes(self) -> Iterator[NodeId]:
        """Yield facilities with at least one route, in index order."""
        for node in range(self.node_count):
            if self.adjacency[node]:
                yield node

    @property
    def edge_count(self) -> int:
        """Number of undirected routes (each stored twice)."""
        return sum(len(pairs) for pairs in self.adjacency) // 2


def build_graph(edges: Iterable[Edge], node_count: int = NODE_COUNT) -> Graph:
    """Build the adjacency list for an undirected network.

    Parameters
    ----------
    edges:
        Routes to insert. Each one is added in both directions.
    node_count:
        Number of facility slots in the adjacency list.

    Raises
    ------
    NodeIndexError
        If an edge names a facility outside ``[0, node_count)``.
    """
    adjacency: List[List[Neighbor]] = [[] for _ in range(node_count)]
    inserted = 0

    for edge in edges:
        for node in (edge.src, edge.dest):
            if not 0 <= node < node_count:
                raise NodeIndexError(
                    f"Edge {edge.src}-{edge.dest} references unknown facility {node}",
                    node=node,
                    node_count=node_count,
                )

        adjacency[edge.src].append((edge.dest, edge.weight))
        # undirected: mirror every route
        adjacency[edge.dest].append((edge.src, edge.weight))
        inserted += 1

    logger.debug(
        "Graph built",
        extra={"nodes": node_count, "edges": inserted},
    )
    return Graph(
        node_count=node_count,
        adjacency=tuple(tuple(pairs) for pairs in adjacency),
    )


def reference_graph() -> Graph:
    """Build the 13-facility reference delivery network."""
    return build_graph(REFERENCE_EDGES, NODE_COUNT)


def facility_directory(
    names: Sequence[str] = FACILITY_NAMES,
) -> Tuple[Facility, ...]:
    """Return the facility table, index-aligned with the graph."""
    return tuple(Facility(node=i, name=name) for i, name in enumerate(names))
