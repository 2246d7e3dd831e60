"""Immutable domain models for the delivery network.

All models are frozen dataclasses with slots. Algorithms return these
records as plain data; turning them into console text is the job of
the renderers in ``adapters.rendering``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Union

NodeId = int
Distance = Union[int, float]

# Sentinel distance for facilities not reached by shortest-path relaxation.
UNREACHABLE: float = math.inf


class MenuChoice(Enum):
    """Commands offered by the logistics routing menu."""

    EXIT = 0
    DISPLAY = 1
    BFS = 2
    DFS = 3
    SHORTEST_PATHS = 4
    SPANNING_TREE = 5


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected route between two facilities.

    Attributes:
        src: First facility index
        dest: Second facility index
        weight: Travel time in minutes
    """

    src: NodeId
    dest: NodeId
    weight: int

    def __post_init__(self) -> None:
        """Reject negative travel times."""
        if self.weight < 0:
            raise ValueError(
                f"Edge weight must be non-negative, got {self.weight}"
            )


@dataclass(frozen=True, slots=True)
class Facility:
    """A facility of the delivery network with its display name."""

    node: NodeId
    name: str

    @property
    def label(self) -> str:
        return f"Facility {self.node} ({self.name})"


@dataclass(frozen=True, slots=True)
class TraversalStep:
    """The edge through which a traversal discovered ``target``."""

    source: NodeId
    target: NodeId
    weight: int


@dataclass(frozen=True, slots=True)
class TraversalResult:
    """Outcome of a depth-first or breadth-first traversal.

    Attributes:
        start: Facility the traversal started from
        order: Facilities in visitation order, start first
        steps: Discovery edges, in the order the targets were discovered
    """

    start: NodeId
    order: tuple[NodeId, ...]
    steps: tuple[TraversalStep, ...] = field(default_factory=tuple)

    @property
    def visited(self) -> frozenset[NodeId]:
        return frozenset(self.order)

    def steps_from(self, source: NodeId) -> tuple[TraversalStep, ...]:
        """Return the discovery edges leaving ``source``."""
        return tuple(step for step in self.steps if step.source == source)

    def step_to(self, target: NodeId) -> Optional[TraversalStep]:
        """Return the edge that discovered ``target``, if any."""
        for step in self.steps:
            if step.target == target:
                return step
        return None


@dataclass(frozen=True, slots=True)
class ShortestPathResult:
    """Single-source shortest travel times.

    Attributes:
        start: Source facility
        distances: Indexed by facility; ``UNREACHABLE`` when no path exists
        predecessors: Previous hop on a shortest path, ``None`` for the
            source and for unreachable facilities
    """

    start: NodeId
    distances: tuple[Distance, ...]
    predecessors: tuple[Optional[NodeId], ...]

    def is_reachable(self, node: NodeId) -> bool:
        return self.distances[node] != UNREACHABLE

    def distance_to(self, node: NodeId) -> Distance:
        return self.distances[node]

    def reachable_nodes(self) -> Iterator[NodeId]:
        """Yield reachable facilities in index order."""
        for node in range(len(self.distances)):
            if self.is_reachable(node):
                yield node

    def path_to(self, node: NodeId) -> tuple[NodeId, ...]:
        """Rebuild the facility sequence from ``start`` to ``node``.

        Returns an empty tuple when ``node`` is unreachable.
        """
        if not self.is_reachable(node):
            return ()

        path: List[NodeId] = []
        current: Optional[NodeId] = node
        while current is not None:
            path.append(current)
            current = self.predecessors[current]

        path.reverse()
        return tuple(path)


@dataclass(frozen=True, slots=True)
class SpanningEdge:
    """A spanning-forest edge connecting ``node`` to its ``parent``."""

    node: NodeId
    parent: NodeId
    weight: int


@dataclass(frozen=True, slots=True)
class SpanningForest:
    """Minimum spanning forest, one tree per connected component.

    Attributes:
        edges: Tree edges ordered by ``node``
        roots: Seed facility of each tree, in the order trees were grown
        components: Members of each tree, aligned with ``roots``
    """

    edges: tuple[SpanningEdge, ...]
    roots: tuple[NodeId, ...] = field(default_factory=tuple)
    components: tuple[frozenset[NodeId], ...] = field(default_factory=tuple)

    @property
    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)

    def edges_by_root(self) -> Dict[NodeId, tuple[SpanningEdge, ...]]:
        """Group tree edges by the seed of the component they belong to."""
        grouped: Dict[NodeId, tuple[SpanningEdge, ...]] = {}
        for root, members in zip(self.roots, self.components):
            grouped[root] = tuple(
                edge for edge in self.edges if edge.node in members
            )
        return grouped
