"""Narrative report renderer.

Describes each result in logistics terms: facility names, travel
times in minutes and a one-line purpose banner per report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ...domain.models import (
    Facility,
    NodeId,
    ShortestPathResult,
    SpanningForest,
    TraversalResult,
)
from ...graph.network import Graph, facility_directory

ARROW = "→"


def _banner(title: str, purpose: str) -> List[str]:
    return [title, f"Purpose: {purpose}", "=" * max(len(title), len(purpose) + 9)]


@dataclass
class NarrativeReportRenderer:
    """Facility-name renderer implementing ReportRendererPort.

    Attributes:
        facilities: Facility table indexed by node
        report_unreachable: Mention facilities that no route leads to
    """

    facilities: Sequence[Facility] = field(default_factory=facility_directory)
    report_unreachable: bool = False

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def label(self, node: NodeId) -> str:
        """Return ``Facility N (name)``, or ``Facility N`` when unnamed."""
        if 0 <= node < len(self.facilities):
            return self.facilities[node].label
        self._logger.debug("No facility name", extra={"node": node})
        return f"Facility {node}"

    def render_network(self, graph: Graph) -> str:
        title = "Package Delivery Network Topology:"
        lines = [title, "=" * len(title)]
        for node in graph.connected_nodes():
            lines.append(f"{self.label(node)} connects to:")
            for dest, weight in graph.adjacency[node]:
                lines.append(
                    f"  {ARROW} {self.label(dest)} - Travel Time: {weight} minutes"
                )
        return "\n".join(lines)

    def render_traversal_start(self, algorithm: str, start: NodeId) -> str:
        """Return e.g. ``Starting BFS from Central Distribution Center...``."""
        if 0 <= start < len(self.facilities):
            return f"Starting {algorithm} from {self.facilities[start].name}..."
        return f"Starting {algorithm} from Facility {start}..."

    def render_depth_first(self, result: TraversalResult) -> str:
        lines = _banner(
            f"Route Trace (DFS) from {self.label(result.start)}:",
            "Exploring deep delivery routes through the network",
        )
        for node in result.order:
            step = result.step_to(node)
            if step is not None:
                lines.append(
                    f"  {ARROW} Possible route from Facility {step.source} to "
                    f"{self.label(node)} - Travel Time: {step.weight} minutes"
                )
            lines.append(f"Inspecting {self.label(node)}")
        return "\n".join(lines)

    def render_breadth_first(self, result: TraversalResult) -> str:
        lines = _banner(
            f"Layer-by-Layer Delivery Coverage (BFS) from {self.label(result.start)}:",
            "Checking which areas are serviced in each hop",
        )
        for node in result.order:
            lines.append(f"Checking {self.label(node)}")
            for step in result.steps_from(node):
                lines.append(
                    f"  {ARROW} Next delivery stop: {self.label(step.target)}"
                    f" - Travel Time: {step.weight} minutes"
                )
        return "\n".join(lines)

    def render_shortest_paths(self, result: ShortestPathResult) -> str:
        lines = _banner(
            f"Fastest Delivery Times from {self.label(result.start)}:",
            "Minimal total travel time to every reachable facility",
        )
        for node in range(len(result.distances)):
            if result.is_reachable(node):
                route = " -> ".join(str(hop) for hop in result.path_to(node))
                lines.append(
                    f"  {ARROW} {self.label(node)}: {result.distance_to(node)} minutes"
                    f" (route {route})"
                )
            elif self.report_unreachable:
                lines.append(f"  {ARROW} {self.label(node)}: unreachable")
        return "\n".join(lines)

    def render_spanning_forest(self, forest: SpanningForest) -> str:
        lines = _banner(
            "Minimum Spanning Tree edges:",
            "Cheapest set of routes keeping every active facility connected",
        )
        for edge in forest.edges:
            lines.append(
                f"Edge from {edge.node} to {edge.parent} with capacity: "
                f"{edge.weight} units ({self.label(edge.node)} {ARROW} "
                f"{self.label(edge.parent)})"
            )
        lines.append(
            f"Total: {forest.total_weight} units across {len(forest.roots)} tree(s)"
        )
        return "\n".join(lines)
