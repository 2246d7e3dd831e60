"""Terse report renderer.

Plain facility indices and numbers, one fact per line. This is the
format to diff against when checking algorithm output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ...domain.models import NodeId, ShortestPathResult, SpanningForest, TraversalResult
from ...graph.network import Graph


@dataclass
class TerseReportRenderer:
    """Index-only renderer implementing ReportRendererPort.

    Attributes:
        report_unreachable: Print ``unreachable`` for facilities that
            no route leads to instead of omitting them.
    """

    report_unreachable: bool = False

    def render_network(self, graph: Graph) -> str:
        lines = ["Adjacency list:"]
        for node in graph.connected_nodes():
            pairs = " ".join(f"({v}, {w})" for v, w in graph.adjacency[node])
            lines.append(f"{node} -> {pairs}")
        return "\n".join(lines)

    def render_traversal_start(self, algorithm: str, start: NodeId) -> str:
        return ""

    def render_depth_first(self, result: TraversalResult) -> str:
        order = " ".join(str(node) for node in result.order)
        return f"DFS from {result.start}: {order}"

    def render_breadth_first(self, result: TraversalResult) -> str:
        order = " ".join(str(node) for node in result.order)
        return f"BFS from {result.start}: {order}"

    def render_shortest_paths(self, result: ShortestPathResult) -> str:
        lines: List[str] = [f"Shortest path from node {result.start}:"]
        for node, distance in enumerate(result.distances):
            if result.is_reachable(node):
                lines.append(f"{result.start} -> {node} : {distance}")
            elif self.report_unreachable:
                lines.append(f"{result.start} -> {node} : unreachable")
        return "\n".join(lines)

    def render_spanning_forest(self, forest: SpanningForest) -> str:
        lines = ["Minimum Spanning Tree edges:"]
        lines.extend(
            f"{edge.node} -> {edge.parent} : {edge.weight}" for edge in forest.edges
        )
        return "\n".join(lines)
