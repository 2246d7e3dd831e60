"""Network report service - Runs one algorithm and renders its result.

The service owns the delivery network for its whole lifetime. Each
operation reads the graph, computes a pure result and hands it to the
configured renderer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.models import NodeId
from ..graph.dijkstra import shortest_paths
from ..graph.mst import minimum_spanning_forest
from ..graph.network import Graph
from ..graph.traversal import breadth_first, depth_first
from ..ports.rendering import ReportRendererPort


@dataclass
class NetworkReportService:
    """Main service behind the logistics routing menu.

    Operations are read-only, so running one twice on the same service
    produces the same report both times.

    Attributes:
        graph: The delivery network
        renderer: Formats each result for the console
    """

    graph: Graph
    renderer: ReportRendererPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def display_network(self) -> str:
        """Render the adjacency list of every connected facility."""
        self._logger.info(
            "Displaying network",
            extra={"nodes": self.graph.node_count, "edges": self.graph.edge_count},
        )
        return self.renderer.render_network(self.graph)

    def trace_routes(self, start: NodeId) -> str:
        """Depth-first route trace from ``start``.

        Raises:
            NodeIndexError: If ``start`` is not a facility of the network.
        """
        result = depth_first(self.graph, start)
        self._logger.info(
            "Depth-first trace",
            extra={"start": start, "visited": len(result.order)},
        )
        return self.renderer.render_depth_first(result)

    def explore_coverage(self, start: NodeId) -> str:
        """Breadth-first coverage report from ``start``.

        Raises:
            NodeIndexError: If ``start`` is not a facility of the network.
        """
        result = breadth_first(self.graph, start)
        self._logger.info(
            "Breadth-first coverage",
            extra={"start": start, "visited": len(result.order)},
        )
        return self.renderer.render_breadth_first(result)

    def fastest_routes(self, start: NodeId) -> str:
        """Shortest travel times from ``start`` to every facility.

        Raises:
            NodeIndexError: If ``start`` is not a facility of the network.
        """
        result = shortest_paths(self.graph, start)
        reachable = sum(1 for _ in result.reachable_nodes())
        self._logger.info(
            "Shortest paths computed",
            extra={
                "start": start,
                "reachable": reachable,
                "unreachable": self.graph.node_count - reachable,
            },
        )
        return self.renderer.render_shortest_paths(result)

    def spanning_forest(self) -> str:
        """Minimum spanning forest over all connected facilities."""
        forest = minimum_spanning_forest(self.graph)
        self._logger.info(
            "Spanning forest computed",
            extra={
                "trees": len(forest.roots),
                "edges": len(forest.edges),
                "total_weight": forest.total_weight,
            },
        )
        return self.renderer.render_spanning_forest(forest)
