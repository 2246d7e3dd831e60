"""Rendering port - Abstraction for turning algorithm results into text.

The algorithms in ``graph`` return plain data. A renderer decides how
that data reads on the console, so the same core serves both the terse
and the narrative report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import (
        NodeId,
        ShortestPathResult,
        SpanningForest,
        TraversalResult,
    )
    from ..graph.network import Graph


class ReportRendererPort(Protocol):
    """Port for console report formatting.

    Implementations: adapters/rendering/terse.py,
    adapters/rendering/narrative.py
    """

    def render_network(self, graph: Graph) -> str:
        """Render the adjacency list, skipping isolated facilities."""
        ...

    def render_traversal_start(self, algorithm: str, start: NodeId) -> str:
        """Announce a traversal before it runs; empty when nothing is announced."""
        ...

    def render_depth_first(self, result: TraversalResult) -> str:
        """Render a depth-first route trace in visitation order."""
        ...

    def render_breadth_first(self, result: TraversalResult) -> str:
        """Render a breadth-first coverage report in dequeue order."""
        ...

    def render_shortest_paths(self, result: ShortestPathResult) -> str:
        """Render ``start -> v : distance`` lines for every destination.

        Args:
            result: Output of ``shortest_paths``.

        Returns:
            The report. Unreachable facilities are omitted unless the
            renderer was configured to report them.
        """
        ...

    def render_spanning_forest(self, forest: SpanningForest) -> str:
        """Render ``node -> parent : weight`` lines for every tree edge."""
        ...
