"""High-level wiring for the delivery network reports.

This module builds the reference network, picks a renderer from the
configuration and exposes a linear demo that runs every report once,
in menu order. Front-ends (the interactive menu, tests) reuse
``build_service`` so they all share the same wiring.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .adapters.rendering import NarrativeReportRenderer, TerseReportRenderer
from .config import AppConfig, get_config
from .domain.errors import ConfigurationError
from .graph.network import NODE_COUNT, REFERENCE_EDGES, Graph, build_graph
from .ports.rendering import ReportRendererPort
from .services import NetworkReportService

# Simple strategy registry so we can swap the report format
RendererFactory = Callable[..., ReportRendererPort]

RENDERER_STRATEGIES: Dict[str, RendererFactory] = {
    "narrative": NarrativeReportRenderer,
    "terse": TerseReportRenderer,
}


def create_renderer(name: str, report_unreachable: bool = False) -> ReportRendererPort:
    """Instantiate the renderer registered under ``name``.

    Raises:
        ConfigurationError: If no renderer has that name.
    """
    factory = RENDERER_STRATEGIES.get(name)
    if factory is None:
        raise ConfigurationError(
            f"Unknown renderer: {name!r}",
            setting_name="renderer",
            expected_type=" | ".join(sorted(RENDERER_STRATEGIES)),
        )
    return factory(report_unreachable=report_unreachable)


def build_service(
    config: Optional[AppConfig] = None,
    graph: Optional[Graph] = None,
) -> NetworkReportService:
    """Build the report service for the reference network.

    Args:
        config: Optional configuration override.
        graph: Optional network override; defaults to the hard-coded routes.
    """
    config = config or get_config()
    network = config.network

    if graph is None:
        graph = build_graph(REFERENCE_EDGES, NODE_COUNT)

    renderer = create_renderer(network.renderer, network.report_unreachable)
    return NetworkReportService(graph=graph, renderer=renderer)


def run_demo(
    config: Optional[AppConfig] = None,
    output: Callable[[str], None] = print,
) -> None:
    """Run every report once from the configured start facility."""
    config = config or get_config()
    service = build_service(config)
    start = config.network.start_node

    for report in (
        service.display_network(),
        service.explore_coverage(start),
        service.trace_routes(start),
        service.fastest_routes(start),
        service.spanning_forest(),
    ):
        output(report)
        output("")


if __name__ == "__main__":
    run_demo()
