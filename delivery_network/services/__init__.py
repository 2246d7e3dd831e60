"""Service layer - Application services that orchestrate the graph and renderers."""

from .network_service import NetworkReportService

__all__ = ["NetworkReportService"]
