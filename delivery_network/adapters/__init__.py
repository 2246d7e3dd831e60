"""Adapters layer - Implementations of ports.

Available implementations:
- TerseReportRenderer: index-only console reports
- NarrativeReportRenderer: facility names and travel times
"""

from .rendering import NarrativeReportRenderer, TerseReportRenderer

__all__ = ["NarrativeReportRenderer", "TerseReportRenderer"]
