from .narrative import NarrativeReportRenderer
from .terse import TerseReportRenderer

__all__ = ["NarrativeReportRenderer", "TerseReportRenderer"]
