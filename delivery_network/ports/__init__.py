"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and its
adapters, which keeps the presentation swappable and testable.
"""

from .rendering import ReportRendererPort

__all__ = [
    "ReportRendererPort",
]
