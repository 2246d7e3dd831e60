"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DeliveryNetworkError,
    InvalidMenuChoiceError,
    NodeIndexError,
)
from .models import (
    UNREACHABLE,
    Distance,
    Edge,
    Facility,
    MenuChoice,
    NodeId,
    ShortestPathResult,
    SpanningEdge,
    SpanningForest,
    TraversalResult,
    TraversalStep,
)

__all__ = [
    # Models
    "NodeId",
    "Distance",
    "UNREACHABLE",
    "Edge",
    "Facility",
    "MenuChoice",
    "TraversalStep",
    "TraversalResult",
    "ShortestPathResult",
    "SpanningEdge",
    "SpanningForest",
    # Errors
    "DeliveryNetworkError",
    "NodeIndexError",
    "InvalidMenuChoiceError",
    "ConfigurationError",
]
