"""Typed domain errors for the delivery network.

All errors inherit from DeliveryNetworkError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DeliveryNetworkError(Exception):
    """Base error for the delivery network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NodeIndexError(DeliveryNetworkError):
    """A facility index falls outside ``[0, node_count)``.

    Raised when building the graph from an edge that names an unknown
    facility, or when an algorithm is started from one.

    Attributes:
        node: The offending index
        node_count: Number of facilities in the network
    """

    node: int = -1
    node_count: int = 0


@dataclass
class InvalidMenuChoiceError(DeliveryNetworkError):
    """Menu input that does not match a known command.

    Attributes:
        raw_input: The text the user typed
    """

    raw_input: str = ""


@dataclass
class ConfigurationError(DeliveryNetworkError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
