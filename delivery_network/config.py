"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- DLN_NETWORK_RENDERER=terse
- DLN_NETWORK_START_NODE=7
- DLN_NETWORK_REPORT_UNREACHABLE=true
- DLN_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .graph.network import NODE_COUNT


class NetworkConfig(BaseSettings):
    """Delivery network and report configuration.

    The facility count is fixed by the hard-coded network and is not
    configurable; ``start_node`` must name one of its facilities.

    Environment variables prefixed with DLN_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="DLN_NETWORK_")

    start_node: int = Field(default=0, ge=0, lt=NODE_COUNT)
    renderer: Literal["narrative", "terse"] = "narrative"
    report_unreachable: bool = False


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with DLN_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="DLN_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.network.renderer)
        print(config.observability.level)

    Environment variables prefixed with DLN_.
    """

    model_config = SettingsConfigDict(env_prefix="DLN_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
