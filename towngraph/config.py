"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- TOWNGRAPH_GRAPH_DEFAULT_ROAD_WEIGHT=5
- TOWNGRAPH_LOG_LEVEL=DEBUG
- TOWNGRAPH_LOG_STRUCTURED=true
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import DEFAULT_ROAD_WEIGHT


class GraphConfig(BaseSettings):
    """Town graph configuration.

    Environment variables prefixed with TOWNGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWNGRAPH_GRAPH_")

    default_road_weight: int = Field(default=DEFAULT_ROAD_WEIGHT, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TOWNGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWNGRAPH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.default_road_weight)

    Environment variables prefixed with TOWNGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TOWNGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
