"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- ROUTE_ROUTING_ALGORITHM=fifo
- ROUTE_ROUTING_MISSING_ROAD_POLICY=error
- ROUTE_LOG_LEVEL=DEBUG
- ROUTE_MAP_OUTPUT=/tmp/route.html
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoutingConfig(BaseSettings):
    """Path-finding and route presentation settings.

    Environment variables prefixed with ROUTE_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTE_ROUTING_")

    algorithm: Literal["dijkstra", "fifo"] = "dijkstra"
    missing_road_policy: Literal["placeholder", "error"] = "placeholder"
    missing_road_placeholder: str = "an unnamed road"
    distance_unit: str = "miles"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ROUTE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTE_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.routing.algorithm)

    Environment variables prefixed with ROUTE_.
    """

    model_config = SettingsConfigDict(env_prefix="ROUTE_")

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    # When set, the computed route is also drawn on an HTML map.
    map_output: Optional[Path] = None


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
