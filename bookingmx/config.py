"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- BOOKINGMX_GRAPH_SOURCE=csv
- BOOKINGMX_GRAPH_DATA_DIR=/path/to/data
- BOOKINGMX_API_BASE_URL=http://reservations:8080/api/reservations
- BOOKINGMX_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """City graph dataset configuration.

    Environment variables prefixed with BOOKINGMX_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="BOOKINGMX_GRAPH_")

    source: Literal["sample", "csv"] = "sample"
    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    cities_file: str = "cities.csv"
    edges_file: str = "edges.csv"
    default_max_distance_km: float = 250.0

    @property
    def cities_path(self) -> Path:
        """Full path to cities CSV file."""
        return self.data_dir / self.cities_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class ReservationApiConfig(BaseSettings):
    """Reservation HTTP API configuration.

    Environment variables prefixed with BOOKINGMX_API_.
    """

    model_config = SettingsConfigDict(env_prefix="BOOKINGMX_API_")

    base_url: str = "http://localhost:8080/api/reservations"
    timeout_seconds: float = 10.0


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with BOOKINGMX_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="BOOKINGMX_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.source)
        print(config.api.base_url)

    Environment variables prefixed with BOOKINGMX_.
    """

    model_config = SettingsConfigDict(env_prefix="BOOKINGMX_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    api: ReservationApiConfig = Field(default_factory=ReservationApiConfig)
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


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
