"""Settings for the metro network, loaded with pydantic-settings.

Every section reads its own environment prefix, so data locations, fare
rules, map output and logging can be tuned without code changes.

Configuration can be overridden via environment variables:
- METRO_NETWORK_DATA_DIR=/path/to/data
- METRO_FARE_COST_PER_KM=1.2
- METRO_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with METRO_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    stations_file: str = "stations.csv"
    connections_file: str = "connections.csv"

    @property
    def stations_path(self) -> Path:
        """Full path to the stations CSV file."""
        return self.data_dir / self.stations_file

    @property
    def connections_path(self) -> Path:
        """Full path to the connections CSV file."""
        return self.data_dir / self.connections_file


class FareConfig(BaseSettings):
    """Fare rules.

    Environment variables prefixed with METRO_FARE_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_FARE_")

    base_fare: float = Field(default=5.0, ge=0)
    cost_per_km: float = Field(default=0.8, ge=0)
    zone_surcharge: float = Field(default=3.0, ge=0)
    round_trip_discount: int = Field(default=5, ge=0)

    # Upper bounds (inclusive) of the fare categories
    economy_max: int = 15
    standard_max: int = 30
    premium_max: int = 50

    @model_validator(mode="after")
    def _check_category_bounds(self) -> FareConfig:
        if not self.economy_max <= self.standard_max <= self.premium_max:
            raise ValueError(
                "Fare category bounds must satisfy "
                "economy_max <= standard_max <= premium_max"
            )
        return self


class RenderingConfig(BaseSettings):
    """Map rendering configuration.

    Environment variables prefixed with METRO_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_MAP_")

    zoom_start: int = 12
    output_file: str = "route.html"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with METRO_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.fare.cost_per_km)
        print(config.network.stations_path)

    Environment variables prefixed with METRO_.
    """

    model_config = SettingsConfigDict(env_prefix="METRO_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    fare: FareConfig = Field(default_factory=FareConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Return the process-wide configuration, read from the environment once."""
    return AppConfig()


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() re-reads it."""
    get_config.cache_clear()
