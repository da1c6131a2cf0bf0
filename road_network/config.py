"""Centralized configuration using Pydantic Settings.

Single source of truth for file locations, capacity limits, labels and
logging. Every value can be overridden via environment variables:
- RN_STORAGE_DATA_DIR=/path/to/data
- RN_NETWORK_MAX_CITIES=50
- RN_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseSettings):
    """Location and encoding of the two data files.

    Environment variables prefixed with RN_STORAGE_.
    """

    model_config = SettingsConfigDict(env_prefix="RN_STORAGE_")

    data_dir: Path = Field(default_factory=Path.cwd)
    cities_file: str = "cities.txt"
    roads_file: str = "roads.txt"
    encoding: str = "utf-8"

    @property
    def cities_path(self) -> Path:
        """Full path to the city table."""
        return self.data_dir / self.cities_file

    @property
    def roads_path(self) -> Path:
        """Full path to the road table."""
        return self.data_dir / self.roads_file


class NetworkConfig(BaseSettings):
    """Capacity limits and units.

    Environment variables prefixed with RN_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="RN_NETWORK_")

    max_cities: int = 20
    max_batch: int = 20
    currency_label: str = "billion RWF"

    @field_validator("max_cities", "max_batch")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value


class DisplayConfig(BaseSettings):
    """Menu presentation.

    Environment variables prefixed with RN_DISPLAY_.
    """

    model_config = SettingsConfigDict(env_prefix="RN_DISPLAY_")

    title: str = "Rwanda Infrastructure Management System"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RN_LOG_. Diagnostics go to stderr
    (or ``file``) and stay out of the interactive output.
    """

    model_config = SettingsConfigDict(env_prefix="RN_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[Path] = None


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.storage.cities_path)
        print(config.network.max_cities)

    Environment variables prefixed with RN_.
    """

    model_config = SettingsConfigDict(env_prefix="RN_")

    storage: StorageConfig = Field(default_factory=StorageConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
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
