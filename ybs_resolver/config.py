"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
data file locations, search caps, extraction markers and logging.

Configuration can be overridden via environment variables:
- YBS_DATA_DATA_DIR=/path/to/data
- YBS_SEARCH_MAX_TRANSFERS=1
- YBS_NLP_DESTINATION_MARKERS='["ကို", "သို့"]'
- YBS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DataConfig(BaseSettings):
    """Transit data configuration.

    Environment variables prefixed with YBS_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="YBS_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    stops_file: str = "stops.json"
    routes_file: str = "routes.json"

    @property
    def stops_path(self) -> Path:
        """Full path to the stops JSON file."""
        return self.data_dir / self.stops_file

    @property
    def routes_path(self) -> Path:
        """Full path to the routes JSON file."""
        return self.data_dir / self.routes_file


class SearchConfig(BaseSettings):
    """Path search configuration.

    Environment variables prefixed with YBS_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="YBS_SEARCH_")

    max_transfers: int = Field(default=2, ge=0)
    max_results: int = Field(default=5, ge=1)
    nearby_radius_km: float = Field(default=1.0, gt=0)


class NLPConfig(BaseSettings):
    """Endpoint extraction configuration.

    Environment variables prefixed with YBS_NLP_.
    """

    model_config = SettingsConfigDict(env_prefix="YBS_NLP_")

    origin_markers: Tuple[str, ...] = ("ကနေ", "မှ")
    destination_markers: Tuple[str, ...] = ("ကို", "သို့", "သွားချင်တာ")
    match_english_names: bool = True

    @field_validator("origin_markers", "destination_markers")
    @classmethod
    def _drop_empty_markers(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        # An empty marker would be contained in every string.
        return tuple(marker for marker in value if marker)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with YBS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="YBS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.search.max_transfers)
        print(config.data.routes_path)

    Environment variables prefixed with YBS_.
    """

    model_config = SettingsConfigDict(env_prefix="YBS_")

    data: DataConfig = Field(default_factory=DataConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    nlp: NLPConfig = Field(default_factory=NLPConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
