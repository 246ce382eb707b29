"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- ORS_GEO_API_KEY=...
- ORS_GEO_TIMEOUT_SECONDS=5
- ORS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import DEFAULT_RESULT_LIMIT


class GeocodingConfig(BaseSettings):
    """Geocoding configuration.

    Environment variables prefixed with ORS_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="ORS_GEO_")

    api_key: Optional[SecretStr] = None
    base_url: str = "https://api.openrouteservice.org/geocode"
    user_agent: str = "openroute-geocoder"
    timeout_seconds: float = 10.0
    default_limit: int = Field(default=DEFAULT_RESULT_LIMIT, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ORS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ORS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.geocoding.base_url)

    Environment variables prefixed with ORS_.
    """

    model_config = SettingsConfigDict(env_prefix="ORS_")

    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
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
