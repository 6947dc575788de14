"""Centralized configuration for the OMDb client.

All configuration values are sourced from environment variables
(or a .env file). Every setting has a safe default, so the
library imports without any configuration; an API key can be
supplied per query instead of through OMDB_API_KEY.

Usage:
    from omdb_client.settings import settings

    settings.omdb.base_url
    settings.logging.level
"""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from omdb_client.settings.base import LoggingSettings
from omdb_client.settings.omdb import OMDbSettings

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "OMDbSettings",
    "get_masked_settings",
]


# =============================================================================
# GLOBAL SETTINGS
# =============================================================================


class Settings(BaseSettings):
    """Global client settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from omdb_client.settings import settings`
    """

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    omdb: OMDbSettings = Field(default_factory=OMDbSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

settings = Settings()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_masked_settings() -> dict[str, Any]:
    """Return settings dict with sensitive values masked.

    Returns:
        Configuration dictionary safe for logging.
    """
    config = settings.model_dump()
    mask = "***MASKED***"

    secrets = [
        ("omdb", "api_key"),
    ]

    for section, key in secrets:
        if section in config and key in config[section] and config[section][key]:
            config[section][key] = mask

    return config
