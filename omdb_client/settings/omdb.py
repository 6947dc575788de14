"""OMDb API configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OMDbSettings(BaseSettings):
    """OMDb API configuration.

    Attributes:
        api_key: Default API key, used when a query sets none.
        base_url: OMDb API endpoint.
        api_version: Protocol version sent as the ``v`` parameter.
        user_agent: HTTP User-Agent header.
        strict_media_kind: Reject unknown ``Type`` tokens instead of
            falling back to movie.
    """

    api_key: str = Field(default="", alias="OMDB_API_KEY")
    base_url: str = Field(
        default="https://www.omdbapi.com/",
        alias="OMDB_BASE_URL",
    )
    api_version: str = Field(default="1", alias="OMDB_API_VERSION")
    user_agent: str = Field(
        default="omdb-client/0.1",
        alias="OMDB_USER_AGENT",
    )
    strict_media_kind: bool = Field(default=False, alias="OMDB_STRICT_MEDIA_KIND")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_configured(self) -> bool:
        """Check if a default API key is configured."""
        return bool(self.api_key and self.api_key != "your_api_key_here")

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Drop surrounding whitespace picked up from .env files."""
        return v.strip()
