"""Pydantic Settings for the poster service client.

All environment variables use the POSTERGEN_ prefix.
Example: POSTERGEN_API_BASE_URL=https://posters.example.com/api
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from postergen_client.config.environments import EnvironmentProfile


class ClientSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Backend origins
    api_base_url: str = "http://localhost:8081/api"
    file_server_base_url: str = "http://localhost:8081"  # Serves generated PDFs

    # HTTP
    timeout_seconds: float = Field(default=10.0, gt=0)

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "POSTERGEN_"}

    @field_validator("api_base_url", "file_server_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def for_profile(cls, profile: EnvironmentProfile, **overrides: object) -> ClientSettings:
        """Build settings whose origins come from an environment profile."""
        return cls(
            api_base_url=profile.api_base_url,
            file_server_base_url=profile.file_server_base_url,
            **overrides,
        )
