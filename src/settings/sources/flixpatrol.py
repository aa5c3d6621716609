"""FlixPatrol scraping configuration settings.

Source: top 10 ranking pages resolved to TMDB ids.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.etl.types.flixpatrol import is_location


class FlixPatrolSettings(BaseSettings):
    """FlixPatrol scraping configuration.

    Attributes:
        base_url: FlixPatrol website base URL.
        user_agent: HTTP User-Agent for requests.
        timeout: Request timeout (seconds). None keeps the httpx default.
        fallback_location: Location retried when a localized ranking is
            empty. Empty string disables the fallback.
    """

    base_url: str = Field(
        default="https://flixpatrol.com",
        alias="FLIXPATROL_BASE_URL",
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/117.0.0.0 Safari/537.36"
        ),
        alias="FLIXPATROL_USER_AGENT",
    )
    timeout: float | None = Field(default=None, alias="FLIXPATROL_TIMEOUT")
    fallback_location: str = Field(
        default="world",
        alias="FLIXPATROL_FALLBACK_LOCATION",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL scheme and strip trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("FLIXPATROL_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("fallback_location")
    @classmethod
    def validate_fallback_location(cls, v: str) -> str:
        """Validate fallback is a known location (or empty)."""
        v = v.strip().lower()
        if v and not is_location(v):
            raise ValueError(f"Unknown FLIXPATROL_FALLBACK_LOCATION: {v}")
        return v

    @property
    def fallback(self) -> str | Literal[False]:
        """Fallback location, or False when disabled."""
        return self.fallback_location or False
