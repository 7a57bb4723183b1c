"""
Shared configuration management for the CFTools client.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://data.cftools.cloud/"


class CFToolsSettings(BaseSettings):
    """Client settings, read from ``CFTOOLS_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CFTOOLS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    base_url: str = Field(default=DEFAULT_BASE_URL)
    server_api_id: Optional[str] = Field(default=None)
    application_id: Optional[str] = Field(default=None)
    secret: Optional[str] = Field(default=None)
    request_timeout: float = Field(default=10.0, gt=0)

    # Logging
    log_level: str = Field(default="info")
    json_logs: bool = Field(default=True)

    # Caching
    cache_enabled: bool = Field(default=False)
    cache_ttl_priority_queue: int = Field(default=20, ge=0)
    cache_ttl_whitelist: Optional[int] = Field(default=None, ge=0)
    cache_ttl_player_details: int = Field(default=10, ge=0)
    cache_ttl_game_server_details: int = Field(default=10, ge=0)
    cache_ttl_leaderboard: int = Field(default=30, ge=0)

    @property
    def has_credentials(self) -> bool:
        return bool(self.application_id and self.secret)


def get_settings(**overrides) -> CFToolsSettings:
    """Get client settings, with optional explicit overrides."""
    return CFToolsSettings(**overrides)
