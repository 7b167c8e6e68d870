"""Client configuration using Pydantic Settings"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

HELIX_BASE = "https://api.twitch.tv/helix"
TMI_BASE = "https://tmi.twitch.tv"

DEFAULT_TIMEOUT = 12.0


class TwitchEndpointSettings(BaseSettings):
    """Settings for the Twitch endpoint client"""

    model_config = SettingsConfigDict(
        env_prefix="TWITCH_",
        env_file=Path.cwd() / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Twitch application
    client_id: str = Field(..., description="Twitch application Client ID")
    token: str = Field(default="", description="Default user access token for the CLI")

    # Endpoints
    helix_url: str = Field(default=HELIX_BASE, description="Helix API base URL")
    tmi_url: str = Field(default=TMI_BASE, description="Legacy TMI base URL")

    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT, description="Per-request timeout in seconds"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("helix_url", "tmi_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """Validate timeout is positive"""
        if v <= 0:
            raise ValueError("REQUEST_TIMEOUT must be greater than zero")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            logger.warning(f"Invalid log level '{v}', defaulting to INFO")
            return "INFO"
        return v_upper


@lru_cache
def get_settings() -> TwitchEndpointSettings:
    """Get cached settings instance"""
    return TwitchEndpointSettings()  # type: ignore[call-arg]
