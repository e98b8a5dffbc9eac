"""
Renderbase SDK settings.

Settings are read from environment variables with the RENDERBASE_ prefix
and can be overridden programmatically via configure_settings().

Example:
    >>> import os
    >>> os.environ["RENDERBASE_TIMEOUT"] = "60"
    >>> from renderbase.config import get_settings
    >>> get_settings().timeout
    60.0
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SDKSettings(BaseSettings):
    """SDK-wide settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="RENDERBASE_",
        extra="ignore",
    )

    # Credentials / endpoint
    api_key: str | None = Field(
        default=None,
        description="API key used when none is passed to the client",
    )
    base_url: str | None = Field(
        default=None,
        description="Override for the API base URL",
    )

    # HTTP
    timeout: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Request timeout in seconds",
    )
    download_timeout: float = Field(
        default=120.0,
        ge=1.0,
        le=600.0,
        description="Timeout for fetching generated documents",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level for the renderbase logger",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines instead of rich console output",
    )


_settings: SDKSettings | None = None


def get_settings() -> SDKSettings:
    """Get the settings singleton, creating it on first use."""
    global _settings
    if _settings is None:
        _settings = SDKSettings()
    return _settings


def configure_settings(**kwargs: Any) -> SDKSettings:
    """
    Replace the settings singleton with explicit values.

    Args:
        **kwargs: Field overrides (unset fields still come from the environment)

    Returns:
        New settings instance
    """
    global _settings
    _settings = SDKSettings(**kwargs)
    return _settings


def reset_settings() -> None:
    """Drop the singleton so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


__all__ = [
    "SDKSettings",
    "get_settings",
    "configure_settings",
    "reset_settings",
]
