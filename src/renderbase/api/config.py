"""
Renderbase API configuration.

Provides URL configuration for prod/staging/local environments.
"""

from __future__ import annotations

from typing import Literal

# Base URLs for different environments
BASE_URLS = {
    "prod": "https://api.renderbase.dev/api/v1",
    "staging": "https://staging-api.renderbase.dev/api/v1",
    "local": "http://localhost:3000/api/v1",
}

DEFAULT_BASE_URL = BASE_URLS["prod"]


def get_base_url(mode: Literal["prod", "staging", "local"] = "prod") -> str:
    """
    Get base URL for the specified environment.

    Args:
        mode: Environment mode - "prod", "staging", or "local"

    Returns:
        Base URL for the API

    Example:
        >>> get_base_url("prod")
        'https://api.renderbase.dev/api/v1'
        >>> get_base_url("local")
        'http://localhost:3000/api/v1'
    """
    return BASE_URLS.get(mode, DEFAULT_BASE_URL)


__all__ = ["get_base_url", "BASE_URLS", "DEFAULT_BASE_URL"]
