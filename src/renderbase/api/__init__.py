"""
Renderbase HTTP API layer.

For most uses, prefer the top-level client:
    >>> from renderbase import Renderbase
    >>> client = Renderbase(api_key="rb_xxx")

Lower-level pieces are available here:
    >>> from renderbase.api import HttpClient, DocumentsService
"""

from __future__ import annotations

# Configuration
from renderbase.api.config import BASE_URLS, DEFAULT_BASE_URL, get_base_url

# Transport
from renderbase.api.http import HttpClient

# Services
from renderbase.api.services import (
    DocumentsService,
    TemplatesService,
    WebhooksService,
)

__all__ = [
    # Config
    "get_base_url",
    "BASE_URLS",
    "DEFAULT_BASE_URL",
    # Transport
    "HttpClient",
    # Services
    "DocumentsService",
    "TemplatesService",
    "WebhooksService",
]
