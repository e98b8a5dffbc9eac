"""
Renderbase API Services.

High-level resource services on top of the shared HTTP transport.
"""

from __future__ import annotations

from renderbase.api.services.documents import DocumentsService
from renderbase.api.services.templates import TemplatesService
from renderbase.api.services.webhooks import WebhooksService

__all__ = [
    "DocumentsService",
    "TemplatesService",
    "WebhooksService",
]
