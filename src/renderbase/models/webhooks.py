"""
Webhook subscription models.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from renderbase.models.base import ApiModel


class WebhookEvent(str, Enum):
    """Known webhook event names."""

    DOCUMENT_COMPLETED = "document.completed"
    DOCUMENT_FAILED = "document.failed"


class WebhookCreateRequest(ApiModel):
    """Request to subscribe a URL to webhook events."""

    url: str = Field(min_length=1)
    events: list[str] = Field(min_length=1)
    description: str | None = None
    workspace_id: str | None = None


class Webhook(ApiModel):
    """Webhook subscription."""

    id: str
    url: str
    events: list[str] = Field(default_factory=list)
    description: str | None = None
    active: bool = True
    secret: str | None = None
    workspace_id: str | None = None
    created_at: datetime | None = None


__all__ = ["WebhookEvent", "WebhookCreateRequest", "Webhook"]
