"""
Renderbase SDK models.
"""

from renderbase.models.base import ApiModel, ListResponse
from renderbase.models.documents import (
    GenerateRequest,
    GenerateResult,
    JobStatus,
    OutputFormat,
)
from renderbase.models.templates import Template, TemplateVariable
from renderbase.models.webhooks import Webhook, WebhookCreateRequest, WebhookEvent

__all__ = [
    # Base
    "ApiModel",
    "ListResponse",
    # Documents
    "GenerateRequest",
    "GenerateResult",
    "JobStatus",
    "OutputFormat",
    # Templates
    "Template",
    "TemplateVariable",
    # Webhooks
    "Webhook",
    "WebhookCreateRequest",
    "WebhookEvent",
]
