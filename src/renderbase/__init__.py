"""
Renderbase Python SDK.

Generate PDF and Excel documents from templates with the Renderbase API.

Usage:
    >>> from renderbase import Renderbase
    >>>
    >>> client = Renderbase(api_key="rb_xxx")
    >>> result = client.documents.generate(
    ...     template_id="tmpl_invoice",
    ...     format="pdf",
    ...     variables={"invoiceNumber": "INV-001"},
    ... )
    >>> print(result.status, result.download_url)
"""

from __future__ import annotations

from renderbase._version import __version__
from renderbase.client import Renderbase
from renderbase.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    DownloadError,
    InvalidRequestError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    RenderbaseError,
    RequestValidationError,
    ServerError,
    TransportError,
)
from renderbase.models import (
    GenerateRequest,
    GenerateResult,
    JobStatus,
    ListResponse,
    OutputFormat,
    Template,
    TemplateVariable,
    Webhook,
    WebhookCreateRequest,
    WebhookEvent,
)

__all__ = [
    "__version__",
    # Client
    "Renderbase",
    # Models
    "GenerateRequest",
    "GenerateResult",
    "JobStatus",
    "ListResponse",
    "OutputFormat",
    "Template",
    "TemplateVariable",
    "Webhook",
    "WebhookCreateRequest",
    "WebhookEvent",
    # Exceptions
    "RenderbaseError",
    "ConfigurationError",
    "RequestValidationError",
    "APIError",
    "InvalidRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "DownloadError",
]
