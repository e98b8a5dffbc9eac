"""
Document generation models.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from pydantic import Field

from renderbase.models.base import ApiModel


class OutputFormat(str, Enum):
    """Document output format."""

    PDF = "pdf"
    EXCEL = "excel"


class JobStatus(str, Enum):
    """Known generation job statuses. The API may report others."""

    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class GenerateRequest(ApiModel):
    """
    Request to render a template into a document.

    Example:
        >>> request = GenerateRequest(template_id="tmpl_invoice", format="pdf")
        >>> request = request.with_variable("invoiceNumber", "INV-001")
        >>> request.to_api()
        {'templateId': 'tmpl_invoice', 'format': 'pdf', 'variables': {'invoiceNumber': 'INV-001'}}
    """

    template_id: str = Field(min_length=1)
    format: OutputFormat
    variables: dict[str, Any] = Field(default_factory=dict)
    workspace_id: str | None = None

    def with_variable(self, name: str, value: Any) -> GenerateRequest:
        """Return a copy with one more variable set."""
        return self.model_copy(update={"variables": {**self.variables, name: value}})

    def with_variables(self, variables: Mapping[str, Any]) -> GenerateRequest:
        """Return a copy with variables merged in."""
        return self.model_copy(update={"variables": {**self.variables, **variables}})


class GenerateResult(ApiModel):
    """Generation job as reported by the API."""

    job_id: str
    status: str
    download_url: str | None = None
    expires_at: datetime | None = None
    format: str | None = None
    template_id: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == JobStatus.COMPLETED.value

    @property
    def is_failed(self) -> bool:
        return self.status == JobStatus.FAILED.value


__all__ = ["OutputFormat", "JobStatus", "GenerateRequest", "GenerateResult"]
