"""
Template models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from renderbase.models.base import ApiModel


class TemplateVariable(ApiModel):
    """Variable declared by a template."""

    name: str
    type: str | None = None
    required: bool = False
    default_value: Any = None
    description: str | None = None


class Template(ApiModel):
    """
    Server-stored document template.

    A template can be addressed by its UUID (id), its short ID
    (e.g. "tmpl_abc123") or its slug (e.g. "invoice-template").
    """

    id: str
    short_id: str | None = None
    slug: str | None = None
    name: str | None = None
    description: str | None = None
    type: str | None = None
    variables: list[TemplateVariable] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def required_variables(self) -> list[str]:
        """Names of variables the template requires."""
        return [v.name for v in self.variables if v.required]


__all__ = ["Template", "TemplateVariable"]
