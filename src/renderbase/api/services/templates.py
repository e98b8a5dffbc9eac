"""
Templates service for Renderbase API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from renderbase.api.http import path_segment
from renderbase.models import ListResponse, Template

if TYPE_CHECKING:
    from renderbase.api.http import HttpClient


class TemplatesService:
    """
    High-level templates service.

    Example:
        >>> templates = client.templates.list(type="pdf")
        >>> for template in templates:
        ...     print(template.name, template.id)
        >>> invoice = client.templates.get("tmpl_invoice")
    """

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def list(
        self,
        page: int | None = None,
        limit: int | None = None,
        type: str | None = None,
    ) -> ListResponse[Template]:
        """
        List templates.

        Args:
            page: Page number (1-based)
            limit: Items per page
            type: Filter by template type ("pdf", "excel")

        Returns:
            One page of templates
        """
        return self._http.get(
            "/templates",
            params={"page": page, "limit": limit, "type": type},
            response_model=ListResponse[Template],
        )

    def get(self, template_id: str) -> Template:
        """
        Get template by UUID, short ID or slug.

        The API resolves all three forms; nothing is checked locally.

        Args:
            template_id: Template identifier

        Returns:
            Template details
        """
        return self._http.get(
            f"/templates/{path_segment(template_id)}",
            response_model=Template,
        )

    def get_by_short_id(self, short_id: str) -> Template:
        """Get template by short ID (e.g. "tmpl_abc123")."""
        return self.get(short_id)

    def get_by_slug(self, slug: str) -> Template:
        """Get template by slug (e.g. "invoice-template")."""
        return self.get(slug)
