"""
Documents service for Renderbase API.

Provides document generation, job lookup and download.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

from renderbase.api.http import path_segment
from renderbase.logging import get_logger
from renderbase.models import GenerateRequest, GenerateResult, ListResponse

if TYPE_CHECKING:
    from renderbase.api.http import HttpClient
    from renderbase.models import OutputFormat

logger = get_logger(__name__)


class DocumentsService:
    """
    High-level documents service.

    Example:
        >>> client = Renderbase(api_key="rb_xxx")
        >>> result = client.documents.generate(
        ...     template_id="tmpl_invoice",
        ...     format="pdf",
        ...     variables={"invoiceNumber": "INV-001"},
        ... )
        >>> if result.is_completed:
        ...     pdf = client.documents.download(result.download_url)
    """

    def __init__(self, http: HttpClient) -> None:
        """
        Initialize documents service.

        Args:
            http: Shared HTTP transport
        """
        self._http = http

    def generate(
        self,
        request: GenerateRequest | None = None,
        *,
        template_id: str | None = None,
        format: OutputFormat | str | None = None,
        variables: Mapping[str, Any] | None = None,
        workspace_id: str | None = None,
    ) -> GenerateResult:
        """
        Generate a document from a template.

        Pass either a GenerateRequest or the individual fields. The job is
        returned as the API reports it; no polling is done.

        Args:
            request: Prepared generation request
            template_id: Template UUID, short ID or slug
            format: Output format ("pdf" or "excel")
            variables: Template variable values
            workspace_id: Optional workspace to attach the job to

        Returns:
            Generation job
        """
        if request is None:
            request = GenerateRequest.build(
                template_id=template_id,
                format=format,
                variables=dict(variables or {}),
                workspace_id=workspace_id,
            )
        elif any(v is not None for v in (template_id, format, variables, workspace_id)):
            raise TypeError("Pass either a GenerateRequest or keyword fields, not both")

        logger.debug("Generating %s from template %s", request.format.value, request.template_id)
        return self._http.post(
            "/documents/generate",
            body=request,
            response_model=GenerateResult,
        )

    def get(self, job_id: str) -> GenerateResult:
        """
        Get generation job by ID.

        Args:
            job_id: Job ID

        Returns:
            Current job state
        """
        return self._http.get(
            f"/documents/jobs/{path_segment(job_id)}",
            response_model=GenerateResult,
        )

    def list(
        self,
        page: int | None = None,
        limit: int | None = None,
        template_id: str | None = None,
        workspace_id: str | None = None,
    ) -> ListResponse[GenerateResult]:
        """
        List generation jobs with optional filtering.

        Args:
            page: Page number (1-based)
            limit: Items per page
            template_id: Filter by template
            workspace_id: Filter by workspace

        Returns:
            One page of jobs
        """
        return self._http.get(
            "/documents/jobs",
            params={
                "page": page,
                "limit": limit,
                "templateId": template_id,
                "workspaceId": workspace_id,
            },
            response_model=ListResponse[GenerateResult],
        )

    def delete(self, job_id: str) -> None:
        """
        Delete generated document.

        Args:
            job_id: Job ID
        """
        self._http.delete(f"/documents/jobs/{path_segment(job_id)}")

    def download(self, download_url: str) -> bytes:
        """
        Download a generated document.

        The URL is pre-signed; the API key is not sent with it.

        Args:
            download_url: URL from GenerateResult.download_url

        Returns:
            Document bytes

        Raises:
            DownloadError: If the fetch fails
        """
        return self._http.fetch_bytes(download_url)

    def download_to(self, download_url: str, path: str | Path) -> Path:
        """
        Download a generated document into a file.

        Args:
            download_url: URL from GenerateResult.download_url
            path: Destination file (parent directories are created)

        Returns:
            Path written
        """
        data = self.download(download_url)
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path
