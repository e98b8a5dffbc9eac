"""
Renderbase API Client.

Entry point for the Renderbase document-generation API.
"""

from __future__ import annotations

from typing import Any, Literal

from renderbase.api.config import get_base_url
from renderbase.api.http import HttpClient
from renderbase.api.services import DocumentsService, TemplatesService, WebhooksService
from renderbase.config import get_settings
from renderbase.exceptions import ConfigurationError


class Renderbase:
    """
    Renderbase API client.

    Holds the configuration, owns one HTTP transport and exposes the
    documents, templates and webhooks services.

    Example:
        >>> client = Renderbase(api_key="rb_xxx")
        >>> result = client.documents.generate(
        ...     template_id="tmpl_invoice",
        ...     format="pdf",
        ...     variables={"invoiceNumber": "INV-001", "customerName": "Acme Corp"},
        ... )
        >>> print(result.download_url)

        >>> # From environment variable
        >>> os.environ["RENDERBASE_API_KEY"] = "rb_xxx"
        >>> with Renderbase() as client:
        ...     templates = client.templates.list(type="pdf")
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        mode: Literal["prod", "staging", "local"] = "prod",
        timeout: float | None = None,
        **http_kwargs: Any,
    ) -> None:
        """
        Initialize Renderbase client.

        Args:
            api_key: API key (or set RENDERBASE_API_KEY env var)
            base_url: Custom base URL (overrides mode)
            mode: Environment mode - "prod", "staging", or "local"
            timeout: Request timeout in seconds
            **http_kwargs: Additional httpx.Client kwargs

        Raises:
            ConfigurationError: If no API key provided
        """
        settings = get_settings()

        api_key = api_key if api_key is not None else settings.api_key
        if not api_key or not api_key.strip():
            raise ConfigurationError(
                "API key required. Pass api_key or set RENDERBASE_API_KEY environment variable."
            )

        self._api_key = api_key
        self._base_url = (base_url or settings.base_url or get_base_url(mode)).rstrip("/")
        self._mode = mode

        self._http = HttpClient(
            api_key=self._api_key,
            base_url=self._base_url,
            timeout=timeout if timeout is not None else settings.timeout,
            download_timeout=settings.download_timeout,
            **http_kwargs,
        )
        self._documents = DocumentsService(self._http)
        self._templates = TemplatesService(self._http)
        self._webhooks = WebhooksService(self._http)

    @property
    def documents(self) -> DocumentsService:
        """Document generation, job lookup and download."""
        return self._documents

    @property
    def templates(self) -> TemplatesService:
        """Template listing and lookup."""
        return self._templates

    @property
    def webhooks(self) -> WebhooksService:
        """Webhook subscription management."""
        return self._webhooks

    @property
    def base_url(self) -> str:
        """Get current base URL."""
        return self._base_url

    @property
    def mode(self) -> str:
        """Get current environment mode."""
        return self._mode

    def __enter__(self) -> Renderbase:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self._http.close()

    def __repr__(self) -> str:
        masked = f"{self._api_key[:4]}..." if len(self._api_key) > 8 else "***"
        return f"<Renderbase base_url={self._base_url!r} api_key={masked!r}>"


__all__ = ["Renderbase"]
