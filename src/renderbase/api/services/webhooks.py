"""
Webhooks service for Renderbase API.

Manages webhook subscriptions for document events.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from renderbase.api.http import path_segment
from renderbase.models import ListResponse, Webhook, WebhookCreateRequest

if TYPE_CHECKING:
    from renderbase.api.http import HttpClient
    from renderbase.models import WebhookEvent


class WebhooksService:
    """
    High-level webhooks service.

    Example:
        >>> hook = client.webhooks.create(
        ...     url="https://example.com/hooks/renderbase",
        ...     events=["document.completed"],
        ... )
        >>> client.webhooks.delete(hook.id)
    """

    def __init__(self, http: HttpClient) -> None:
        """
        Initialize webhooks service.

        Args:
            http: Shared HTTP transport
        """
        self._http = http

    def create(
        self,
        request: WebhookCreateRequest | None = None,
        *,
        url: str | None = None,
        events: Sequence[WebhookEvent | str] | None = None,
        description: str | None = None,
        workspace_id: str | None = None,
    ) -> Webhook:
        """
        Create a webhook subscription.

        Args:
            request: Prepared create request
            url: Endpoint that receives events
            events: Event names to subscribe to
            description: Free-form label
            workspace_id: Limit events to one workspace

        Returns:
            Created webhook (includes the signing secret)
        """
        if request is None:
            request = WebhookCreateRequest.build(
                url=url,
                events=[getattr(e, "value", e) for e in (events or [])],
                description=description,
                workspace_id=workspace_id,
            )
        elif any(v is not None for v in (url, events, description, workspace_id)):
            raise TypeError("Pass either a WebhookCreateRequest or keyword fields, not both")
        return self._http.post("/webhooks", body=request, response_model=Webhook)

    def list(
        self,
        page: int | None = None,
        limit: int | None = None,
    ) -> ListResponse[Webhook]:
        """
        List webhook subscriptions.

        Args:
            page: Page number (1-based)
            limit: Items per page

        Returns:
            One page of webhooks
        """
        return self._http.get(
            "/webhooks",
            params={"page": page, "limit": limit},
            response_model=ListResponse[Webhook],
        )

    def get(self, webhook_id: str) -> Webhook:
        """
        Get webhook by ID.

        Args:
            webhook_id: Webhook ID

        Returns:
            Webhook details
        """
        return self._http.get(
            f"/webhooks/{path_segment(webhook_id)}",
            response_model=Webhook,
        )

    def delete(self, webhook_id: str) -> None:
        """
        Delete webhook.

        Args:
            webhook_id: Webhook ID
        """
        self._http.delete(f"/webhooks/{path_segment(webhook_id)}")
