"""
Tests for the webhooks service.
"""

import pytest

from renderbase.exceptions import InvalidRequestError, RequestValidationError
from renderbase.models import WebhookCreateRequest, WebhookEvent

BASE_URL = "https://api.renderbase.dev/api/v1"


class TestWebhooks:
    """Tests for webhook CRUD."""

    def test_create_with_keywords(self, api, client, sample_webhook_data):
        api.queue(201, json_data=sample_webhook_data)

        hook = client.webhooks.create(
            url="https://example.com/hooks/renderbase",
            events=[WebhookEvent.DOCUMENT_COMPLETED, "document.failed"],
        )

        assert api.last.method == "POST"
        assert str(api.last.url) == f"{BASE_URL}/webhooks"
        assert api.last_json() == {
            "url": "https://example.com/hooks/renderbase",
            "events": ["document.completed", "document.failed"],
        }
        assert hook.id == "wh_1"
        assert hook.secret == "whsec_abc"

    def test_create_with_request(self, api, client, sample_webhook_data):
        api.queue(json_data=sample_webhook_data)
        request = WebhookCreateRequest(
            url="https://example.com/hooks/renderbase",
            events=["document.completed"],
            description="billing",
            workspace_id="ws_1",
        )

        client.webhooks.create(request)

        assert api.last_json() == {
            "url": "https://example.com/hooks/renderbase",
            "events": ["document.completed"],
            "description": "billing",
            "workspaceId": "ws_1",
        }

    def test_create_rejected(self, api, client):
        api.queue(422, json_data={"message": "url must be https", "code": "INVALID_URL"})

        with pytest.raises(InvalidRequestError) as exc_info:
            client.webhooks.create(url="http://example.com", events=["document.completed"])

        assert exc_info.value.code == "INVALID_URL"
        assert exc_info.value.status_code == 422

    def test_create_requires_url_and_events(self, api, client):
        with pytest.raises(RequestValidationError) as exc_info:
            client.webhooks.create(events=["document.completed"])

        assert "WebhookCreateRequest" in exc_info.value.message
        assert api.requests == []

        with pytest.raises(RequestValidationError):
            client.webhooks.create(url="https://example.com/hooks")

    def test_create_rejects_both_forms(self, api, client):
        request = WebhookCreateRequest(url="https://example.com/a", events=["document.completed"])

        with pytest.raises(TypeError):
            client.webhooks.create(request, description="billing")
        assert api.requests == []

    def test_list(self, api, client, sample_webhook_data):
        api.queue(json_data={"data": [sample_webhook_data], "page": 1, "limit": 20, "total": 1})

        response = client.webhooks.list(limit=20)

        assert str(api.last.url) == f"{BASE_URL}/webhooks?limit=20"
        assert [hook.id for hook in response] == ["wh_1"]

    def test_get(self, api, client, sample_webhook_data):
        api.queue(json_data=sample_webhook_data)

        hook = client.webhooks.get("wh_1")

        assert api.last.method == "GET"
        assert str(api.last.url) == f"{BASE_URL}/webhooks/wh_1"
        assert hook.active is True

    def test_delete(self, api, client):
        api.queue(204)

        client.webhooks.delete("wh_1")

        assert api.last.method == "DELETE"
        assert str(api.last.url) == f"{BASE_URL}/webhooks/wh_1"
