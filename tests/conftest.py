"""
Pytest configuration and fixtures for Renderbase SDK tests.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from renderbase import Renderbase


class RecordingAPI:
    """Mock HTTP backend that records requests and replays queued responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def queue(
        self,
        status_code: int = 200,
        json_data: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Queue the next response."""
        if json_data is not None:
            response = httpx.Response(status_code, json=json_data, headers=headers)
        else:
            response = httpx.Response(status_code, content=content or b"", headers=headers)
        self._responses.append(response)

    def fail(self, error: Exception) -> None:
        """Queue a transport failure."""
        self._responses.append(error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture(autouse=True)
def reset_sdk_settings(monkeypatch):
    """Isolate tests from RENDERBASE_* environment and cached settings."""
    from renderbase.config import reset_settings

    for name in (
        "RENDERBASE_API_KEY",
        "RENDERBASE_BASE_URL",
        "RENDERBASE_TIMEOUT",
        "RENDERBASE_DOWNLOAD_TIMEOUT",
        "RENDERBASE_LOG_LEVEL",
        "RENDERBASE_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def api() -> RecordingAPI:
    """Provide a recording mock backend."""
    return RecordingAPI()


@pytest.fixture
def client(api: RecordingAPI) -> Renderbase:
    """Client wired to the mock backend with the default base URL."""
    client = Renderbase(api_key="sk_test", transport=api.transport())
    yield client
    client.close()


# ============================================================================
# Test Data Fixtures
# ============================================================================


@pytest.fixture
def sample_job_data() -> dict[str, Any]:
    """Sample generation job from API response."""
    return {
        "jobId": "job_123",
        "status": "completed",
        "downloadUrl": "https://cdn.renderbase.dev/files/job_123.pdf?sig=abc",
        "expiresAt": "2026-10-20T12:00:00Z",
        "format": "pdf",
        "templateId": "tmpl_invoice",
    }


@pytest.fixture
def sample_template_data() -> dict[str, Any]:
    """Sample template from API response."""
    return {
        "id": "4f7c2a8e-0d0b-4a53-9a7e-1c2d3e4f5a6b",
        "shortId": "tmpl_invoice",
        "slug": "invoice-template",
        "name": "Invoice",
        "type": "pdf",
        "variables": [
            {"name": "invoiceNumber", "type": "string", "required": True},
            {"name": "customerName", "type": "string", "required": True},
            {"name": "notes", "type": "string", "required": False, "defaultValue": ""},
        ],
        "createdAt": "2026-01-05T09:30:00Z",
    }


@pytest.fixture
def sample_webhook_data() -> dict[str, Any]:
    """Sample webhook from API response."""
    return {
        "id": "wh_1",
        "url": "https://example.com/hooks/renderbase",
        "events": ["document.completed", "document.failed"],
        "active": True,
        "secret": "whsec_abc",
    }
