"""
HTTP transport for the Renderbase API.

Thin wrapper around httpx.Client: attaches the API key, encodes query
parameters and JSON bodies, and turns failures into SDK exceptions.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Any, Mapping, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from renderbase._version import __version__
from renderbase.exceptions import APIError, DownloadError, TransportError
from renderbase.logging import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

USER_AGENT = f"renderbase-python/{__version__}"


def path_segment(value: str | int) -> str:
    """Escape an identifier for use as a single URL path segment."""
    return quote(str(value), safe="")


def encode_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """
    Stringify query parameters, dropping unset ones.

    Absent filters are omitted entirely rather than sent as empty values.
    """
    if not params:
        return {}
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, Enum):
            encoded[key] = str(value.value)
        else:
            encoded[key] = str(value)
    return encoded


def encode_body(body: BaseModel | Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Serialize a request body with wire names, omitting None fields."""
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return {key: value for key, value in body.items() if value is not None}


def _error_details(response: httpx.Response) -> tuple[str, str | None, Any]:
    """Extract (message, code, body) from an error response."""
    try:
        body: Any = response.json()
    except ValueError:
        body = response.text or None

    message: Any = None
    code: Any = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            code = error.get("code")
        elif isinstance(error, str):
            message = error
        message = body.get("message") or message
        code = body.get("code") or code

    if not message:
        message = f"HTTP {response.status_code}: {response.reason_phrase}"
    return str(message), (str(code) if code is not None else None), body


class HttpClient:
    """
    Synchronous HTTP transport shared by all resource services.

    Usage:
        >>> with HttpClient(api_key="rb_xxx", base_url="https://api.renderbase.dev/api/v1") as http:
        ...     page = http.get("/templates", params={"page": 1}, response_model=ListResponse[Template])
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 30.0,
        download_timeout: float = 120.0,
        **kwargs: Any,
    ):
        """
        Initialize transport.

        Args:
            api_key: API key sent as a bearer token
            base_url: Base API URL (e.g., 'https://api.renderbase.dev/api/v1')
            timeout: Request timeout in seconds
            download_timeout: Timeout for download URL fetches
            **kwargs: Additional httpx.Client kwargs
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            **kwargs,
        )
        # Pre-signed URLs must not receive the API key
        self._download_client = httpx.Client(
            timeout=download_timeout,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
            **kwargs,
        )

    # =========================================================================
    # API requests
    # =========================================================================

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: BaseModel | Mapping[str, Any] | None = None,
        response_model: type[M] | None = None,
    ) -> M | None:
        """
        Send one API request.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            params: Query parameters (None values are omitted)
            body: JSON body
            response_model: Model to validate the response against

        Returns:
            Validated model, or None when no response_model is given

        Raises:
            APIError: Non-success status code
            TransportError: Connection failure or malformed response
        """
        query = encode_params(params)
        payload = encode_body(body)

        start = time.perf_counter()
        try:
            response = self._client.request(
                method,
                path,
                params=query or None,
                json=payload,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("%s %s failed: %s", method, path, e)
            raise TransportError(f"{method} {path} failed: {e}", cause=e) from e

        elapsed = (time.perf_counter() - start) * 1000
        logger.debug(
            "%s %s -> %d (%.0f ms)", method, path, response.status_code, elapsed
        )

        if not response.is_success:
            message, code, error_body = _error_details(response)
            raise APIError.from_status(
                response.status_code,
                message,
                code=code,
                body=error_body,
                headers=response.headers,
            )

        if response_model is None:
            return None

        if not response.content:
            raise TransportError(f"{method} {path} returned an empty body")

        try:
            return response_model.model_validate(response.json())
        except ValueError as e:
            # PydanticValidationError is a ValueError too
            kind = "unexpected" if isinstance(e, PydanticValidationError) else "invalid JSON"
            raise TransportError(
                f"{method} {path} returned {kind} response body", cause=e
            ) from e

    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        response_model: type[M] | None = None,
    ) -> M | None:
        return self.request("GET", path, params=params, response_model=response_model)

    def post(
        self,
        path: str,
        body: BaseModel | Mapping[str, Any] | None = None,
        response_model: type[M] | None = None,
    ) -> M | None:
        return self.request("POST", path, body=body, response_model=response_model)

    def delete(self, path: str) -> None:
        self.request("DELETE", path)

    # =========================================================================
    # Downloads
    # =========================================================================

    def fetch_bytes(self, url: str) -> bytes:
        """
        Fetch raw bytes from an absolute, pre-signed URL.

        The API key is not sent. Any failure, including a partial read,
        raises DownloadError and yields no data.

        Args:
            url: Download URL returned by the API

        Returns:
            Response body

        Raises:
            DownloadError: HTTP error status or IO failure
        """
        chunks: list[bytes] = []
        try:
            with self._download_client.stream("GET", url) as response:
                if not response.is_success:
                    raise DownloadError(
                        f"Download failed with HTTP {response.status_code}",
                        url=url,
                        status_code=response.status_code,
                    )
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DownloadError(f"Failed to download document: {e}", url=url, cause=e) from e

        data = b"".join(chunks)
        logger.debug("Downloaded %d bytes", len(data))
        return data

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close HTTP clients."""
        self._client.close()
        self._download_client.close()


__all__ = ["HttpClient", "encode_params", "encode_body", "path_segment"]
