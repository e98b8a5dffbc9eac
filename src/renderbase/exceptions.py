"""
Renderbase SDK exceptions.

Every error raised by the SDK derives from RenderbaseError and carries
a message, an optional machine-readable code from the API, and the HTTP
status code (0 when the failure did not come from an HTTP response).
"""

from __future__ import annotations

from typing import Any, Mapping


class RenderbaseError(Exception):
    """Base exception for all Renderbase SDK errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int = 0,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self._original_cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        parts = [f"message={self.message!r}"]
        if self.code is not None:
            parts.append(f"code={self.code!r}")
        if self.status_code > 0:
            parts.append(f"status_code={self.status_code}")
        return f"{type(self).__name__}({', '.join(parts)})"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(RenderbaseError):
    """Invalid client configuration (e.g. missing API key)."""


class RequestValidationError(RenderbaseError):
    """Request arguments rejected locally, before anything is sent."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message, cause=cause)


# =============================================================================
# API Errors
# =============================================================================


class APIError(RenderbaseError):
    """The API answered with a non-success status code."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int = 0,
        body: Any = None,
    ) -> None:
        super().__init__(message, code=code, status_code=status_code)
        self.body = body

    @classmethod
    def from_status(
        cls,
        status_code: int,
        message: str,
        code: str | None = None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> APIError:
        """
        Build the most specific APIError subclass for a status code.

        Args:
            status_code: HTTP status code
            message: Error message
            code: Error code from the response body
            body: Parsed (or raw) response body
            headers: Response headers, used for Retry-After

        Returns:
            APIError instance
        """
        if status_code == 429:
            retry_after = _parse_retry_after((headers or {}).get("retry-after"))
            return RateLimitError(
                message, code=code, body=body, retry_after=retry_after
            )

        error_cls = _STATUS_ERRORS.get(status_code)
        if error_cls is None:
            error_cls = ServerError if status_code >= 500 else APIError
        return error_cls(message, code=code, status_code=status_code, body=body)


class InvalidRequestError(APIError):
    """Request rejected as invalid (400/422)."""


class AuthenticationError(APIError):
    """API key missing, invalid or revoked (401)."""


class PermissionDeniedError(APIError):
    """API key lacks access to the resource (403)."""


class NotFoundError(APIError):
    """Resource does not exist (404)."""


class RateLimitError(APIError):
    """Too many requests (429)."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int = 429,
        body: Any = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, code=code, status_code=status_code, body=body)
        self.retry_after = retry_after


class ServerError(APIError):
    """The API failed on its side (5xx)."""


_STATUS_ERRORS: dict[int, type[APIError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    422: InvalidRequestError,
}


def _parse_retry_after(value: str | None) -> float | None:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(RenderbaseError):
    """Connection failure, timeout, or malformed response body."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message, cause=cause)


class DownloadError(RenderbaseError):
    """Failure while fetching a generated document from its download URL."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int = 0,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, cause=cause)
        self.url = url


__all__ = [
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
