"""API errors – failures talking to the remote catalog service."""

from __future__ import annotations

from typing import Any

from kinopoisk_dev.kernel.errors.base import KinopoiskError


class KinopoiskApiError(KinopoiskError):
    """The remote API answered with an unexpected status or could not be reached."""

    default_code = "api_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.endpoint = endpoint

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["status_code"] = self.status_code
        if self.endpoint is not None:
            base["endpoint"] = self.endpoint
        return base


class UnauthorizedError(KinopoiskApiError):
    """Missing or invalid API token (HTTP 401)."""

    default_code = "unauthorized"

    def __init__(self, message: str = "Unauthorized: API token is missing or invalid", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 401)
        super().__init__(message, **kwargs)


class ForbiddenError(KinopoiskApiError):
    """Token is valid but the request quota or plan does not allow it (HTTP 403)."""

    default_code = "forbidden"

    def __init__(self, message: str = "Forbidden: request limit exceeded or access denied", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 403)
        super().__init__(message, **kwargs)


class NotFoundError(KinopoiskApiError):
    """The requested resource does not exist (HTTP 404)."""

    default_code = "not_found"

    def __init__(self, message: str = "Not found", **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 404)
        super().__init__(message, **kwargs)


class RequestTimeoutError(KinopoiskApiError):
    """The request exceeded the configured timeout."""

    default_code = "timeout"
    retryable = True


class TransportError(KinopoiskApiError):
    """Connection-level failure before a response was received."""

    default_code = "transport_error"
    retryable = True


class ResponseParseError(KinopoiskApiError):
    """The response body is not valid JSON."""

    default_code = "response_parse_error"


__all__ = [
    "ForbiddenError",
    "KinopoiskApiError",
    "NotFoundError",
    "RequestTimeoutError",
    "ResponseParseError",
    "TransportError",
    "UnauthorizedError",
]
