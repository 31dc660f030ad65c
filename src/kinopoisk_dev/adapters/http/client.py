"""HTTP adapter – KinopoiskHttpClient.

Thin async :mod:`httpx` wrapper: it validates the request, flattens the
compiled filter map into query parameters, retries transient failures and
maps HTTP outcomes onto :mod:`kinopoisk_dev.kernel.errors`.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

import httpx

from kinopoisk_dev.adapters.http.retry import TenacityRetryPolicy
from kinopoisk_dev.config.settings import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    validate_token,
)
from kinopoisk_dev.kernel.errors import (
    ForbiddenError,
    KinopoiskApiError,
    NotFoundError,
    RequestTimeoutError,
    ResponseParseError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from kinopoisk_dev.observability.logging import get_logger, request_context

logger = get_logger(__name__)

USER_AGENT = "kinopoisk-dev-python"
ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH"})
_ENDPOINT_RE = re.compile(r"^[a-zA-Z0-9/_-]+$")

_STATUS_ERRORS: dict[int, type[KinopoiskApiError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}


def _stringify(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _flatten(key: str, value: Any, out: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten(f"{key}[{sub_key}]", sub_value, out)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _flatten(key, item, out)
    else:
        out.append((key, _stringify(value)))


def to_query_params(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten a compiled filter map into ``(key, value)`` query pairs.

    ``None`` values are dropped, lists repeat their key, nested mappings
    use ``key[sub]`` names, and booleans become ``true`` / ``false``.
    """
    out: list[tuple[str, str]] = []
    for key, value in params.items():
        _flatten(key, value, out)
    return out


class KinopoiskHttpClient:
    """Async client for the ``api.kinopoisk.dev`` REST API.

    Example::

        async with KinopoiskHttpClient(token) as http:
            payload = await http.get("movie", {"year": "2020-2024", "limit": 5})
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_wait: float = 0.5,
        **kwargs: Any,
    ) -> None:
        validate_token(token)
        self._api_version = api_version
        self._retry = TenacityRetryPolicy(max_retries=max_retries, initial_wait=retry_wait)
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={
                "X-API-KEY": token,
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            **kwargs,
        )
        logger.debug("http.client.initialised", base_url=base_url, api_version=api_version, timeout=timeout)

    @property
    def api_version(self) -> str:
        return self._api_version

    async def __aenter__(self) -> "KinopoiskHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        *,
        api_version: str | None = None,
    ) -> Any:
        return await self.request("GET", endpoint, params, api_version=api_version)

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        *,
        api_version: str | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body."""
        verb = method.upper()
        if verb not in ALLOWED_METHODS:
            raise ValidationError.for_field("method", f"unsupported HTTP method {method!r}", method)
        path = endpoint.lstrip("/")
        if not _ENDPOINT_RE.match(path):
            raise ValidationError.for_field("endpoint", f"invalid endpoint {endpoint!r}", endpoint)

        url = f"/{api_version or self._api_version}/{path}"
        query = to_query_params(params or {})
        with request_context(verb, url):
            logger.debug("http.request", params=len(query))
            response = await self._retry.execute_async(lambda: self._send(verb, url, query))
            return self._parse(response, url)

    async def _send(self, method: str, url: str, query: list[tuple[str, str]]) -> httpx.Response:
        try:
            response = await self._client.request(method, url, params=query)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"HTTP request timed out: {method} {url}", endpoint=url, cause=exc) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"HTTP transport error: {method} {url}: {exc}", endpoint=url, cause=exc) from exc

        if response.status_code != 200:
            raise self._status_error(method, url, response)
        return response

    def _status_error(self, method: str, url: str, response: httpx.Response) -> KinopoiskApiError:
        status = response.status_code
        logger.warning("http.error", status_code=status)
        error_cls = _STATUS_ERRORS.get(status)
        if error_cls is not None:
            return error_cls(endpoint=url)
        return KinopoiskApiError(
            f"HTTP {status} from {method} {url}: {_error_message(response)}",
            status_code=status,
            endpoint=url,
        )

    @staticmethod
    def _parse(response: httpx.Response, url: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseParseError(
                f"Invalid JSON in response from {url}",
                status_code=response.status_code,
                endpoint=url,
                cause=exc,
            ) from exc


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or "unexpected response"
    if isinstance(body, Mapping) and body.get("message"):
        message = body["message"]
        return ", ".join(map(str, message)) if isinstance(message, list) else str(message)
    return response.reason_phrase or "unexpected response"


__all__ = ["ALLOWED_METHODS", "USER_AGENT", "KinopoiskHttpClient", "to_query_params"]
