"""API – ResourceGroup base shared by the per-endpoint request groups."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from kinopoisk_dev.adapters.http import KinopoiskHttpClient
from kinopoisk_dev.application.pagination import DocsPage, PageRequest
from kinopoisk_dev.application.query import FilterBuilder
from kinopoisk_dev.kernel.errors import ResponseParseError


class ResourceGroup:
    """One family of endpoints (``movie``, ``person``, ...) over a shared HTTP client."""

    endpoint: ClassVar[str] = ""
    filter_class: ClassVar[type[FilterBuilder]] = FilterBuilder

    def __init__(self, http: KinopoiskHttpClient) -> None:
        self._http = http

    def new_filter(self) -> Any:
        """Return an empty filter of the type this group expects."""
        return self.filter_class()

    async def _get_one(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        payload = await self._http.get(path, params)
        if not isinstance(payload, dict):
            raise ResponseParseError(f"Expected a JSON object from {path}", endpoint=path)
        return payload

    async def _get_page(
        self,
        path: str,
        filters: FilterBuilder | None = None,
        page: int = 1,
        limit: int = 10,
        extra: Mapping[str, Any] | None = None,
    ) -> DocsPage[dict[str, Any]]:
        request = PageRequest(page=page, limit=limit)
        params = (filters if filters is not None else self.new_filter()).compile()
        if extra:
            params.update(extra)
        params.update(request.to_params())
        payload = await self._get_one(path, params)
        return DocsPage.from_payload(payload, page=page, limit=limit)

    async def search(
        self,
        filters: FilterBuilder | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> DocsPage[dict[str, Any]]:
        """Search ``/<endpoint>`` with *filters*; ``page >= 1``, ``1 <= limit <= 250``."""
        return await self._get_page(self.endpoint, filters, page, limit)

    async def first(self, filters: FilterBuilder | None = None) -> dict[str, Any] | None:
        """First matching document, or ``None``."""
        result = await self.search(filters, page=1, limit=1)
        return result.first()


__all__ = ["ResourceGroup"]
