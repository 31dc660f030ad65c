"""API – keyword endpoints."""
from __future__ import annotations

from typing import Any

from kinopoisk_dev.api.base import ResourceGroup
from kinopoisk_dev.application.pagination import DocsPage
from kinopoisk_dev.application.query import KeywordSearchFilter


class KeywordRequests(ResourceGroup):
    endpoint = "keyword"
    filter_class = KeywordSearchFilter

    async def by_title(self, title: str, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(KeywordSearchFilter().title(title), page, limit)

    async def for_movie(self, movie_id: int, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(KeywordSearchFilter().movie_id(movie_id), page, limit)

    async def get_by_id(self, keyword_id: int) -> dict[str, Any] | None:
        return await self.first(KeywordSearchFilter().id(keyword_id))

    async def popular(self, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(KeywordSearchFilter().only_popular(), page, limit)


__all__ = ["KeywordRequests"]
