"""API – review endpoints."""
from __future__ import annotations

from typing import Any

from kinopoisk_dev.api.base import ResourceGroup
from kinopoisk_dev.application.pagination import DocsPage
from kinopoisk_dev.application.query import ReviewSearchFilter


class ReviewRequests(ResourceGroup):
    endpoint = "review"
    filter_class = ReviewSearchFilter

    async def positive(self, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(ReviewSearchFilter().only_positive(), page, limit)

    async def negative(self, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(ReviewSearchFilter().only_negative(), page, limit)

    async def for_movie(self, movie_id: int, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(ReviewSearchFilter().movie_id(movie_id), page, limit)


__all__ = ["ReviewRequests"]
