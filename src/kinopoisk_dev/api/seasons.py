"""API – season endpoints."""
from __future__ import annotations

from typing import Any

from kinopoisk_dev.api.base import ResourceGroup
from kinopoisk_dev.application.pagination import DocsPage
from kinopoisk_dev.application.query import SeasonSearchFilter


class SeasonRequests(ResourceGroup):
    endpoint = "season"
    filter_class = SeasonSearchFilter

    async def get_by_id(self, season_id: int) -> dict[str, Any]:
        return await self._get_one(f"season/{int(season_id)}")

    async def for_movie(self, movie_id: int, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(SeasonSearchFilter().movie_id(movie_id), page, limit)

    async def by_number(self, movie_id: int, number: int) -> dict[str, Any] | None:
        return await self.first(SeasonSearchFilter().movie_id(movie_id).number(number))


__all__ = ["SeasonRequests"]
