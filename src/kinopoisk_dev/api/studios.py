"""API – studio endpoints."""
from __future__ import annotations

from typing import Any

from kinopoisk_dev.api.base import ResourceGroup
from kinopoisk_dev.application.pagination import DocsPage
from kinopoisk_dev.application.query import StudioSearchFilter
from kinopoisk_dev.kernel.errors import NotFoundError
from kinopoisk_dev.kernel.vocabulary import StudioType


class StudioRequests(ResourceGroup):
    endpoint = "studio"
    filter_class = StudioSearchFilter

    async def get_by_id(self, studio_id: int) -> dict[str, Any]:
        """The studio endpoint has no ``/{id}`` route; look it up by ``id``."""
        studio = await self.first(StudioSearchFilter().id(int(studio_id)))
        if studio is None:
            raise NotFoundError(f"Studio {studio_id} not found", endpoint="studio")
        return studio

    async def random(self, filters: StudioSearchFilter | None = None) -> dict[str, Any]:
        studio = await self.first(filters)
        if studio is None:
            raise NotFoundError("No studio matches the given filters", endpoint="studio")
        return studio

    async def by_type(self, studio_type: StudioType | str, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(StudioSearchFilter().studio_type(studio_type), page, limit)

    async def production(self, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.by_type(StudioType.PRODUCTION, page, limit)

    async def dubbing(self, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.by_type(StudioType.DUBBING_STUDIO, page, limit)

    async def by_title(self, title: str, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(StudioSearchFilter().title(title), page, limit)

    async def for_movie(self, movie_id: int, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(StudioSearchFilter().movie_id(movie_id), page, limit)


__all__ = ["StudioRequests"]
