"""API – image endpoints."""
from __future__ import annotations

from typing import Any

from kinopoisk_dev.api.base import ResourceGroup
from kinopoisk_dev.application.pagination import DocsPage
from kinopoisk_dev.application.query import ImageSearchFilter
from kinopoisk_dev.kernel.vocabulary import ImageType


class ImageRequests(ResourceGroup):
    endpoint = "image"
    filter_class = ImageSearchFilter

    async def for_movie(
        self,
        movie_id: int,
        image_type: ImageType | str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> DocsPage[dict[str, Any]]:
        filters = ImageSearchFilter().movie_id(movie_id)
        if image_type:
            filters.type(image_type)
        return await self.search(filters, page, limit)

    async def posters(self, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(ImageSearchFilter().only_posters(), page, limit)


__all__ = ["ImageRequests"]
