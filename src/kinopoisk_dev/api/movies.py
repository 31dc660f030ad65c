"""API – movie endpoints."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from kinopoisk_dev.api.base import ResourceGroup
from kinopoisk_dev.application.pagination import DocsPage, PageRequest
from kinopoisk_dev.application.query import MovieSearchFilter
from kinopoisk_dev.kernel.errors import ValidationError
from kinopoisk_dev.kernel.vocabulary import FilterField

POSSIBLE_VALUE_FIELDS = (
    FilterField.GENRES.value,
    FilterField.COUNTRIES.value,
    FilterField.TYPE.value,
    FilterField.TYPE_NUMBER.value,
    FilterField.STATUS.value,
)


class MovieRequests(ResourceGroup):
    endpoint = "movie"
    filter_class = MovieSearchFilter

    async def get_by_id(self, movie_id: int) -> dict[str, Any]:
        return await self._get_one(f"movie/{int(movie_id)}")

    async def random(self, filters: MovieSearchFilter | None = None) -> dict[str, Any]:
        params = filters.compile() if filters is not None else {}
        return await self._get_one("movie/random", params)

    async def possible_values_by_field(self, field: FilterField | str) -> list[dict[str, Any]]:
        """Distinct values of a classifier field (genres, countries, types, statuses)."""
        name = field.value if isinstance(field, FilterField) else field
        if name not in POSSIBLE_VALUE_FIELDS:
            raise ValidationError.for_field(
                "field", f"only {', '.join(POSSIBLE_VALUE_FIELDS)} are supported", name
            )
        payload = await self._http.get("movie/possible-values-by-field", {"field": name}, api_version="v1")
        return list(payload or [])

    async def awards(
        self, filters: MovieSearchFilter | None = None, page: int = 1, limit: int = 10
    ) -> DocsPage[dict[str, Any]]:
        return await self._get_page("movie/awards", filters, page, limit)

    async def search_by_name(self, query: str, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        """Full-text title search."""
        request = PageRequest(page=page, limit=limit)
        payload = await self._get_one("movie/search", {"query": query, **request.to_params()})
        return DocsPage.from_payload(payload, page=page, limit=limit)

    async def latest(self, year: int | None = None, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        filters = MovieSearchFilter()
        if year is not None:
            filters.year(year)
        return await self.search(filters, page, limit)

    async def by_genre(self, genres: str | Iterable[str], page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        filters = MovieSearchFilter().with_included_genres(genres).sort_by_kinopoisk_rating()
        return await self.search(filters, page, limit)

    async def by_country(
        self, countries: str | Iterable[str], page: int = 1, limit: int = 10
    ) -> DocsPage[dict[str, Any]]:
        filters = MovieSearchFilter().with_included_countries(countries).sort_by_kinopoisk_rating()
        return await self.search(filters, page, limit)

    async def by_year_range(
        self, from_year: int, to_year: int, page: int = 1, limit: int = 10
    ) -> DocsPage[dict[str, Any]]:
        filters = MovieSearchFilter().with_year_between(from_year, to_year).sort_by_year()
        return await self.search(filters, page, limit)


__all__ = ["POSSIBLE_VALUE_FIELDS", "MovieRequests"]
