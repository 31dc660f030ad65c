"""API – person endpoints."""
from __future__ import annotations

import random
from typing import Any

from kinopoisk_dev.api.base import ResourceGroup
from kinopoisk_dev.application.pagination import DocsPage, PageRequest
from kinopoisk_dev.application.query import PersonSearchFilter
from kinopoisk_dev.kernel.errors import NotFoundError
from kinopoisk_dev.kernel.vocabulary import PersonProfession, PersonSex, SortDirection, SortField

# Sortable attributes of person documents.
PERSON_SORT_FIELDS = (SortField.ID, SortField.NAME, SortField.EN_NAME, SortField.CREATED_AT, SortField.UPDATED_AT)


class PersonRequests(ResourceGroup):
    endpoint = "person"
    filter_class = PersonSearchFilter

    async def get_by_id(self, person_id: int) -> dict[str, Any]:
        return await self._get_one(f"person/{int(person_id)}")

    async def random(
        self, filters: PersonSearchFilter | None = None, *, rng: random.Random | None = None
    ) -> dict[str, Any]:
        """A person matching *filters*, picked by a randomly ordered one-item search."""
        rng = rng or random.Random()
        filters = filters if filters is not None else PersonSearchFilter()
        for field in rng.sample(PERSON_SORT_FIELDS, rng.randint(1, len(PERSON_SORT_FIELDS) - 1)):
            filters.sort_by(field, rng.choice(SortDirection.all()))
        person = await self.first(filters)
        if person is None:
            raise NotFoundError("No person matches the given filters", endpoint="person")
        return person

    async def search_by_name(self, name: str, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        request = PageRequest(page=page, limit=limit)
        payload = await self._get_one("person/search", {"query": name, **request.to_params()})
        return DocsPage.from_payload(payload, page=page, limit=limit)

    async def awards(
        self, filters: PersonSearchFilter | None = None, page: int = 1, limit: int = 10
    ) -> DocsPage[dict[str, Any]]:
        return await self._get_page("person/awards", filters, page, limit)

    async def by_profession(
        self, profession: PersonProfession | str, page: int = 1, limit: int = 10
    ) -> DocsPage[dict[str, Any]]:
        return await self.search(PersonSearchFilter().profession(profession), page, limit)

    async def actors(self, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.by_profession(PersonProfession.ACTOR, page, limit)

    async def by_sex(self, sex: PersonSex | str, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(PersonSearchFilter().sex(sex), page, limit)

    async def by_birth_year(
        self, from_year: int, to_year: int | None = None, page: int = 1, limit: int = 10
    ) -> DocsPage[dict[str, Any]]:
        return await self.search(PersonSearchFilter().birth_year(from_year, to_year), page, limit)

    async def by_death_year(self, year: int, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        return await self.search(PersonSearchFilter().death_year(year), page, limit)


__all__ = ["PERSON_SORT_FIELDS", "PersonRequests"]
