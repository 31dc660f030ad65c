"""API – curated list endpoints."""
from __future__ import annotations

import re
from typing import Any

from kinopoisk_dev.api.base import ResourceGroup
from kinopoisk_dev.application.pagination import DocsPage
from kinopoisk_dev.application.query import FilterBuilder
from kinopoisk_dev.kernel.errors import ValidationError
from kinopoisk_dev.kernel.vocabulary import ListCategory

_SLUG_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


class ListRequests(ResourceGroup):
    endpoint = "list"

    async def get_by_slug(self, slug: str) -> dict[str, Any]:
        if not _SLUG_RE.match(slug):
            raise ValidationError.for_field("slug", "letters, digits, '-' and '_' only", slug)
        return await self._get_one(f"list/{slug}")

    async def by_category(self, category: ListCategory | str, page: int = 1, limit: int = 10) -> DocsPage[dict[str, Any]]:
        value = category.value if isinstance(category, ListCategory) else category
        return await self.search(FilterBuilder().assign("category", value), page, limit)


__all__ = ["ListRequests"]
