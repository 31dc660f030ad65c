"""Search filters – KeywordSearchFilter.

The keyword endpoint takes bare list-valued parameters (``id``,
``title``, ``movies.id``, ``createdAt``, ...) rather than
``field.operator`` keys, so this façade writes through
:meth:`FilterBuilder.assign`.  Sorting uses the shared sort list.
"""
from __future__ import annotations

import datetime
from collections.abc import Iterable
from typing import Any

from kinopoisk_dev.application.query.builder import FilterBuilder
from kinopoisk_dev.kernel.vocabulary import FilterField, SortDirection, SortField, field_path

DATE_FORMAT = "%d.%m.%Y"


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _date_window(days: int, today: datetime.date | None) -> str:
    end = today or datetime.date.today()
    start = end - datetime.timedelta(days=days)
    return f"{start.strftime(DATE_FORMAT)}-{end.strftime(DATE_FORMAT)}"


class KeywordSearchFilter(FilterBuilder):
    """Filters for ``/keyword`` searches."""

    def id(self, value: int | str | Iterable[int | str]) -> "KeywordSearchFilter":
        return self.assign("id", _as_list(value))

    def title(self, value: str | Iterable[str]) -> "KeywordSearchFilter":
        return self.assign("title", _as_list(value))

    def movie_id(self, value: int | str | Iterable[int | str]) -> "KeywordSearchFilter":
        return self.assign("movies.id", _as_list(value))

    def updated_at(self, date: str) -> "KeywordSearchFilter":
        """``dd.mm.yyyy`` or a ``dd.mm.yyyy-dd.mm.yyyy`` window."""
        return self.assign("updatedAt", [date])

    def created_at(self, date: str) -> "KeywordSearchFilter":
        return self.assign("createdAt", [date])

    def sort_by_id(self, direction: SortDirection | str = SortDirection.ASC) -> "KeywordSearchFilter":
        return self.sort_by(SortField.ID, direction)

    def sort_by_title(self, direction: SortDirection | str = SortDirection.ASC) -> "KeywordSearchFilter":
        return self.sort_by(SortField.TITLE, direction)

    def sort_by_created_at(self, direction: SortDirection | str = SortDirection.DESC) -> "KeywordSearchFilter":
        return self.sort_by(SortField.CREATED_AT, direction)

    def sort_by_updated_at(self, direction: SortDirection | str = SortDirection.DESC) -> "KeywordSearchFilter":
        return self.sort_by(SortField.UPDATED_AT, direction)

    def not_null_fields(self, fields: Iterable[FilterField | str]) -> "KeywordSearchFilter":
        return self.assign("notNullFields", [field_path(f) for f in fields])

    def search(self, text: str) -> "KeywordSearchFilter":
        return self.title(text)

    def only_popular(self) -> "KeywordSearchFilter":
        """Keywords attached to at least one movie, newest first."""
        return self.not_null_fields(["movies.id"]).sort_by_created_at(SortDirection.DESC)

    def recently_created(self, days: int = 30, *, today: datetime.date | None = None) -> "KeywordSearchFilter":
        return self.created_at(_date_window(days, today)).sort_by_created_at(SortDirection.DESC)

    def recently_updated(self, days: int = 7, *, today: datetime.date | None = None) -> "KeywordSearchFilter":
        return self.updated_at(_date_window(days, today)).sort_by_updated_at(SortDirection.DESC)


__all__ = ["KeywordSearchFilter"]
