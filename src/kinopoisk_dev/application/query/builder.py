"""Application query – FilterBuilder, the compile-to-wire-map aggregate."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from kinopoisk_dev.application.query.filter_store import FilterStore
from kinopoisk_dev.application.query.sort import SortCriterion, SortList
from kinopoisk_dev.kernel.vocabulary import (
    FilterField,
    FilterOperator,
    SortDirection,
    SortField,
    field_path,
)

SORT_KEY = "sort"


class FilterBuilder:
    """Owns one :class:`FilterStore` and one :class:`SortList`.

    Every mutator returns ``self`` so calls chain.  :meth:`compile` turns
    the current state into the flat parameter map sent to the API.

    Example::

        params = (
            FilterBuilder()
            .add_filter("year", [2020, 2024], FilterOperator.RANGE)
            .add_filter("genres.name", ["драма"], FilterOperator.INCLUDE)
            .sort_by(SortField.RATING_KP)
            .compile()
        )
        # {"year": "2020-2024", "genres.name": ["+драма"], "sort": "-rating.kp"}
    """

    def __init__(self) -> None:
        self._filters = FilterStore()
        self._sort = SortList()

    @property
    def filters(self) -> FilterStore:
        return self._filters

    @property
    def sort(self) -> SortList:
        return self._sort

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def add_filter(
        self,
        field: FilterField | str,
        value: Any,
        operator: FilterOperator | str = FilterOperator.EQUALS,
    ) -> "FilterBuilder":
        self._filters.add_filter(field, value, operator)
        return self

    def assign(self, key: FilterField | str, value: Any) -> "FilterBuilder":
        self._filters.assign(key, value)
        return self

    def not_null_fields(self, fields: Iterable[FilterField | str]) -> "FilterBuilder":
        """Require each of *fields* to be present (``field.ne`` null)."""
        for field in fields:
            self._filters.add_filter(field, None, FilterOperator.NOT_EQUALS)
        return self

    def select_fields(self, fields: Iterable[FilterField | str]) -> "FilterBuilder":
        """Limit the response documents to *fields*."""
        return self.assign("selectFields", [field_path(f) for f in fields])

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def sort_by(self, field: SortField | str, direction: SortDirection | str | None = None) -> "FilterBuilder":
        self._sort.sort_by(field, direction)
        return self

    def add_sort_criteria(self, criterion: SortCriterion) -> "FilterBuilder":
        self._sort.add_criteria(criterion)
        return self

    def add_multiple_sort(self, items: Iterable[str | Mapping[str, Any] | SortCriterion]) -> "FilterBuilder":
        self._sort.add_multiple_sort(items)
        return self

    def set_sort_criteria(self, criteria: Iterable[SortCriterion]) -> "FilterBuilder":
        self._sort.set_sort_criteria(criteria)
        return self

    def toggle_sort(self, field: SortField | str) -> "FilterBuilder":
        self._sort.toggle_sort(field)
        return self

    def remove_sort_by_field(self, field: SortField | str) -> "FilterBuilder":
        self._sort.remove_sort_by_field(field)
        return self

    def clear_sort(self) -> "FilterBuilder":
        self._sort.clear_sort()
        return self

    def sort_by_asc(self, field: SortField | str) -> "FilterBuilder":
        return self.sort_by(field, SortDirection.ASC)

    def sort_by_desc(self, field: SortField | str) -> "FilterBuilder":
        return self.sort_by(field, SortDirection.DESC)

    def sort_by_kinopoisk_rating(self, direction: SortDirection | str = SortDirection.DESC) -> "FilterBuilder":
        return self.sort_by(SortField.RATING_KP, direction)

    def sort_by_imdb_rating(self, direction: SortDirection | str = SortDirection.DESC) -> "FilterBuilder":
        return self.sort_by(SortField.RATING_IMDB, direction)

    def sort_by_year(self, direction: SortDirection | str = SortDirection.DESC) -> "FilterBuilder":
        return self.sort_by(SortField.YEAR, direction)

    def sort_by_year_old_first(self) -> "FilterBuilder":
        return self.sort_by(SortField.YEAR, SortDirection.ASC)

    def sort_by_name(self, direction: SortDirection | str = SortDirection.ASC) -> "FilterBuilder":
        return self.sort_by(SortField.NAME, direction)

    def sort_by_popularity(self) -> "FilterBuilder":
        return self.sort_by(SortField.VOTES_KP, SortDirection.DESC)

    def sort_by_created(self, direction: SortDirection | str = SortDirection.DESC) -> "FilterBuilder":
        return self.sort_by(SortField.CREATED_AT, direction)

    def sort_by_updated(self, direction: SortDirection | str = SortDirection.DESC) -> "FilterBuilder":
        return self.sort_by(SortField.UPDATED_AT, direction)

    def sort_by_best(self) -> "FilterBuilder":
        """Highest Kinopoisk rating first, newest first among equals."""
        return self.sort_by(SortField.RATING_KP, SortDirection.DESC).sort_by(SortField.YEAR, SortDirection.DESC)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def compile(self) -> dict[str, Any]:
        """Return the wire map: filter params plus ``sort`` when any is set."""
        params = self._filters.params
        sort = self._sort.get_sort_string()
        if sort is not None:
            params[SORT_KEY] = sort
        return params

    def reset(self) -> "FilterBuilder":
        self._filters.clear()
        self._sort.clear_sort()
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.compile()!r})"


__all__ = ["SORT_KEY", "FilterBuilder"]
