"""Search filters – CommonFilters, the base shared by the entity façades."""
from __future__ import annotations

from enum import Enum
from typing import Any

from kinopoisk_dev.application.query.builder import FilterBuilder
from kinopoisk_dev.application.query.facade import filter_method
from kinopoisk_dev.kernel.vocabulary import FilterField, FilterOperator


class CommonFilters(FilterBuilder):
    """Name, type, rating and range helpers available on every entity filter."""

    movie_id = filter_method("movieId", doc="Restrict to documents of one movie.")
    name = filter_method(FilterField.NAME)
    en_name = filter_method(FilterField.EN_NAME)

    def type(self, value: str | Enum, operator: FilterOperator | str = FilterOperator.EQUALS) -> "CommonFilters":
        if isinstance(value, Enum):
            value = value.value
        return self.add_filter(FilterField.TYPE, value, operator)

    def search_by_name(self, query: str) -> "CommonFilters":
        return self.add_filter(FilterField.NAME, query, FilterOperator.REGEX)

    def search_by_en_name(self, query: str) -> "CommonFilters":
        return self.add_filter(FilterField.EN_NAME, query, FilterOperator.REGEX)

    def search_by_description(self, query: str) -> "CommonFilters":
        return self.add_filter(FilterField.DESCRIPTION, query, FilterOperator.REGEX)

    def with_min_rating(self, min_rating: float, field: str = "kp") -> "CommonFilters":
        return self.add_filter(f"rating.{field}", min_rating, FilterOperator.GREATER_THAN_EQUALS)

    def with_max_rating(self, max_rating: float, field: str = "kp") -> "CommonFilters":
        return self.add_filter(f"rating.{field}", max_rating, FilterOperator.LESS_THAN_EQUALS)

    def with_rating_between(self, min_rating: float, max_rating: float, field: str = "kp") -> "CommonFilters":
        return self._add_range_filter(f"rating.{field}", min_rating, max_rating)

    def season_range(self, from_season: int, to_season: int) -> "CommonFilters":
        return self._add_range_filter("number", from_season, to_season)

    def age_range(self, min_age: int, max_age: int) -> "CommonFilters":
        return self._add_range_filter("age", min_age, max_age)

    def _add_range_filter(self, field: str, low: Any, high: Any) -> "CommonFilters":
        return self.add_filter(field, [low, high], FilterOperator.RANGE)


__all__ = ["CommonFilters"]
