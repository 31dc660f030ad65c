"""Search filters – ReviewSearchFilter."""
from __future__ import annotations

from kinopoisk_dev.application.query.facade import filter_method
from kinopoisk_dev.application.query.filters.common import CommonFilters
from kinopoisk_dev.application.query.filters.movie import MovieFilter
from kinopoisk_dev.kernel.vocabulary import FilterOperator, ReviewType


class ReviewSearchFilter(CommonFilters, MovieFilter):
    """Filters for ``/review`` searches.  Text fields match by regex."""

    author = filter_method("author", FilterOperator.REGEX)
    review = filter_method("review", FilterOperator.REGEX)
    title = filter_method("title", FilterOperator.REGEX)

    def only_positive(self) -> "ReviewSearchFilter":
        return self.type(ReviewType.POSITIVE)

    def only_negative(self) -> "ReviewSearchFilter":
        return self.type(ReviewType.NEGATIVE)

    def only_neutral(self) -> "ReviewSearchFilter":
        return self.type(ReviewType.NEUTRAL)


__all__ = ["ReviewSearchFilter"]
