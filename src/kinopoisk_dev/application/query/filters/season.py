"""Search filters – SeasonSearchFilter."""
from __future__ import annotations

from kinopoisk_dev.application.query.facade import filter_method
from kinopoisk_dev.application.query.filters.common import CommonFilters
from kinopoisk_dev.application.query.filters.movie import MovieFilter


class SeasonSearchFilter(CommonFilters, MovieFilter):
    """Filters for ``/season`` searches."""

    number = filter_method("number", doc="Season number.")
    episodes_count = filter_method("episodesCount")


__all__ = ["SeasonSearchFilter"]
