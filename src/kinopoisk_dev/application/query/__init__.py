"""Application query – filter/sort compiler and search-filter façades."""
from kinopoisk_dev.application.query.builder import SORT_KEY, FilterBuilder
from kinopoisk_dev.application.query.facade import assign_method, filter_method, unwrap
from kinopoisk_dev.application.query.filter_store import FilterStore, composite_key, format_bound
from kinopoisk_dev.application.query.filters import (
    CommonFilters,
    ImageSearchFilter,
    KeywordSearchFilter,
    MovieFilter,
    MovieSearchFilter,
    PersonSearchFilter,
    ReviewSearchFilter,
    SeasonSearchFilter,
    StudioSearchFilter,
)
from kinopoisk_dev.application.query.sort import SortCriterion, SortList

__all__ = [
    "SORT_KEY",
    "CommonFilters",
    "FilterBuilder",
    "FilterStore",
    "ImageSearchFilter",
    "KeywordSearchFilter",
    "MovieFilter",
    "MovieSearchFilter",
    "PersonSearchFilter",
    "ReviewSearchFilter",
    "SeasonSearchFilter",
    "SortCriterion",
    "SortList",
    "StudioSearchFilter",
    "assign_method",
    "composite_key",
    "filter_method",
    "format_bound",
    "unwrap",
]
