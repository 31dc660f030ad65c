"""Application – query compilation and pagination (transport-agnostic)."""
from kinopoisk_dev.application.pagination import MAX_LIMIT, DocsPage, PageRequest
from kinopoisk_dev.application.query import (
    FilterBuilder,
    FilterStore,
    ImageSearchFilter,
    KeywordSearchFilter,
    MovieSearchFilter,
    PersonSearchFilter,
    ReviewSearchFilter,
    SeasonSearchFilter,
    SortCriterion,
    SortList,
    StudioSearchFilter,
)

__all__ = [
    "MAX_LIMIT",
    "DocsPage",
    "FilterBuilder",
    "FilterStore",
    "ImageSearchFilter",
    "KeywordSearchFilter",
    "MovieSearchFilter",
    "PageRequest",
    "PersonSearchFilter",
    "ReviewSearchFilter",
    "SeasonSearchFilter",
    "SortCriterion",
    "SortList",
    "StudioSearchFilter",
]
