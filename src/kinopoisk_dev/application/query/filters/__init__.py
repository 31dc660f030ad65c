"""Search filters – per-entity façades over FilterBuilder."""
from kinopoisk_dev.application.query.filters.common import CommonFilters
from kinopoisk_dev.application.query.filters.image import ImageSearchFilter
from kinopoisk_dev.application.query.filters.keyword import KeywordSearchFilter
from kinopoisk_dev.application.query.filters.movie import MovieFilter, MovieSearchFilter
from kinopoisk_dev.application.query.filters.person import PersonSearchFilter
from kinopoisk_dev.application.query.filters.review import ReviewSearchFilter
from kinopoisk_dev.application.query.filters.season import SeasonSearchFilter
from kinopoisk_dev.application.query.filters.studio import StudioSearchFilter

__all__ = [
    "CommonFilters",
    "ImageSearchFilter",
    "KeywordSearchFilter",
    "MovieFilter",
    "MovieSearchFilter",
    "PersonSearchFilter",
    "ReviewSearchFilter",
    "SeasonSearchFilter",
    "StudioSearchFilter",
]
