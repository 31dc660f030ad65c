"""
kinopoisk_dev – async client and query compiler for the Kinopoisk.dev API.

Import path convention::

    from kinopoisk_dev.api import Kinopoisk
    from kinopoisk_dev.application.query import MovieSearchFilter, FilterBuilder
    from kinopoisk_dev.kernel.vocabulary import FilterField, FilterOperator, SortField
    from kinopoisk_dev.kernel.errors import KinopoiskApiError, ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
