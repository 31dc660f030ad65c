"""Kernel – framework-agnostic building blocks: errors and vocabulary."""

from kinopoisk_dev.kernel.errors import (
    ForbiddenError,
    KinopoiskApiError,
    KinopoiskError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from kinopoisk_dev.kernel.vocabulary import (
    FieldType,
    FilterField,
    FilterOperator,
    SortDirection,
    SortField,
)

__all__ = [
    "FieldType",
    "FilterField",
    "FilterOperator",
    "ForbiddenError",
    "KinopoiskApiError",
    "KinopoiskError",
    "NotFoundError",
    "SortDirection",
    "SortField",
    "UnauthorizedError",
    "ValidationError",
]
