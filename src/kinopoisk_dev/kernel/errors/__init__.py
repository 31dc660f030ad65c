"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    KinopoiskError
    ├── ValidationError          (validation.py)
    └── KinopoiskApiError        (api.py)
        ├── UnauthorizedError
        ├── ForbiddenError
        ├── NotFoundError
        ├── RequestTimeoutError
        ├── TransportError
        └── ResponseParseError

Configuration errors live in :mod:`kinopoisk_dev.config.validation`.
"""

from kinopoisk_dev.kernel.errors.api import (
    ForbiddenError,
    KinopoiskApiError,
    NotFoundError,
    RequestTimeoutError,
    ResponseParseError,
    TransportError,
    UnauthorizedError,
)
from kinopoisk_dev.kernel.errors.base import KinopoiskError
from kinopoisk_dev.kernel.errors.validation import ValidationError

__all__ = [
    "ForbiddenError",
    "KinopoiskApiError",
    "KinopoiskError",
    "NotFoundError",
    "RequestTimeoutError",
    "ResponseParseError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
]
