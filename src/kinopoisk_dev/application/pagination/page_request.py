"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses

from kinopoisk_dev.kernel.errors import ValidationError

MAX_LIMIT = 250


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Validated ``page`` / ``limit`` pair for list endpoints."""
    page: int = 1
    limit: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError.for_field("page", "must be >= 1", self.page)
        if self.limit < 1 or self.limit > MAX_LIMIT:
            raise ValidationError.for_field("limit", f"must be between 1 and {MAX_LIMIT}", self.limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def to_params(self) -> dict[str, int]:
        return {"page": self.page, "limit": self.limit}


__all__ = ["MAX_LIMIT", "PageRequest"]
