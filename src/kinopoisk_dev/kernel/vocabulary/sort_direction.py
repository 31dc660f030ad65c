"""Vocabulary – SortDirection."""
from __future__ import annotations

from enum import Enum


class SortDirection(str, Enum):
    """Direction of a single sort criterion."""

    ASC = "asc"
    DESC = "desc"

    def reverse(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC

    @property
    def is_ascending(self) -> bool:
        return self is SortDirection.ASC

    @property
    def is_descending(self) -> bool:
        return self is SortDirection.DESC

    @property
    def symbol(self) -> str:
        return "↑" if self is SortDirection.ASC else "↓"

    @property
    def description(self) -> str:
        return "Ascending" if self is SortDirection.ASC else "Descending"

    @property
    def short_description(self) -> str:
        return "A→Z" if self is SortDirection.ASC else "Z→A"

    @classmethod
    def from_string(cls, value: str, default: "SortDirection | None" = None) -> "SortDirection":
        """Lenient parse: unknown strings fall back to *default*, then ASC."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return default or cls.ASC

    @classmethod
    def all(cls) -> list["SortDirection"]:
        return [cls.ASC, cls.DESC]


__all__ = ["SortDirection"]
