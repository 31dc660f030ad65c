"""Application query – SortCriterion and SortList.

A :class:`SortList` holds at most one criterion per :class:`SortField`, in
the order the fields were (last) added.  It is backed by a single
insertion-ordered dict, so the ordered sequence and the per-field lookup
can never disagree.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from kinopoisk_dev.kernel.vocabulary import SortDirection, SortField


def _as_sort_field(field: SortField | str) -> SortField:
    return field if isinstance(field, SortField) else SortField(field)


@dataclasses.dataclass(frozen=True, slots=True)
class SortCriterion:
    """One ``(field, direction)`` ordering instruction."""

    field: SortField
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def create(cls, field: SortField | str, direction: SortDirection | str | None = None) -> "SortCriterion":
        """Build a criterion, falling back to the field's default direction."""
        sort_field = _as_sort_field(field)
        if isinstance(direction, str):
            direction = SortDirection.from_string(direction, sort_field.default_direction)
        return cls(sort_field, direction or sort_field.default_direction)

    @classmethod
    def ascending(cls, field: SortField | str) -> "SortCriterion":
        return cls(_as_sort_field(field), SortDirection.ASC)

    @classmethod
    def descending(cls, field: SortField | str) -> "SortCriterion":
        return cls(_as_sort_field(field), SortDirection.DESC)

    @classmethod
    def from_strings(cls, field: str, direction: str | None = None) -> "SortCriterion | None":
        """Parse raw strings; ``None`` when *field* is not a known sort field."""
        try:
            sort_field = SortField(field.strip())
        except ValueError:
            return None
        return cls(sort_field, SortDirection.from_string(direction or "", sort_field.default_direction))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SortCriterion | None":
        """Inverse of :meth:`to_dict`; ``None`` when ``field`` is missing or unknown."""
        field = data.get("field")
        if not isinstance(field, str):
            return None
        direction = data.get("direction")
        return cls.from_strings(field, direction if isinstance(direction, str) else None)

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field.value, "direction": self.direction.value}

    def to_api_string(self) -> str:
        """``rating.kp`` ascending -> ``"rating.kp"``; descending -> ``"-rating.kp"``."""
        if self.direction is SortDirection.DESC:
            return f"-{self.field.value}"
        return self.field.value

    def short_string(self) -> str:
        return f"{self.field.value}{self.direction.symbol}"

    def reversed(self) -> "SortCriterion":
        return dataclasses.replace(self, direction=self.direction.reverse())

    def has_same_field(self, other: "SortCriterion") -> bool:
        return self.field is other.field

    @property
    def is_rating_sort(self) -> bool:
        return self.field.is_rating_field

    @property
    def is_votes_sort(self) -> bool:
        return self.field.is_votes_field

    @property
    def is_date_sort(self) -> bool:
        return self.field.is_date_field

    def __str__(self) -> str:
        return self.to_api_string()


class SortList:
    """Ordered, field-unique collection of :class:`SortCriterion`."""

    def __init__(self, criteria: Iterable[SortCriterion] = ()) -> None:
        self._criteria: dict[SortField, SortCriterion] = {}
        for criterion in criteria:
            self.add_criteria(criterion)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_criteria(self, criterion: SortCriterion) -> "SortList":
        """Store *criterion*, moving its field to the end of the order."""
        self._criteria.pop(criterion.field, None)
        self._criteria[criterion.field] = criterion
        return self

    def sort_by(self, field: SortField | str, direction: SortDirection | str | None = None) -> "SortList":
        """Append (or move to the end) a criterion for *field*.

        Without an explicit *direction* the field's default direction is used.
        """
        return self.add_criteria(SortCriterion.create(field, direction))

    def toggle_sort(self, field: SortField | str) -> "SortList":
        """Flip *field*'s direction in place; add it with its default if absent."""
        sort_field = _as_sort_field(field)
        current = self._criteria.get(sort_field)
        if current is None:
            return self.sort_by(sort_field)
        # Re-assigning an existing key keeps its position in the dict.
        self._criteria[sort_field] = current.reversed()
        return self

    def remove_sort_by_field(self, field: SortField | str) -> "SortList":
        self._criteria.pop(_as_sort_field(field), None)
        return self

    def clear_sort(self) -> "SortList":
        self._criteria.clear()
        return self

    def set_sort_criteria(self, criteria: Iterable[SortCriterion]) -> "SortList":
        """Replace every criterion with *criteria* (later duplicates win)."""
        self._criteria.clear()
        for criterion in criteria:
            self.add_criteria(criterion)
        return self

    def add_multiple_sort(self, items: Iterable[str | Mapping[str, Any] | SortCriterion]) -> "SortList":
        """Add several criteria at once.

        Each item is a :class:`SortCriterion`, a ``{"field", "direction"}``
        mapping, or a ``"field"`` / ``"field:direction"`` string.  Items
        naming unknown fields are skipped.
        """
        for item in items:
            criterion: SortCriterion | None
            if isinstance(item, SortCriterion):
                criterion = item
            elif isinstance(item, Mapping):
                criterion = SortCriterion.from_dict(item)
            else:
                name, _, direction = str(item).partition(":")
                criterion = SortCriterion.from_strings(name, direction or None)
            if criterion is not None:
                self.add_criteria(criterion)
        return self

    def import_criteria(self, data: Iterable[Mapping[str, Any]]) -> "SortList":
        """Replace the list with criteria parsed from :meth:`export_criteria` output."""
        self._criteria.clear()
        return self.add_multiple_sort(data)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def criteria(self) -> tuple[SortCriterion, ...]:
        return tuple(self._criteria.values())

    def has_sort_by(self, field: SortField | str) -> bool:
        try:
            return _as_sort_field(field) in self._criteria
        except ValueError:
            return False

    def get_sort_direction(self, field: SortField | str) -> SortDirection | None:
        try:
            criterion = self._criteria.get(_as_sort_field(field))
        except ValueError:
            return None
        return criterion.direction if criterion else None

    def sort_count(self) -> int:
        return len(self._criteria)

    def has_any_sorting(self) -> bool:
        return bool(self._criteria)

    def first(self) -> SortCriterion | None:
        return next(iter(self._criteria.values()), None)

    def last(self) -> SortCriterion | None:
        return next(reversed(self._criteria.values()), None)

    def get_sort_string(self) -> str | None:
        """Comma-joined API tokens, or ``None`` when nothing is sorted."""
        if not self._criteria:
            return None
        return ",".join(c.to_api_string() for c in self._criteria.values())

    def export_criteria(self) -> list[dict[str, str]]:
        return [c.to_dict() for c in self._criteria.values()]

    def __len__(self) -> int:
        return len(self._criteria)

    def __iter__(self) -> Iterator[SortCriterion]:
        return iter(self._criteria.values())

    def __contains__(self, field: object) -> bool:
        return isinstance(field, (SortField, str)) and self.has_sort_by(field)

    def __repr__(self) -> str:
        return f"SortList({self.get_sort_string() or ''!r})"


__all__ = ["SortCriterion", "SortList"]
