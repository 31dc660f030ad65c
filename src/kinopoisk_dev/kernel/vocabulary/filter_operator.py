"""Vocabulary – FilterOperator.

Operators fall into four groups:

* comparison (``eq``, ``ne``, ``gt``, ``gte``, ``lt``, ``lte``)
* membership (``in``, ``nin``, ``all``) and pattern match (``regex``)
* ``range``: collapses a ``[min, max]`` pair into ``"min-max"``
* ``include`` / ``exclude``: accumulate ``+value`` / ``!value`` entries
"""
from __future__ import annotations

from enum import Enum

from kinopoisk_dev.kernel.vocabulary.field_type import FieldType


class FilterOperator(str, Enum):
    EQUALS = "eq"
    NOT_EQUALS = "ne"
    GREATER_THAN = "gt"
    GREATER_THAN_EQUALS = "gte"
    LESS_THAN = "lt"
    LESS_THAN_EQUALS = "lte"

    IN = "in"
    NOT_IN = "nin"
    ALL = "all"

    REGEX = "regex"

    RANGE = "range"
    INCLUDE = "include"
    EXCLUDE = "exclude"

    @property
    def prefix(self) -> str | None:
        """Value prefix used by the include/exclude accumulator."""
        if self is FilterOperator.INCLUDE:
            return "+"
        if self is FilterOperator.EXCLUDE:
            return "!"
        return None

    @property
    def is_range(self) -> bool:
        return self is FilterOperator.RANGE

    @property
    def is_include_exclude(self) -> bool:
        return self in (FilterOperator.INCLUDE, FilterOperator.EXCLUDE)

    @classmethod
    def default_for_field_type(cls, field_type: FieldType | str) -> "FilterOperator":
        """Recommended operator for a field classification.

        Include/exclude-capable fields default to ``in``, free text to
        ``regex``, everything else (ranges included) to ``eq``.
        """
        try:
            kind = FieldType(field_type)
        except ValueError:
            return cls.EQUALS
        match kind:
            case FieldType.INCLUDE_EXCLUDE:
                return cls.IN
            case FieldType.TEXT:
                return cls.REGEX
            case _:
                return cls.EQUALS

    @classmethod
    def coerce(cls, operator: "FilterOperator | str") -> "FilterOperator | str":
        """Map a raw string onto a member; unknown strings pass through verbatim."""
        if isinstance(operator, cls):
            return operator
        try:
            return cls(operator)
        except ValueError:
            return operator


__all__ = ["FilterOperator"]
