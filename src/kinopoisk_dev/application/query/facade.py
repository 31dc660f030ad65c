"""Application query – method templates for the search-filter façades.

Façade classes declare simple per-field methods as class attributes::

    class SeasonSearchFilter(SearchFilter):
        number = filter_method("number")
        airing = assign_method("airDate")

which keeps each façade a flat list of field bindings instead of dozens
of hand-written two-line delegations.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any

from kinopoisk_dev.kernel.vocabulary import FilterField, FilterOperator, field_path


def unwrap(value: Any) -> Any:
    """Replace enum members with their wire value; materialise other iterables as lists.

    Strings, bytes and mappings are left alone, so ``unwrap(x for x in genres)``
    yields a list rather than a generator that would be stringified.
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (str, bytes, Mapping)):
        return value
    if isinstance(value, Iterable):
        return [unwrap(v) for v in value]
    return value


def filter_method(
    field: FilterField | str,
    operator: FilterOperator | str = FilterOperator.EQUALS,
    doc: str | None = None,
) -> Callable[..., Any]:
    """Return a ``method(self, value, operator=<operator>)`` bound to *field*."""
    path = field_path(field)

    def method(self: Any, value: Any, operator: FilterOperator | str = operator) -> Any:
        return self.add_filter(path, unwrap(value), operator)

    method.__doc__ = doc or f"Filter by ``{path}``."
    return method


def assign_method(field: FilterField | str, doc: str | None = None) -> Callable[..., Any]:
    """Return a ``method(self, value)`` that writes *field* verbatim."""
    path = field_path(field)

    def method(self: Any, value: Any) -> Any:
        return self.assign(path, unwrap(value))

    method.__doc__ = doc or f"Set ``{path}`` directly."
    return method


__all__ = ["assign_method", "filter_method", "unwrap"]
