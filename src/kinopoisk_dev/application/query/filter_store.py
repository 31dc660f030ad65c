"""Application query – FilterStore, the filter half of the query compiler.

A :class:`FilterStore` is a flat ``str -> value`` map.  Every write goes
through :meth:`FilterStore.add_filter`, which encodes one of three ways:

* ``range`` turns a ``[min, max]`` pair into ``field -> "min-max"``;
* ``include`` / ``exclude`` on a genre or country name path appends
  ``+value`` / ``!value`` entries to a list kept under the bare path;
* anything else writes ``"field.operator" -> value``, last write wins.

The store never raises on input.  A malformed range is dropped, and unknown
operator strings are used verbatim.  The drop is logged at debug level only
once structlog has been configured (see
:class:`~kinopoisk_dev.observability.logging.JsonLoggerFactory`); structlog's
built-in defaults would otherwise print the event to stdout.
"""
from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

import structlog

from kinopoisk_dev.kernel.vocabulary import (
    FilterField,
    FilterOperator,
    field_path,
    supports_include_exclude,
)
from kinopoisk_dev.observability.logging import get_logger

logger = get_logger(__name__)


def format_bound(value: Any) -> str:
    """Render one bound of a range the way the remote API expects it.

    ``True`` renders as ``"1"``; ``False`` and ``None`` as ``""``.  Floats
    with no fractional part drop the ``.0`` (``7.0`` -> ``"7"``).
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def composite_key(path: str, operator: FilterOperator | str) -> str:
    """``("year", FilterOperator.GREATER_THAN)`` -> ``"year.gt"``."""
    op = operator.value if isinstance(operator, FilterOperator) else str(operator)
    return f"{path}.{op}"


class FilterStore:
    """Mutable map of encoded filter parameters."""

    def __init__(self) -> None:
        self._params: dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add_filter(
        self,
        field: FilterField | str,
        value: Any,
        operator: FilterOperator | str = FilterOperator.EQUALS,
    ) -> "FilterStore":
        """Encode *value* for *field* under *operator* and store it."""
        path = field_path(field)
        op = FilterOperator.coerce(operator)

        if op is FilterOperator.RANGE:
            self._add_range(path, value)
            return self

        # Include/exclude only accumulates on the paths that understand it;
        # elsewhere the operator name becomes an ordinary key suffix.
        if op in (FilterOperator.INCLUDE, FilterOperator.EXCLUDE) and supports_include_exclude(path):
            self._accumulate(path, value, op.prefix)
            return self

        self._params[composite_key(path, op)] = value
        return self

    def assign(self, key: FilterField | str, value: Any) -> "FilterStore":
        """Write *value* under the bare *key*, bypassing operator encoding."""
        self._params[field_path(key)] = value
        return self

    def remove(self, key: FilterField | str) -> "FilterStore":
        self._params.pop(field_path(key), None)
        return self

    def clear(self) -> None:
        self._params.clear()

    def _add_range(self, path: str, value: Any) -> None:
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            if structlog.is_configured():
                logger.debug("filter.range.dropped", field=path, value=value)
            return
        low, high = value
        self._params[path] = f"{format_bound(low)}-{format_bound(high)}"

    def _accumulate(self, path: str, value: Any, prefix: str) -> None:
        existing = self._params.get(path)
        entries: list[Any] = list(existing) if isinstance(existing, list) else []
        if isinstance(value, (list, tuple)):
            entries.extend(f"{prefix}{format_bound(item)}" for item in value)
        else:
            entries.append(f"{prefix}{format_bound(value)}")
        self._params[path] = entries

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def params(self) -> dict[str, Any]:
        """Shallow copy of the encoded parameters."""
        return dict(self._params)

    def get(self, key: FilterField | str, default: Any = None) -> Any:
        return self._params.get(field_path(key), default)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (str, Enum)):
            return field_path(key) in self._params
        return False

    def __len__(self) -> int:
        return len(self._params)

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __repr__(self) -> str:
        return f"FilterStore({self._params!r})"


__all__ = ["FilterStore", "composite_key", "format_bound"]
