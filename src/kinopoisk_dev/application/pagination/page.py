"""Application pagination – DocsPage, one page of a ``docs`` listing."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass
class DocsPage(Generic[T]):
    """A page as returned by the catalog's list endpoints.

    ``docs`` holds the raw documents; ``pages`` is the server-reported
    page count.
    """

    docs: list[T]
    total: int
    limit: int
    page: int
    pages: int

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def is_empty(self) -> bool:
        return not self.docs

    def first(self) -> T | None:
        return self.docs[0] if self.docs else None

    def map(self, fn: Callable[[T], Any]) -> "DocsPage[Any]":
        """Return a new :class:`DocsPage` with each document transformed by *fn*."""
        return DocsPage(
            docs=[fn(doc) for doc in self.docs],
            total=self.total,
            limit=self.limit,
            page=self.page,
            pages=self.pages,
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], *, page: int = 1, limit: int = 10) -> "DocsPage[Any]":
        """Build from a response body; missing counters fall back to the request."""
        docs = payload.get("docs") or []
        return cls(
            docs=list(docs),
            total=int(payload.get("total", len(docs))),
            limit=int(payload.get("limit", limit)),
            page=int(payload.get("page", page)),
            pages=int(payload.get("pages", 1 if docs else 0)),
        )


__all__ = ["DocsPage"]
