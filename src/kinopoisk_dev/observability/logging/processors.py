"""Observability – get_logger and per-request log context."""
from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger named *name*, with *initial_values* bound."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


@contextlib.contextmanager
def request_context(method: str, path: str, **values: Any) -> Iterator[None]:
    """Tag every event logged inside the block with the request being made.

    Relies on ``structlog.contextvars.merge_contextvars`` in the processor
    chain (installed by :class:`JsonLoggerFactory`), so retry warnings and
    error events carry ``http_method`` / ``http_path`` without passing them
    around.
    """
    with structlog.contextvars.bound_contextvars(http_method=method, http_path=path, **values):
        yield


__all__ = ["get_logger", "request_context"]
