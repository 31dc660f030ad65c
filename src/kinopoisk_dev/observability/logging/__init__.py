"""Observability – structured logging helpers."""
from kinopoisk_dev.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from kinopoisk_dev.observability.logging.factory import JsonLoggerFactory
from kinopoisk_dev.observability.logging.processors import get_logger, request_context

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
    "request_context",
]
