"""Observability – SensitiveFieldsFilter, redaction of credentials in log events."""
from __future__ import annotations

import re
from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "token", "api_key", "apikey", "api_token", "x-api-key",
    "authorization", "password", "secret",
})

# Shape of a Kinopoisk.dev API key, searched for inside free-text values.
_API_KEY_RE = re.compile(r"\b[A-Z0-9]{7}-[A-Z0-9]{7}-[A-Z0-9]{7}-[A-Z0-9]{7}\b")


class SensitiveFieldsFilter:
    """structlog processor that hides credentials.

    Values under a sensitive key (case-insensitive, at any depth of nested
    dicts and lists) become ``[REDACTED]``.  With *mask_api_keys* on, an API
    key embedded in any other string (an error message, a URL) is masked
    as well.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None, mask_api_keys: bool = True) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))
        self._mask_api_keys = mask_api_keys

    def is_sensitive(self, key: str) -> bool:
        return key.lower() in self._fields

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        """Top-level keys only."""
        return {k: self.REDACTED if self.is_sensitive(k) else v for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: self.REDACTED if self.is_sensitive(k) else self._scrub(v) for k, v in data.items()}

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            return type(value)(self._scrub(v) for v in value)
        if self._mask_api_keys and isinstance(value, str):
            return _API_KEY_RE.sub(self.REDACTED, value)
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
