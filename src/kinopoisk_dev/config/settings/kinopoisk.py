"""Config settings – KinopoiskSettings."""
from __future__ import annotations

import dataclasses
import re

from kinopoisk_dev.config.settings.base import Settings
from kinopoisk_dev.kernel.errors import ValidationError

DEFAULT_BASE_URL = "https://api.kinopoisk.dev"
DEFAULT_API_VERSION = "v1.4"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3

TOKEN_PATTERN = re.compile(r"^[A-Z0-9]{7}-[A-Z0-9]{7}-[A-Z0-9]{7}-[A-Z0-9]{7}$")


def validate_token(token: str) -> str:
    """Return *token* if it looks like an API key, else raise :class:`ValidationError`."""
    if not token:
        raise ValidationError.for_field("token", "API token is required")
    if not TOKEN_PATTERN.match(token):
        raise ValidationError.for_field("token", "expected format XXXXXXX-XXXXXXX-XXXXXXX-XXXXXXX")
    return token


@dataclasses.dataclass(repr=False)
class KinopoiskSettings(Settings):
    """Client configuration, read from ``KINOPOISK_*`` variables by the loaders."""

    _prefix = "KINOPOISK"
    _secret_fields = frozenset({"token"})

    token: str = ""
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    log_level: str = "INFO"

    def _validate(self) -> None:
        validate_token(self.token)
        errors: dict[str, str] = {}
        if self.timeout <= 0:
            errors["timeout"] = "must be > 0"
        if self.max_retries < 0:
            errors["max_retries"] = "must be >= 0"
        if not self.base_url.startswith(("http://", "https://")):
            errors["base_url"] = "must be an http(s) URL"
        if errors:
            raise ValidationError.with_errors(errors)


__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "KinopoiskSettings",
    "TOKEN_PATTERN",
    "validate_token",
]
