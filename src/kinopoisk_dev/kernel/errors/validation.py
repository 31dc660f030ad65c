"""Validation errors – caller input rejected before any request is sent."""

from __future__ import annotations

from typing import Any

from kinopoisk_dev.kernel.errors.base import KinopoiskError


class ValidationError(KinopoiskError):
    """Input data does not meet validation rules.

    ``errors`` maps a field name to its failure message.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        *,
        errors: dict[str, str] | None = None,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: dict[str, str] = errors or {}
        self.field = field
        self.value = value

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def first_error(self) -> str | None:
        return next(iter(self.errors.values()), None)

    @classmethod
    def for_field(cls, field: str, message: str, value: Any = None) -> "ValidationError":
        return cls(
            f"Invalid value for '{field}': {message}",
            errors={field: message},
            field=field,
            value=value,
        )

    @classmethod
    def with_errors(cls, errors: dict[str, str]) -> "ValidationError":
        count = len(errors)
        if count == 0:
            message = "Unknown validation error"
        elif count == 1:
            message = "1 validation error found"
        else:
            message = f"{count} validation errors found"
        return cls(message, errors=errors)

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        if self.field is not None:
            base["field"] = self.field
        return base


__all__ = ["ValidationError"]
