"""Vocabulary – FieldType data-type classification."""
from __future__ import annotations

from enum import Enum


class FieldType(str, Enum):
    NUMBER = "number"
    BOOLEAN = "boolean"
    TEXT = "text"
    DATE = "date"
    INCLUDE_EXCLUDE = "include_exclude"
    OBJECT = "object"
    STRING = "string"

    @property
    def supports_range(self) -> bool:
        return self in (FieldType.NUMBER, FieldType.DATE)

    @property
    def supports_include_exclude(self) -> bool:
        return self is FieldType.INCLUDE_EXCLUDE


__all__ = ["FieldType"]
