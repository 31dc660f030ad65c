"""Config settings – Settings, the dataclass base for client configuration."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass settings bound to one environment-variable namespace.

    ``_prefix`` is the namespace (``KINOPOISK`` -> ``KINOPOISK_TOKEN``);
    ``_secret_fields`` are masked by :meth:`to_dict` and ``repr``.
    Subclasses validate in :meth:`_validate`, which runs on construction.
    """

    _prefix: ClassVar[str] = ""
    _secret_fields: ClassVar[frozenset[str]] = frozenset()

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise on invalid values; the default accepts anything."""

    @classmethod
    def env_var(cls, field_name: str) -> str:
        """``KinopoiskSettings.env_var("max_retries")`` -> ``"KINOPOISK_MAX_RETRIES"``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def to_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        if not reveal_secrets:
            for name in self._secret_fields:
                if data.get(name):
                    data[name] = "***"
        return data

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({fields})"


__all__ = ["Settings"]
