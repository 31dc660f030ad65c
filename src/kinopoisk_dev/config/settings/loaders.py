"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from dotenv import load_dotenv

from kinopoisk_dev.config.settings.base import Settings
from kinopoisk_dev.config.validation import ConfigError, InvalidSettingError, MissingRequiredSettingError
from kinopoisk_dev.kernel.errors import KinopoiskError

T = TypeVar("T", bound=Settings)


def _to_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(raw)


# Field annotations are strings under ``from __future__ import annotations``.
_CONVERTERS: dict[str, Callable[[str], Any]] = {
    "bool": _to_bool,
    "int": int,
    "float": float,
    "str": str,
}


def _type_name(hint: Any) -> str:
    return hint if isinstance(hint, str) else getattr(hint, "__name__", "str")


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` subclass from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` variables from *environ* (default ``os.environ``).

    Unset variables fall back to the dataclass default; a field without a
    default raises :class:`MissingRequiredSettingError`.  Validation errors
    from the settings class propagate unchanged.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            env_var = settings_class.env_var(field.name)
            raw = environ.get(env_var)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(env_var)
                continue
            values[field.name] = self._convert(env_var, raw, _type_name(field.type))

        try:
            return settings_class(**values)
        except KinopoiskError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _convert(env_var: str, raw: str, type_name: str) -> Any:
        converter = _CONVERTERS.get(type_name, str)
        try:
            return converter(raw)
        except ValueError as exc:
            raise InvalidSettingError(env_var, raw, type_name, cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into ``os.environ``, then read it like :class:`EnvSettingsLoader`.

    Variables already set in the process win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
