"""Config validation – errors raised while loading client settings."""
from __future__ import annotations

from kinopoisk_dev.kernel.errors import KinopoiskError


class ConfigError(KinopoiskError):
    """Settings could not be loaded from the environment or a ``.env`` file."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, env_var: str) -> None:
        super().__init__(f"Environment variable {env_var} is required", detail={"env_var": env_var})
        self.env_var = env_var


class InvalidSettingError(ConfigError):
    """An environment value could not be converted to the field's type."""

    default_code = "invalid_setting"

    def __init__(self, env_var: str, raw: str, expected: str, *, cause: BaseException | None = None) -> None:
        super().__init__(
            f"{env_var}={raw!r} is not a valid {expected}",
            detail={"env_var": env_var, "expected": expected},
            cause=cause,
        )
        self.env_var = env_var
        self.raw = raw


__all__ = ["ConfigError", "InvalidSettingError", "MissingRequiredSettingError"]
