"""Config – dataclass settings, environment loaders and config errors."""
from kinopoisk_dev.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    KinopoiskSettings,
    Settings,
    SettingsLoader,
)
from kinopoisk_dev.config.validation import ConfigError, InvalidSettingError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingError",
    "KinopoiskSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
