"""Config settings – dataclass settings and environment loaders."""
from kinopoisk_dev.config.settings.base import Settings
from kinopoisk_dev.config.settings.kinopoisk import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    KinopoiskSettings,
    validate_token,
)
from kinopoisk_dev.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "KinopoiskSettings",
    "Settings",
    "SettingsLoader",
    "validate_token",
]
