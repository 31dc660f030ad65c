"""Config validation – error types."""
from kinopoisk_dev.config.validation.errors import ConfigError, InvalidSettingError, MissingRequiredSettingError

__all__ = ["ConfigError", "InvalidSettingError", "MissingRequiredSettingError"]
