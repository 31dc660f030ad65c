"""Adapters – infrastructure bindings (HTTP transport)."""
from kinopoisk_dev.adapters.http import KinopoiskHttpClient, TenacityRetryPolicy

__all__ = ["KinopoiskHttpClient", "TenacityRetryPolicy"]
