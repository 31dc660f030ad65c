"""HTTP adapter – async httpx client and tenacity retry policy."""
from kinopoisk_dev.adapters.http.client import ALLOWED_METHODS, USER_AGENT, KinopoiskHttpClient, to_query_params
from kinopoisk_dev.adapters.http.retry import TenacityRetryPolicy, is_transient

__all__ = [
    "ALLOWED_METHODS",
    "USER_AGENT",
    "KinopoiskHttpClient",
    "TenacityRetryPolicy",
    "is_transient",
    "to_query_params",
]
