"""HTTP adapter – tenacity-backed retry policy for transient API failures."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

import tenacity

from kinopoisk_dev.kernel.errors import KinopoiskApiError, KinopoiskError
from kinopoisk_dev.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def is_transient(exc: BaseException) -> bool:
    """Timeouts, connection failures and 5xx answers are worth another try."""
    if isinstance(exc, KinopoiskError) and exc.retryable:
        return True
    if isinstance(exc, KinopoiskApiError) and exc.status_code is not None:
        return exc.status_code >= 500
    return False


def _log_retry(retry_state: tenacity.RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "http.retry",
        attempt=retry_state.attempt_number,
        error=type(exc).__name__ if exc else None,
        status_code=getattr(exc, "status_code", None),
    )


class TenacityRetryPolicy:
    """Retry an async call with exponential backoff and jitter.

    Parameters
    ----------
    max_retries:
        Retries after the first attempt; ``0`` disables retrying.
    initial_wait:
        First backoff delay in seconds (doubles per attempt, capped by
        *max_wait*).
    retry:
        A ``tenacity`` retry predicate. Defaults to :func:`is_transient`.
    """

    def __init__(
        self,
        max_retries: int = 3,
        initial_wait: float = 0.5,
        max_wait: float = 8.0,
        retry: Any = None,
    ) -> None:
        self._max_attempts = max_retries + 1
        jitter = initial_wait if initial_wait > 0 else 0
        self._wait = tenacity.wait_exponential_jitter(initial=initial_wait, max=max_wait, jitter=jitter)
        self._retry = retry or tenacity.retry_if_exception(is_transient)

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def _build_async_retrying(self) -> tenacity.AsyncRetrying:
        return tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=self._retry,
            before_sleep=_log_retry,
            reraise=True,
        )

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        """Await *func* until it succeeds, fails permanently, or attempts run out."""
        async for attempt in self._build_async_retrying():
            with attempt:
                result = await func()
        return result  # type: ignore[return-value]


__all__ = ["TenacityRetryPolicy", "is_transient"]
