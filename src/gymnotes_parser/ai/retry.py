"""Backoff for the fallback's completion request.

Only transient upstream problems are retried; anything else (bad key, bad
request, quota) fails on the first attempt so a typo'd entry never waits
on a doomed request.
"""
import logging
from typing import Any, Callable, TypeVar

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_MIN_WAIT_SECONDS = 1
DEFAULT_MAX_WAIT_SECONDS = 10

RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}

_TRANSIENT_MARKERS = (
    "429",
    "500",
    "502",
    "503",
    "504",
    "timeout",
    "timed out",
    "connection",
    "temporary failure in name resolution",
    "name or service not known",
)


def is_retryable_error(exception: BaseException) -> bool:
    """
    True for rate limits, 5xx, timeouts and connection failures.

    openai's APIStatusError carries ``status_code``; other exceptions are
    classified by type name and message.
    """
    status_code = getattr(exception, "status_code", None)
    if isinstance(status_code, int):
        return status_code in RETRYABLE_STATUS_CODES

    exception_type = type(exception).__name__.lower()
    if "timeout" in exception_type or "connect" in exception_type:
        return True

    message = str(exception).lower()
    if "rate" in message and "limit" in message:
        return True
    return any(marker in message for marker in _TRANSIENT_MARKERS)


def create_retry_decorator(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    return retry(
        retry=retry_if_exception(is_retryable_error),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait_seconds, max=max_wait_seconds),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def retry_sync_call(
    func: Callable[..., T],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
    **kwargs: Any,
) -> T:
    """
    Call ``func`` with backoff on retryable errors.

    Raises:
        Exception: The first non-retryable error, or the last error once
            attempts are exhausted
    """
    decorator = create_retry_decorator(max_attempts, min_wait_seconds, max_wait_seconds)
    return decorator(func)(*args, **kwargs)
