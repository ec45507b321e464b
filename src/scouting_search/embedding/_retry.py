import logging
from collections.abc import Callable
from typing import Any

import httpx
from tenacity import RetryCallState, retry, retry_if_exception, stop_after_attempt, wait_exponential_jitter

logger = logging.getLogger(__name__)


def is_retryable(exc: BaseException) -> bool:
    """Transport failures and 5xx responses are worth another attempt; 4xx are not."""
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return False


def http_retry(label: str, *, attempts: int = 3) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Return a tenacity retry decorator for HTTP calls.

    *label* is interpolated into the warning emitted before each retry.
    """

    def _log_retry(retry_state: RetryCallState) -> None:
        logger.warning("Retrying %s (attempt %d): %s", label, retry_state.attempt_number, retry_state.outcome)

    return retry(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential_jitter(initial=1, max=10),
        retry=retry_if_exception(is_retryable),
        before_sleep=_log_retry,
        reraise=True,
    )
