"""Retry policy for bridge requests.

A bridge that times out or answers 429/5xx gets one more attempt with a short
jittered backoff; after that the fetcher moves on to the next bridge.
"""

from __future__ import annotations

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from .http_client import parse_retry_after
from .logging_config import get_logger

logger = get_logger(__name__)

HTTP_TRANSIENT_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
)


class TransientHTTPError(Exception):
    """Wrapper for transient HTTP errors (429, 5xx) that should be retried."""

    def __init__(self, message: str, status_code: int, retry_after: float | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.retry_after = retry_after


class RateLimitError(TransientHTTPError):
    """Rate limit (429) error with optional Retry-After."""


def log_retry_attempt(retry_state: RetryCallState) -> None:
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    wait_time = retry_state.next_action.sleep if retry_state.next_action else 0

    logger.warning(
        "retry_attempt",
        attempt=retry_state.attempt_number,
        wait_seconds=round(wait_time, 2),
        exception_type=type(exception).__name__ if exception else None,
        exception_msg=str(exception)[:100] if exception else None,
    )


bridge_retry = retry(
    reraise=True,
    stop=stop_after_attempt(2),
    wait=wait_exponential_jitter(initial=0.5, max=2, jitter=0.5),
    retry=retry_if_exception_type(HTTP_TRANSIENT_EXCEPTIONS + (TransientHTTPError,)),
    before_sleep=log_retry_attempt,
)


def check_response_for_retry(response: httpx.Response) -> None:
    """Raise a retryable error for 429 and 5xx responses.

    Raises:
        RateLimitError: For 429 responses
        TransientHTTPError: For 5xx responses
    """
    if response.status_code == 429:
        raise RateLimitError(
            "Rate limited (429)",
            status_code=429,
            retry_after=parse_retry_after(response),
        )

    if response.status_code >= 500:
        raise TransientHTTPError(
            f"Server error ({response.status_code})",
            status_code=response.status_code,
        )
