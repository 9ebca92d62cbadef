# ABOUTME: Opt-in retry policy for outbound HTTP calls using tenacity
# ABOUTME: Only transport failures are retried; one attempt means no retries at all

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from lexicon_harvest.utils.logging import get_logger

logger = get_logger(__name__)


def _log_retry(retry_state) -> None:
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Retrying request after transport error",
        attempt=retry_state.attempt_number,
        error=str(exception) if exception else None,
    )


def transport_retry(max_attempts: int = 1, min_wait: float = 0.5, max_wait: float = 8.0) -> AsyncRetrying:
    """Build a retrying controller for ``async for attempt in ...`` loops.

    Args:
        max_attempts: Total attempts, 1 disables retrying
        min_wait: Minimum backoff in seconds
        max_wait: Maximum backoff in seconds

    Returns:
        AsyncRetrying that re-raises the last error once attempts run out
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max(1, max_attempts)),
        wait=wait_exponential(multiplier=min_wait, max=max_wait),
        retry=retry_if_exception_type(httpx.TransportError),
        before_sleep=_log_retry,
        reraise=True,
    )
