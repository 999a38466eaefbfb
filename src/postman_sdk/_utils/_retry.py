import asyncio
import time
from logging import getLogger
from typing import Awaitable, Callable, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

T = TypeVar("T")

ShouldRetry = Callable[[BaseException], bool]
OnRetry = Callable[[int, int, float, BaseException], None]

logger = getLogger("postman_sdk")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_INITIAL_DELAY = 1.0
DEFAULT_MAX_DELAY = 10.0
DEFAULT_FACTOR = 2.0


def is_transient_error(error: BaseException) -> bool:
    """Tell whether a failed call is worth retrying.

    Errors without an HTTP status (network failures, timeouts), server
    errors (5xx) and rate limiting (429) are transient. Any other 4xx is not,
    and neither are interrupts such as ``KeyboardInterrupt``.
    """
    if not isinstance(error, Exception):
        return False
    response = getattr(error, "response", None)
    status_code = getattr(response, "status_code", None)
    if status_code is None:
        return True
    return status_code >= 500 or status_code == 429


def log_retry(
    attempt: int, max_attempts: int, delay: float, error: BaseException
) -> None:
    logger.warning(
        f"Attempt {attempt}/{max_attempts} failed: {error}. Retrying in {delay:.2f}s"
    )


def _always_retry(error: BaseException) -> bool:
    return True


def _sleep(seconds: float) -> None:
    time.sleep(seconds)


async def _sleep_async(seconds: float) -> None:
    await asyncio.sleep(seconds)


def _retry_kwargs(
    max_attempts: int,
    initial_delay: float,
    max_delay: float,
    factor: float,
    should_retry: Optional[ShouldRetry],
    on_retry: Optional[OnRetry],
) -> dict:
    notify = on_retry or log_retry
    retry_on = should_retry or _always_retry

    def before_sleep(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        notify(retry_state.attempt_number, max_attempts, delay, error)

    return {
        "stop": stop_after_attempt(max_attempts),
        # multiplier * exp_base ** (attempt - 1), capped at max
        "wait": wait_exponential(
            multiplier=initial_delay, exp_base=factor, max=max_delay
        ),
        "retry": retry_if_exception(
            lambda error: isinstance(error, Exception) and retry_on(error)
        ),
        "before_sleep": before_sleep,
        "reraise": True,
    }


def retry_with_backoff(
    operation: Callable[[], T],
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    max_delay: float = DEFAULT_MAX_DELAY,
    factor: float = DEFAULT_FACTOR,
    should_retry: Optional[ShouldRetry] = None,
    on_retry: Optional[OnRetry] = None,
) -> T:
    """Call ``operation`` until it succeeds, backing off exponentially.

    The delay before attempt ``n + 1`` is
    ``min(initial_delay * factor ** (n - 1), max_delay)`` seconds.

    Args:
        operation: A zero-argument callable.
        max_attempts: Total number of calls, the first one included.
        initial_delay: Delay in seconds after the first failure.
        max_delay: Upper bound for any single delay, in seconds.
        factor: Growth factor between two consecutive delays.
        should_retry: Consulted on every failure; returning ``False`` stops
            immediately. Defaults to retrying every ``Exception``;
            ``KeyboardInterrupt`` and ``SystemExit`` are never retried.
        on_retry: Called as ``on_retry(attempt, max_attempts, delay, error)``
            before each wait. Defaults to a warning log.

    Returns:
        Whatever ``operation`` returns on its first successful call.

    Raises:
        Exception: The original error of the last attempt, unchanged.

    Examples:
        >>> retry_with_backoff(
        ...     lambda: client.specs.create_generation(spec_id, name="Generated"),
        ...     should_retry=is_transient_error,
        ... )
    """
    retrying = Retrying(
        sleep=_sleep,
        **_retry_kwargs(
            max_attempts, initial_delay, max_delay, factor, should_retry, on_retry
        ),
    )
    return retrying(operation)


async def retry_with_backoff_async(
    operation: Callable[[], Awaitable[T]],
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    max_delay: float = DEFAULT_MAX_DELAY,
    factor: float = DEFAULT_FACTOR,
    should_retry: Optional[ShouldRetry] = None,
    on_retry: Optional[OnRetry] = None,
) -> T:
    """Asynchronously call ``operation`` until it succeeds.

    Same contract as :func:`retry_with_backoff`; ``operation`` returns an
    awaitable and the waits are ``asyncio.sleep`` suspensions. Plain
    callables returning a coroutine, such as ``lambda: fetch()``, are
    awaited too.
    """

    # AsyncRetrying only awaits coroutine functions
    async def call() -> T:
        return await operation()

    retrying = AsyncRetrying(
        sleep=_sleep_async,
        **_retry_kwargs(
            max_attempts, initial_delay, max_delay, factor, should_retry, on_retry
        ),
    )
    return await retrying(call)
