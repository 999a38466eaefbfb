import asyncio
import math
import time
from logging import getLogger
from typing import Any, Awaitable, Callable, Mapping, TypeVar

from httpx import Response

from ..errors import TaskFailedError, TaskTimeoutError
from ..models import TaskStatus
from ._retry import is_transient_error, retry_with_backoff, retry_with_backoff_async

T = TypeVar("T")

logger = getLogger("postman_sdk")

DEFAULT_POLL_INTERVAL = 5.0
DEFAULT_POLL_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 3


def read_task_status(result: Any) -> TaskStatus:
    """Extract the task status from a status check result.

    Accepts an ``httpx.Response`` (its JSON body is used) or a mapping. A
    mapping wrapped in a ``data`` member is unwrapped first.
    """
    body = result.json() if isinstance(result, Response) else result
    if isinstance(body, Mapping) and isinstance(body.get("data"), Mapping):
        body = body["data"]
    if not isinstance(body, Mapping):
        body = {}
    return TaskStatus.model_validate(body)


def _max_attempts(poll_interval: float, timeout: float) -> int:
    if poll_interval <= 0:
        raise ValueError("poll_interval must be greater than 0")
    return max(1, math.ceil(timeout / poll_interval))


class _PollState:
    """Attempt count, elapsed time and last status of one polling loop."""

    def __init__(self, task_name: str, poll_interval: float, timeout: float):
        self.task_name = task_name
        self.poll_interval = poll_interval
        self.timeout = timeout
        self.max_attempts = _max_attempts(poll_interval, timeout)
        self.attempt = 0
        self.last_status = None
        self._started = time.monotonic()

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self._started

    def evaluate(self, result: Any) -> bool:
        """Record one check; return True when the task completed.

        Raises:
            TaskFailedError: The task reported ``failed``.
            TaskTimeoutError: The time or attempt budget is spent.
        """
        task_status = read_task_status(result)
        self.last_status = task_status.status
        logger.info(
            f"{self.task_name} status: {task_status.status} "
            f"(attempt {self.attempt}/{self.max_attempts})"
        )

        if task_status.is_completed:
            return True
        if task_status.is_failed:
            raise TaskFailedError(task_status.failure_reason, task_name=self.task_name)

        if self.elapsed >= self.timeout:
            raise TaskTimeoutError(
                f"{self.task_name} timed out after {self.timeout}s "
                f"(last status: {self.last_status})",
                task_name=self.task_name,
                last_status=self.last_status,
                attempts=self.attempt,
            )
        if self.attempt >= self.max_attempts:
            raise TaskTimeoutError(
                f"{self.task_name} exceeded maximum attempts ({self.max_attempts}) "
                f"(last status: {self.last_status})",
                task_name=self.task_name,
                last_status=self.last_status,
                attempts=self.attempt,
            )
        return False


def poll_until_complete(
    check_status: Callable[[], T],
    *,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    timeout: float = DEFAULT_POLL_TIMEOUT,
    task_name: str = "Task",
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> T:
    """Poll an asynchronous task until it completes, fails or times out.

    Every check is retried with exponential backoff on transient errors
    (network failures, 5xx, 429). Between two checks the loop sleeps
    ``poll_interval`` seconds; it never sleeps after the last allowed check.

    Args:
        check_status: A zero-argument callable returning the current task
            status, either as an ``httpx.Response`` or as a mapping.
        poll_interval: Seconds between two checks.
        timeout: Overall budget in seconds. It also bounds the number of
            checks to ``ceil(timeout / poll_interval)``.
        task_name: Name used in log and error messages.
        max_retries: Attempts per check for transient errors.

    Returns:
        The result of the check that reported ``completed``.

    Raises:
        TaskFailedError: The task reported ``failed``.
        TaskTimeoutError: The time or attempt budget is spent.
        Exception: A non-transient check error, unchanged.

    Examples:
        >>> response = client.specs.create_generation(spec_id)
        >>> task_id = response.json()["taskId"]
        >>> poll_until_complete(
        ...     lambda: client.specs.get_task_status(spec_id, task_id),
        ...     task_name="Collection generation",
        ... )
    """
    state = _PollState(task_name, poll_interval, timeout)

    while True:
        state.attempt += 1
        result = retry_with_backoff(
            check_status,
            max_attempts=max_retries,
            should_retry=is_transient_error,
        )
        if state.evaluate(result):
            return result
        time.sleep(poll_interval)


async def poll_until_complete_async(
    check_status: Callable[[], Awaitable[T]],
    *,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    timeout: float = DEFAULT_POLL_TIMEOUT,
    task_name: str = "Task",
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> T:
    """Asynchronously poll a task until it completes, fails or times out.

    Same contract as :func:`poll_until_complete`; ``check_status`` returns an
    awaitable and the waits are ``asyncio.sleep`` suspensions.
    """
    state = _PollState(task_name, poll_interval, timeout)

    while True:
        state.attempt += 1
        result = await retry_with_backoff_async(
            check_status,
            max_attempts=max_retries,
            should_retry=is_transient_error,
        )
        if state.evaluate(result):
            return result
        await asyncio.sleep(poll_interval)
