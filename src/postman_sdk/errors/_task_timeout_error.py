from typing import Optional


class TaskTimeoutError(TimeoutError):
    """Raised when a polled task does not reach a terminal status in time.

    Covers both the wall-clock budget and the attempt budget of a polling
    loop.
    """

    def __init__(
        self,
        message: str,
        task_name: str = "Task",
        last_status: Optional[str] = None,
        attempts: int = 0,
    ):
        self.task_name = task_name
        self.last_status = last_status
        self.attempts = attempts
        self.message = message
        super().__init__(self.message)
