from typing import Optional


class TaskFailedError(Exception):
    """Raised when a polled task reports the ``failed`` status.

    Carries the failure reason reported by the server.
    """

    def __init__(
        self,
        reason: str,
        task_name: str = "Task",
        task_id: Optional[str] = None,
    ):
        self.reason = reason
        self.task_name = task_name
        self.task_id = task_id
        target = f"{task_name} '{task_id}'" if task_id else task_name
        self.message = f"{target} failed: {reason}"
        super().__init__(self.message)
