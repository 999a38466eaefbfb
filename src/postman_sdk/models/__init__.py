from .task import TaskStatus, TaskStatusValue

__all__ = [
    "TaskStatus",
    "TaskStatusValue",
]
