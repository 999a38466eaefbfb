from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict


class TaskStatusValue(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class TaskStatus(BaseModel):
    """Status of an asynchronous generation or synchronization task."""

    model_config = ConfigDict(extra="allow")

    status: Optional[str] = None
    error: Optional[Union[str, Dict[str, Any]]] = None
    meta: Optional[Dict[str, Any]] = None
    details: Optional[Dict[str, Any]] = None

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatusValue.COMPLETED.value

    @property
    def is_failed(self) -> bool:
        return self.status == TaskStatusValue.FAILED.value

    @property
    def failure_reason(self) -> str:
        """The server-reported reason of a failed task.

        The API reports it either as a plain string or as an object with a
        ``message`` member.
        """
        if isinstance(self.error, str) and self.error:
            return self.error
        if isinstance(self.error, dict) and self.error.get("message"):
            return str(self.error["message"])
        return "Unknown error"
