"""Postman SDK errors.

This module contains the exceptions raised by the Postman SDK.
"""

from ._api_key_missing_error import ApiKeyMissingError
from ._invalid_identifier_error import InvalidIdentifierError
from ._postman_api_error import PostmanApiError
from ._task_failed_error import TaskFailedError
from ._task_timeout_error import TaskTimeoutError

__all__ = [
    "ApiKeyMissingError",
    "InvalidIdentifierError",
    "PostmanApiError",
    "TaskFailedError",
    "TaskTimeoutError",
]
