"""Postman SDK for Python.

A thin client for the Postman API (https://api.getpostman.com): workspaces,
collections, environments, specs, mocks, monitors and more, plus helpers to
retry transient failures and to await asynchronous server-side tasks.

Usage:
    from postman_sdk import Postman

    client = Postman()
    client.users.me().json()
"""

from ._config import PostmanApiConfig
from ._postman import Postman
from ._utils import (
    RequestSpec,
    build_query_string,
    build_request_spec,
    build_uid,
    is_transient_error,
    poll_until_complete,
    poll_until_complete_async,
    retry_with_backoff,
    retry_with_backoff_async,
    validate_id,
    validate_uid,
)

__all__ = [
    "Postman",
    "PostmanApiConfig",
    "RequestSpec",
    "build_query_string",
    "build_request_spec",
    "build_uid",
    "is_transient_error",
    "poll_until_complete",
    "poll_until_complete_async",
    "retry_with_backoff",
    "retry_with_backoff_async",
    "validate_id",
    "validate_uid",
]
