from ._endpoint import Endpoint
from ._polling import (
    poll_until_complete,
    poll_until_complete_async,
    read_task_status,
)
from ._query import build_query_string
from ._request_spec import RequestSpec, build_request_spec
from ._retry import (
    is_transient_error,
    log_retry,
    retry_with_backoff,
    retry_with_backoff_async,
)
from ._ssl_context import get_httpx_client_kwargs
from ._validation import (
    build_uid,
    validate_id,
    validate_path,
    validate_required,
    validate_uid,
)

__all__ = [
    "Endpoint",
    "RequestSpec",
    "build_query_string",
    "build_request_spec",
    "build_uid",
    "get_httpx_client_kwargs",
    "is_transient_error",
    "log_retry",
    "poll_until_complete",
    "poll_until_complete_async",
    "read_task_status",
    "retry_with_backoff",
    "retry_with_backoff_async",
    "validate_id",
    "validate_path",
    "validate_required",
    "validate_uid",
]
