from typing import Any, Optional

from httpx import HTTPStatusError

MAX_RESPONSE_LENGTH = 3000


class PostmanApiError(HTTPStatusError):
    """Raised when the Postman API answers with a non-2xx status code.

    Keeps the original ``request`` and ``response`` so callers can inspect
    ``error.response.status_code`` exactly as with ``httpx.HTTPStatusError``,
    and adds the method, URL and server body to the message.
    """

    def __init__(self, error: HTTPStatusError) -> None:
        self.status_code = error.response.status_code
        self.url = str(error.request.url)
        self.http_method = error.request.method
        self.response_content = error.response.text or ""
        self.error_name, self.error_message = _parse_error_body(error.response)

        content = self.response_content
        if len(content) > MAX_RESPONSE_LENGTH:
            content = f"{content[:MAX_RESPONSE_LENGTH]}... [truncated]"

        message = (
            f"\n\t{self.http_method} {self.url}"
            f"\n\tStatus: {self.status_code}"
            f"\n\tResponse: {content}"
        )
        super().__init__(message, request=error.request, response=error.response)


def _parse_error_body(response: Any) -> tuple[Optional[str], Optional[str]]:
    # Postman errors look like {"error": {"name": "...", "message": "..."}}
    try:
        body = response.json()
    except ValueError:
        return None, None

    if not isinstance(body, dict):
        return None, None

    error = body.get("error")
    if isinstance(error, dict):
        return error.get("name"), error.get("message")
    if isinstance(error, str):
        return None, error
    return body.get("name"), body.get("message") or body.get("detail")
