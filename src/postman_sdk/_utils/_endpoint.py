from typing import Any, Mapping, Optional

from ._query import build_query_string


class Endpoint(str):
    """A Postman API endpoint path.

    The path always starts with a single slash and never ends with one. An
    empty segment inside the path, as left by a blank identifier, raises
    ``ValueError``. A query string, when present, is kept untouched.

    Examples:
        >>> Endpoint("workspaces/")
        '/workspaces'
        >>> Endpoint("/specs").with_query({"workspaceId": "w1", "limit": None})
        '/specs?workspaceId=w1'
    """

    def __new__(cls, endpoint: str) -> "Endpoint":
        path, separator, query = endpoint.partition("?")
        segments = path.strip("/").split("/")
        if path.strip("/") and "" in segments:
            raise ValueError(f"Empty path segment in endpoint: {path}")
        normalized = "/" + "/".join(segments)
        if separator and query:
            normalized = f"{normalized}?{query}"
        return super().__new__(cls, normalized)

    def with_query(self, params: Optional[Mapping[str, Any]]) -> "Endpoint":
        return Endpoint(f"{self}{build_query_string(params)}")
