from typing import Any, Dict, Optional

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import Endpoint, RequestSpec, validate_id
from ._base_service import BaseService


class MocksService(BaseService):
    """Service for managing mock servers, their call logs and server responses."""

    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def list(
        self, team_id: Optional[str] = None, workspace_id: Optional[str] = None
    ) -> Response:
        """List mock servers.

        Args:
            team_id (Optional[str]): Only return the team's mock servers.
            workspace_id (Optional[str]): Only return the workspace's mock servers.
                Takes precedence over ``team_id`` on the server side.
        """
        if workspace_id is not None:
            validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint("/mocks").with_query(
            {"teamId": team_id, "workspace": workspace_id}
        )
        return self.request(self._spec("GET", endpoint))

    def create(self, mock: Dict[str, Any], workspace_id: str) -> Response:
        """Create a mock server.

        Args:
            mock (Dict[str, Any]): ``{"collection": <collection UID>, "name": ..., "private": False}``.
            workspace_id (str): The workspace ID.
        """
        validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint("/mocks").with_query({"workspace": workspace_id})
        return self.request(self._spec("POST", endpoint, {"mock": mock}))

    def retrieve(self, mock_id: str) -> Response:
        validate_id(mock_id, "mock_id")

        return self.request(self._spec("GET", Endpoint(f"/mocks/{mock_id}")))

    def update(self, mock_id: str, mock: Dict[str, Any]) -> Response:
        validate_id(mock_id, "mock_id")

        return self.request(self._spec("PUT", Endpoint(f"/mocks/{mock_id}"), {"mock": mock}))

    def delete(self, mock_id: str) -> Response:
        validate_id(mock_id, "mock_id")

        return self.request(self._spec("DELETE", Endpoint(f"/mocks/{mock_id}")))

    def list_call_logs(
        self,
        mock_id: str,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        until: Optional[str] = None,
        since: Optional[str] = None,
        response_status_code: Optional[int] = None,
        response_type: Optional[str] = None,
        request_method: Optional[str] = None,
        request_path: Optional[str] = None,
        sort: Optional[str] = None,
        direction: Optional[str] = None,
        include: Optional[str] = None,
    ) -> Response:
        """List the calls received by a mock server.

        Args:
            mock_id (str): The mock server ID.
            limit (Optional[int]): Maximum number of results.
            cursor (Optional[str]): The pagination cursor from a previous page.
            until (Optional[str]): Only calls received before this ISO 8601 time.
            since (Optional[str]): Only calls received after this ISO 8601 time.
            response_status_code (Optional[int]): Only calls answered with this status code.
            response_type (Optional[str]): Only calls answered with this response type.
            request_method (Optional[str]): Only calls made with this HTTP method.
            request_path (Optional[str]): Only calls made to this path.
            sort (Optional[str]): Sort key, e.g. ``servedAt``.
            direction (Optional[str]): ``asc`` or ``desc``.
            include (Optional[str]): ``request.headers``, ``response.body``...
                (comma separated).
        """
        validate_id(mock_id, "mock_id")

        spec = self._call_logs_spec(
            mock_id,
            {
                "limit": limit,
                "cursor": cursor,
                "until": until,
                "since": since,
                "responseStatusCode": response_status_code,
                "responseType": response_type,
                "requestMethod": request_method,
                "requestPath": request_path,
                "sort": sort,
                "direction": direction,
                "include": include,
            },
        )
        return self.request(spec)

    def publish(self, mock_id: str) -> Response:
        """Make a mock server public."""
        validate_id(mock_id, "mock_id")

        return self.request(self._spec("POST", Endpoint(f"/mocks/{mock_id}/publish")))

    def unpublish(self, mock_id: str) -> Response:
        """Make a mock server private again."""
        validate_id(mock_id, "mock_id")

        return self.request(self._spec("DELETE", Endpoint(f"/mocks/{mock_id}/unpublish")))

    # Server responses

    def list_server_responses(self, mock_id: str) -> Response:
        validate_id(mock_id, "mock_id")

        return self.request(
            self._spec("GET", Endpoint(f"/mocks/{mock_id}/server-responses"))
        )

    def create_server_response(
        self, mock_id: str, server_response: Dict[str, Any]
    ) -> Response:
        """Create a server response, returned on every call while it is active.

        Args:
            mock_id (str): The mock server ID.
            server_response (Dict[str, Any]): ``{"name": ..., "statusCode": 500, "body": ...}``.
        """
        validate_id(mock_id, "mock_id")

        spec = self._spec(
            "POST",
            Endpoint(f"/mocks/{mock_id}/server-responses"),
            {"serverResponse": server_response},
        )
        return self.request(spec)

    def retrieve_server_response(self, mock_id: str, server_response_id: str) -> Response:
        validate_id(mock_id, "mock_id")
        validate_id(server_response_id, "server_response_id")

        spec = self._spec(
            "GET", Endpoint(f"/mocks/{mock_id}/server-responses/{server_response_id}")
        )
        return self.request(spec)

    def update_server_response(
        self,
        mock_id: str,
        server_response_id: str,
        server_response: Dict[str, Any],
    ) -> Response:
        validate_id(mock_id, "mock_id")
        validate_id(server_response_id, "server_response_id")

        spec = self._spec(
            "PUT",
            Endpoint(f"/mocks/{mock_id}/server-responses/{server_response_id}"),
            {"serverResponse": server_response},
        )
        return self.request(spec)

    def delete_server_response(self, mock_id: str, server_response_id: str) -> Response:
        validate_id(mock_id, "mock_id")
        validate_id(server_response_id, "server_response_id")

        spec = self._spec(
            "DELETE", Endpoint(f"/mocks/{mock_id}/server-responses/{server_response_id}")
        )
        return self.request(spec)

    def _call_logs_spec(self, mock_id: str, params: Dict[str, Any]) -> RequestSpec:
        endpoint = Endpoint(f"/mocks/{mock_id}/call-logs").with_query(params)
        return self._spec("GET", endpoint)
