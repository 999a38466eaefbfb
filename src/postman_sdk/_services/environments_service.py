from typing import Any, Dict, List, Optional

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import Endpoint, validate_id, validate_uid
from ._base_service import BaseService


class EnvironmentsService(BaseService):
    """Service for managing Postman environments and their forks."""

    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def list(self, workspace_id: Optional[str] = None) -> Response:
        if workspace_id is not None:
            validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint("/environments").with_query({"workspace": workspace_id})
        return self.request(self._spec("GET", endpoint))

    def create(
        self, environment: Dict[str, Any], workspace_id: Optional[str] = None
    ) -> Response:
        """Create an environment.

        Args:
            environment (Dict[str, Any]): ``{"name": ..., "values": [{"key", "value", "type", "enabled"}]}``.
            workspace_id (Optional[str]): The workspace to create it in.

        Returns:
            Response: The API response, ``{"environment": {"id", "name", "uid"}}``.
        """
        if workspace_id is not None:
            validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint("/environments").with_query({"workspace": workspace_id})
        return self.request(self._spec("POST", endpoint, {"environment": environment}))

    def retrieve(self, environment_id: str) -> Response:
        validate_id(environment_id, "environment_id")

        return self.request(self._spec("GET", Endpoint(f"/environments/{environment_id}")))

    def modify(
        self, environment_id: str, patch_operations: List[Dict[str, Any]]
    ) -> Response:
        """Apply JSON Patch operations to an environment.

        Args:
            environment_id (str): The environment ID.
            patch_operations (List[Dict[str, Any]]): e.g.
                ``[{"op": "replace", "path": "/name", "value": "Staging"}]``.
        """
        validate_id(environment_id, "environment_id")

        spec = self._spec(
            "PATCH", Endpoint(f"/environments/{environment_id}"), patch_operations
        )
        return self.request(spec)

    def delete(self, environment_id: str) -> Response:
        validate_id(environment_id, "environment_id")

        return self.request(self._spec("DELETE", Endpoint(f"/environments/{environment_id}")))

    def list_forks(
        self,
        environment_uid: str,
        cursor: Optional[str] = None,
        direction: Optional[str] = None,
        limit: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> Response:
        validate_uid(environment_uid, "environment_uid")

        endpoint = Endpoint(f"/environments/{environment_uid}/forks").with_query(
            {"cursor": cursor, "direction": direction, "limit": limit, "sort": sort}
        )
        return self.request(self._spec("GET", endpoint))

    def create_fork(
        self, environment_uid: str, workspace_id: str, fork_name: str
    ) -> Response:
        """Fork an environment into a workspace."""
        validate_uid(environment_uid, "environment_uid")
        validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint(f"/environments/{environment_uid}/forks").with_query(
            {"workspace": workspace_id}
        )
        return self.request(self._spec("POST", endpoint, {"forkName": fork_name}))

    def merge_fork(self, environment_uid: str) -> Response:
        """Merge a forked environment back into its parent."""
        validate_uid(environment_uid, "environment_uid")

        return self.request(
            self._spec("POST", Endpoint(f"/environments/{environment_uid}/merges"))
        )

    def pull_changes(
        self, environment_uid: str, data: Optional[Dict[str, Any]] = None
    ) -> Response:
        """Pull the changes of a parent environment into its fork."""
        validate_uid(environment_uid, "environment_uid")

        return self.request(
            self._spec("POST", Endpoint(f"/environments/{environment_uid}/pulls"), data)
        )
