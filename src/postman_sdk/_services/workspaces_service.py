from typing import Any, Dict, List, Optional

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import Endpoint, RequestSpec, validate_id
from ._base_service import BaseService


class WorkspacesService(BaseService):
    """Service for managing Postman workspaces.

    Workspaces group collections, environments, specs, mocks and monitors and
    control who can see them.
    """

    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def list(
        self,
        type: Optional[str] = None,
        created_by: Optional[int] = None,
        include: Optional[str] = None,
    ) -> Response:
        """List the workspaces visible to the API key owner.

        Args:
            type (Optional[str]): Only return workspaces of this type
                (``personal``, ``team``, ``private``, ``public``, ``partner``).
            created_by (Optional[int]): Only return workspaces created by this user ID.
            include (Optional[str]): Extra data to include, e.g. ``mocks:deactivated``.

        Returns:
            Response: The API response, ``{"workspaces": [...]}``.

        Examples:
            ```python
            from postman_sdk import Postman

            client = Postman()

            client.workspaces.list(type="team")
            ```
        """
        spec = self._list_spec(type=type, created_by=created_by, include=include)
        return self.request(spec)

    def create(
        self,
        name: str,
        type: str,
        description: Optional[str] = None,
        about: Optional[str] = None,
    ) -> Response:
        """Create a workspace.

        Args:
            name (str): The workspace name.
            type (str): The workspace type.
            description (Optional[str]): A long description.
            about (Optional[str]): A short summary.

        Returns:
            Response: The API response, ``{"workspace": {"id": ..., "name": ...}}``.
        """
        spec = self._create_spec(name, type, description=description, about=about)
        return self.request(spec)

    def retrieve(self, workspace_id: str, include: Optional[str] = None) -> Response:
        """Retrieve a workspace with the elements it contains.

        Args:
            workspace_id (str): The workspace ID.
            include (Optional[str]): Extra data to include.

        Returns:
            Response: The API response, ``{"workspace": {...}}``.
        """
        validate_id(workspace_id, "workspace_id")

        spec = self._retrieve_spec(workspace_id, include=include)
        return self.request(spec)

    def update(
        self,
        workspace_id: str,
        name: Optional[str] = None,
        type: Optional[str] = None,
        description: Optional[str] = None,
        about: Optional[str] = None,
    ) -> Response:
        """Update a workspace. Only the given fields are sent."""
        validate_id(workspace_id, "workspace_id")

        spec = self._update_spec(
            workspace_id, name=name, type=type, description=description, about=about
        )
        return self.request(spec)

    def delete(self, workspace_id: str) -> Response:
        validate_id(workspace_id, "workspace_id")

        spec = self._spec("DELETE", Endpoint(f"/workspaces/{workspace_id}"))
        return self.request(spec)

    def get_tags(self, workspace_id: str) -> Response:
        validate_id(workspace_id, "workspace_id")

        spec = self._spec("GET", Endpoint(f"/workspaces/{workspace_id}/tags"))
        return self.request(spec)

    def update_tags(self, workspace_id: str, tags: List[Dict[str, Any]]) -> Response:
        """Replace the tags of a workspace.

        Args:
            workspace_id (str): The workspace ID.
            tags (List[Dict[str, Any]]): The new tags, e.g. ``[{"slug": "billing"}]``.
                An empty list removes every tag.

        Returns:
            Response: The API response, ``{"tags": [...]}``.
        """
        validate_id(workspace_id, "workspace_id")

        spec = self._spec(
            "PUT", Endpoint(f"/workspaces/{workspace_id}/tags"), {"tags": tags}
        )
        return self.request(spec)

    def _list_spec(
        self,
        type: Optional[str],
        created_by: Optional[int],
        include: Optional[str],
    ) -> RequestSpec:
        endpoint = Endpoint("/workspaces").with_query(
            {"type": type, "createdBy": created_by, "include": include}
        )
        return self._spec("GET", endpoint)

    def _create_spec(
        self,
        name: str,
        type: str,
        description: Optional[str],
        about: Optional[str],
    ) -> RequestSpec:
        workspace: Dict[str, Any] = {"name": name, "type": type}
        if description is not None:
            workspace["description"] = description
        if about is not None:
            workspace["about"] = about

        return self._spec("POST", Endpoint("/workspaces"), {"workspace": workspace})

    def _retrieve_spec(self, workspace_id: str, include: Optional[str]) -> RequestSpec:
        endpoint = Endpoint(f"/workspaces/{workspace_id}").with_query(
            {"include": include}
        )
        return self._spec("GET", endpoint)

    def _update_spec(
        self,
        workspace_id: str,
        name: Optional[str],
        type: Optional[str],
        description: Optional[str],
        about: Optional[str],
    ) -> RequestSpec:
        fields = {"name": name, "type": type, "description": description, "about": about}
        workspace = {key: value for key, value in fields.items() if value is not None}

        return self._spec(
            "PUT", Endpoint(f"/workspaces/{workspace_id}"), {"workspace": workspace}
        )
