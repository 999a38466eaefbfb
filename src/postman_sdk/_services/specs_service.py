from typing import Any, Dict, List, Optional

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import (
    Endpoint,
    RequestSpec,
    poll_until_complete,
    poll_until_complete_async,
    validate_id,
    validate_path,
    validate_required,
    validate_uid,
)
from ._base_service import BaseService

DEFAULT_GENERATION_OPTIONS: Dict[str, Any] = {
    "requestNameSource": "Fallback",
    "indentCharacter": "Space",
    "parametersResolution": "Example",
    "folderStrategy": "Paths",
    "includeAuthInfoInExample": True,
    "enableOptionalParameters": True,
    "keepImplicitHeaders": False,
    "includeDeprecated": True,
    "alwaysInheritAuthentication": False,
    "nestedFolderHierarchy": False,
}


class SpecsService(BaseService):
    """Service for managing API specifications in Postman's Spec Hub.

    Besides the specs and their files, it drives the asynchronous
    transformations between specs and collections: generating a collection
    from a spec and keeping a generated collection in sync with its spec.
    """

    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def list(
        self,
        workspace_id: str,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Response:
        """List the specs of a workspace.

        Args:
            workspace_id (str): The workspace ID.
            cursor (Optional[str]): The pagination cursor from a previous page.
            limit (Optional[int]): Maximum number of results.

        Returns:
            Response: The API response, ``{"specs": [...], "meta": {"nextCursor": ...}}``.
        """
        validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint("/specs").with_query(
            {"workspaceId": workspace_id, "cursor": cursor, "limit": limit}
        )
        return self.request(self._spec("GET", endpoint))

    def create(
        self,
        workspace_id: str,
        name: str,
        type: str,
        files: List[Dict[str, Any]],
    ) -> Response:
        """Create a spec.

        Args:
            workspace_id (str): The workspace ID.
            name (str): The spec name.
            type (str): The spec type, e.g. ``OPENAPI:3.0`` or ``ASYNCAPI:2.0``.
            files (List[Dict[str, Any]]): The spec files, ``[{"path": "index.yaml", "content": "..."}]``.

        Examples:
            ```python
            from postman_sdk import Postman

            client = Postman()

            client.specs.create(
                workspace_id,
                "Sample API",
                "OPENAPI:3.0",
                [{"path": "index.yaml", "content": "openapi: 3.0.0"}],
            )
            ```
        """
        validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint("/specs").with_query({"workspaceId": workspace_id})
        payload = {"name": name, "type": type, "files": files}
        return self.request(self._spec("POST", endpoint, payload))

    def retrieve(self, spec_id: str) -> Response:
        spec = self._retrieve_spec(spec_id)
        return self.request(spec)

    def modify(self, spec_id: str, name: str) -> Response:
        """Rename a spec."""
        validate_id(spec_id, "spec_id")

        return self.request(self._spec("PATCH", Endpoint(f"/specs/{spec_id}"), {"name": name}))

    def delete(self, spec_id: str) -> Response:
        validate_id(spec_id, "spec_id")

        return self.request(self._spec("DELETE", Endpoint(f"/specs/{spec_id}")))

    def get_definition(self, spec_id: str) -> Response:
        """Retrieve the complete, bundled definition of a spec."""
        validate_id(spec_id, "spec_id")

        return self.request(self._spec("GET", Endpoint(f"/specs/{spec_id}/definitions")))

    # Files

    def list_files(self, spec_id: str) -> Response:
        validate_id(spec_id, "spec_id")

        return self.request(self._spec("GET", Endpoint(f"/specs/{spec_id}/files")))

    def create_file(self, spec_id: str, path: str, content: str) -> Response:
        validate_id(spec_id, "spec_id")

        spec = self._spec(
            "POST", Endpoint(f"/specs/{spec_id}/files"), {"path": path, "content": content}
        )
        return self.request(spec)

    def retrieve_file(self, spec_id: str, file_path: str) -> Response:
        validate_id(spec_id, "spec_id")
        validate_path(file_path, "file_path")

        return self.request(self._spec("GET", Endpoint(f"/specs/{spec_id}/files/{file_path}")))

    def modify_file(self, spec_id: str, file_path: str, data: Dict[str, Any]) -> Response:
        """Update a spec file.

        Args:
            spec_id (str): The spec ID.
            file_path (str): The file path inside the spec, e.g. ``index.yaml``.
            data (Dict[str, Any]): Fields to update: ``content``, ``name`` or
                ``type`` (only one per call).
        """
        validate_id(spec_id, "spec_id")
        validate_path(file_path, "file_path")

        spec = self._spec("PATCH", Endpoint(f"/specs/{spec_id}/files/{file_path}"), data)
        return self.request(spec)

    def delete_file(self, spec_id: str, file_path: str) -> Response:
        validate_id(spec_id, "spec_id")
        validate_path(file_path, "file_path")

        return self.request(
            self._spec("DELETE", Endpoint(f"/specs/{spec_id}/files/{file_path}"))
        )

    # Transformations

    def sync_with_collection(self, spec_id: str, collection_uid: str) -> Response:
        """Synchronize a spec with a collection generated from it.

        The API answers ``202 Accepted`` with ``{"taskId", "url"}``; await the
        task with :meth:`wait_for_task`.
        """
        spec = self._sync_with_collection_spec(spec_id, collection_uid)
        return self.request(spec)

    async def sync_with_collection_async(
        self, spec_id: str, collection_uid: str
    ) -> Response:
        spec = self._sync_with_collection_spec(spec_id, collection_uid)
        return await self.request_async(spec)

    def create_generation(
        self,
        spec_id: str,
        element_type: str = "collection",
        name: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """Generate a collection from a spec.

        Args:
            spec_id (str): The spec ID.
            element_type (str): The generated element. Defaults to ``collection``.
            name (Optional[str]): The generated element's name. Defaults to the
                spec's own name, which costs one extra request.
            options (Optional[Dict[str, Any]]): Generation options, merged over
                ``DEFAULT_GENERATION_OPTIONS``.

        Returns:
            Response: ``202 Accepted`` with ``{"taskId", "url"}``.

        Examples:
            ```python
            response = client.specs.create_generation(spec_id)
            client.specs.wait_for_task(spec_id, response.json()["taskId"])
            ```
        """
        validate_id(spec_id, "spec_id")
        validate_required(element_type, "element_type")

        if name is None:
            name = self._spec_name(self.request(self._retrieve_spec(spec_id)))

        spec = self._create_generation_spec(spec_id, element_type, name, options)
        return self.request(spec)

    async def create_generation_async(
        self,
        spec_id: str,
        element_type: str = "collection",
        name: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Response:
        validate_id(spec_id, "spec_id")
        validate_required(element_type, "element_type")

        if name is None:
            name = self._spec_name(await self.request_async(self._retrieve_spec(spec_id)))

        spec = self._create_generation_spec(spec_id, element_type, name, options)
        return await self.request_async(spec)

    def list_generations(
        self,
        spec_id: str,
        element_type: str,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Response:
        spec = self._list_generations_spec(spec_id, element_type, cursor, limit)
        return self.request(spec)

    async def list_generations_async(
        self,
        spec_id: str,
        element_type: str,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Response:
        spec = self._list_generations_spec(spec_id, element_type, cursor, limit)
        return await self.request_async(spec)

    def get_task_status(self, spec_id: str, task_id: str) -> Response:
        """Retrieve the status of a generation or synchronization task."""
        spec = self._task_status_spec(spec_id, task_id)
        return self.request(spec)

    async def get_task_status_async(self, spec_id: str, task_id: str) -> Response:
        spec = self._task_status_spec(spec_id, task_id)
        return await self.request_async(spec)

    def wait_for_task(self, spec_id: str, task_id: str, **poll_options: Any) -> Response:
        """Block until a spec task completes.

        Args:
            spec_id (str): The spec ID.
            task_id (str): The task ID returned by the kick-off call.
            **poll_options: ``poll_interval``, ``timeout``, ``task_name`` and
                ``max_retries``, passed to :func:`poll_until_complete`.

        Returns:
            Response: The status response that reported ``completed``.

        Raises:
            TaskFailedError: The task failed.
            TaskTimeoutError: The task did not complete in time.
        """
        validate_id(spec_id, "spec_id")
        validate_id(task_id, "task_id")
        poll_options.setdefault("task_name", f"Spec task '{task_id}'")

        return poll_until_complete(
            lambda: self.get_task_status(spec_id, task_id), **poll_options
        )

    async def wait_for_task_async(
        self, spec_id: str, task_id: str, **poll_options: Any
    ) -> Response:
        """Asynchronously wait until a spec task completes."""
        validate_id(spec_id, "spec_id")
        validate_id(task_id, "task_id")
        poll_options.setdefault("task_name", f"Spec task '{task_id}'")

        return await poll_until_complete_async(
            lambda: self.get_task_status_async(spec_id, task_id), **poll_options
        )

    @staticmethod
    def _spec_name(response: Response) -> str:
        return response.json()["name"]

    def _retrieve_spec(self, spec_id: str) -> RequestSpec:
        validate_id(spec_id, "spec_id")

        return self._spec("GET", Endpoint(f"/specs/{spec_id}"))

    def _sync_with_collection_spec(self, spec_id: str, collection_uid: str) -> RequestSpec:
        validate_id(spec_id, "spec_id")
        validate_uid(collection_uid, "collection_uid")

        endpoint = Endpoint(f"/specs/{spec_id}/synchronizations").with_query(
            {"collectionUid": collection_uid}
        )
        return self._spec("PUT", endpoint)

    def _create_generation_spec(
        self,
        spec_id: str,
        element_type: str,
        name: str,
        options: Optional[Dict[str, Any]],
    ) -> RequestSpec:
        validate_required(element_type, "element_type")
        payload = {
            "name": name,
            "options": {**DEFAULT_GENERATION_OPTIONS, **(options or {})},
        }
        return self._spec(
            "POST", Endpoint(f"/specs/{spec_id}/generations/{element_type}"), payload
        )

    def _list_generations_spec(
        self,
        spec_id: str,
        element_type: str,
        cursor: Optional[str],
        limit: Optional[int],
    ) -> RequestSpec:
        validate_id(spec_id, "spec_id")
        validate_required(element_type, "element_type")

        endpoint = Endpoint(f"/specs/{spec_id}/generations/{element_type}").with_query(
            {"cursor": cursor, "limit": limit}
        )
        return self._spec("GET", endpoint)

    def _task_status_spec(self, spec_id: str, task_id: str) -> RequestSpec:
        validate_id(spec_id, "spec_id")
        validate_id(task_id, "task_id")

        return self._spec("GET", Endpoint(f"/specs/{spec_id}/tasks/{task_id}"))
