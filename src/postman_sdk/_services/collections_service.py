from typing import Any, Dict, List, Optional, Union

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import (
    Endpoint,
    RequestSpec,
    poll_until_complete,
    poll_until_complete_async,
    validate_id,
    validate_required,
    validate_uid,
)
from .._utils.constants import HEADER_PREFER
from ._base_service import BaseService


class CollectionsService(BaseService):
    """Service for managing Postman collections.

    Covers collections themselves, their folders, comments, tags, roles,
    forks and pull requests, and the transformations between collections
    and API specifications.
    """

    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def list(
        self,
        workspace_id: Optional[str] = None,
        name: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Response:
        """List collections.

        Args:
            workspace_id (Optional[str]): Only return the collections of this workspace.
            name (Optional[str]): Only return the collections matching this name.
            limit (Optional[int]): Maximum number of results.
            offset (Optional[int]): Zero-based offset of the first result.

        Returns:
            Response: The API response, ``{"collections": [...]}``.

        Examples:
            ```python
            from postman_sdk import Postman

            client = Postman()

            client.collections.list(workspace_id=workspace_id, limit=10)
            ```
        """
        if workspace_id is not None:
            validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint("/collections").with_query(
            {"workspace": workspace_id, "name": name, "limit": limit, "offset": offset}
        )
        return self.request(self._spec("GET", endpoint))

    def create(
        self, collection: Dict[str, Any], workspace_id: Optional[str] = None
    ) -> Response:
        """Create a collection.

        Args:
            collection (Dict[str, Any]): The collection in Postman Collection
                v2.1 format, with at least ``info.name`` and ``info.schema``.
            workspace_id (Optional[str]): The workspace to create it in.

        Returns:
            Response: The API response, ``{"collection": {"id", "name", "uid"}}``.
        """
        if workspace_id is not None:
            validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint("/collections").with_query({"workspace": workspace_id})
        return self.request(self._spec("POST", endpoint, {"collection": collection}))

    def retrieve(
        self,
        collection_id: str,
        access_key: Optional[str] = None,
        model: Optional[str] = None,
    ) -> Response:
        """Retrieve a collection.

        Args:
            collection_id (str): The collection ID.
            access_key (Optional[str]): A collection's read-only access key.
            model (Optional[str]): ``minimal`` to only return the root-level
                request and folder IDs.

        Returns:
            Response: The API response, ``{"collection": {...}}``.
        """
        validate_id(collection_id, "collection_id")

        endpoint = Endpoint(f"/collections/{collection_id}").with_query(
            {"access_key": access_key, "model": model}
        )
        return self.request(self._spec("GET", endpoint))

    def update(
        self,
        collection_id: str,
        collection: Dict[str, Any],
        prefer: Optional[str] = None,
    ) -> Response:
        """Replace a collection's contents.

        Args:
            collection_id (str): The collection ID.
            collection (Dict[str, Any]): The full collection.
            prefer (Optional[str]): ``respond-async`` to process the update
                asynchronously; the response then carries a task.

        Returns:
            Response: The API response.
        """
        validate_id(collection_id, "collection_id")

        headers = {HEADER_PREFER: prefer} if prefer is not None else None
        spec = self._spec(
            "PUT",
            Endpoint(f"/collections/{collection_id}"),
            {"collection": collection},
            headers=headers,
        )
        return self.request(spec)

    def modify(self, collection_id: str, collection: Dict[str, Any]) -> Response:
        """Partially update a collection's ``info`` (name, description...)."""
        validate_id(collection_id, "collection_id")

        spec = self._spec(
            "PATCH", Endpoint(f"/collections/{collection_id}"), {"collection": collection}
        )
        return self.request(spec)

    def delete(self, collection_id: str) -> Response:
        validate_id(collection_id, "collection_id")

        return self.request(self._spec("DELETE", Endpoint(f"/collections/{collection_id}")))

    # Folders

    def create_folder(self, collection_id: str, folder: Dict[str, Any]) -> Response:
        validate_id(collection_id, "collection_id")

        spec = self._spec("POST", Endpoint(f"/collections/{collection_id}/folders"), folder)
        return self.request(spec)

    def retrieve_folder(
        self,
        collection_id: str,
        folder_id: str,
        ids: Optional[bool] = None,
        uid: Optional[bool] = None,
        populate: Optional[bool] = None,
    ) -> Response:
        """Retrieve a folder of a collection.

        Args:
            collection_id (str): The collection ID.
            folder_id (str): The folder ID.
            ids (Optional[bool]): Only return the properties holding IDs.
            uid (Optional[bool]): Return UIDs instead of IDs.
            populate (Optional[bool]): Include the folder's requests and subfolders.
        """
        validate_id(collection_id, "collection_id")
        validate_id(folder_id, "folder_id")

        endpoint = Endpoint(f"/collections/{collection_id}/folders/{folder_id}").with_query(
            {"ids": ids, "uid": uid, "populate": populate}
        )
        return self.request(self._spec("GET", endpoint))

    def update_folder(
        self, collection_id: str, folder_id: str, folder: Dict[str, Any]
    ) -> Response:
        validate_id(collection_id, "collection_id")
        validate_id(folder_id, "folder_id")

        spec = self._spec(
            "PUT", Endpoint(f"/collections/{collection_id}/folders/{folder_id}"), folder
        )
        return self.request(spec)

    def delete_folder(self, collection_id: str, folder_id: str) -> Response:
        validate_id(collection_id, "collection_id")
        validate_id(folder_id, "folder_id")

        spec = self._spec(
            "DELETE", Endpoint(f"/collections/{collection_id}/folders/{folder_id}")
        )
        return self.request(spec)

    # Comments

    def list_comments(self, collection_uid: str) -> Response:
        validate_uid(collection_uid, "collection_uid")

        return self.request(
            self._spec("GET", Endpoint(f"/collections/{collection_uid}/comments"))
        )

    def create_comment(self, collection_uid: str, comment: Dict[str, Any]) -> Response:
        """Comment on a collection.

        Args:
            collection_uid (str): The collection UID.
            comment (Dict[str, Any]): ``{"body": "...", "threadId": ..., "tags": {...}}``.
                Pass ``threadId`` to reply to an existing thread.
        """
        validate_uid(collection_uid, "collection_uid")

        spec = self._spec("POST", Endpoint(f"/collections/{collection_uid}/comments"), comment)
        return self.request(spec)

    def update_comment(
        self,
        collection_uid: str,
        comment_id: Union[int, str],
        comment: Dict[str, Any],
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_required(comment_id, "comment_id")

        spec = self._spec(
            "PUT",
            Endpoint(f"/collections/{collection_uid}/comments/{comment_id}"),
            comment,
        )
        return self.request(spec)

    def delete_comment(
        self, collection_uid: str, comment_id: Union[int, str]
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_required(comment_id, "comment_id")

        spec = self._spec(
            "DELETE", Endpoint(f"/collections/{collection_uid}/comments/{comment_id}")
        )
        return self.request(spec)

    def list_folder_comments(self, collection_uid: str, folder_uid: str) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(folder_uid, "folder_uid")

        spec = self._spec(
            "GET", Endpoint(f"/collections/{collection_uid}/folders/{folder_uid}/comments")
        )
        return self.request(spec)

    def create_folder_comment(
        self, collection_uid: str, folder_uid: str, comment: Dict[str, Any]
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(folder_uid, "folder_uid")

        spec = self._spec(
            "POST",
            Endpoint(f"/collections/{collection_uid}/folders/{folder_uid}/comments"),
            comment,
        )
        return self.request(spec)

    def update_folder_comment(
        self,
        collection_uid: str,
        folder_uid: str,
        comment_id: Union[int, str],
        comment: Dict[str, Any],
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(folder_uid, "folder_uid")
        validate_required(comment_id, "comment_id")

        spec = self._spec(
            "PUT",
            Endpoint(
                f"/collections/{collection_uid}/folders/{folder_uid}/comments/{comment_id}"
            ),
            comment,
        )
        return self.request(spec)

    def delete_folder_comment(
        self, collection_uid: str, folder_uid: str, comment_id: Union[int, str]
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(folder_uid, "folder_uid")
        validate_required(comment_id, "comment_id")

        spec = self._spec(
            "DELETE",
            Endpoint(
                f"/collections/{collection_uid}/folders/{folder_uid}/comments/{comment_id}"
            ),
        )
        return self.request(spec)

    # Tags and roles

    def get_tags(self, collection_uid: str) -> Response:
        validate_uid(collection_uid, "collection_uid")

        return self.request(self._spec("GET", Endpoint(f"/collections/{collection_uid}/tags")))

    def update_tags(self, collection_uid: str, tags: List[Dict[str, Any]]) -> Response:
        """Replace the tags of a collection. An empty list removes every tag."""
        validate_uid(collection_uid, "collection_uid")

        spec = self._spec(
            "PUT", Endpoint(f"/collections/{collection_uid}/tags"), {"tags": tags}
        )
        return self.request(spec)

    def get_roles(self, collection_id: str) -> Response:
        validate_id(collection_id, "collection_id")

        return self.request(self._spec("GET", Endpoint(f"/collections/{collection_id}/roles")))

    def modify_roles(self, collection_id: str, roles: List[Dict[str, Any]]) -> Response:
        """Add or remove user, group or team roles on a collection.

        Args:
            collection_id (str): The collection ID.
            roles (List[Dict[str, Any]]): JSON Patch style operations, e.g.
                ``[{"op": "update", "path": "/user", "value": [{"id": 1, "role": "VIEWER"}]}]``.
        """
        validate_id(collection_id, "collection_id")

        spec = self._spec(
            "PATCH", Endpoint(f"/collections/{collection_id}/roles"), {"roles": roles}
        )
        return self.request(spec)

    # Forks

    def list_forks(
        self,
        cursor: Optional[str] = None,
        direction: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Response:
        """List the collection forks created by the API key owner."""
        endpoint = Endpoint("/collections/collection-forks").with_query(
            {"cursor": cursor, "direction": direction, "limit": limit}
        )
        return self.request(self._spec("GET", endpoint))

    def create_fork(self, collection_id: str, workspace_id: str, label: str) -> Response:
        """Fork a collection into a workspace.

        Args:
            collection_id (str): The collection ID.
            workspace_id (str): The workspace that receives the fork.
            label (str): The fork label.
        """
        validate_id(collection_id, "collection_id")
        validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint(f"/collections/fork/{collection_id}").with_query(
            {"workspace": workspace_id}
        )
        return self.request(self._spec("POST", endpoint, {"label": label}))

    def merge_fork(
        self,
        source_uid: str,
        destination_uid: str,
        strategy: Optional[str] = None,
    ) -> Response:
        """Merge a forked collection back into its parent.

        Args:
            source_uid (str): The fork's UID.
            destination_uid (str): The parent collection's UID.
            strategy (Optional[str]): ``deleteSource`` or ``updateSourceWithDestination``.
        """
        validate_uid(source_uid, "source_uid")
        validate_uid(destination_uid, "destination_uid")

        payload: Dict[str, Any] = {"source": source_uid, "destination": destination_uid}
        if strategy is not None:
            payload["strategy"] = strategy

        return self.request(self._spec("POST", Endpoint("/collections/merge"), payload))

    def pull_changes(self, collection_id: str) -> Response:
        """Pull the changes of a parent collection into its fork."""
        validate_id(collection_id, "collection_id")

        return self.request(self._spec("PUT", Endpoint(f"/collections/{collection_id}/pulls")))

    # Pull requests

    def list_pull_requests(self, collection_uid: str) -> Response:
        validate_uid(collection_uid, "collection_uid")

        return self.request(
            self._spec("GET", Endpoint(f"/collections/{collection_uid}/pull-requests"))
        )

    def create_pull_request(
        self,
        collection_uid: str,
        title: str,
        destination_id: str,
        reviewers: List[str],
        description: Optional[str] = None,
    ) -> Response:
        """Open a pull request from a forked collection.

        Args:
            collection_uid (str): The fork's UID.
            title (str): The pull request title.
            destination_id (str): The UID of the parent collection.
            reviewers (List[str]): User IDs of the reviewers.
            description (Optional[str]): The pull request description.
        """
        validate_uid(collection_uid, "collection_uid")

        payload: Dict[str, Any] = {
            "title": title,
            "destinationId": destination_id,
            "reviewers": reviewers,
        }
        if description is not None:
            payload["description"] = description

        spec = self._spec(
            "POST", Endpoint(f"/collections/{collection_uid}/pull-requests"), payload
        )
        return self.request(spec)

    # Transformations

    def sync_with_spec(self, collection_uid: str, spec_id: str) -> Response:
        """Synchronize a collection generated from a spec with that spec.

        The API answers ``202 Accepted`` with ``{"taskId", "url"}``; await the
        task with :meth:`wait_for_task`.
        """
        spec = self._sync_with_spec_spec(collection_uid, spec_id)
        return self.request(spec)

    async def sync_with_spec_async(self, collection_uid: str, spec_id: str) -> Response:
        spec = self._sync_with_spec_spec(collection_uid, spec_id)
        return await self.request_async(spec)

    def create_generation(
        self,
        collection_uid: str,
        element_type: str,
        name: str,
        type: str,
        format: str,
    ) -> Response:
        """Generate an API specification from a collection.

        Args:
            collection_uid (str): The collection UID.
            element_type (str): The generated element, ``spec``.
            name (str): The generated spec's name.
            type (str): The spec type, e.g. ``OPENAPI:3.0``.
            format (str): ``JSON`` or ``YAML``.

        Returns:
            Response: ``202 Accepted`` with ``{"taskId", "url"}``.

        Examples:
            ```python
            response = client.collections.create_generation(
                collection_uid, "spec", "Generated API", "OPENAPI:3.0", "YAML"
            )
            client.collections.wait_for_task(collection_uid, response.json()["taskId"])
            ```
        """
        spec = self._create_generation_spec(collection_uid, element_type, name, type, format)
        return self.request(spec)

    async def create_generation_async(
        self,
        collection_uid: str,
        element_type: str,
        name: str,
        type: str,
        format: str,
    ) -> Response:
        spec = self._create_generation_spec(collection_uid, element_type, name, type, format)
        return await self.request_async(spec)

    def list_generations(self, collection_uid: str, element_type: str) -> Response:
        spec = self._list_generations_spec(collection_uid, element_type)
        return self.request(spec)

    async def list_generations_async(
        self, collection_uid: str, element_type: str
    ) -> Response:
        spec = self._list_generations_spec(collection_uid, element_type)
        return await self.request_async(spec)

    def get_task_status(self, collection_uid: str, task_id: str) -> Response:
        """Retrieve the status of a generation or synchronization task."""
        spec = self._task_status_spec(collection_uid, task_id)
        return self.request(spec)

    async def get_task_status_async(self, collection_uid: str, task_id: str) -> Response:
        spec = self._task_status_spec(collection_uid, task_id)
        return await self.request_async(spec)

    def wait_for_task(self, collection_uid: str, task_id: str, **poll_options: Any) -> Response:
        """Block until a collection task completes.

        Args:
            collection_uid (str): The collection UID.
            task_id (str): The task ID returned by the kick-off call.
            **poll_options: ``poll_interval``, ``timeout``, ``task_name`` and
                ``max_retries``, passed to :func:`poll_until_complete`.

        Returns:
            Response: The status response that reported ``completed``.

        Raises:
            TaskFailedError: The task failed.
            TaskTimeoutError: The task did not complete in time.
        """
        validate_uid(collection_uid, "collection_uid")
        validate_id(task_id, "task_id")
        poll_options.setdefault("task_name", f"Collection task '{task_id}'")

        return poll_until_complete(
            lambda: self.get_task_status(collection_uid, task_id), **poll_options
        )

    async def wait_for_task_async(
        self, collection_uid: str, task_id: str, **poll_options: Any
    ) -> Response:
        """Asynchronously wait until a collection task completes."""
        validate_uid(collection_uid, "collection_uid")
        validate_id(task_id, "task_id")
        poll_options.setdefault("task_name", f"Collection task '{task_id}'")

        return await poll_until_complete_async(
            lambda: self.get_task_status_async(collection_uid, task_id), **poll_options
        )

    def _sync_with_spec_spec(self, collection_uid: str, spec_id: str) -> RequestSpec:
        validate_uid(collection_uid, "collection_uid")
        validate_id(spec_id, "spec_id")

        endpoint = Endpoint(f"/collections/{collection_uid}/synchronizations").with_query(
            {"specId": spec_id}
        )
        return self._spec("PUT", endpoint)

    def _create_generation_spec(
        self,
        collection_uid: str,
        element_type: str,
        name: str,
        type: str,
        format: str,
    ) -> RequestSpec:
        validate_uid(collection_uid, "collection_uid")
        validate_required(element_type, "element_type")

        return self._spec(
            "POST",
            Endpoint(f"/collections/{collection_uid}/generations/{element_type}"),
            {"name": name, "type": type, "format": format},
        )

    def _list_generations_spec(self, collection_uid: str, element_type: str) -> RequestSpec:
        validate_uid(collection_uid, "collection_uid")
        validate_required(element_type, "element_type")

        return self._spec(
            "GET", Endpoint(f"/collections/{collection_uid}/generations/{element_type}")
        )

    def _task_status_spec(self, collection_uid: str, task_id: str) -> RequestSpec:
        validate_uid(collection_uid, "collection_uid")
        validate_id(task_id, "task_id")

        return self._spec("GET", Endpoint(f"/collections/{collection_uid}/tasks/{task_id}"))
