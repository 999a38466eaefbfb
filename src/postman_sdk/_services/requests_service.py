from typing import Any, Dict, Optional, Union

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import Endpoint, validate_id, validate_required, validate_uid
from ._base_service import BaseService


class RequestsService(BaseService):
    """Service for managing the requests of a collection and their comments."""

    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def create(
        self,
        collection_id: str,
        request: Dict[str, Any],
        folder_id: Optional[str] = None,
    ) -> Response:
        """Create a request in a collection.

        Args:
            collection_id (str): The collection ID.
            request (Dict[str, Any]): The request, e.g. ``{"name": ..., "method": "GET", "url": ...}``.
            folder_id (Optional[str]): The folder to create it in. Defaults to
                the collection root.

        Returns:
            Response: The API response, ``{"data": {...}, "meta": {...}}``.
        """
        validate_id(collection_id, "collection_id")
        if folder_id is not None:
            validate_id(folder_id, "folder_id")

        endpoint = Endpoint(f"/collections/{collection_id}/requests").with_query(
            {"folder": folder_id}
        )
        return self.request(self._spec("POST", endpoint, request))

    def retrieve(
        self,
        collection_id: str,
        request_id: str,
        ids: Optional[bool] = None,
        uid: Optional[bool] = None,
        populate: Optional[bool] = None,
    ) -> Response:
        validate_id(collection_id, "collection_id")
        validate_id(request_id, "request_id")

        endpoint = Endpoint(f"/collections/{collection_id}/requests/{request_id}").with_query(
            {"ids": ids, "uid": uid, "populate": populate}
        )
        return self.request(self._spec("GET", endpoint))

    def update(
        self, collection_id: str, request_id: str, request: Dict[str, Any]
    ) -> Response:
        """Update a request. Fields not given keep their value."""
        validate_id(collection_id, "collection_id")
        validate_id(request_id, "request_id")

        spec = self._spec(
            "PUT", Endpoint(f"/collections/{collection_id}/requests/{request_id}"), request
        )
        return self.request(spec)

    def delete(self, collection_id: str, request_id: str) -> Response:
        validate_id(collection_id, "collection_id")
        validate_id(request_id, "request_id")

        spec = self._spec(
            "DELETE", Endpoint(f"/collections/{collection_id}/requests/{request_id}")
        )
        return self.request(spec)

    def list_comments(self, collection_uid: str, request_uid: str) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(request_uid, "request_uid")

        spec = self._spec(
            "GET", Endpoint(f"/collections/{collection_uid}/requests/{request_uid}/comments")
        )
        return self.request(spec)

    def create_comment(
        self, collection_uid: str, request_uid: str, comment: Dict[str, Any]
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(request_uid, "request_uid")

        spec = self._spec(
            "POST",
            Endpoint(f"/collections/{collection_uid}/requests/{request_uid}/comments"),
            comment,
        )
        return self.request(spec)

    def update_comment(
        self,
        collection_uid: str,
        request_uid: str,
        comment_id: Union[int, str],
        comment: Dict[str, Any],
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(request_uid, "request_uid")
        validate_required(comment_id, "comment_id")

        spec = self._spec(
            "PUT",
            Endpoint(
                f"/collections/{collection_uid}/requests/{request_uid}/comments/{comment_id}"
            ),
            comment,
        )
        return self.request(spec)

    def delete_comment(
        self, collection_uid: str, request_uid: str, comment_id: Union[int, str]
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(request_uid, "request_uid")
        validate_required(comment_id, "comment_id")

        spec = self._spec(
            "DELETE",
            Endpoint(
                f"/collections/{collection_uid}/requests/{request_uid}/comments/{comment_id}"
            ),
        )
        return self.request(spec)
