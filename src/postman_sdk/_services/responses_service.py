from typing import Any, Dict, Optional, Union

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import Endpoint, validate_id, validate_required, validate_uid
from ._base_service import BaseService


class ResponsesService(BaseService):
    """Service for managing the saved responses of collection requests."""

    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def create(
        self, collection_id: str, request_id: str, response: Dict[str, Any]
    ) -> Response:
        """Save a response for a request.

        Args:
            collection_id (str): The collection ID.
            request_id (str): The parent request ID.
            response (Dict[str, Any]): The response, e.g. ``{"name": ..., "code": 200, "body": ...}``.
        """
        validate_id(collection_id, "collection_id")
        validate_id(request_id, "request_id")

        endpoint = Endpoint(f"/collections/{collection_id}/responses").with_query(
            {"request": request_id}
        )
        return self.request(self._spec("POST", endpoint, response))

    def retrieve(
        self,
        collection_id: str,
        response_id: str,
        ids: Optional[bool] = None,
        uid: Optional[bool] = None,
        populate: Optional[bool] = None,
    ) -> Response:
        validate_id(collection_id, "collection_id")
        validate_id(response_id, "response_id")

        endpoint = Endpoint(
            f"/collections/{collection_id}/responses/{response_id}"
        ).with_query({"ids": ids, "uid": uid, "populate": populate})
        return self.request(self._spec("GET", endpoint))

    def update(
        self, collection_id: str, response_id: str, response: Dict[str, Any]
    ) -> Response:
        validate_id(collection_id, "collection_id")
        validate_id(response_id, "response_id")

        spec = self._spec(
            "PUT",
            Endpoint(f"/collections/{collection_id}/responses/{response_id}"),
            response,
        )
        return self.request(spec)

    def delete(self, collection_id: str, response_id: str) -> Response:
        validate_id(collection_id, "collection_id")
        validate_id(response_id, "response_id")

        spec = self._spec(
            "DELETE", Endpoint(f"/collections/{collection_id}/responses/{response_id}")
        )
        return self.request(spec)

    def list_comments(self, collection_uid: str, response_uid: str) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(response_uid, "response_uid")

        spec = self._spec(
            "GET",
            Endpoint(f"/collections/{collection_uid}/responses/{response_uid}/comments"),
        )
        return self.request(spec)

    def create_comment(
        self, collection_uid: str, response_uid: str, comment: Dict[str, Any]
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(response_uid, "response_uid")

        spec = self._spec(
            "POST",
            Endpoint(f"/collections/{collection_uid}/responses/{response_uid}/comments"),
            comment,
        )
        return self.request(spec)

    def update_comment(
        self,
        collection_uid: str,
        response_uid: str,
        comment_id: Union[int, str],
        comment: Dict[str, Any],
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(response_uid, "response_uid")
        validate_required(comment_id, "comment_id")

        spec = self._spec(
            "PUT",
            Endpoint(
                f"/collections/{collection_uid}/responses/{response_uid}/comments/{comment_id}"
            ),
            comment,
        )
        return self.request(spec)

    def delete_comment(
        self, collection_uid: str, response_uid: str, comment_id: Union[int, str]
    ) -> Response:
        validate_uid(collection_uid, "collection_uid")
        validate_uid(response_uid, "response_uid")
        validate_required(comment_id, "comment_id")

        spec = self._spec(
            "DELETE",
            Endpoint(
                f"/collections/{collection_uid}/responses/{response_uid}/comments/{comment_id}"
            ),
        )
        return self.request(spec)
