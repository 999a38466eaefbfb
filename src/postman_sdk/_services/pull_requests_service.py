from typing import Any, Dict, List, Optional

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import Endpoint, validate_id
from ._base_service import BaseService

REVIEW_ACTIONS = ("approve", "decline", "merge", "unapprove")


class PullRequestsService(BaseService):
    """Service for reviewing and updating pull requests.

    Pull requests are opened from a fork, see
    :meth:`CollectionsService.create_pull_request`.
    """

    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def retrieve(self, pull_request_id: str) -> Response:
        validate_id(pull_request_id, "pull_request_id")

        return self.request(self._spec("GET", Endpoint(f"/pull-requests/{pull_request_id}")))

    def update(
        self,
        pull_request_id: str,
        title: str,
        reviewers: List[str],
        description: Optional[str] = None,
    ) -> Response:
        validate_id(pull_request_id, "pull_request_id")

        payload: Dict[str, Any] = {"title": title, "reviewers": reviewers}
        if description is not None:
            payload["description"] = description

        return self.request(
            self._spec("PUT", Endpoint(f"/pull-requests/{pull_request_id}"), payload)
        )

    def review(
        self, pull_request_id: str, action: str, comment: Optional[str] = None
    ) -> Response:
        """Approve, decline, merge or unapprove a pull request.

        Args:
            pull_request_id (str): The pull request ID.
            action (str): One of ``approve``, ``decline``, ``merge`` or ``unapprove``.
            comment (Optional[str]): A comment, e.g. the reason for declining.

        Raises:
            ValueError: If ``action`` is not a known review action.
        """
        validate_id(pull_request_id, "pull_request_id")
        if action not in REVIEW_ACTIONS:
            raise ValueError(
                f"action must be one of {', '.join(REVIEW_ACTIONS)}, got '{action}'"
            )

        payload = {"action": action}
        if comment is not None:
            payload["comment"] = comment

        return self.request(
            self._spec("POST", Endpoint(f"/pull-requests/{pull_request_id}/tasks"), payload)
        )
