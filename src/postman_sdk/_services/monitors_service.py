from typing import Any, Dict, Optional

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import Endpoint, validate_id, validate_uid
from ._base_service import BaseService


class MonitorsService(BaseService):
    """Service for managing and running Postman monitors."""

    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def list(
        self,
        workspace_id: Optional[str] = None,
        active: Optional[bool] = None,
        owner: Optional[int] = None,
        collection_uid: Optional[str] = None,
        environment_uid: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Response:
        """List monitors.

        Args:
            workspace_id (Optional[str]): Only return the workspace's monitors.
            active (Optional[bool]): Only return active (``True``) or inactive monitors.
            owner (Optional[int]): Only return the monitors owned by this user ID.
            collection_uid (Optional[str]): Only return the monitors of this collection.
            environment_uid (Optional[str]): Only return the monitors using this environment.
            cursor (Optional[str]): The pagination cursor from a previous page.
            limit (Optional[int]): Maximum number of results.
        """
        if workspace_id is not None:
            validate_id(workspace_id, "workspace_id")
        if collection_uid is not None:
            validate_uid(collection_uid, "collection_uid")
        if environment_uid is not None:
            validate_uid(environment_uid, "environment_uid")

        endpoint = Endpoint("/monitors").with_query(
            {
                "workspace": workspace_id,
                "active": active,
                "owner": owner,
                "collectionUid": collection_uid,
                "environmentUid": environment_uid,
                "cursor": cursor,
                "limit": limit,
            }
        )
        return self.request(self._spec("GET", endpoint))

    def create(self, monitor: Dict[str, Any], workspace_id: str) -> Response:
        """Create a monitor.

        Args:
            monitor (Dict[str, Any]): ``{"name": ..., "collection": <UID>, "schedule": {"cron": ..., "timezone": ...}}``.
            workspace_id (str): The workspace ID.
        """
        validate_id(workspace_id, "workspace_id")

        endpoint = Endpoint("/monitors").with_query({"workspace": workspace_id})
        return self.request(self._spec("POST", endpoint, {"monitor": monitor}))

    def retrieve(self, monitor_id: str) -> Response:
        validate_id(monitor_id, "monitor_id")

        return self.request(self._spec("GET", Endpoint(f"/monitors/{monitor_id}")))

    def update(self, monitor_id: str, monitor: Dict[str, Any]) -> Response:
        validate_id(monitor_id, "monitor_id")

        spec = self._spec("PUT", Endpoint(f"/monitors/{monitor_id}"), {"monitor": monitor})
        return self.request(spec)

    def delete(self, monitor_id: str) -> Response:
        validate_id(monitor_id, "monitor_id")

        return self.request(self._spec("DELETE", Endpoint(f"/monitors/{monitor_id}")))

    def run(self, monitor_id: str, run_async: Optional[bool] = None) -> Response:
        """Run a monitor now.

        Args:
            monitor_id (str): The monitor ID.
            run_async (Optional[bool]): When ``True``, return right away
                instead of waiting for the run to finish.
        """
        validate_id(monitor_id, "monitor_id")

        endpoint = Endpoint(f"/monitors/{monitor_id}/run").with_query({"async": run_async})
        return self.request(self._spec("POST", endpoint))
