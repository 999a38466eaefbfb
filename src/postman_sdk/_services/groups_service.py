from typing import Union

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import Endpoint, validate_required
from ._base_service import BaseService


class GroupsService(BaseService):
    """Service for reading the user groups of a team."""

    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def list(self) -> Response:
        return self.request(self._spec("GET", Endpoint("/groups")))

    def retrieve(self, group_id: Union[int, str]) -> Response:
        validate_required(group_id, "group_id")

        return self.request(self._spec("GET", Endpoint(f"/groups/{group_id}")))
