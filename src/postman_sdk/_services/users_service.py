from httpx import Response

from .._config import PostmanApiConfig
from .._utils import Endpoint, RequestSpec
from ._base_service import BaseService


class UsersService(BaseService):
    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def me(self) -> Response:
        """Retrieve the user that owns the API key, with its usage limits.

        Returns:
            Response: The API response, ``{"user": {...}, "operations": [...]}``.
        """
        return self.request(self._me_spec())

    async def me_async(self) -> Response:
        return await self.request_async(self._me_spec())

    def _me_spec(self) -> RequestSpec:
        return self._spec("GET", Endpoint("/me"))
