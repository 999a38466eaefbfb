from functools import cached_property
from logging import getLogger
from typing import Any, List, Optional

from ._config import PostmanApiConfig
from ._services import (
    CollectionsService,
    EnvironmentsService,
    GroupsService,
    MocksService,
    MonitorsService,
    PullRequestsService,
    RequestsService,
    ResponsesService,
    SpecsService,
    TagsService,
    UsersService,
    WorkspacesService,
)
from ._services._base_service import BaseService


class Postman:
    """Entry point of the SDK.

    Builds the configuration once and exposes one service per Postman API
    resource. The API key defaults to the ``POSTMAN_API_KEY`` environment
    variable.

    Examples:
        ```python
        from postman_sdk import Postman

        client = Postman()

        workspaces = client.workspaces.list(type="team").json()["workspaces"]
        ```

        The services own their HTTP connections; release them with
        :meth:`close` / :meth:`aclose` or use the client as a context manager:

        ```python
        with Postman() as client:
            client.users.me()
        ```
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._config = PostmanApiConfig.from_env(
            api_key=api_key, base_url=base_url, timeout=timeout
        )

        log = getLogger("postman_sdk")
        log.debug(f"CONFIG: base_url={self._config.base_url} timeout={self._config.timeout}")

    @property
    def config(self) -> PostmanApiConfig:
        return self._config

    def _open_services(self) -> List[BaseService]:
        # cached_property stores created services in the instance dict
        return [value for value in vars(self).values() if isinstance(value, BaseService)]

    def close(self) -> None:
        for service in self._open_services():
            service.close()

    async def aclose(self) -> None:
        for service in self._open_services():
            service.close()
            await service.aclose()

    def __enter__(self) -> "Postman":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "Postman":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    @cached_property
    def workspaces(self) -> WorkspacesService:
        return WorkspacesService(self._config)

    @cached_property
    def collections(self) -> CollectionsService:
        return CollectionsService(self._config)

    @cached_property
    def requests(self) -> RequestsService:
        return RequestsService(self._config)

    @cached_property
    def responses(self) -> ResponsesService:
        return ResponsesService(self._config)

    @cached_property
    def environments(self) -> EnvironmentsService:
        return EnvironmentsService(self._config)

    @cached_property
    def specs(self) -> SpecsService:
        return SpecsService(self._config)

    @cached_property
    def mocks(self) -> MocksService:
        return MocksService(self._config)

    @cached_property
    def monitors(self) -> MonitorsService:
        return MonitorsService(self._config)

    @cached_property
    def pull_requests(self) -> PullRequestsService:
        return PullRequestsService(self._config)

    @cached_property
    def tags(self) -> TagsService:
        return TagsService(self._config)

    @cached_property
    def users(self) -> UsersService:
        return UsersService(self._config)

    @cached_property
    def groups(self) -> GroupsService:
        return GroupsService(self._config)
