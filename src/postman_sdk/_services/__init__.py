from .collections_service import CollectionsService
from .environments_service import EnvironmentsService
from .groups_service import GroupsService
from .mocks_service import MocksService
from .monitors_service import MonitorsService
from .pull_requests_service import PullRequestsService
from .requests_service import RequestsService
from .responses_service import ResponsesService
from .specs_service import SpecsService
from .tags_service import TagsService
from .users_service import UsersService
from .workspaces_service import WorkspacesService

__all__ = [
    "CollectionsService",
    "EnvironmentsService",
    "GroupsService",
    "MocksService",
    "MonitorsService",
    "PullRequestsService",
    "RequestsService",
    "ResponsesService",
    "SpecsService",
    "TagsService",
    "UsersService",
    "WorkspacesService",
]
