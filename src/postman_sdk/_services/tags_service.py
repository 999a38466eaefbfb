from typing import Optional

from httpx import Response

from .._config import PostmanApiConfig
from .._utils import Endpoint, validate_required
from ._base_service import BaseService


class TagsService(BaseService):
    def __init__(self, config: PostmanApiConfig) -> None:
        super().__init__(config=config)

    def list_entities(
        self,
        slug: str,
        limit: Optional[int] = None,
        direction: Optional[str] = None,
        cursor: Optional[str] = None,
        entity_type: Optional[str] = None,
    ) -> Response:
        """List the workspaces, collections and APIs tagged with a tag.

        Args:
            slug (str): The tag slug, e.g. ``needs-review``.
            limit (Optional[int]): Maximum number of results.
            direction (Optional[str]): ``asc`` or ``desc``, by tagging time.
            cursor (Optional[str]): The pagination cursor from a previous page.
            entity_type (Optional[str]): ``api``, ``collection`` or ``workspace``.
        """
        validate_required(slug, "slug")

        endpoint = Endpoint(f"/tags/{slug}/entities").with_query(
            {
                "limit": limit,
                "direction": direction,
                "cursor": cursor,
                "entityType": entity_type,
            }
        )
        return self.request(self._spec("GET", endpoint))
