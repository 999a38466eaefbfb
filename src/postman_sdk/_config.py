import os
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ._utils.constants import BASE_URL, DEFAULT_TIMEOUT, ENV_POSTMAN_API_KEY
from .errors import ApiKeyMissingError


class PostmanApiConfig(BaseModel):
    """Connection settings shared by every service.

    Built once and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = BASE_URL
    api_key: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "PostmanApiConfig":
        """Build a config, falling back to ``POSTMAN_API_KEY`` for the key."""
        return cls(
            base_url=base_url or BASE_URL,
            api_key=api_key or os.getenv(ENV_POSTMAN_API_KEY) or None,
            timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
        )

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ApiKeyMissingError()
        return self.api_key
