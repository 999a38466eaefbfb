from logging import getLogger
from typing import Any, Mapping, Optional

from httpx import AsyncClient, Client, HTTPStatusError, Response

from .._config import PostmanApiConfig
from .._utils import RequestSpec, build_request_spec, get_httpx_client_kwargs
from .._utils.constants import HEADER_API_KEY
from ..errors import PostmanApiError


def _masked_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: "***" if name.lower() == HEADER_API_KEY.lower() and value else value
        for name, value in headers.items()
    }


class BaseService:
    """Sends request descriptors to the Postman API.

    Every resource service builds a :class:`RequestSpec` per call and hands it
    to :meth:`request` or :meth:`request_async`. Non-2xx responses are raised
    as :class:`PostmanApiError`; transport errors propagate untouched.
    """

    def __init__(self, config: PostmanApiConfig) -> None:
        self._logger = getLogger("postman_sdk")
        self._config = config

        client_kwargs = get_httpx_client_kwargs(config)

        self._client = Client(**client_kwargs)
        self._client_async = AsyncClient(**client_kwargs)

        super().__init__()

    def _spec(
        self,
        method: str,
        endpoint: str,
        json: Any | None = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RequestSpec:
        return build_request_spec(
            self._config, method, endpoint, json, headers=headers
        )

    def _log_request(self, spec: RequestSpec) -> None:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(f"HEADERS: {_masked_headers(spec.headers)}")

    def _raise_for_status(self, response: Response) -> Response:
        try:
            response.raise_for_status()
        except HTTPStatusError as e:
            # include the http response in the error message
            error = PostmanApiError(e)
            response.close()
            raise error from e

        return response

    def request(self, spec: RequestSpec) -> Response:
        self._log_request(spec)

        response = self._client.request(
            spec.method, spec.url, headers=spec.headers, json=spec.json
        )
        self._logger.debug(f"Response: {response.status_code} {spec.url}")

        return self._raise_for_status(response)

    async def request_async(self, spec: RequestSpec) -> Response:
        self._log_request(spec)

        response = await self._client_async.request(
            spec.method, spec.url, headers=spec.headers, json=spec.json
        )
        self._logger.debug(f"Response: {response.status_code} {spec.url}")

        try:
            response.raise_for_status()
        except HTTPStatusError as e:
            # include the http response in the error message
            error = PostmanApiError(e)
            await response.aclose()
            raise error from e

        return response

    def close(self) -> None:
        self._client.close()

    async def aclose(self) -> None:
        await self._client_async.aclose()
