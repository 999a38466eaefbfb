import json
import logging

import httpx
import pytest
from pytest_httpx import HTTPXMock

from postman_sdk._config import PostmanApiConfig
from postman_sdk._services._base_service import BaseService
from postman_sdk.errors import PostmanApiError


@pytest.fixture
def service(config: PostmanApiConfig) -> BaseService:
    return BaseService(config=config)


class TestBaseService:
    def test_init_base_service(self, service: BaseService):
        assert service is not None

    def test_spec_shortcut(self, service: BaseService, base_url: str, api_key: str):
        spec = service._spec("post", "/workspaces", {"workspace": {}})

        assert spec.method == "POST"
        assert spec.url == f"{base_url}/workspaces"
        assert spec.headers["X-API-Key"] == api_key
        assert spec.json == {"workspace": {}}

    class TestRequest:
        def test_simple_request(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
            api_key: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/me",
                status_code=200,
                json={"user": {"id": 12345678}},
            )

            response = service.request(service._spec("GET", "/me"))

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "GET"
            assert sent_request.url == f"{base_url}/me"
            assert sent_request.headers["X-API-Key"] == api_key
            assert sent_request.headers["Content-Type"] == "application/json"
            assert sent_request.content == b""

            assert response.status_code == 200
            assert response.json() == {"user": {"id": 12345678}}

        def test_request_with_body_and_query(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/collections?workspace=w1",
                method="POST",
                status_code=200,
                json={"collection": {"id": "c1"}},
            )

            service.request(
                service._spec(
                    "POST", "/collections?workspace=w1", {"collection": {"info": {}}}
                )
            )

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert json.loads(sent_request.content) == {"collection": {"info": {}}}

        def test_non_2xx_raises_postman_api_error(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            body = {
                "error": {
                    "name": "instanceNotFoundError",
                    "message": "We could not find the workspace you are looking for",
                }
            }
            httpx_mock.add_response(url=f"{base_url}/workspaces/abc", status_code=404, json=body)

            with pytest.raises(PostmanApiError) as exc_info:
                service.request(service._spec("GET", "/workspaces/abc"))

            error = exc_info.value
            assert isinstance(error, httpx.HTTPStatusError)
            assert error.response.status_code == 404
            assert error.status_code == 404
            assert error.http_method == "GET"
            assert error.url == f"{base_url}/workspaces/abc"
            assert error.error_name == "instanceNotFoundError"
            assert error.error_message == body["error"]["message"]
            assert "instanceNotFoundError" in str(error)
            assert isinstance(error.__cause__, httpx.HTTPStatusError)

        def test_non_json_error_body(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(url=f"{base_url}/me", status_code=502, text="Bad Gateway")

            with pytest.raises(PostmanApiError) as exc_info:
                service.request(service._spec("GET", "/me"))

            assert exc_info.value.error_name is None
            assert exc_info.value.response_content == "Bad Gateway"

        def test_long_error_body_is_truncated(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(url=f"{base_url}/me", status_code=500, text="x" * 5000)

            with pytest.raises(PostmanApiError) as exc_info:
                service.request(service._spec("GET", "/me"))

            assert "[truncated]" in str(exc_info.value)
            assert len(exc_info.value.response_content) == 5000

        def test_transport_errors_propagate_untouched(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
        ):
            httpx_mock.add_exception(httpx.ConnectError("connection refused"))

            with pytest.raises(httpx.ConnectError):
                service.request(service._spec("GET", "/me"))

        def test_api_key_is_masked_in_logs(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
            api_key: str,
            caplog: pytest.LogCaptureFixture,
        ):
            httpx_mock.add_response(url=f"{base_url}/me", json={})

            with caplog.at_level(logging.DEBUG, logger="postman_sdk"):
                service.request(service._spec("GET", "/me"))

            assert f"Request: GET {base_url}/me" in caplog.text
            assert api_key not in caplog.text

    class TestRequestAsync:
        @pytest.mark.anyio
        async def test_simple_request_async(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
            api_key: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/me",
                status_code=200,
                json={"user": {"id": 12345678}},
            )

            response = await service.request_async(service._spec("GET", "/me"))

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "GET"
            assert sent_request.headers["X-API-Key"] == api_key
            assert response.json() == {"user": {"id": 12345678}}

        @pytest.mark.anyio
        async def test_non_2xx_raises_postman_api_error(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(url=f"{base_url}/me", status_code=401, json={})

            with pytest.raises(PostmanApiError) as exc_info:
                await service.request_async(service._spec("GET", "/me"))

            assert exc_info.value.response.status_code == 401
