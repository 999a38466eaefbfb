import pytest
from pytest_httpx import HTTPXMock

from postman_sdk import Postman
from postman_sdk._services import SpecsService, WorkspacesService


class TestPostman:
    def test_api_key_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("POSTMAN_API_KEY", "PMAK-from-env")

        client = Postman()

        assert client.config.api_key == "PMAK-from-env"
        assert client.config.base_url == "https://api.getpostman.com"

    def test_services_are_cached(self):
        client = Postman(api_key="PMAK-key")

        assert isinstance(client.workspaces, WorkspacesService)
        assert isinstance(client.specs, SpecsService)
        assert client.specs is client.specs

    def test_services_share_the_config(self, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url="https://proxy.example.com/me", method="GET", json={})

        client = Postman(api_key="PMAK-key", base_url="https://proxy.example.com")
        client.users.me()

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["X-API-Key"] == "PMAK-key"

    def test_close_releases_created_services(self):
        client = Postman(api_key="PMAK-key")
        specs = client.specs

        client.close()

        assert specs._client.is_closed
        assert "workspaces" not in vars(client)

    def test_context_manager_closes(self):
        with Postman(api_key="PMAK-key") as client:
            users = client.users

        assert users._client.is_closed

    @pytest.mark.anyio
    async def test_async_context_manager_closes(self):
        async with Postman(api_key="PMAK-key") as client:
            users = client.users

        assert users._client.is_closed
        assert users._client_async.is_closed
