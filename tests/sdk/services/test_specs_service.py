import json
from unittest.mock import patch

import pytest
from pytest_httpx import HTTPXMock

from postman_sdk._config import PostmanApiConfig
from postman_sdk._services import SpecsService
from postman_sdk._services.specs_service import DEFAULT_GENERATION_OPTIONS
from postman_sdk.errors import InvalidIdentifierError, TaskTimeoutError


@pytest.fixture
def service(config: PostmanApiConfig) -> SpecsService:
    return SpecsService(config=config)


class TestSpecsService:
    class TestList:
        def test_list(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/specs?workspaceId={item_id}&limit=5",
                method="GET",
                json={"specs": [], "meta": {}},
            )

            service.list(item_id, limit=5)

        def test_workspace_is_required(self, httpx_mock: HTTPXMock, service: SpecsService):
            with pytest.raises(InvalidIdentifierError, match="workspace_id is required"):
                service.list(None)  # type: ignore[arg-type]

            assert httpx_mock.get_requests() == []

    class TestCreate:
        def test_create(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
        ):
            files = [{"path": "index.yaml", "content": "openapi: 3.0.0"}]
            httpx_mock.add_response(
                url=f"{base_url}/specs?workspaceId={item_id}",
                method="POST",
                json={"id": "s1", "name": "Sample API"},
            )

            service.create(item_id, "Sample API", "OPENAPI:3.0", files)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {
                "name": "Sample API",
                "type": "OPENAPI:3.0",
                "files": files,
            }

    class TestFiles:
        def test_modify_file_keeps_nested_path(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/specs/{item_id}/files/common/schemas.yaml",
                method="PATCH",
            )

            service.modify_file(item_id, "common/schemas.yaml", {"content": "type: object"})

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {"content": "type: object"}

        @pytest.mark.parametrize("file_path", ["", "common//schemas.yaml", "../index.yaml"])
        def test_delete_file_rejects_malformed_path(
            self, httpx_mock: HTTPXMock, service: SpecsService, item_id: str, file_path: str
        ):
            with pytest.raises(InvalidIdentifierError):
                service.delete_file(item_id, file_path)

            assert httpx_mock.get_requests() == []

        def test_create_file(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
        ):
            httpx_mock.add_response(url=f"{base_url}/specs/{item_id}/files", method="POST")

            service.create_file(item_id, "index.yaml", "openapi: 3.0.0")

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {
                "path": "index.yaml",
                "content": "openapi: 3.0.0",
            }

        def test_get_definition(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
        ):
            httpx_mock.add_response(url=f"{base_url}/specs/{item_id}/definitions", method="GET")

            service.get_definition(item_id)

    class TestGeneration:
        def test_create_generation_with_name(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/specs/{item_id}/generations/collection",
                method="POST",
                status_code=202,
                json={"taskId": "t1", "url": "/specs/x/tasks/t1"},
            )

            service.create_generation(
                item_id, name="Generated", options={"folderStrategy": "Tags"}
            )

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            body = json.loads(sent_request.content)
            assert body["name"] == "Generated"
            assert body["options"] == {**DEFAULT_GENERATION_OPTIONS, "folderStrategy": "Tags"}

        def test_create_generation_defaults_to_spec_name(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/specs/{item_id}",
                method="GET",
                json={"id": item_id, "name": "Payments API"},
            )
            httpx_mock.add_response(
                url=f"{base_url}/specs/{item_id}/generations/collection",
                method="POST",
                status_code=202,
                json={"taskId": "t1", "url": "/specs/x/tasks/t1"},
            )

            service.create_generation(item_id)

            generation_request = httpx_mock.get_requests()[-1]
            body = json.loads(generation_request.content)
            assert body["name"] == "Payments API"
            assert body["options"] == DEFAULT_GENERATION_OPTIONS

        @pytest.mark.anyio
        async def test_create_generation_async_defaults_to_spec_name(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/specs/{item_id}",
                method="GET",
                json={"id": item_id, "name": "Payments API"},
            )
            httpx_mock.add_response(
                url=f"{base_url}/specs/{item_id}/generations/collection",
                method="POST",
                status_code=202,
                json={"taskId": "t1", "url": "/specs/x/tasks/t1"},
            )

            response = await service.create_generation_async(item_id)

            assert response.status_code == 202
            assert json.loads(httpx_mock.get_requests()[-1].content)["name"] == "Payments API"

        def test_list_generations(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/specs/{item_id}/generations/collection?limit=10",
                method="GET",
                json={"collections": []},
            )

            service.list_generations(item_id, "collection", limit=10)

        def test_sync_with_collection(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
            other_uid: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/specs/{item_id}/synchronizations?collectionUid={other_uid}",
                method="PUT",
                status_code=202,
                json={"taskId": "t1", "url": "/specs/x/tasks/t1"},
            )

            assert service.sync_with_collection(item_id, other_uid).status_code == 202

    class TestTasks:
        def test_wait_for_task_times_out(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
            other_id: str,
        ):
            url = f"{base_url}/specs/{item_id}/tasks/{other_id}"
            httpx_mock.add_response(url=url, method="GET", json={"status": "pending"})
            httpx_mock.add_response(url=url, method="GET", json={"status": "pending"})

            with patch("time.sleep"):
                with pytest.raises(TaskTimeoutError) as exc_info:
                    service.wait_for_task(item_id, other_id, poll_interval=0.5, timeout=1.0)

            assert exc_info.value.last_status == "pending"
            assert other_id in exc_info.value.task_name
            assert len(httpx_mock.get_requests()) == 2

        def test_wait_for_task_retries_server_errors(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
            other_id: str,
        ):
            url = f"{base_url}/specs/{item_id}/tasks/{other_id}"
            httpx_mock.add_response(url=url, method="GET", status_code=503)
            httpx_mock.add_response(url=url, method="GET", json={"status": "completed"})

            with patch("time.sleep"):
                response = service.wait_for_task(item_id, other_id)

            assert response.json() == {"status": "completed"}

        @pytest.mark.anyio
        async def test_wait_for_task_async(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
            other_id: str,
        ):
            url = f"{base_url}/specs/{item_id}/tasks/{other_id}"
            httpx_mock.add_response(url=url, method="GET", json={"status": "pending"})
            httpx_mock.add_response(url=url, method="GET", json={"status": "completed"})

            response = await service.wait_for_task_async(
                item_id, other_id, poll_interval=0.01, timeout=1.0
            )

            assert response.json() == {"status": "completed"}
            assert len(httpx_mock.get_requests()) == 2

        @pytest.mark.anyio
        async def test_get_task_status_async(
            self,
            httpx_mock: HTTPXMock,
            service: SpecsService,
            base_url: str,
            item_id: str,
            other_id: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/specs/{item_id}/tasks/{other_id}",
                method="GET",
                json={"status": "pending"},
            )

            response = await service.get_task_status_async(item_id, other_id)

            assert response.json() == {"status": "pending"}
