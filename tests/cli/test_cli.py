import json
from unittest.mock import patch

from click.testing import CliRunner
from pytest_httpx import HTTPXMock

from postman_sdk._cli import cli

SPEC_ID = "12345678-1234-1234-1234-123456789abc"
TASK_ID = "87654321-4321-4321-4321-cba987654321"
COLLECTION_UID = f"12345678-{TASK_ID}"
API_KEY = "PMAK-cli-key"


class TestMe:
    def test_prints_user(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url="https://api.getpostman.com/me",
            method="GET",
            json={"user": {"id": 12345678, "username": "taylor"}},
        )

        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["me"], env={"POSTMAN_API_KEY": API_KEY})

        assert result.exit_code == 0
        assert json.loads(result.output) == {"user": {"id": 12345678, "username": "taylor"}}
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["X-API-Key"] == API_KEY

    def test_missing_api_key(self, runner: CliRunner, httpx_mock: HTTPXMock):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["me"])

        assert result.exit_code == 1
        assert "POSTMAN_API_KEY" in result.output
        assert httpx_mock.get_requests() == []

    def test_api_key_from_dotenv(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url="https://api.getpostman.com/me", method="GET", json={})

        with runner.isolated_filesystem():
            with open(".env", "w") as f:
                f.write("POSTMAN_API_KEY=PMAK-dotenv-key\n")
            result = runner.invoke(cli, ["me"], env={"POSTMAN_API_KEY": None})

        assert result.exit_code == 0
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["X-API-Key"] == "PMAK-dotenv-key"

    def test_api_error(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url="https://api.getpostman.com/me",
            method="GET",
            status_code=401,
            json={"error": {"name": "AuthenticationError", "message": "Invalid API Key"}},
        )

        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["me"], env={"POSTMAN_API_KEY": API_KEY})

        assert result.exit_code == 1
        assert "Invalid API Key" in result.output


class TestSyncSpec:
    def test_uploads_file_content(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=f"https://api.getpostman.com/specs/{SPEC_ID}/files/index.yaml",
            method="PATCH",
            json={"path": "index.yaml"},
        )

        with runner.isolated_filesystem():
            with open("openapi.yaml", "w") as f:
                f.write("openapi: 3.0.0\n")
            result = runner.invoke(
                cli,
                [
                    "sync-spec",
                    "--file",
                    "openapi.yaml",
                    "--spec-id",
                    SPEC_ID,
                    "--spec-file-path",
                    "index.yaml",
                ],
                env={"POSTMAN_API_KEY": API_KEY},
            )

        assert result.exit_code == 0
        assert f"Updated 'index.yaml' in spec {SPEC_ID}" in result.output
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert json.loads(sent_request.content) == {"content": "openapi: 3.0.0\n"}

    def test_invalid_spec_id(self, runner: CliRunner, httpx_mock: HTTPXMock):
        with runner.isolated_filesystem():
            with open("openapi.yaml", "w") as f:
                f.write("openapi: 3.0.0\n")
            result = runner.invoke(
                cli,
                [
                    "sync-spec",
                    "--file",
                    "openapi.yaml",
                    "--spec-id",
                    "not-an-id",
                    "--spec-file-path",
                    "index.yaml",
                ],
                env={"POSTMAN_API_KEY": API_KEY},
            )

        assert result.exit_code == 1
        assert "spec_id must be a valid ID format" in result.output
        assert httpx_mock.get_requests() == []


class TestWaitTask:
    def test_waits_for_spec_task(self, runner: CliRunner, httpx_mock: HTTPXMock):
        url = f"https://api.getpostman.com/specs/{SPEC_ID}/tasks/{TASK_ID}"
        httpx_mock.add_response(url=url, method="GET", json={"status": "pending"})
        httpx_mock.add_response(url=url, method="GET", json={"status": "completed"})

        with runner.isolated_filesystem(), patch("time.sleep"):
            result = runner.invoke(
                cli,
                ["wait-task", "--spec-id", SPEC_ID, "--task-id", TASK_ID],
                env={"POSTMAN_API_KEY": API_KEY},
            )

        assert result.exit_code == 0
        assert f"Task {TASK_ID} completed" in result.output

    def test_failed_collection_task(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=f"https://api.getpostman.com/collections/{COLLECTION_UID}/tasks/{TASK_ID}",
            method="GET",
            json={"status": "failed", "error": "boom"},
        )

        with runner.isolated_filesystem():
            result = runner.invoke(
                cli,
                ["wait-task", "--collection-uid", COLLECTION_UID, "--task-id", TASK_ID],
                env={"POSTMAN_API_KEY": API_KEY},
            )

        assert result.exit_code == 1
        assert "boom" in result.output

    def test_requires_exactly_one_owner(self, runner: CliRunner):
        result = runner.invoke(
            cli,
            [
                "wait-task",
                "--spec-id",
                SPEC_ID,
                "--collection-uid",
                COLLECTION_UID,
                "--task-id",
                TASK_ID,
            ],
            env={"POSTMAN_API_KEY": API_KEY},
        )

        assert result.exit_code == 2
        assert "exactly one of --spec-id or --collection-uid" in result.output
