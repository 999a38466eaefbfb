import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

# Ensure local source package (src/postman_sdk) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from postman_sdk._config import PostmanApiConfig  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("POSTMAN_API_KEY", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.getpostman.com"


@pytest.fixture
def api_key() -> str:
    return "PMAK-test-api-key"


@pytest.fixture
def config(base_url: str, api_key: str) -> PostmanApiConfig:
    return PostmanApiConfig(base_url=base_url, api_key=api_key)


@pytest.fixture
def item_id() -> str:
    return "12345678-1234-1234-1234-123456789abc"


@pytest.fixture
def other_id() -> str:
    return "87654321-4321-4321-4321-cba987654321"


@pytest.fixture
def item_uid(item_id: str) -> str:
    return f"12345678-{item_id}"


@pytest.fixture
def other_uid(other_id: str) -> str:
    return f"12345678-{other_id}"
