"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

HTTP:
    Requests never leave the process. Tests build a GrafanaClient on top of
    an httpx.MockTransport driven by a RecordingHandler, which stores every
    request it receives and answers with a canned JSON response.

Environment:
    Every test runs in its own temporary working directory with
    GRAFANA_API_KEY unset and configuration caches cleared, so a developer's
    shell or .env file cannot leak into results.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest

from grafana_tools.client import GrafanaClient
from grafana_tools.core.config import ClientConfig, get_app_config, get_settings


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test in a clean working directory with fresh config caches."""
    monkeypatch.delenv("GRAFANA_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


# =============================================================================
# HTTP Fixtures
# =============================================================================


class RecordingHandler:
    """MockTransport handler that records requests and returns a fixed response."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | None = None,
        error: Callable[[httpx.Request], Exception] | None = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body if json_body is not None else {}
        self.content = content
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json_body)


@pytest.fixture
def client_config() -> ClientConfig:
    """Connection details for a fake Grafana host."""
    return ClientConfig(
        api_key="xxxxxx",
        hostname="testhost",
        user_agent="grafana-tools/1.0.0",
    )


@pytest.fixture
def handler() -> RecordingHandler:
    """Default handler answering 200 with an empty JSON object."""
    return RecordingHandler()


@pytest.fixture
async def client(
    client_config: ClientConfig,
    handler: RecordingHandler,
) -> AsyncGenerator[GrafanaClient, None]:
    """GrafanaClient wired to the recording handler."""
    grafana = GrafanaClient(client_config, transport=httpx.MockTransport(handler))
    yield grafana
    await grafana.close()


@pytest.fixture
def anyio_backend() -> str:
    """Specify the async backend for anyio."""
    return "asyncio"
