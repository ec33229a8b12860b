"""Pytest configuration and fixtures."""

import httpx
import pytest
from fastapi.testclient import TestClient

from apirelay.app import create_app
from apirelay.config import Settings

SETTINGS_ENV_VARS = [
    "UPSTREAM_TIMEOUT",
    "PROBE_TIMEOUT",
    "IP_LOOKUP_URL",
    "IP_LOOKUP_TIMEOUT",
    "LOG_LEVEL",
    "DEBUG",
    "API_HOST",
    "API_PORT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of Settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_settings():
    """Settings for testing."""
    return Settings(
        upstream_timeout=30.0,
        probe_timeout=5.0,
        ip_lookup_url="https://ipinfo.test/json",
        ip_lookup_timeout=5.0,
        log_level="WARNING",
    )


@pytest.fixture
def upstream_requests():
    """Requests seen by the simulated upstreams, in arrival order."""
    return []


@pytest.fixture
def make_client(mock_settings, upstream_requests):
    """Build a TestClient whose upstream calls go to ``handler``.

    Every request reaching the transport is recorded in ``upstream_requests``.
    """
    clients = []

    def _make(handler, **overrides):
        async def recording_handler(request: httpx.Request):
            upstream_requests.append(request)
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        app_settings = mock_settings.model_copy(update=overrides)
        app = create_app(app_settings, transport=httpx.MockTransport(recording_handler))
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def ok_handler():
    """Upstream answering every call with a small JSON body."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            stream=httpx.ByteStream(b'{"data":[]}'),
            headers={"Content-Type": "application/json"},
        )

    return handler
