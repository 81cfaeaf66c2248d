"""
Shared pytest fixtures for realtime broker tests.

Outbound calls are stubbed by patching ``httpx.AsyncClient.post``, so no test
ever reaches the real OpenAI endpoint.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from realtime_broker.api import create_app
from realtime_broker.config import Settings, get_settings

TEST_API_KEY = "sk-test-secret-do-not-leak"
SESSIONS_URL = "https://api.openai.com/v1/realtime/sessions"


def session_reply(client_secret=None, status_code: int = 200) -> httpx.Response:
    """Build a successful upstream session reply with extra fields to discard."""
    if client_secret is None:
        client_secret = {"value": "ek_test_123", "expires_at": 1760000000}
    return httpx.Response(
        status_code,
        json={
            "id": "sess_abc",
            "object": "realtime.session",
            "model": "gpt-4o-realtime-preview",
            "client_secret": client_secret,
        },
    )


@pytest.fixture
def settings():
    """Settings with a test key, ignoring any local .env file."""
    return Settings(_env_file=None, openai_api_key=TEST_API_KEY)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def upstream_post():
    """Patch the outbound httpx POST; configure return_value or side_effect per test."""
    with patch("httpx.AsyncClient.post", new_callable=AsyncMock) as mock_post:
        mock_post.return_value = session_reply()
        yield mock_post


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
