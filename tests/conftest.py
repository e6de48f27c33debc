from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from triggerlines.core.config import Settings
from triggerlines.main import create_app

GEMINI_KEY = "gem-test-key"
OPENAI_KEY = "oai-test-key"


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key=GEMINI_KEY, openai_api_key=OPENAI_KEY, default_provider="gemini")


@pytest.fixture
def gemini_only_settings() -> Settings:
    return Settings(gemini_api_key=GEMINI_KEY, default_provider="gemini")


@pytest.fixture
def no_key_settings() -> Settings:
    return Settings()


@pytest.fixture
def client_for():
    """Build an in-process API client for the given settings."""

    @asynccontextmanager
    async def _client(settings: Settings, raise_app_exceptions: bool = True):
        app = create_app(settings, validate_on_startup=False)
        transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

    return _client


@pytest.fixture
async def client(client_for, settings):
    async with client_for(settings) as ac:
        yield ac
