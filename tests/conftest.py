"""Pytest fixtures and shared test configuration.

Fixtures:
    - fake_provider: Scriptable stand-in for the completion provider
    - app: Relay app wired to the fake provider
    - async_client: HTTPX client for API testing
    - ui_origin: Origin the relay accepts cross-origin calls from
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from lexora.agent.provider import DEFAULT_SESSION_ID, ProviderError
from lexora.api.app import create_app
from lexora.api.chat import get_provider
from lexora.api.config import ServerConfig


class FakeProvider:
    """Completion provider that echoes or fails on demand.

    Records every call and keeps one history list per session key.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []
        self.histories: dict[str, list[str]] = {}
        self.reply: str | None = None
        self.error: Exception | None = None

    async def respond(self, message: str, session_id: str | None = None) -> str:
        self.calls.append((message, session_id))
        if self.error is not None:
            raise self.error
        history = self.histories.setdefault(session_id or DEFAULT_SESSION_ID, [])
        history.append(message)
        if self.reply is not None:
            return self.reply
        return f"echo: {message} (turn {len(history)})"


@pytest.fixture
def ui_origin() -> str:
    return "http://localhost:3001"


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def app(fake_provider: FakeProvider, ui_origin: str) -> FastAPI:
    """Create a relay app whose provider dependency is the fake."""
    application = create_app(ServerConfig(allowed_origin=ui_origin))
    application.dependency_overrides[get_provider] = lambda: fake_provider
    return application


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def provider_error() -> ProviderError:
    return ProviderError("connect ECONNREFUSED 127.0.0.1:11434")
