"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - client_config: Deterministic ClientConfig that ignores the environment
    - session: Fresh ChatSession for one test
    - view: Recording ChatView that mimics the page's visible turns
    - make_chat_client: Factory for ChatClient instances over a mock transport
    - async_client: HTTPX client for the host API

All HTTP traffic goes through httpx transports; no network is touched.
"""

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from src.api import app
from src.chat.client import ChatClient
from src.chat.config import ClientConfig
from src.chat.session import ChatSession
from tests.fakes import CHAT_URL, SYSTEM_PROMPT, RecordingView


@pytest.fixture
def client_config() -> ClientConfig:
    """Return a fixed client configuration.

    Returns:
        ClientConfig pointing at the mock backend with no timeout.
    """
    return ClientConfig(
        chat_url=CHAT_URL,
        system_prompt=SYSTEM_PROMPT,
        timeout=None,
        line_buffering=False,
    )


@pytest.fixture
def session() -> ChatSession:
    """Create a fresh chat session with the test system prompt."""
    return ChatSession(SYSTEM_PROMPT)


@pytest.fixture
def view() -> RecordingView:
    """Create a recording display surface."""
    return RecordingView()


@pytest.fixture
async def make_chat_client(
    client_config: ClientConfig,
) -> AsyncIterator[Callable[..., ChatClient]]:
    """Yield a factory building ChatClients over httpx.MockTransport.

    The factory takes a request handler and optional config overrides.
    All underlying HTTP clients are closed at teardown.
    """
    http_clients: list[httpx.AsyncClient] = []

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
        **overrides: object,
    ) -> ChatClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http)
        config = client_config.model_copy(update=overrides)
        return ChatClient(config=config, http_client=http)

    yield factory

    for http in http_clients:
        await http.aclose()


@pytest.fixture
async def async_client() -> AsyncIterator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
