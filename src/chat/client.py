"""HTTP client for the streaming chat backend.

Wraps httpx with:
- One POST per turn carrying the whole conversation
- Incremental reading of the newline-delimited JSON response body
- A single TransportError for every request-level failure
- Singleton lifecycle management for the UI
"""

import logging
from collections.abc import AsyncIterator
from types import TracebackType

import httpx

from src.chat.config import ClientConfig, get_client_config
from src.chat.stream import iter_fragments
from src.models.schemas import ChatRequest, Message

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Raised when the chat request fails or returns a non-2xx status.

    Attributes:
        status_code: HTTP status of the response, if one was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ChatClient:
    """Client for the backend chat endpoint."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the chat client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            http_client: Optional pre-built httpx client (e.g. with a mock
                    transport). The chat client does not close clients it
                    did not create.
        """
        self._config = config or get_client_config()
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self._config.timeout)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def stream_reply(self, messages: list[Message]) -> AsyncIterator[str]:
        """Stream the assistant reply to a conversation.

        Args:
            messages: Conversation snapshot, system message first.

        Yields:
            Response text fragments as they arrive.

        Raises:
            TransportError: If the request fails, returns a non-2xx status,
                or the connection breaks while reading the body.
        """
        payload = ChatRequest(messages=messages).model_dump(mode="json")

        try:
            async with self._http.stream(
                "POST",
                self._config.chat_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            ) as response:
                if not response.is_success:
                    raise TransportError(
                        f"Chat request failed with HTTP {response.status_code}",
                        status_code=response.status_code,
                    )
                async for fragment in iter_fragments(
                    response.aiter_bytes(),
                    line_buffering=self._config.line_buffering,
                ):
                    yield fragment
        except httpx.HTTPError as e:
            raise TransportError(f"Connection failed: {e}") from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "ChatClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


# Module-level singleton instance
_chat_client: ChatClient | None = None


def get_chat_client() -> ChatClient:
    """Get or create the global chat client.

    Uses singleton pattern so all pages share one connection pool.

    Returns:
        The ChatClient instance.
    """
    global _chat_client
    if _chat_client is None:
        _chat_client = ChatClient()
    return _chat_client


async def close_chat_client() -> None:
    """Close and forget the global chat client, if one was created."""
    global _chat_client
    if _chat_client is not None:
        await _chat_client.aclose()
        _chat_client = None
