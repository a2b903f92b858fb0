"""FastAPI application factory and configuration.

Host application for the chat page, with lifespan management and a
health endpoint. The NiceGUI page is mounted onto it in src.main.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.chat.client import close_chat_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown lifecycle.

    Closes the shared chat client's connection pool on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting chat client...")
    yield
    await close_chat_client()
    logger.info("Shutting down chat client...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Chat Client",
        description=(
            "Browser chat client that streams replies from a newline-delimited "
            "JSON chat backend and renders them as they arrive."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "chat-client"}

    return application


app = create_app()
