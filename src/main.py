"""Main application entry point.

Runs FastAPI with NiceGUI mounted for the chat interface.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles the health route, NiceGUI serves the chat page.
    """
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.chat.config import get_client_config
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    # Fail fast on a bad environment before the server starts
    config = get_client_config()

    app = create_app()

    ui.run_with(app, title="Chat")

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    logger.info(f"Chat UI available at http://localhost:{port}/")
    logger.info(f"Streaming replies from {config.chat_url}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
