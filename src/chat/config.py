"""Chat client configuration with environment variable loading.

Pydantic-based configuration for the streaming chat client.
Values default from the environment (and a local .env file).
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_CHAT_URL = "http://localhost:8787/api/chat"

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful, friendly assistant. "
    "Provide concise and accurate responses. "
    "Write plainly with short sentences and avoid filler."
)

FALLBACK_MESSAGE = "Sorry, there was an error processing your request."


def _env_timeout() -> float | None:
    raw = os.getenv("CHAT_TIMEOUT", "").strip()
    return float(raw) if raw else None


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


class ClientConfig(BaseModel):
    """Configuration for the chat client.

    Attributes:
        chat_url: Absolute URL of the backend chat endpoint.
        system_prompt: Fixed instruction sent as the first message of every request.
        timeout: Request timeout in seconds (None waits indefinitely).
        line_buffering: Carry incomplete trailing lines across chunk boundaries.
    """

    # Environment-derived defaults go through the same validation
    model_config = ConfigDict(validate_default=True)

    chat_url: str = Field(
        default_factory=lambda: os.getenv("CHAT_API_URL", DEFAULT_CHAT_URL),
        description="Backend chat endpoint",
    )
    system_prompt: str = Field(
        default_factory=lambda: os.getenv("SYSTEM_PROMPT") or DEFAULT_SYSTEM_PROMPT,
        description="System instruction that opens every conversation",
    )
    timeout: float | None = Field(
        default_factory=_env_timeout,
        gt=0,
        description="Request timeout in seconds, None for no timeout",
    )
    line_buffering: bool = Field(
        default_factory=lambda: _env_flag("CHAT_LINE_BUFFERING"),
        description="Reassemble JSON lines split across network chunks",
    )

    @field_validator("chat_url")
    @classmethod
    def validate_chat_url(cls, v: str) -> str:
        """Validate that the chat URL is an absolute http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("CHAT_API_URL must be an absolute http(s) URL")
        return v

    @field_validator("system_prompt")
    @classmethod
    def validate_system_prompt(cls, v: str) -> str:
        """Validate that the system prompt is non-empty."""
        if not v or not v.strip():
            raise ValueError("System prompt must not be empty")
        return v.strip()


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If an environment value is invalid.
    """
    return ClientConfig()
