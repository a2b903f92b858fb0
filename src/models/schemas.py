"""Pydantic models for the chat wire format.

Provides type safety and validation for everything that crosses the network.

Models:
    - Role: Speaker of a message
    - Message: Individual message in the conversation
    - ChatRequest: Outgoing chat request payload
    - StreamFragment: One line of the streamed response body
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker roles understood by the chat backend."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message in the conversation.

    Messages are frozen: once appended to a conversation they never change.

    Attributes:
        role: The speaker identifier (system, user, or assistant).
        content: The message text.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: Role = Field(..., description="Message role: 'system', 'user', or 'assistant'")
    content: str = Field(..., description="The message content")


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        messages: The full conversation, system message first.
    """

    messages: list[Message] = Field(..., min_length=1)


class StreamFragment(BaseModel):
    """A single newline-delimited JSON object from the response stream.

    Only ``response`` is read; any other field the backend sends is ignored.

    Attributes:
        response: Incremental piece of assistant text, if present.
    """

    model_config = ConfigDict(extra="ignore")

    response: str | None = None
