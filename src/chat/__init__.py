"""Chat client core: conversation state and the streaming response consumer.

Responsibilities:
    - Append-only conversation history with a fixed system message
    - One POST per user turn carrying the full history
    - Incremental NDJSON parsing of the streamed reply
    - Single in-flight turn per session, guarded by a flag

Knows nothing about NiceGUI; the page talks to it through ChatView.
"""

from src.chat.client import ChatClient, TransportError, get_chat_client
from src.chat.config import ClientConfig, get_client_config
from src.chat.conversation import Conversation
from src.chat.session import ChatSession, send_turn
from src.chat.stream import iter_fragments, parse_fragment
from src.chat.view import ChatView

__all__ = [
    "ChatClient",
    "ChatSession",
    "ChatView",
    "ClientConfig",
    "Conversation",
    "TransportError",
    "get_chat_client",
    "get_client_config",
    "iter_fragments",
    "parse_fragment",
    "send_turn",
]
