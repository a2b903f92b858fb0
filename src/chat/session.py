"""Per-session chat state and the send-turn flow.

A turn appends the user message, streams the reply into the view one
fragment at a time, then commits the finished reply to the conversation.
Only one turn may run per session; ``is_processing`` is the guard.
"""

import logging
import uuid
from contextlib import aclosing

from src.chat.client import ChatClient
from src.chat.config import FALLBACK_MESSAGE
from src.chat.conversation import Conversation
from src.chat.view import ChatView
from src.models.schemas import Message, Role

logger = logging.getLogger(__name__)


class ChatSession:
    """Manages chat state for one page session."""

    def __init__(self, system_prompt: str) -> None:
        self.conversation = Conversation(system_prompt)
        self.session_id: str = str(uuid.uuid4())
        self.is_processing: bool = False


async def send_turn(
    session: ChatSession,
    text: str,
    view: ChatView,
    client: ChatClient,
) -> Message | None:
    """Send one user message and stream the assistant reply into the view.

    Failures never escape: the partial reply is discarded and a fixed
    fallback message is committed and shown instead. Cancelling the calling
    task still releases the guard.

    Args:
        session: Session whose conversation is sent and extended.
        text: Raw text submitted by the user.
        view: Display surface for the session.
        client: Chat backend client.

    Returns:
        The assistant message committed for this turn, or None if the
        submission was ignored (blank text or a turn already running).
    """
    text = text.strip()
    if not text or session.is_processing:
        return None

    session.is_processing = True

    try:
        view.set_busy(True)
        session.conversation.append(Message(role=Role.USER, content=text))
        view.append_message(Role.USER, text)
        view.append_message(Role.ASSISTANT, "")

        logger.info(
            f"Session {session.session_id[:8]}: sending turn "
            f"({len(session.conversation)} messages)"
        )

        try:
            buffer = ""
            stream = client.stream_reply(session.conversation.snapshot())
            async with aclosing(stream) as reply_stream:
                async for fragment in reply_stream:
                    buffer += fragment
                    view.update_last_assistant_text(buffer)
            reply = Message(role=Role.ASSISTANT, content=buffer)
        except Exception:
            logger.exception(f"Session {session.session_id[:8]}: chat turn failed")
            reply = Message(role=Role.ASSISTANT, content=FALLBACK_MESSAGE)
            view.update_last_assistant_text(FALLBACK_MESSAGE)

        session.conversation.append(reply)
        logger.info(f"Session {session.session_id[:8]}: turn complete ({len(reply.content)} chars)")
        return reply

    finally:
        session.is_processing = False
        view.set_busy(False)
