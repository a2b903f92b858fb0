"""Append-only conversation history."""

from collections.abc import Iterator

from src.models.schemas import Message, Role


class Conversation:
    """Ordered messages exchanged during one chat session.

    The first message is always the system instruction given at construction.
    Later messages are only ever appended, never edited or removed.
    """

    def __init__(self, system_prompt: str) -> None:
        self._messages: list[Message] = [Message(role=Role.SYSTEM, content=system_prompt)]

    @property
    def system_message(self) -> Message:
        return self._messages[0]

    def append(self, message: Message) -> None:
        """Add a message to the end of the conversation.

        Args:
            message: A user or assistant message.

        Raises:
            ValueError: If the message is a system message.
        """
        if message.role == Role.SYSTEM:
            raise ValueError("The system message is fixed at initialization")
        self._messages.append(message)

    def snapshot(self) -> list[Message]:
        """Return the full ordered history for transmission."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.snapshot())
