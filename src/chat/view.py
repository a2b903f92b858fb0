"""Display surface contract used by the turn orchestration.

The NiceGUI page implements this protocol; tests use a recording fake.
"""

from typing import Protocol

from src.models.schemas import Role


class ChatView(Protocol):
    """Everything a chat turn needs from the visible page."""

    def append_message(self, role: Role, text: str) -> None:
        """Create a new visible turn and scroll it into view."""
        ...

    def update_last_assistant_text(self, text: str) -> None:
        """Replace the text of the most recent assistant turn and scroll to it."""
        ...

    def set_busy(self, busy: bool) -> None:
        """Disable input and show the typing indicator while a request runs."""
        ...
