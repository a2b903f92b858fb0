"""NiceGUI chat interface with incremental rendering of streamed replies."""

from datetime import datetime

from nicegui import ui

from src.chat.client import ChatClient, get_chat_client
from src.chat.session import ChatSession, send_turn
from src.models.schemas import Role

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: #1f2937; }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .message-text { white-space: pre-wrap; word-break: break-word; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #2563eb;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #2563eb; }
</style>
"""


class NiceGUIChatView:
    """ChatView backed by NiceGUI elements on one page.

    Text is rendered with labels, never as HTML, so streamed content
    cannot inject markup.
    """

    def __init__(
        self,
        messages_container: ui.column,
        scroll_area: ui.scroll_area,
        typing_indicator: ui.row,
        input_field: ui.textarea,
        send_btn: ui.button,
    ) -> None:
        self._messages = messages_container
        self._scroll = scroll_area
        self.typing_indicator = typing_indicator
        self.input_field = input_field
        self.send_btn = send_btn
        self._last_assistant: ui.label | None = None

    def append_message(self, role: Role, text: str) -> None:
        is_user = role == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with self._messages, ui.row().classes(f"w-full {align}"):
            with ui.column().classes("max-w-[75%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    label = ui.label(text).classes("message-text text-sm leading-relaxed")
                ui.label(datetime.now().strftime("%I:%M %p")).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )

        if not is_user:
            self._last_assistant = label
        self._scroll_to_bottom()

    def update_last_assistant_text(self, text: str) -> None:
        if self._last_assistant is None:
            self.append_message(Role.ASSISTANT, text)
            return
        self._last_assistant.set_text(text)
        self._scroll_to_bottom()

    def set_busy(self, busy: bool) -> None:
        self.typing_indicator.set_visibility(busy)
        if busy:
            self.input_field.disable()
            self.send_btn.disable()
        else:
            self.input_field.enable()
            self.send_btn.enable()
            self.input_field.run_method("focus")

    def _scroll_to_bottom(self) -> None:
        self._scroll.scroll_to(percent=1.0)


def build_chat_page(client: ChatClient) -> NiceGUIChatView:
    """Build the chat layout for the current page and wire it to ``client``.

    Each call starts a fresh session, so every page visit gets its own
    conversation.

    Returns:
        The view rendering this page's turns.
    """
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession(client.config.system_prompt)

    view: NiceGUIChatView
    input_field: ui.textarea

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or session.is_processing:
            return
        input_field.value = ""
        await send_turn(session, text, view, client)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center gap-3"):
            ui.icon("chat").classes("text-white text-2xl")
            ui.label("Chat").classes("text-lg font-semibold text-white")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
            with ui.column().classes("w-full p-5 gap-4"):
                messages_container = ui.column().classes("w-full gap-4")
                with ui.row().classes("items-center gap-1 px-4").mark(
                    "typing"
                ) as typing_indicator:
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")
                typing_indicator.set_visibility(False)

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
            with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                # Enter sends, Shift+Enter keeps the newline
                input_field = (
                    ui.textarea(placeholder="Type your message here...")
                    .props("autogrow borderless dense rows=1 autofocus")
                    .classes("w-full")
                    .mark("message-input")
                    .on("keydown.enter.exact.prevent", send_message)
                )
            send_btn = (
                ui.button(icon="send", on_click=send_message)
                .props("round unelevated")
                .mark("send")
            )

    view = NiceGUIChatView(
        messages_container, scroll_area, typing_indicator, input_field, send_btn
    )
    return view


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    build_chat_page(get_chat_client())

