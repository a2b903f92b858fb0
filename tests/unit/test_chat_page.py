"""Unit tests for the NiceGUI chat page and NiceGUIChatView.

Pages run in NiceGUI's simulated user environment, so no browser is
started. Each test registers its own page because NiceGUI resets its
routes between tests.
"""

import asyncio
from collections.abc import AsyncIterator, Callable

import httpx
import pytest_check as check
from nicegui import ui
from nicegui.testing import User

from src.chat.client import ChatClient
from src.models.schemas import Role
from src.ui.chat_page import NiceGUIChatView, build_chat_page
from tests.fakes import ndjson_response

PAGE = "/session"


def serve_chat_page(client: ChatClient) -> list[NiceGUIChatView]:
    """Register the chat page at PAGE and collect the views it builds."""
    views: list[NiceGUIChatView] = []

    @ui.page(PAGE)
    def page() -> None:
        views.append(build_chat_page(client))

    return views


class TestChatPageTurn:
    """Tests for submitting a message through the page controls."""

    async def test_reply_is_rendered_and_controls_restored(
        self,
        user: User,
        make_chat_client: Callable[..., ChatClient],
    ) -> None:
        """A submitted message streams its reply and re-enables input."""
        client = make_chat_client(
            lambda request: ndjson_response(b'{"response":"Hi "}\n', b'{"response":"there!"}\n')
        )
        views = serve_chat_page(client)
        await user.open(PAGE)

        user.find(marker="message-input").type("Hello")
        user.find(marker="send").click()

        await user.should_see("Hello")
        await user.should_see("Hi there!")
        await user.should_not_see(marker="typing")

        view = views[0]
        check.equal(view.input_field.value, "")
        check.is_true(view.input_field.enabled)
        check.is_true(view.send_btn.enabled)

    async def test_controls_disabled_while_reply_streams(
        self,
        user: User,
        make_chat_client: Callable[..., ChatClient],
    ) -> None:
        """Input is cleared and locked until the stream finishes."""
        release = asyncio.Event()

        async def body() -> AsyncIterator[bytes]:
            yield b'{"response":"partial"}\n'
            await release.wait()
            yield b'{"response":" done"}\n'

        client = make_chat_client(lambda request: httpx.Response(200, content=body()))
        views = serve_chat_page(client)
        await user.open(PAGE)

        user.find(marker="message-input").type("Hello")
        user.find(marker="send").click()
        await user.should_see("partial")

        view = views[0]
        check.equal(view.input_field.value, "")
        check.is_false(view.input_field.enabled)
        check.is_false(view.send_btn.enabled)
        check.is_true(view.typing_indicator.visible)

        release.set()
        await user.should_see("partial done")
        await user.should_not_see(marker="typing")

        check.is_true(view.input_field.enabled)
        check.is_true(view.send_btn.enabled)

    async def test_blank_input_sends_nothing(
        self,
        user: User,
        make_chat_client: Callable[..., ChatClient],
    ) -> None:
        """Whitespace-only input is left in place and no request is made."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return ndjson_response(b'{"response":"unexpected"}\n')

        views = serve_chat_page(make_chat_client(handler))
        await user.open(PAGE)

        user.find(marker="message-input").type("   ")
        user.find(marker="send").click()
        await asyncio.sleep(0.1)

        check.equal(requests, [])
        check.equal(views[0].input_field.value, "   ")
        check.is_true(views[0].send_btn.enabled)


class TestNiceGUIChatView:
    """Tests for the view's rendering of assistant turns."""

    async def test_rendering_same_buffer_twice_keeps_one_turn(
        self,
        user: User,
        make_chat_client: Callable[..., ChatClient],
    ) -> None:
        """Repeated updates rewrite the assistant turn instead of adding one."""
        views = serve_chat_page(make_chat_client(lambda request: ndjson_response()))
        await user.open(PAGE)
        view = views[0]

        view.append_message(Role.USER, "Hello")
        view.append_message(Role.ASSISTANT, "")
        view.update_last_assistant_text("Hi there!")
        view.update_last_assistant_text("Hi there!")

        await user.should_see("Hi there!")
        assert len(user.find(content="Hi there!").elements) == 1

    async def test_update_targets_latest_assistant_turn(
        self,
        user: User,
        make_chat_client: Callable[..., ChatClient],
    ) -> None:
        """Earlier assistant turns keep their text."""
        views = serve_chat_page(make_chat_client(lambda request: ndjson_response()))
        await user.open(PAGE)
        view = views[0]

        view.append_message(Role.ASSISTANT, "first")
        view.append_message(Role.ASSISTANT, "")
        view.update_last_assistant_text("second")

        await user.should_see("first")
        await user.should_see("second")
        check.equal(len(user.find(content="first").elements), 1)
        check.equal(len(user.find(content="second").elements), 1)

    async def test_markup_is_rendered_as_text(
        self,
        user: User,
        make_chat_client: Callable[..., ChatClient],
    ) -> None:
        """Streamed text is shown verbatim rather than parsed as HTML."""
        views = serve_chat_page(make_chat_client(lambda request: ndjson_response()))
        await user.open(PAGE)
        view = views[0]

        view.append_message(Role.ASSISTANT, "")
        view.update_last_assistant_text("<b>bold</b>")

        await user.should_see("<b>bold</b>")
