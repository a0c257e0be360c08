"""Tests for the NiceGUI chat page, driven through NiceGUI's simulated user.

The relay is replaced by HeldRelay, which keeps each request open until
the test releases it, so the pending state can be observed.
"""

import asyncio
import re

import pytest
from nicegui.testing import User

from lexora.ui.client import ChatClient


class HeldRelay:
    """Stand-in for the relay that answers only once released."""

    def __init__(self, reply: str = "Hello from the model") -> None:
        self.reply = reply
        self.messages: list[str] = []
        self.release = asyncio.Event()

    async def send(self, message: str) -> dict:
        self.messages.append(message)
        await self.release.wait()
        return {"reply": self.reply}


@pytest.fixture
def relay(monkeypatch: pytest.MonkeyPatch) -> HeldRelay:
    held = HeldRelay()
    monkeypatch.setattr(ChatClient, "send", lambda _client, message: held.send(message))
    return held


@pytest.fixture
async def chat_user(user: User, relay: HeldRelay) -> User:
    """Simulated user with the chat page open."""
    # Registered after the user fixture resets NiceGUI's routes.
    import lexora.ui.chat_page  # noqa: F401

    user.javascript_rules[re.compile(".*prefers-color-scheme.*")] = lambda _: False
    await user.open("/")
    return user


def is_enabled(user: User, marker: str) -> bool:
    element = next(iter(user.find(marker=marker).elements))
    return element.enabled


def counter_text(user: User) -> str:
    return next(iter(user.find(marker="message-counter").elements)).text


class TestEmptyPage:
    """Tests for the page before any message is sent."""

    async def test_shows_empty_state_and_zero_count(self, chat_user: User) -> None:
        await chat_user.should_see("Start the conversation")
        await chat_user.should_see("Ask me anything!")
        assert counter_text(chat_user) == "0 messages"

    async def test_send_disabled_for_empty_input(self, chat_user: User) -> None:
        assert is_enabled(chat_user, "send-button") is False
        assert is_enabled(chat_user, "message-input") is True

    async def test_send_disabled_for_whitespace_input(self, chat_user: User) -> None:
        chat_user.find(marker="message-input").type("   ")

        assert is_enabled(chat_user, "send-button") is False

    async def test_send_enabled_once_text_is_typed(self, chat_user: User) -> None:
        chat_user.find(marker="message-input").type("Hi")

        assert is_enabled(chat_user, "send-button") is True


class TestPendingRequest:
    """Tests for the controls while a reply is outstanding."""

    async def test_controls_locked_until_reply_arrives(
        self, chat_user: User, relay: HeldRelay
    ) -> None:
        chat_user.find(marker="message-input").type("Hi")
        chat_user.find(marker="send-button").click()

        await chat_user.should_see("thinking")
        assert relay.messages == ["Hi"]
        assert is_enabled(chat_user, "message-input") is False
        assert is_enabled(chat_user, "send-button") is False
        await chat_user.should_not_see("Start the conversation")

        relay.release.set()

        await chat_user.should_see("Hello from the model")
        await chat_user.should_not_see("thinking")
        assert is_enabled(chat_user, "message-input") is True
        assert counter_text(chat_user) == "2 messages"

    async def test_input_cleared_after_send(self, chat_user: User, relay: HeldRelay) -> None:
        relay.release.set()
        chat_user.find(marker="message-input").type("Hi")
        chat_user.find(marker="send-button").click()

        await chat_user.should_see("Hello from the model")
        assert next(iter(chat_user.find(marker="message-input").elements)).value == ""

    async def test_second_click_while_pending_is_ignored(
        self, chat_user: User, relay: HeldRelay
    ) -> None:
        chat_user.find(marker="message-input").type("Hi")
        chat_user.find(marker="send-button").click()
        await chat_user.should_see("thinking")

        chat_user.find(marker="send-button").click()
        relay.release.set()

        await chat_user.should_see("Hello from the model")
        assert relay.messages == ["Hi"]


class TestEnterKey:
    """Tests for keyboard submission."""

    async def test_enter_submits(self, chat_user: User, relay: HeldRelay) -> None:
        from lexora.ui.chat_page import SEND_ON_ENTER

        relay.release.set()
        chat_user.find(marker="message-input").type("What is 2+2?").trigger(SEND_ON_ENTER)

        await chat_user.should_see("Hello from the model")
        assert relay.messages == ["What is 2+2?"]

    async def test_enter_on_blank_input_sends_nothing(
        self, chat_user: User, relay: HeldRelay
    ) -> None:
        from lexora.ui.chat_page import SEND_ON_ENTER

        chat_user.find(marker="message-input").type("   ").trigger(SEND_ON_ENTER)
        await asyncio.sleep(0.1)

        assert relay.messages == []
        assert counter_text(chat_user) == "0 messages"

    async def test_only_plain_enter_is_captured(self, chat_user: User) -> None:
        """Shift+Enter is left to the textarea, which inserts a newline."""
        element = next(iter(chat_user.find(marker="message-input").elements))
        keydown = [
            listener.to_dict()
            for listener in element._event_listeners.values()
            if listener.type.startswith("keydown")
        ]

        assert len(keydown) == 1
        assert keydown[0]["keys"] == ["enter"]
        assert {"exact", "prevent"} <= set(keydown[0]["modifiers"])

    async def test_shift_enter_does_not_send(self, chat_user: User, relay: HeldRelay) -> None:
        chat_user.find(marker="message-input").type("line one").trigger("keydown.enter.shift")
        await asyncio.sleep(0.1)

        assert relay.messages == []
        assert next(iter(chat_user.find(marker="message-input").elements)).value == "line one"
