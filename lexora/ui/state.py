"""Chat state for one UI session, independent of NiceGUI widgets."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal

logger = logging.getLogger(__name__)

ERROR_TEXT = "Error talking to server."
NO_REPLY_TEXT = "(no reply)"

Role = Literal["user", "assistant"]
SendFn = Callable[[str], Awaitable[dict[str, Any]]]


@dataclass(frozen=True)
class Message:
    """A single chat message shown in the history."""

    role: Role
    text: str


class ChatState:
    """Message history plus the pending flag for one browser tab.

    At most one request is outstanding: ``submit`` does nothing while a
    previous turn is pending.
    """

    def __init__(
        self,
        send: SendFn,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.messages: list[Message] = []
        self.pending: bool = False
        self.last_error: str | None = None
        self._send = send
        self._on_change = on_change

    def can_submit(self, text: str | None) -> bool:
        return bool(text and text.strip()) and not self.pending

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def submit(self, text: str | None) -> bool:
        """Send one user turn and record the reply.

        Returns:
            False if the call was a no-op (blank text or a pending turn).
        """
        if not self.can_submit(text):
            return False
        text = text.strip()

        self.messages.append(Message("user", text))
        self.pending = True
        self.last_error = None
        self._changed()

        try:
            data = await self._send(text)
            reply = data.get("reply") if isinstance(data, dict) else None
            self.messages.append(
                Message("assistant", NO_REPLY_TEXT if reply is None else str(reply))
            )
        except Exception as e:
            logger.exception(f"Chat request failed: {e}")
            self.last_error = str(e) or ERROR_TEXT
            self.messages.append(Message("assistant", ERROR_TEXT))
        finally:
            self.pending = False
            self._changed()

        return True
