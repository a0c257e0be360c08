"""Completion provider capability used by the relay endpoint."""

from typing import Protocol

DEFAULT_SESSION_ID = "default"


class ProviderError(Exception):
    """Raised when the completion provider or its model endpoint fails."""

    pass


class CompletionProvider(Protocol):
    """Anything that turns a user message into an assistant reply.

    Implementations own the conversation context. Omitting ``session_id``
    selects the single shared context.
    """

    async def respond(self, message: str, session_id: str | None = None) -> str: ...
