from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request payload for the chat relay endpoint.

    ``message`` is optional at the schema level so a missing field reaches
    the endpoint and is reported with the same 400 body as an empty one.

    Attributes:
        message: User's message.
        session_id: Optional key for an isolated conversation context.
    """

    message: str | None = None
    session_id: str | None = Field(None, max_length=128)


class ChatReply(BaseModel):
    """Successful relay response.

    Attributes:
        reply: The assistant's reply text.
    """

    reply: str


class ErrorBody(BaseModel):
    """Body of every 4xx/5xx relay response."""

    error: str
