"""Chat relay endpoint.

Validates the user message, delegates to the completion provider and
translates the outcome into an HTTP response.
"""

import logging

from fastapi import APIRouter, Depends

from lexora.agent.chat_agent import get_agent_service
from lexora.agent.provider import CompletionProvider
from lexora.api.errors import GENERIC_SERVER_ERROR, MessageRequiredError, RelayError
from lexora.models.schemas import ChatReply, ChatRequest, ErrorBody

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def get_provider() -> CompletionProvider:
    """Resolve the completion provider for a request."""
    return get_agent_service()


def _require_message(request: ChatRequest) -> str:
    """Return the message as sent, or raise if it is missing or blank.

    Raises:
        MessageRequiredError: 400 if the message is absent or whitespace.
    """
    if request.message is None or not request.message.strip():
        raise MessageRequiredError()
    return request.message


@router.post(
    "",
    response_model=ChatReply,
    responses={400: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
async def chat(
    request: ChatRequest,
    provider: CompletionProvider = Depends(get_provider),
) -> ChatReply:
    """Relay one user turn to the completion provider.

    Args:
        request: Chat payload with the user's message.
        provider: Completion provider holding the conversation context.

    Returns:
        ChatReply with the provider's reply text.

    Raises:
        400: Message missing or empty.
        500: Provider or model endpoint failure.
    """
    message = _require_message(request)
    logger.info(f"Received message ({len(message)} chars)")

    try:
        reply = await provider.respond(message, session_id=request.session_id)
    except Exception as e:
        logger.exception(f"Completion provider failed: {e}")
        raise RelayError(str(e) or GENERIC_SERVER_ERROR) from e

    return ChatReply(reply=reply)
