"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - ChatRequest: Incoming chat request payload
    - ChatReply: Outgoing assistant reply
    - ErrorBody: Error payload for failed requests
"""

from lexora.models.schemas import ChatReply, ChatRequest, ErrorBody

__all__ = ["ChatReply", "ChatRequest", "ErrorBody"]
