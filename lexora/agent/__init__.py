"""Agno agent logic for LLM conversation.

Responsibilities:
    - Agent initialization with a local Ollama model
    - Conversation context held in process memory
    - Translation of provider failures into ProviderError

Maintains clean separation from the HTTP layer.
"""

from lexora.agent.chat_agent import AgentService, get_agent_service
from lexora.agent.config import AgentConfig, get_agent_config
from lexora.agent.provider import DEFAULT_SESSION_ID, CompletionProvider, ProviderError

__all__ = [
    "DEFAULT_SESSION_ID",
    "AgentConfig",
    "AgentService",
    "CompletionProvider",
    "ProviderError",
    "get_agent_config",
    "get_agent_service",
]
