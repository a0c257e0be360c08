"""Agno agent service backed by a local Ollama model.

Core module for the chatbot's conversation handling.

Architecture Decisions:

1. **In-memory storage** - Agno's Agent ignores session_id without a db. An
   ``InMemoryDb`` gives multi-turn context for the lifetime of the process
   and is discarded on restart.

2. **Singleton Pattern** - One agent and one store per process, so every
   request without a session_id lands in the same shared conversation.

3. **Service Wrapper** - Decouples the relay endpoint from Agno's interface.
   Every failure surfaces as ``ProviderError`` so the API maps one type.

4. **Per-session locks** - Turns against the same session are serialised;
   Agno reads history, calls the model, then appends the run, and two
   interleaved turns would see stale history. A lock lives only while a
   turn holds or waits on it. The session histories in ``InMemoryDb`` are
   kept until restart, one entry per session_id a client sends.
"""

import asyncio
import logging
import weakref

from agno.agent import Agent
from agno.db.in_memory import InMemoryDb
from agno.models.ollama import Ollama

from lexora.agent.config import AgentConfig, get_agent_config
from lexora.agent.provider import DEFAULT_SESSION_ID, ProviderError

logger = logging.getLogger(__name__)


class AgentService:
    """Completion provider wrapping Agno's Agent.

    Wraps Agno's Agent with:
    - In-memory session history
    - Singleton lifecycle management
    - Per-session locking
    - Centralized error translation to ProviderError
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the agent service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._storage = InMemoryDb()
        self._agent = self._create_agent()
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def _create_agent(self) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Configured Agent with Ollama model and in-memory storage.
        """
        model = Ollama(
            id=self._config.model_name,
            host=self._config.base_url,
            options={"temperature": self._config.temperature},
        )

        return Agent(
            model=model,
            db=self._storage,
            description=(
                "A friendly conversational assistant. It is talkative and "
                "provides specific details from its context."
            ),
            instructions=[
                "If you do not know the answer to a question, say so truthfully.",
            ],
            add_history_to_context=True,
            num_history_runs=self._config.num_history_runs,
            markdown=False,
        )

    def _lock_for(self, session_id: str) -> asyncio.Lock:
        lock = self._locks.get(session_id)
        if lock is None:
            lock = self._locks[session_id] = asyncio.Lock()
        return lock

    async def respond(self, message: str, session_id: str | None = None) -> str:
        """Get the assistant reply for a message.

        Agno appends the turn to the session history after the model call.

        Args:
            message: The user's message.
            session_id: Conversation key; the shared context when omitted.

        Returns:
            Complete response text.

        Raises:
            ProviderError: If the agent or the model endpoint fails.
        """
        session_id = session_id or DEFAULT_SESSION_ID

        async with self._lock_for(session_id):
            try:
                response = await self._agent.arun(message, session_id=session_id)
            except Exception as e:
                raise ProviderError(str(e) or e.__class__.__name__) from e

        status = getattr(response, "status", None)
        if str(getattr(status, "value", status)).lower() == "error":
            raise ProviderError(str(response.content or "Model run failed"))

        content = response.content
        if content is None:
            return ""
        return content if isinstance(content, str) else str(content)


# Module-level singleton instance
_agent_service: AgentService | None = None


def get_agent_service() -> AgentService:
    """Get or create the global agent service.

    Returns:
        The AgentService instance.
    """
    global _agent_service
    if _agent_service is None:
        _agent_service = AgentService()
        logger.info(
            f"Created agent service (model={_agent_service._config.model_name}, "
            f"host={_agent_service._config.base_url})"
        )
    return _agent_service
