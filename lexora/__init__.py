"""Lexora - a minimal chat application backed by a local LLM runtime.

Combines FastAPI for the chat relay endpoint, Agno for conversation memory
and model calls, NiceGUI for the browser chat interface, and Pydantic for
request validation and configuration.

Components:
    - api: HTTP relay endpoint and error mapping
    - agent: Completion provider with in-memory conversation context
    - ui: Chat page, theme preference, and relay client
    - models: Request/response schemas
"""

__version__ = "0.1.0"
