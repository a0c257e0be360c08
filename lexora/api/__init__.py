"""FastAPI relay for the Lexora chat UI.

Endpoints:
    - GET /health: Service health status
    - POST /chat: Relay a user message to the completion provider
"""

from lexora.api.app import app, create_app

__all__ = ["app", "create_app"]
