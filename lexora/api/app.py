"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
error handlers, and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lexora import __version__
from lexora.api.chat import router as chat_router
from lexora.api.config import ServerConfig, get_server_config
from lexora.api.errors import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    The conversation context lives as long as this lifespan.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Lexora chat relay...")
    yield
    logger.info("Shutting down Lexora chat relay...")


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Optional server configuration, loaded from environment if omitted.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or get_server_config()

    application = FastAPI(
        title="Lexora Chat Relay",
        description=(
            "Relays chat messages from the Lexora UI to a locally hosted LLM "
            "and returns the reply. Keeps conversation context in memory."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[config.allowed_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    register_error_handlers(application)
    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "lexora"}

    return application


app = create_app()
