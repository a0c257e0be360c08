"""Relay server configuration with environment variable loading."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

load_dotenv()


class ServerConfig(BaseModel):
    """Startup configuration for the relay service and the chat UI.

    Attributes:
        host: Interface the servers bind to.
        port: Relay service port.
        ui_port: Chat UI port when running in separate mode.
        allowed_origin: The only cross-origin caller the relay accepts.
        storage_secret: Secret signing NiceGUI's per-browser storage.
    """

    model_config = ConfigDict(validate_default=True)

    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(
        default_factory=lambda: os.getenv("PORT", "5000"), ge=1, le=65535
    )
    ui_port: int = Field(
        default_factory=lambda: os.getenv("UI_PORT", "3001"), ge=1, le=65535
    )
    allowed_origin: str = Field(
        default_factory=lambda: os.getenv("UI_ORIGIN", "http://localhost:3001"),
        description="Origin of the deployed chat UI",
    )
    storage_secret: str = Field(
        default_factory=lambda: os.getenv("NICEGUI_STORAGE_SECRET", "lexora-chat-secret"),
    )

    @field_validator("allowed_origin")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Browsers send Origin without a trailing slash."""
        return v.strip().rstrip("/")


def get_server_config() -> ServerConfig:
    """Create server configuration from environment."""
    return ServerConfig()
