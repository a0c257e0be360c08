"""Agent configuration with environment variable loading.

Pydantic-based configuration for the completion provider.
Targets a locally hosted Ollama server by default.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class AgentConfig(BaseModel):
    """Configuration for the chat agent.

    Attributes:
        base_url: Base URL of the model-serving endpoint.
        model_name: Model identifier served by the endpoint.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        num_history_runs: Previous turns replayed into the model context.
    """

    # Defaults come from the environment and go through the same checks.
    model_config = ConfigDict(validate_default=True)

    base_url: str = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL", "http://localhost:11434"),
        description="Model-serving endpoint base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "mistral"),
        description="Model to use",
    )
    temperature: float = Field(
        default_factory=lambda: os.getenv("LLM_TEMPERATURE", "0.7"),
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    num_history_runs: int = Field(
        default_factory=lambda: os.getenv("LLM_HISTORY_RUNS", "50"),
        ge=1,
        description="Number of previous turns included in context",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("LLM_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("model_name")
    @classmethod
    def validate_model_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("LLM_MODEL must not be empty")
        return v.strip()


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.

    Raises:
        ValueError: If an environment value is invalid.
    """
    return AgentConfig()
