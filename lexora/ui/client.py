"""HTTP client for the chat relay endpoint."""

import logging
import os
from typing import Any

import httpx

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{os.getenv('PORT', '5000')}")


class ChatClientError(Exception):
    """Raised when the relay cannot be reached or answers with an error."""

    pass


class ChatClient:
    """Posts one user message per call to ``{base_url}/chat``."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def send(self, message: str) -> dict[str, Any]:
        """Send a message and return the decoded JSON body.

        Raises:
            ChatClientError: On transport failure, non-2xx status, or a body
                that is not JSON.
        """
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self._timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post("/chat", json={"message": message})
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPStatusError as e:
                raise ChatClientError(
                    f"HTTP {e.response.status_code}: {_error_text(e.response)}"
                ) from e
            except httpx.RequestError as e:
                raise ChatClientError(f"Connection failed: {e}") from e
            except ValueError as e:
                raise ChatClientError(f"Invalid response body: {e}") from e

        if not isinstance(data, dict):
            logger.warning(f"Unexpected response body type: {type(data).__name__}")
            return {}
        return data


def _error_text(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return response.reason_phrase
