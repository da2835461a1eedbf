"""HTTP transport for the chat-completions endpoint using httpx."""

import logging
from collections.abc import AsyncIterator
from contextlib import aclosing
from typing import Any, Optional

import httpx

from edgee.errors import APIError
from edgee.llm.sse import iter_stream_chunks
from edgee.llm.types import Message, StreamChunk, ToolChoice

logger = logging.getLogger(__name__)

COMPLETIONS_PATH = "/v1/chat/completions"


def build_request_body(
    model: str,
    messages: list[Message],
    tools: Optional[list[dict[str, Any]]] = None,
    tool_choice: Optional[ToolChoice] = None,
    stream: bool = False,
) -> dict[str, Any]:
    """Build the JSON body of a chat-completions request.

    Optional keys are only included when set.
    """
    body: dict[str, Any] = {
        "model": model,
        "messages": [m.to_dict() for m in messages],
    }
    if tools:
        body["tools"] = tools
    if tool_choice:
        body["tool_choice"] = tool_choice
    if stream:
        body["stream"] = True
    return body


class HTTPTransport:
    """Issues one POST per API interaction.

    Holds no per-call state, so a single transport can serve concurrent calls.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the transport.

        Args:
            api_key: Bearer token sent with every request
            base_url: API base URL, without the completions path
            timeout: Request timeout in seconds (None disables it)
            http_client: Externally managed httpx client. If given, it is not
                closed by :meth:`close`.
        """
        self.url = base_url.rstrip("/") + COMPLETIONS_PATH
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def post(self, body: dict[str, Any]) -> Any:
        """Send a one-shot request and return the decoded JSON payload.

        Raises:
            APIError: If the response status is not 2xx
        """
        logger.debug("POST %s (model=%s)", self.url, body.get("model"))
        response = await self._client.post(self.url, json=body, headers=self.headers)

        if not response.is_success:
            raise APIError(response.status_code, response.text)

        return response.json()

    async def stream(self, body: dict[str, Any]) -> AsyncIterator[StreamChunk]:
        """Send a streaming request and yield decoded chunks as they arrive.

        Closing the generator early closes the underlying response.

        Raises:
            APIError: If the response status is not 2xx
        """
        logger.debug("POST %s (model=%s, stream)", self.url, body.get("model"))
        async with self._client.stream("POST", self.url, json=body, headers=self.headers) as response:
            if not response.is_success:
                await response.aread()
                raise APIError(response.status_code, response.text)

            async with aclosing(iter_stream_chunks(response.aiter_lines())) as chunks:
                async for chunk in chunks:
                    yield chunk

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
