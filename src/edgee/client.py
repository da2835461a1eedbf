"""Caller-facing Edgee client."""

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import aclosing
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import httpx

from edgee.agent.events import StreamEvent
from edgee.agent.loop import run_tool_loop
from edgee.agent.streaming import stream_tool_loop
from edgee.config.loader import load_config
from edgee.config.schema import EdgeeConfig
from edgee.errors import ConfigurationError
from edgee.llm.transport import HTTPTransport, build_request_body
from edgee.llm.types import InputObject, Message, SendResponse, StreamChunk, ToolChoice
from edgee.tools.base import Tool
from edgee.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

Input = Union[str, InputObject]


@dataclass
class PassthroughRequest:
    """Forward the conversation as-is; no automatic tool dispatch."""

    messages: list[Message]
    tools: Optional[list[dict[str, Any]]] = None
    tool_choice: Optional[ToolChoice] = None


@dataclass
class ToolLoopRequest:
    """Run the automatic tool loop over executable tools."""

    messages: list[Message]
    registry: ToolRegistry
    max_iterations: int


def resolve_request(
    input: Input,
    tools: Optional[Sequence[Tool]],
    max_tool_iterations: int,
) -> Union[PassthroughRequest, ToolLoopRequest]:
    """Resolve the caller's input into one of the two request variants.

    Args:
        input: User text, or a full conversation with raw tool declarations
        tools: Executable tools. Empty or None means passthrough.
        max_tool_iterations: Round limit for the tool loop

    Raises:
        ValueError: If executable tools are combined with raw declarations,
            or the round limit is below 1
    """
    if isinstance(input, str):
        messages = [Message(role="user", content=input)]
        raw_tools, tool_choice = None, None
    else:
        messages = input.message_objects()
        raw_tools, tool_choice = input.tools, input.tool_choice

    if not tools:
        return PassthroughRequest(messages=messages, tools=raw_tools, tool_choice=tool_choice)

    if raw_tools or tool_choice:
        raise ValueError("Executable tools cannot be combined with raw tool declarations")
    if max_tool_iterations < 1:
        raise ValueError("max_tool_iterations must be at least 1")

    return ToolLoopRequest(
        messages=messages,
        registry=ToolRegistry(tools),
        max_iterations=max_tool_iterations,
    )


class Edgee:
    """Client for the Edgee OpenAI-compatible chat-completions API.

    The client holds no per-call state; one instance can serve concurrent calls.

    Example:
        async with Edgee() as edgee:
            response = await edgee.send("devstral2", "Say hello!")
            print(response.text)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[EdgeeConfig] = None,
        config_path: Optional[Union[str, Path]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            api_key: API key. Falls back to EDGEE_API_KEY, then the config file.
            base_url: API base URL. Falls back to EDGEE_BASE_URL, then the
                config file, then https://api.edgee.ai.
            timeout: Request timeout in seconds (default: none)
            config: Fully resolved configuration; skips environment lookup
            config_path: YAML config file (default: ~/.edgee/edgee.yaml)
            http_client: Externally managed httpx client

        Raises:
            ConfigurationError: If no API key can be resolved
        """
        if config is None:
            config = load_config(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                path=config_path,
            )
        elif not config.api_key:
            raise ConfigurationError("EDGEE_API_KEY is not set")

        self.config = config
        self.base_url = config.base_url
        self._transport = HTTPTransport(
            api_key=config.api_key,  # type: ignore[arg-type]
            base_url=config.base_url,
            timeout=config.timeout,
            http_client=http_client,
        )

    async def send(
        self,
        model: str,
        input: Input,
        tools: Optional[Sequence[Tool]] = None,
        max_tool_iterations: Optional[int] = None,
    ) -> SendResponse:
        """Send a one-shot request.

        With executable ``tools``, requested tools are run automatically and
        the conversation continues until the model answers.

        Args:
            model: Model identifier
            input: User text, or an InputObject for manual mode
            tools: Executable tools for the automatic loop
            max_tool_iterations: Round limit (default from config)

        Returns:
            The final response; in tool mode usage is summed over all rounds

        Raises:
            APIError: If the API answers with a non-2xx status
            MaxIterationsError: If the round limit is reached
        """
        request = resolve_request(input, tools, self._max_iterations(max_tool_iterations))

        if isinstance(request, ToolLoopRequest):
            logger.debug("Running tool loop with tools: %s", ", ".join(request.registry.names))
            return await run_tool_loop(
                self._transport,
                model,
                request.messages,
                request.registry,
                request.max_iterations,
            )

        body = build_request_body(
            model, request.messages, tools=request.tools, tool_choice=request.tool_choice
        )
        return SendResponse.from_dict(await self._transport.post(body))

    def stream(
        self,
        model: str,
        input: Input,
        tools: Optional[Sequence[Tool]] = None,
        max_tool_iterations: Optional[int] = None,
    ) -> AsyncIterator[Union[StreamChunk, StreamEvent]]:
        """Stream a response.

        Without executable tools, yields StreamChunks. With tools, yields
        stream events (content chunks, tool start/result, round complete).
        Nothing is sent until iteration starts.

        Args:
            model: Model identifier
            input: User text, or an InputObject for manual mode
            tools: Executable tools for the automatic loop
            max_tool_iterations: Round limit (default from config)

        Raises:
            ValueError: Immediately, if the request cannot be resolved
        """
        request = resolve_request(input, tools, self._max_iterations(max_tool_iterations))

        if isinstance(request, ToolLoopRequest):
            return stream_tool_loop(
                self._transport,
                model,
                request.messages,
                request.registry,
                request.max_iterations,
            )

        body = build_request_body(
            model,
            request.messages,
            tools=request.tools,
            tool_choice=request.tool_choice,
            stream=True,
        )
        return self._transport.stream(body)

    async def stream_text(self, model: str, input: Input) -> AsyncIterator[str]:
        """Stream only the non-empty text fragments of a response."""
        request = resolve_request(input, None, self.config.max_tool_iterations)
        body = build_request_body(
            model,
            request.messages,
            tools=request.tools,
            tool_choice=request.tool_choice,
            stream=True,
        )
        async with aclosing(self._transport.stream(body)) as chunks:
            async for chunk in chunks:
                if chunk.text:
                    yield chunk.text

    def _max_iterations(self, override: Optional[int]) -> int:
        return self.config.max_tool_iterations if override is None else override

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._transport.close()

    async def __aenter__(self) -> "Edgee":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
