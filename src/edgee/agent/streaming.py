"""Streaming variant of the tool loop."""

import logging
from collections.abc import AsyncIterator
from contextlib import aclosing
from dataclasses import dataclass, field
from typing import Any, Protocol

from edgee.agent.events import (
    ChunkEvent,
    IterationCompleteEvent,
    StreamEvent,
    ToolResultEvent,
    ToolStartEvent,
)
from edgee.agent.loop import DEFAULT_MAX_TOOL_ITERATIONS, AgentState, execute_tool_call
from edgee.errors import MaxIterationsError
from edgee.llm.transport import build_request_body
from edgee.llm.types import FunctionCall, Message, StreamChunk, ToolCall, ToolCallDelta
from edgee.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class StreamingTransport(Protocol):
    """The part of the transport the streaming loop needs."""

    def stream(self, body: dict[str, Any]) -> AsyncIterator[StreamChunk]: ...


@dataclass
class _PartialToolCall:
    id: str = ""
    name: str = ""
    arguments: list[str] = field(default_factory=list)


class ToolCallAccumulator:
    """Reassembles tool calls from streamed fragments, keyed by index."""

    def __init__(self) -> None:
        self._calls: dict[int, _PartialToolCall] = {}

    def add(self, deltas: list[ToolCallDelta]) -> None:
        for delta in deltas:
            partial = self._calls.setdefault(delta.index, _PartialToolCall())
            if delta.id:
                partial.id = delta.id
            if delta.name:
                partial.name = delta.name
            if delta.arguments:
                partial.arguments.append(delta.arguments)

    def build(self) -> list[ToolCall]:
        """Return the completed calls in index order."""
        return [
            ToolCall(
                id=partial.id,
                function=FunctionCall(name=partial.name, arguments="".join(partial.arguments)),
            )
            for _, partial in sorted(self._calls.items())
        ]


async def stream_tool_loop(
    transport: StreamingTransport,
    model: str,
    messages: list[Message],
    registry: ToolRegistry,
    max_iterations: int = DEFAULT_MAX_TOOL_ITERATIONS,
) -> AsyncIterator[StreamEvent]:
    """Stream a tool-augmented conversation as events.

    Content events are yielded as each round's stream arrives. When a round
    ends with tool calls, each call gets a start event right before it runs
    and a result event right after. A round-complete event then precedes the
    next round's stream.

    Closing the iterator early closes the open network stream and runs no
    further tool handlers.

    Args:
        transport: Transport used for each round
        model: Model identifier
        messages: Seed conversation
        registry: Tools the model may call
        max_iterations: Maximum number of rounds

    Yields:
        ChunkEvent, ToolStartEvent, ToolResultEvent and IterationCompleteEvent

    Raises:
        MaxIterationsError: If every round requested tool calls
        APIError: If a round's request fails
    """
    state = AgentState(messages)
    tools = registry.declarations()

    for iteration in range(1, max_iterations + 1):
        body = build_request_body(model, state.messages, tools=tools, stream=True)
        accumulator = ToolCallAccumulator()
        content_parts: list[str] = []

        async with aclosing(transport.stream(body)) as chunks:
            async for chunk in chunks:
                if not chunk.choices:
                    continue

                delta = chunk.choices[0].delta
                if delta.tool_calls:
                    accumulator.add(delta.tool_calls)
                if delta.content:
                    content_parts.append(delta.content)
                    yield ChunkEvent(chunk)

        tool_calls = accumulator.build()
        if not tool_calls or not registry:
            return

        state.add_assistant_message("".join(content_parts) or None, tool_calls)

        for tool_call in tool_calls:
            yield ToolStartEvent(tool_call)
            result = await execute_tool_call(registry, tool_call)
            state.add_tool_result(tool_call.id, result)
            yield ToolResultEvent(tool_call_id=tool_call.id, tool_name=tool_call.name, result=result)

        logger.info("Streaming tool round %d complete (%d calls)", iteration, len(tool_calls))
        yield IterationCompleteEvent(iteration)

    raise MaxIterationsError(max_iterations)
