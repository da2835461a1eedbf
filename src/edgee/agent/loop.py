"""Automatic tool-execution loop."""

import logging
from typing import Any, Protocol

from edgee.errors import (
    ArgumentParseError,
    ArgumentValidationError,
    MaxIterationsError,
    ToolExecutionError,
)
from edgee.llm.transport import build_request_body
from edgee.llm.types import Message, SendResponse, ToolCall, Usage, accumulate_usage
from edgee.tools.base import serialize_tool_result
from edgee.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOOL_ITERATIONS = 10


class CompletionTransport(Protocol):
    """The part of the transport the one-shot loop needs."""

    async def post(self, body: dict[str, Any]) -> Any: ...


class AgentState:
    """Conversation and usage owned by a single loop invocation."""

    def __init__(self, messages: list[Message]):
        """Initialize agent state.

        Args:
            messages: Seed conversation. Copied, never mutated.
        """
        self.messages: list[Message] = list(messages)
        self.usage: Usage | None = None

    def add_usage(self, usage: Usage | None) -> None:
        self.usage = accumulate_usage(self.usage, usage)

    def add_assistant_message(self, content: str | None, tool_calls: list[ToolCall]) -> None:
        """Echo the model's tool-calling turn into the conversation."""
        self.messages.append(Message(role="assistant", content=content, tool_calls=tool_calls))

    def add_tool_result(self, tool_call_id: str, result: Any) -> None:
        """Add a tool result, serialized to text, to the conversation.

        Args:
            tool_call_id: ID of the tool call this result answers
            result: Tool result or error mapping
        """
        self.messages.append(
            Message(
                role="tool",
                content=serialize_tool_result(result),
                tool_call_id=tool_call_id,
            )
        )


async def execute_tool_call(registry: ToolRegistry, tool_call: ToolCall) -> Any:
    """Run one tool call, turning failures into an error result.

    Args:
        registry: Tools available to this call
        tool_call: The call requested by the model

    Returns:
        The handler's result, or ``{"error": ...}`` on failure
    """
    tool = registry.get(tool_call.name)
    if tool is None:
        logger.warning("Model requested unknown tool '%s'", tool_call.name)
        return {"error": f"Unknown tool: {tool_call.name}"}

    try:
        result = await tool.execute(tool_call.arguments)
    except (ArgumentParseError, ArgumentValidationError) as e:
        logger.warning("Invalid arguments for tool '%s'", tool_call.name)
        return {"error": f"Invalid arguments: {e}"}
    except ToolExecutionError as e:
        logger.warning("Tool '%s' failed: %s", tool_call.name, e)
        return {"error": f"Tool execution failed: {e}"}

    # The result must be representable as message content
    try:
        serialize_tool_result(result)
    except (TypeError, ValueError) as e:
        logger.warning("Tool '%s' returned an unserializable result: %s", tool_call.name, e)
        return {"error": f"Tool execution failed: {e}"}

    return result


async def run_tool_loop(
    transport: CompletionTransport,
    model: str,
    messages: list[Message],
    registry: ToolRegistry,
    max_iterations: int = DEFAULT_MAX_TOOL_ITERATIONS,
) -> SendResponse:
    """Call the model repeatedly, executing requested tools, until it answers.

    Each round sends the whole conversation. Tool calls of a round run one
    after another in the order the model emitted them.

    Args:
        transport: Transport used for each round
        model: Model identifier
        messages: Seed conversation
        registry: Tools the model may call
        max_iterations: Maximum number of rounds

    Returns:
        The final response, with usage summed over all rounds

    Raises:
        MaxIterationsError: If every round requested tool calls
        APIError: If a round's request fails
    """
    state = AgentState(messages)
    tools = registry.declarations()

    for iteration in range(1, max_iterations + 1):
        body = build_request_body(model, state.messages, tools=tools)
        response = SendResponse.from_dict(await transport.post(body))
        state.add_usage(response.usage)

        tool_calls = response.tool_calls
        # With no tools declared there is nothing to dispatch
        if not tool_calls or not registry:
            return SendResponse(choices=response.choices, usage=state.usage)

        message = response.message
        state.add_assistant_message(message.content if message else None, tool_calls)

        for tool_call in tool_calls:
            result = await execute_tool_call(registry, tool_call)
            state.add_tool_result(tool_call.id, result)

        logger.info("Tool round %d complete (%d calls)", iteration, len(tool_calls))

    raise MaxIterationsError(max_iterations)
