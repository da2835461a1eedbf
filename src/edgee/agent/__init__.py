"""Automatic tool-execution loop, one-shot and streaming.

The loop calls the model, runs any tools it requests, feeds their results
back, and repeats until the model answers without tool calls or the round
limit is reached.

Usage::

    from edgee.agent import run_tool_loop
    from edgee.tools import ToolRegistry

    response = await run_tool_loop(
        transport, "devstral2", [Message(role="user", content="Hi")], ToolRegistry(tools)
    )
"""

from edgee.agent.events import (
    ChunkEvent,
    IterationCompleteEvent,
    StreamEvent,
    ToolResultEvent,
    ToolStartEvent,
)
from edgee.agent.loop import (
    DEFAULT_MAX_TOOL_ITERATIONS,
    AgentState,
    execute_tool_call,
    run_tool_loop,
)
from edgee.agent.streaming import ToolCallAccumulator, stream_tool_loop

__all__ = [
    "DEFAULT_MAX_TOOL_ITERATIONS",
    "AgentState",
    "ChunkEvent",
    "IterationCompleteEvent",
    "StreamEvent",
    "ToolCallAccumulator",
    "ToolResultEvent",
    "ToolStartEvent",
    "execute_tool_call",
    "run_tool_loop",
    "stream_tool_loop",
]
