"""Events produced by the streaming tool loop."""

from dataclasses import dataclass, field
from typing import Any, Literal, Union

from edgee.llm.types import StreamChunk, ToolCall


@dataclass
class ChunkEvent:
    """A content fragment from the current round's stream."""

    chunk: StreamChunk
    type: Literal["chunk"] = field(default="chunk", init=False)


@dataclass
class ToolStartEvent:
    """A tool is about to be executed."""

    tool_call: ToolCall
    type: Literal["tool_start"] = field(default="tool_start", init=False)


@dataclass
class ToolResultEvent:
    """A tool finished; ``result`` is the handler's value or an error mapping."""

    tool_call_id: str
    tool_name: str
    result: Any
    type: Literal["tool_result"] = field(default="tool_result", init=False)


@dataclass
class IterationCompleteEvent:
    """All tool calls of a round are resolved; the next round follows."""

    iteration: int
    type: Literal["iteration_complete"] = field(default="iteration_complete", init=False)


StreamEvent = Union[ChunkEvent, ToolStartEvent, ToolResultEvent, IterationCompleteEvent]
