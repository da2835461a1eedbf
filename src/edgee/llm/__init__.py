"""Chat-completions wire types, transport and stream decoding."""

from .sse import iter_sse_data, iter_stream_chunks
from .transport import HTTPTransport, build_request_body
from .types import (
    Choice,
    FunctionCall,
    InputObject,
    Message,
    SendResponse,
    StreamChoice,
    StreamChunk,
    StreamDelta,
    ToolCall,
    ToolCallDelta,
    ToolChoice,
    Usage,
    accumulate_usage,
)

__all__ = [
    "Choice",
    "FunctionCall",
    "HTTPTransport",
    "InputObject",
    "Message",
    "SendResponse",
    "StreamChoice",
    "StreamChunk",
    "StreamDelta",
    "ToolCall",
    "ToolCallDelta",
    "ToolChoice",
    "Usage",
    "accumulate_usage",
    "build_request_body",
    "iter_sse_data",
    "iter_stream_chunks",
]
