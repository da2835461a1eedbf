"""Edgee - Python client for the Edgee chat-completions API.

Two ways to talk to the model:

- One-shot or streamed passthrough: send a prompt or a full conversation
  (with raw tool declarations if you handle tool calls yourself).
- Automatic tool loop: pass executable :class:`~edgee.tools.Tool` objects and
  the client runs requested tools and feeds results back until the model
  produces a final answer.

Key modules:

- :mod:`edgee.client` - The :class:`Edgee` client
- :mod:`edgee.agent` - Tool loop, one-shot and streaming
- :mod:`edgee.tools` - Tool definitions and the ``@tool`` decorator
- :mod:`edgee.llm` - Wire types, HTTP transport, SSE decoding
- :mod:`edgee.config` - API key and base URL resolution
"""

__version__ = "0.1.0"

from edgee.agent.events import (
    ChunkEvent,
    IterationCompleteEvent,
    StreamEvent,
    ToolResultEvent,
    ToolStartEvent,
)
from edgee.client import Edgee
from edgee.config.schema import EdgeeConfig
from edgee.errors import (
    APIError,
    ArgumentParseError,
    ArgumentValidationError,
    ConfigurationError,
    EdgeeError,
    MaxIterationsError,
    ToolError,
    ToolExecutionError,
)
from edgee.llm.types import (
    Choice,
    FunctionCall,
    InputObject,
    Message,
    SendResponse,
    StreamChunk,
    ToolCall,
    Usage,
)
from edgee.tools import Tool, ToolRegistry, tool

__all__ = [
    "APIError",
    "ArgumentParseError",
    "ArgumentValidationError",
    "Choice",
    "ChunkEvent",
    "ConfigurationError",
    "Edgee",
    "EdgeeConfig",
    "EdgeeError",
    "FunctionCall",
    "InputObject",
    "IterationCompleteEvent",
    "MaxIterationsError",
    "Message",
    "SendResponse",
    "StreamChunk",
    "StreamEvent",
    "Tool",
    "ToolCall",
    "ToolError",
    "ToolExecutionError",
    "ToolRegistry",
    "ToolResultEvent",
    "ToolStartEvent",
    "Usage",
    "__version__",
    "tool",
]
