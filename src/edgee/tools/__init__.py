"""Executable tools for the automatic tool loop."""

from .base import ArgumentSchema, PydanticSchema, Tool, ToolHandler, serialize_tool_result
from .registry import ToolRegistry, tool

__all__ = [
    "ArgumentSchema",
    "PydanticSchema",
    "Tool",
    "ToolHandler",
    "ToolRegistry",
    "serialize_tool_result",
    "tool",
]
