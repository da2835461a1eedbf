"""Chat-completions data types.

These mirror the JSON shapes exchanged with the API. Parsing is lenient:
missing or malformed fields become ``None`` instead of raising, so a
partially valid payload still yields usable accessors.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Literal, Union


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_arguments(value: Any) -> str:
    # Some backends send arguments as an object instead of JSON text
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


@dataclass
class FunctionCall:
    """Function name and raw JSON arguments of a tool call."""

    name: str
    arguments: str = ""


@dataclass
class ToolCall:
    """A tool call requested by the model."""

    id: str
    function: FunctionCall
    type: str = "function"

    @property
    def name(self) -> str:
        return self.function.name

    @property
    def arguments(self) -> str:
        return self.function.arguments

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ToolCall":
        function = _as_dict(data.get("function"))
        return cls(
            id=data.get("id") or "",
            type=data.get("type") or "function",
            function=FunctionCall(
                name=function.get("name") or "",
                arguments=_as_arguments(function.get("arguments")),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "function": {
                "name": self.function.name,
                "arguments": self.function.arguments,
            },
        }


@dataclass
class Message:
    """A message in the conversation."""

    role: str  # "system", "user", "assistant", "tool"
    content: str | None = None
    name: str | None = None
    tool_calls: list[ToolCall] | None = None
    tool_call_id: str | None = None  # For tool response messages

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Message":
        raw_calls = data.get("tool_calls")
        tool_calls = None
        if isinstance(raw_calls, list):
            tool_calls = [ToolCall.from_dict(tc) for tc in raw_calls if isinstance(tc, dict)]

        return cls(
            role=data.get("role") or "assistant",
            content=data.get("content"),
            name=data.get("name"),
            tool_calls=tool_calls,
            tool_call_id=data.get("tool_call_id"),
        )

    def to_dict(self) -> dict[str, Any]:
        message_dict: dict[str, Any] = {"role": self.role}

        # Assistant messages carrying tool calls may have null content
        if self.content is not None or self.role == "assistant":
            message_dict["content"] = self.content
        if self.name:
            message_dict["name"] = self.name
        if self.tool_calls:
            message_dict["tool_calls"] = [tc.to_dict() for tc in self.tool_calls]
        if self.tool_call_id is not None:
            message_dict["tool_call_id"] = self.tool_call_id

        return message_dict


@dataclass
class Choice:
    """One completion choice."""

    index: int
    message: Message | None
    finish_reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Choice":
        message = data.get("message")
        return cls(
            index=data.get("index") or 0,
            message=Message.from_dict(message) if isinstance(message, dict) else None,
            finish_reason=data.get("finish_reason"),
        )


def _sum_details(
    left: dict[str, Any] | None, right: dict[str, Any] | None
) -> dict[str, Any] | None:
    if left is None:
        return dict(right) if right is not None else None
    if right is None:
        return dict(left)

    merged = dict(left)
    for key, value in right.items():
        previous = merged.get(key)
        if isinstance(previous, (int, float)) and isinstance(value, (int, float)):
            merged[key] = previous + value
        elif key not in merged:
            merged[key] = value
    return merged


@dataclass
class Usage:
    """Token usage reported by the API.

    The optional detail mappings hold sub-counters such as
    ``cached_tokens`` and ``reasoning_tokens``.
    """

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_tokens_details: dict[str, Any] | None = None
    completion_tokens_details: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Usage":
        prompt_details = data.get("prompt_tokens_details")
        completion_details = data.get("completion_tokens_details")
        return cls(
            prompt_tokens=data.get("prompt_tokens") or 0,
            completion_tokens=data.get("completion_tokens") or 0,
            total_tokens=data.get("total_tokens") or 0,
            prompt_tokens_details=dict(prompt_details) if isinstance(prompt_details, dict) else None,
            completion_tokens_details=(
                dict(completion_details) if isinstance(completion_details, dict) else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        usage_dict: dict[str, Any] = {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }
        if self.prompt_tokens_details is not None:
            usage_dict["prompt_tokens_details"] = self.prompt_tokens_details
        if self.completion_tokens_details is not None:
            usage_dict["completion_tokens_details"] = self.completion_tokens_details
        return usage_dict

    def __add__(self, other: "Usage") -> "Usage":
        if not isinstance(other, Usage):
            return NotImplemented
        return Usage(
            prompt_tokens=self.prompt_tokens + other.prompt_tokens,
            completion_tokens=self.completion_tokens + other.completion_tokens,
            total_tokens=self.total_tokens + other.total_tokens,
            prompt_tokens_details=_sum_details(
                self.prompt_tokens_details, other.prompt_tokens_details
            ),
            completion_tokens_details=_sum_details(
                self.completion_tokens_details, other.completion_tokens_details
            ),
        )


def accumulate_usage(total: Usage | None, usage: Usage | None) -> Usage | None:
    """Add one round's usage to a running total.

    The first reported usage initializes the total; an absent usage leaves
    the total unchanged.
    """
    if usage is None:
        return total
    if total is None:
        return Usage.from_dict(usage.to_dict())
    return total + usage


@dataclass
class SendResponse:
    """Response of a one-shot call.

    Accessors read the first choice; with no choices they return ``None``.
    """

    choices: list[Choice] = field(default_factory=list)
    usage: Usage | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "SendResponse":
        payload = _as_dict(data)
        choices = [Choice.from_dict(c) for c in _as_list(payload.get("choices")) if isinstance(c, dict)]
        usage = payload.get("usage")
        return cls(
            choices=choices,
            usage=Usage.from_dict(usage) if isinstance(usage, dict) else None,
        )

    @property
    def message(self) -> Message | None:
        return self.choices[0].message if self.choices else None

    @property
    def text(self) -> str | None:
        message = self.message
        if message is not None and message.content:
            return message.content
        return None

    @property
    def finish_reason(self) -> str | None:
        return self.choices[0].finish_reason if self.choices else None

    @property
    def tool_calls(self) -> list[ToolCall] | None:
        message = self.message
        return message.tool_calls if message is not None else None


@dataclass
class ToolCallDelta:
    """A fragment of a tool call delivered in one streamed frame.

    Fragments sharing an ``index`` belong to the same call; ``arguments``
    fragments are concatenated in arrival order.
    """

    index: int
    id: str | None = None
    name: str | None = None
    arguments: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ToolCallDelta":
        function = _as_dict(data.get("function"))
        return cls(
            index=data.get("index") or 0,
            id=data.get("id"),
            name=function.get("name"),
            arguments=_as_arguments(function.get("arguments")) or None,
        )


@dataclass
class StreamDelta:
    """Partial message fields carried by a streamed frame."""

    role: str | None = None
    content: str | None = None
    tool_calls: list[ToolCallDelta] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StreamDelta":
        raw_calls = data.get("tool_calls")
        tool_calls = None
        if isinstance(raw_calls, list):
            tool_calls = [ToolCallDelta.from_dict(tc) for tc in raw_calls if isinstance(tc, dict)]
        return cls(role=data.get("role"), content=data.get("content"), tool_calls=tool_calls)


@dataclass
class StreamChoice:
    index: int
    delta: StreamDelta
    finish_reason: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StreamChoice":
        return cls(
            index=data.get("index") or 0,
            delta=StreamDelta.from_dict(_as_dict(data.get("delta"))),
            finish_reason=data.get("finish_reason"),
        )


@dataclass
class StreamChunk:
    """One decoded streaming frame."""

    choices: list[StreamChoice] = field(default_factory=list)
    usage: Usage | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "StreamChunk":
        payload = _as_dict(data)
        choices = [
            StreamChoice.from_dict(c) for c in _as_list(payload.get("choices")) if isinstance(c, dict)
        ]
        usage = payload.get("usage")
        return cls(
            choices=choices,
            usage=Usage.from_dict(usage) if isinstance(usage, dict) else None,
        )

    @property
    def text(self) -> str | None:
        if self.choices and self.choices[0].delta.content:
            return self.choices[0].delta.content
        return None

    @property
    def role(self) -> str | None:
        if self.choices and self.choices[0].delta.role:
            return self.choices[0].delta.role
        return None

    @property
    def finish_reason(self) -> str | None:
        if self.choices and self.choices[0].finish_reason:
            return self.choices[0].finish_reason
        return None


ToolChoice = Union[Literal["none", "auto"], dict[str, Any]]


@dataclass
class InputObject:
    """Caller-built conversation for advanced (manual tool) mode.

    ``tools`` are raw wire declarations, e.g.
    ``{"type": "function", "function": {"name": ..., "parameters": {...}}}``.
    """

    messages: list[Union[Message, dict[str, Any]]]
    tools: list[dict[str, Any]] | None = None
    tool_choice: ToolChoice | None = None

    def message_objects(self) -> list[Message]:
        return [m if isinstance(m, Message) else Message.from_dict(m) for m in self.messages]
