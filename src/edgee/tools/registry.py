"""Per-call tool lookup and the ``@tool`` decorator."""

import inspect
from collections.abc import Callable, Iterable
from typing import Any, Optional, get_type_hints

from pydantic import Field, create_model

from edgee.tools.base import Tool


class ToolRegistry:
    """Name-keyed lookup over the tools supplied for one call.

    Names are assumed unique; if duplicated, the last one wins.
    """

    def __init__(self, tools: Iterable[Tool]):
        self._tools: dict[str, Tool] = {t.name: t for t in tools}

    def get(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def declarations(self) -> list[dict[str, Any]]:
        """Wire tool declarations for every registered tool.

        Returns:
            List of tool declarations in OpenAI function format
        """
        return [t.to_openai_format() for t in self._tools.values()]


def _param_description(fn: Callable[..., Any], param_name: str) -> Optional[str]:
    # Simple parsing: look for "param_name: description" lines
    if not fn.__doc__:
        return None
    for line in fn.__doc__.split("\n"):
        line = line.strip()
        if line.startswith(f"{param_name}:"):
            return line[len(param_name) + 1 :].strip()
    return None


def tool(
    description: Optional[str] = None,
    name: Optional[str] = None,
) -> Callable[[Callable[..., Any]], Tool]:
    """Decorator turning a plain function into a Tool.

    Introspects the function signature to build a pydantic argument model.
    Parameter descriptions are read from ``name: description`` docstring lines.

    Args:
        description: Tool description sent to the model. Defaults to the
            first docstring line.
        name: Tool name. Defaults to the function name.

    Returns:
        Decorator producing a Tool

    Example:
        @tool(description="Get the current weather for a location")
        async def get_weather(location: str) -> dict:
            '''location: The city name'''
            ...
    """

    def decorator(fn: Callable[..., Any]) -> Tool:
        hints = get_type_hints(fn)
        sig = inspect.signature(fn)

        fields: dict[str, Any] = {}
        for param_name, param in sig.parameters.items():
            annotation = hints.get(param_name, Any)
            default = ... if param.default is inspect.Parameter.empty else param.default
            fields[param_name] = (
                annotation,
                Field(default, description=_param_description(fn, param_name)),
            )

        tool_name = name or fn.__name__
        model = create_model(f"{tool_name}_arguments", **fields)

        def handler(arguments: Any) -> Any:
            return fn(**{field_name: getattr(arguments, field_name) for field_name in fields})

        tool_description = description
        if tool_description is None and fn.__doc__:
            tool_description = fn.__doc__.strip().split("\n")[0]

        return Tool(
            name=tool_name,
            description=tool_description,
            schema=model,
            handler=handler,
        )

    return decorator
