"""Base types for executable tools."""

import inspect
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ValidationError

from edgee.errors import ArgumentParseError, ArgumentValidationError, ToolExecutionError

logger = logging.getLogger(__name__)


@runtime_checkable
class ArgumentSchema(Protocol):
    """Capability a tool's argument schema must provide."""

    def to_json_schema(self) -> dict[str, Any]:
        """Return a JSON Schema object describing the arguments."""
        ...

    def validate(self, raw: Any) -> Any:
        """Return typed arguments, or raise ArgumentValidationError."""
        ...


class PydanticSchema:
    """ArgumentSchema backed by a pydantic model class."""

    def __init__(self, model: type[BaseModel]):
        self.model = model

    def to_json_schema(self) -> dict[str, Any]:
        return self.model.model_json_schema()

    def validate(self, raw: Any) -> BaseModel:
        try:
            return self.model.model_validate(raw)
        except ValidationError as e:
            raise ArgumentValidationError(str(e)) from e


# Handlers receive validated arguments and may be sync or async
ToolHandler = Callable[[Any], Any]


def _is_model_class(value: Any) -> bool:
    return inspect.isclass(value) and issubclass(value, BaseModel)


@dataclass
class Tool:
    """A named capability the model can call.

    Example:
        class WeatherArgs(BaseModel):
            location: str = Field(description="The city name")

        async def get_weather(args: WeatherArgs) -> dict:
            return {"location": args.location, "temperature": 18}

        weather = Tool(
            name="get_weather",
            description="Get the current weather for a location",
            schema=WeatherArgs,
            handler=get_weather,
        )
    """

    name: str
    schema: Union[type[BaseModel], ArgumentSchema]
    handler: ToolHandler
    description: Optional[str] = None
    argument_schema: ArgumentSchema = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if _is_model_class(self.schema):
            self.argument_schema = PydanticSchema(self.schema)  # type: ignore[arg-type]
        elif isinstance(self.schema, ArgumentSchema):
            self.argument_schema = self.schema
        else:
            raise TypeError(
                f"Tool '{self.name}' schema must be a pydantic model class "
                "or implement to_json_schema() and validate()"
            )

    def to_openai_format(self) -> dict[str, Any]:
        """Convert to the wire tool declaration.

        Returns:
            Dictionary matching the OpenAI function tool format
        """
        function: dict[str, Any] = {"name": self.name}
        if self.description:
            function["description"] = self.description
        function["parameters"] = self.argument_schema.to_json_schema()

        return {"type": "function", "function": function}

    async def execute(self, raw_arguments: str) -> Any:
        """Parse, validate and run the handler.

        Args:
            raw_arguments: JSON-encoded arguments as sent by the model.
                An empty string is treated as an empty object.

        Returns:
            The handler's result

        Raises:
            ArgumentParseError: If the arguments are not valid JSON
            ArgumentValidationError: If the arguments don't match the schema
            ToolExecutionError: If the handler raises
        """
        if not isinstance(raw_arguments, str):
            raise ArgumentParseError(f"Expected JSON text, got {type(raw_arguments).__name__}")

        try:
            raw = json.loads(raw_arguments) if raw_arguments.strip() else {}
        except json.JSONDecodeError as e:
            raise ArgumentParseError(str(e)) from e

        try:
            arguments = self.argument_schema.validate(raw)
        except ArgumentValidationError:
            raise
        except Exception as e:
            raise ArgumentValidationError(str(e)) from e

        logger.debug("Executing tool %s", self.name)

        try:
            result = self.handler(arguments)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            raise ToolExecutionError(str(e)) from e

        return result


def serialize_tool_result(result: Any) -> str:
    """Render a tool result as message content.

    Strings pass through unchanged; everything else is JSON-encoded.
    """
    if isinstance(result, str):
        return result
    if isinstance(result, BaseModel):
        return json.dumps(result.model_dump(mode="json"))
    return json.dumps(result, default=str)
