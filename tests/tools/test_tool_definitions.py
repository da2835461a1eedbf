"""Tests for tool definitions, the registry and the @tool decorator."""

from typing import Any, Literal

import pytest
from pydantic import BaseModel, Field

from edgee.errors import ArgumentParseError, ArgumentValidationError, ToolExecutionError
from edgee.tools.base import Tool, serialize_tool_result
from edgee.tools.registry import ToolRegistry, tool


class WeatherArgs(BaseModel):
    location: str = Field(description="The city name")


class CalculatorArgs(BaseModel):
    operation: Literal["add", "subtract", "multiply", "divide"]
    a: float
    b: float


async def get_weather(args: WeatherArgs) -> dict[str, Any]:
    return {"location": args.location, "temperature": 18, "condition": "partly cloudy"}


def calculate(args: CalculatorArgs) -> dict[str, Any]:
    ops = {
        "add": args.a + args.b,
        "subtract": args.a - args.b,
        "multiply": args.a * args.b,
        "divide": args.a / args.b,
    }
    return {"result": ops[args.operation]}


@pytest.fixture
def weather_tool() -> Tool:
    return Tool(
        name="get_weather",
        description="Get the current weather for a location",
        schema=WeatherArgs,
        handler=get_weather,
    )


# -- Tool ------------------------------------------------------------------------


def test_to_openai_format(weather_tool):
    declaration = weather_tool.to_openai_format()

    assert declaration["type"] == "function"
    function = declaration["function"]
    assert function["name"] == "get_weather"
    assert function["description"] == "Get the current weather for a location"
    assert function["parameters"]["type"] == "object"
    assert function["parameters"]["properties"]["location"]["type"] == "string"
    assert function["parameters"]["properties"]["location"]["description"] == "The city name"
    assert function["parameters"]["required"] == ["location"]


def test_to_openai_format_without_description():
    declaration = Tool(name="calc", schema=CalculatorArgs, handler=calculate).to_openai_format()
    assert "description" not in declaration["function"]


@pytest.mark.asyncio
async def test_execute_async_handler(weather_tool):
    result = await weather_tool.execute('{"location": "Paris"}')
    assert result["location"] == "Paris"


@pytest.mark.asyncio
async def test_execute_sync_handler():
    calc = Tool(name="calculate", schema=CalculatorArgs, handler=calculate)

    result = await calc.execute('{"operation": "multiply", "a": 15, "b": 7}')

    assert result == {"result": 105}


@pytest.mark.asyncio
async def test_execute_invalid_json(weather_tool):
    with pytest.raises(ArgumentParseError):
        await weather_tool.execute("{location: Paris")


@pytest.mark.asyncio
async def test_execute_non_string_arguments(weather_tool):
    with pytest.raises(ArgumentParseError, match="dict"):
        await weather_tool.execute({"location": "Paris"})


@pytest.mark.asyncio
async def test_execute_validation_error(weather_tool):
    with pytest.raises(ArgumentValidationError, match="location"):
        await weather_tool.execute('{"city": "Paris"}')


@pytest.mark.asyncio
async def test_execute_handler_failure():
    calc = Tool(name="calculate", schema=CalculatorArgs, handler=calculate)

    with pytest.raises(ToolExecutionError, match="division by zero"):
        await calc.execute('{"operation": "divide", "a": 1, "b": 0}')


@pytest.mark.asyncio
async def test_execute_empty_arguments():
    class NoArgs(BaseModel):
        pass

    ping = Tool(name="ping", schema=NoArgs, handler=lambda args: "pong")

    assert await ping.execute("") == "pong"


@pytest.mark.asyncio
async def test_custom_argument_schema():
    class UpperSchema:
        def to_json_schema(self) -> dict[str, Any]:
            return {"type": "object", "properties": {"text": {"type": "string"}}}

        def validate(self, raw: Any) -> str:
            if not isinstance(raw.get("text"), str):
                raise ValueError("text must be a string")
            return raw["text"]

    upper = Tool(name="upper", schema=UpperSchema(), handler=lambda text: text.upper())

    assert upper.to_openai_format()["function"]["parameters"]["properties"] == {
        "text": {"type": "string"}
    }
    assert await upper.execute('{"text": "hi"}') == "HI"
    with pytest.raises(ArgumentValidationError, match="text must be a string"):
        await upper.execute('{"text": 1}')


def test_invalid_schema_rejected():
    with pytest.raises(TypeError):
        Tool(name="bad", schema=dict, handler=lambda args: None)  # type: ignore[arg-type]


# -- serialize_tool_result -------------------------------------------------------


def test_serialize_string_passthrough():
    assert serialize_tool_result("plain text") == "plain text"


def test_serialize_dict():
    assert serialize_tool_result({"error": "Unknown tool: x"}) == '{"error": "Unknown tool: x"}'


def test_serialize_pydantic_model():
    assert serialize_tool_result(WeatherArgs(location="Paris")) == '{"location": "Paris"}'


# -- ToolRegistry ----------------------------------------------------------------


def test_registry_lookup(weather_tool):
    registry = ToolRegistry([weather_tool])

    assert "get_weather" in registry
    assert registry.get("get_weather") is weather_tool
    assert registry.get("missing") is None
    assert len(registry) == 1


def test_registry_declarations_preserve_order(weather_tool):
    calc = Tool(name="calculate", schema=CalculatorArgs, handler=calculate)

    registry = ToolRegistry([weather_tool, calc])

    assert registry.names == ["get_weather", "calculate"]
    assert [d["function"]["name"] for d in registry.declarations()] == ["get_weather", "calculate"]


def test_registry_duplicate_name_last_wins(weather_tool):
    replacement = Tool(name="get_weather", schema=WeatherArgs, handler=lambda args: "other")

    registry = ToolRegistry([weather_tool, replacement])

    assert registry.get("get_weather") is replacement
    assert len(registry) == 1


# -- tool decorator --------------------------------------------------------------


def test_tool_decorator_builds_schema():
    @tool(description="Say hello")
    async def greet(name: str, loud: bool = False) -> str:
        """Greet someone.

        name: The person's name
        loud: Whether to shout
        """
        return f"Hello, {name}!"

    assert isinstance(greet, Tool)
    assert greet.name == "greet"
    assert greet.description == "Say hello"

    parameters = greet.to_openai_format()["function"]["parameters"]
    assert parameters["properties"]["name"]["type"] == "string"
    assert parameters["properties"]["name"]["description"] == "The person's name"
    assert parameters["properties"]["loud"]["type"] == "boolean"
    assert parameters["required"] == ["name"]


def test_tool_decorator_docstring_description():
    @tool(name="sum_numbers")
    def add(a: int, b: int) -> int:
        """Add two numbers."""
        return a + b

    assert add.name == "sum_numbers"
    assert add.description == "Add two numbers."


@pytest.mark.asyncio
async def test_tool_decorator_execute():
    @tool(description="Add two numbers")
    def add(a: int, b: int = 1) -> int:
        return a + b

    assert await add.execute('{"a": 2, "b": 3}') == 5
    assert await add.execute('{"a": 2}') == 3
    with pytest.raises(ArgumentValidationError):
        await add.execute('{"a": "two"}')
