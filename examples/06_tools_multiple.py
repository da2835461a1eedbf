"""
Multiple Tools
==============

Build tools from plain functions with the @tool decorator and let the model
pick which ones to call.

Usage:
    python examples/06_tools_multiple.py
"""

import asyncio
from typing import Literal

from edgee import Edgee, tool

WEATHER = {
    "Paris": {"temperature": 18, "condition": "partly cloudy"},
    "London": {"temperature": 12, "condition": "rainy"},
    "New York": {"temperature": 22, "condition": "sunny"},
}


@tool(description="Get the current weather for a location")
async def get_weather(location: str) -> dict:
    """
    location: The city name
    """
    data = WEATHER.get(location, {"temperature": 20, "condition": "unknown"})
    return {"location": location, **data}


@tool(description="Perform basic arithmetic operations (add, subtract, multiply, divide)")
def calculate(operation: Literal["add", "subtract", "multiply", "divide"], a: float, b: float) -> dict:
    results = {
        "add": a + b,
        "subtract": a - b,
        "multiply": a * b,
        "divide": a / b if b != 0 else "Error: division by zero",
    }
    return {"operation": operation, "a": a, "b": b, "result": results[operation]}


async def main():
    async with Edgee() as edgee:
        response = await edgee.send(
            "devstral2",
            "What's 25 multiplied by 4, and then what's the weather in London?",
            tools=[get_weather, calculate],
        )

    print(f"Content: {response.text}")
    print(f"Total usage: {response.usage}")


if __name__ == "__main__":
    asyncio.run(main())
