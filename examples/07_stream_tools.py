"""
Streaming With Tools
====================

Combine streaming with automatic tool execution. The stream yields events
for content chunks, tool starts, tool results and completed rounds.

Usage:
    python examples/07_stream_tools.py
"""

import asyncio
import json
from typing import Literal

from edgee import Edgee, tool


@tool(description="Get the current weather for a location")
async def get_weather(location: str) -> dict:
    """
    location: The city name
    """
    return {"location": location, "temperature": 18, "condition": "partly cloudy"}


@tool(description="Perform basic arithmetic operations")
def calculate(operation: Literal["add", "subtract", "multiply", "divide"], a: float, b: float) -> dict:
    results = {
        "add": a + b,
        "subtract": a - b,
        "multiply": a * b,
        "divide": a / b if b != 0 else "Error: division by zero",
    }
    return {"operation": operation, "a": a, "b": b, "result": results[operation]}


async def main():
    print("Streaming with tools...\n")
    print("Response: ", end="", flush=True)

    async with Edgee() as edgee:
        events = edgee.stream(
            "devstral2",
            "What's 15 multiplied by 7, and what's the weather in Paris?",
            tools=[get_weather, calculate],
        )
        async for event in events:
            if event.type == "chunk":
                print(event.chunk.text or "", end="", flush=True)
            elif event.type == "tool_start":
                print(f"\n  [Tool starting: {event.tool_call.name}]")
            elif event.type == "tool_result":
                print(f"  [Tool result: {event.tool_name} -> {json.dumps(event.result)}]")
                print("Response: ", end="", flush=True)
            elif event.type == "iteration_complete":
                print(f"  [Iteration {event.iteration} complete, continuing...]")

    print()


if __name__ == "__main__":
    asyncio.run(main())
