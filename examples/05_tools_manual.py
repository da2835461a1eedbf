"""
Manual Tool Handling
====================

Declare tools in raw OpenAI format and handle the returned tool calls
yourself. Nothing is executed by the client in this mode.

Usage:
    python examples/05_tools_manual.py
"""

import asyncio
import json

from edgee import Edgee, InputObject


async def main():
    request = InputObject(
        messages=[{"role": "user", "content": "What is the weather in Paris?"}],
        tools=[
            {
                "type": "function",
                "function": {
                    "name": "get_weather",
                    "description": "Get the current weather for a location",
                    "parameters": {
                        "type": "object",
                        "properties": {
                            "location": {"type": "string", "description": "City name"},
                        },
                        "required": ["location"],
                    },
                },
            }
        ],
        tool_choice="auto",
    )

    async with Edgee() as edgee:
        response = await edgee.send("devstral2", request)

    print(f"Content: {response.text}")
    calls = [call.to_dict() for call in response.tool_calls or []]
    print(f"Tool calls: {json.dumps(calls, indent=2)}")

    # To continue: run each tool yourself, append an assistant message with
    # the tool calls and one "tool" message per result, then send again.


if __name__ == "__main__":
    asyncio.run(main())
