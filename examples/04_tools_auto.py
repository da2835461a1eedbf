"""
Automatic Tool Execution
========================

Define a tool with a pydantic argument model and a handler. The client runs
the tool whenever the model asks for it and keeps going until the model
produces a final answer.

Usage:
    python examples/04_tools_auto.py
"""

import asyncio

from pydantic import BaseModel, Field

from edgee import Edgee, Tool

WEATHER = {
    "Paris": {"temperature": 18, "condition": "partly cloudy"},
    "London": {"temperature": 12, "condition": "rainy"},
    "New York": {"temperature": 22, "condition": "sunny"},
}


class WeatherArgs(BaseModel):
    location: str = Field(description="The city name")


async def get_weather(args: WeatherArgs) -> dict:
    # Simulated weather API response
    data = WEATHER.get(args.location, {"temperature": 20, "condition": "unknown"})
    return {"location": args.location, **data}


weather_tool = Tool(
    name="get_weather",
    description="Get the current weather for a location",
    schema=WeatherArgs,
    handler=get_weather,
)


async def main():
    async with Edgee() as edgee:
        response = await edgee.send(
            "devstral2",
            "What's the weather like in Paris?",
            tools=[weather_tool],
        )

    print(f"Content: {response.text}")
    print(f"Total usage: {response.usage}")


if __name__ == "__main__":
    asyncio.run(main())
