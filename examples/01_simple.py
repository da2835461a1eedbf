"""
Simple Example
==============

The most basic way to use edgee: send a string prompt, read the text back.

Prerequisites:
- EDGEE_API_KEY set in the environment (EDGEE_BASE_URL is optional)

Usage:
    python examples/01_simple.py
"""

import asyncio

from edgee import Edgee


async def main():
    async with Edgee() as edgee:
        response = await edgee.send("devstral2", "What is the capital of France?")

    print(f"Content: {response.text}")
    print(f"Usage: {response.usage}")


if __name__ == "__main__":
    asyncio.run(main())
