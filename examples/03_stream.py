"""
Streaming Example
=================

Stream a response token by token for real-time output.

Usage:
    python examples/03_stream.py
"""

import asyncio

from edgee import Edgee


async def main():
    print("Response: ", end="", flush=True)

    async with Edgee() as edgee:
        async for chunk in edgee.stream("devstral2", "Say hello in 10 words!"):
            print(chunk.text or "", end="", flush=True)

    print()


if __name__ == "__main__":
    asyncio.run(main())
