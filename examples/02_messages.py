"""
Conversation Example
====================

Pass an InputObject to send a whole conversation, including a system prompt.

Usage:
    python examples/02_messages.py
"""

import asyncio

from edgee import Edgee, InputObject, Message


async def main():
    conversation = InputObject(
        messages=[
            Message(role="system", content="You are a helpful assistant."),
            Message(role="user", content="Say hello!"),
        ]
    )

    async with Edgee() as edgee:
        response = await edgee.send("devstral2", conversation)

    print(f"Content: {response.text}")


if __name__ == "__main__":
    asyncio.run(main())
