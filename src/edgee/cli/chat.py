"""Send and stream commands."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from edgee.client import Edgee
from edgee.errors import EdgeeError
from edgee.llm.types import InputObject, Message

console = Console()


def _build_input(prompt: str, system: str | None) -> str | InputObject:
    if not system:
        return prompt
    return InputObject(
        messages=[
            Message(role="system", content=system),
            Message(role="user", content=prompt),
        ]
    )


def _create_client(config_path: str | None) -> Edgee:
    try:
        return Edgee(config_path=config_path)
    except EdgeeError as e:
        console.print(f"[red]Failed to configure client: {e}[/red]")
        console.print("Set [bold]EDGEE_API_KEY[/bold] or add api_key to your config file.")
        raise typer.Exit(code=1) from e


def send_command(
    model: str,
    prompt: str,
    system: str | None = None,
    config_path: str | None = None,
) -> None:
    """Send a prompt and print the response text and usage.

    Args:
        model: Model identifier
        prompt: User message
        system: Optional system prompt
        config_path: Optional path to config file
    """
    client = _create_client(config_path)
    asyncio.run(_send(client, model, _build_input(prompt, system)))


async def _send(client: Edgee, model: str, input: str | InputObject) -> None:
    async with client:
        try:
            response = await client.send(model, input)
        except EdgeeError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1) from e

    console.print(response.text or "", markup=False, highlight=False)
    if response.usage:
        console.print(
            f"[dim]tokens: {response.usage.prompt_tokens} prompt, "
            f"{response.usage.completion_tokens} completion[/dim]"
        )


def stream_command(
    model: str,
    prompt: str,
    system: str | None = None,
    config_path: str | None = None,
) -> None:
    """Stream a response, printing fragments as they arrive.

    Args:
        model: Model identifier
        prompt: User message
        system: Optional system prompt
        config_path: Optional path to config file
    """
    client = _create_client(config_path)
    asyncio.run(_stream(client, model, _build_input(prompt, system)))


async def _stream(client: Edgee, model: str, input: str | InputObject) -> None:
    async with client:
        try:
            async for text in client.stream_text(model, input):
                console.print(text, end="", markup=False, highlight=False)
        except EdgeeError as e:
            console.print(f"\n[red]Error: {e}[/red]")
            raise typer.Exit(code=1) from e
    console.print()
