"""Main CLI application using Typer."""

import sys

import typer
from rich.console import Console
from rich.markup import escape

from edgee import __version__
from edgee.errors import EdgeeError

app = typer.Typer(
    name="edgee",
    help="Edgee - chat-completions client",
    no_args_is_help=True,
)

console = Console()


@app.command()
def version():
    """Show edgee version."""
    console.print(f"edgee version {__version__}")


@app.command()
def send(
    model: str = typer.Argument(..., help="Model identifier"),
    prompt: str = typer.Argument(..., help="User message"),
    system: str = typer.Option(None, "--system", "-s", help="System prompt"),
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.edgee/edgee.yaml)",
    ),
):
    """Send a prompt and print the response."""
    from edgee.cli.chat import send_command

    send_command(model=model, prompt=prompt, system=system, config_path=config_path)


@app.command()
def stream(
    model: str = typer.Argument(..., help="Model identifier"),
    prompt: str = typer.Argument(..., help="User message"),
    system: str = typer.Option(None, "--system", "-s", help="System prompt"),
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.edgee/edgee.yaml)",
    ),
):
    """Stream a response token by token."""
    from edgee.cli.chat import stream_command

    stream_command(model=model, prompt=prompt, system=system, config_path=config_path)


def main():
    """Entry point for the CLI.

    Client errors (configuration, API, tool loop) are printed by type;
    anything else is reported as unexpected. Ctrl-C exits with 130.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)
    except EdgeeError as e:
        console.print(f"[red]{type(e).__name__}:[/red] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error ({type(e).__name__}): {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
