"""tailwind-mcp call — Run one tool without an MCP client."""

import asyncio
import json

import typer
from rich.console import Console
from rich.markdown import Markdown

console = Console()


def call_tool(
    name: str = typer.Argument(..., help="Tool name, e.g. optimize_classes"),
    args: str = typer.Option("{}", "--args", "-a", help="Tool arguments as a JSON object"),
    raw: bool = typer.Option(False, "--raw", help="Print the markdown source instead of rendering it"),
):
    """Dispatch one tools/call locally and print the result.

    Example:
        tailwind-mcp call optimize_classes --args '{"html": "<div class=\\"p-4 p-4\\"></div>"}'
    """
    from tailwind_mcp.config import TailwindMCPConfig
    from tailwind_mcp.server import build_dispatcher

    try:
        arguments = json.loads(args)
    except json.JSONDecodeError as e:
        console.print(f"[red]--args is not valid JSON: {e}[/red]")
        raise typer.Exit(code=2)
    if not isinstance(arguments, dict):
        console.print("[red]--args must be a JSON object[/red]")
        raise typer.Exit(code=2)

    response = asyncio.run(build_dispatcher(TailwindMCPConfig()).call(name, arguments))

    if raw:
        typer.echo(response.text)
    else:
        console.print(Markdown(response.text))
    if response.is_error:
        raise typer.Exit(code=1)
