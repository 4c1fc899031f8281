"""tailwind-mcp serve — Run the stdio MCP server."""

import asyncio
import logging
import sys

import typer
from rich.console import Console

# stdout is the transport
console = Console(stderr=True)


def serve(
    log_level: str = typer.Option(None, "--log-level", help="Override TAILWIND_MCP_LOG_LEVEL"),
):
    """Serve tools/list and tools/call over stdin/stdout.

    Point an MCP client at this command:

        {"command": "tailwind-mcp", "args": ["serve"]}
    """
    from tailwind_mcp.config import TailwindMCPConfig
    from tailwind_mcp.server import run_stdio

    cfg = TailwindMCPConfig()
    level = (log_level or cfg.log_level).upper()
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if not cfg.gemini_api_key:
        console.print("[yellow]GEMINI_API_KEY not set: tools will use their manual engines.[/yellow]")

    try:
        asyncio.run(run_stdio(cfg))
    except KeyboardInterrupt:
        raise typer.Exit()
