"""tailwind-mcp CLI. Typer application."""

import typer
from rich.console import Console

from tailwind_mcp.version import __version__

app = typer.Typer(
    name="tailwind-mcp",
    help="Tailwind CSS tools over the Model Context Protocol, with or without an LLM.",
    no_args_is_help=True,
    invoke_without_command=True,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", is_eager=True, help="Show version"),
):
    """tailwind-mcp CLI."""
    if version:
        console.print(f"tailwind-mcp v{__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


# ── Server ─────────────────────────────────────────────────────────────────────
from tailwind_mcp.cli.commands import serve  # noqa: E402

app.command(name="serve", help="Run the MCP server on stdio")(serve.serve)

# ── Local inspection ───────────────────────────────────────────────────────────
from tailwind_mcp.cli.commands import call, config, tools  # noqa: E402

app.command(name="tools", help="List the tools and their arguments")(tools.tools_list)
app.command(name="config", help="Show resolved configuration")(config.config_show)
app.command(name="call", help="Run one tool locally and print its output")(call.call_tool)


if __name__ == "__main__":
    app()
