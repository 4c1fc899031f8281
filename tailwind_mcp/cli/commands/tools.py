"""tailwind-mcp tools — List the registered tools."""

from rich import box
from rich.console import Console
from rich.table import Table

console = Console()


def tools_list():
    """List every tool with its description and arguments.

    Required arguments are shown in bold. Example:
        tailwind-mcp tools
    """
    from tailwind_mcp.config import TailwindMCPConfig
    from tailwind_mcp.server import build_dispatcher

    definitions = build_dispatcher(TailwindMCPConfig()).list_tools()

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title=f"[bold]{len(definitions)} Tools[/bold]",
    )
    table.add_column("Name", style="cyan", width=24)
    table.add_column("Description", width=48)
    table.add_column("Arguments", width=44)

    for definition in definitions:
        schema = definition.input_schema
        required = set(schema.get("required", []))
        args = [
            f"[bold]{arg}[/bold]" if arg in required else f"[dim]{arg}[/dim]"
            for arg in schema.get("properties", {})
        ]
        table.add_row(definition.name, f"[dim]{definition.description}[/dim]", ", ".join(args))

    console.print()
    console.print(table)
    console.print()
    console.print("[dim]Run one locally with [cyan]tailwind-mcp call NAME --args '{...}'[/cyan].[/dim]")
