"""tailwind-mcp config — Show resolved configuration."""

from rich import box
from rich.console import Console
from rich.table import Table

console = Console()


def mask(val: str) -> str:
    s = str(val)
    if len(s) <= 8:
        return "***"
    return s[:4] + "…" + "***"


def config_show():
    """Show the resolved configuration.

    Reads from environment variables and .env file. The API key is masked.

    Example:
        tailwind-mcp config
    """
    from tailwind_mcp.config import TailwindMCPConfig
    cfg = TailwindMCPConfig()

    sensitive = {"gemini_api_key"}

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title="[bold]tailwind-mcp Configuration[/bold]",
    )
    table.add_column("Key", style="cyan", width=26)
    table.add_column("Value", width=40)
    table.add_column("Env Var", style="dim", width=38)

    sections = [
        ("App", [
            ("debug", "TAILWIND_MCP_DEBUG"),
            ("log_level", "TAILWIND_MCP_LOG_LEVEL"),
        ]),
        ("LLM", [
            ("gemini_api_key", "GEMINI_API_KEY"),
            ("default_llm_model", "TAILWIND_MCP_DEFAULT_LLM_MODEL"),
            ("llm_max_tokens", "TAILWIND_MCP_LLM_MAX_TOKENS"),
            ("llm_temperature", "TAILWIND_MCP_LLM_TEMPERATURE"),
            ("llm_timeout_seconds", "TAILWIND_MCP_LLM_TIMEOUT_SECONDS"),
        ]),
        ("Preview", [
            ("preview_screenshots", "TAILWIND_MCP_PREVIEW_SCREENSHOTS"),
            ("preview_timeout_seconds", "TAILWIND_MCP_PREVIEW_TIMEOUT_SECONDS"),
        ]),
    ]

    first = True
    for section_name, fields in sections:
        if not first:
            table.add_row("", "", "")
        first = False
        table.add_row(f"[bold dim]── {section_name} ──[/bold dim]", "", "")
        for attr, env_var in fields:
            val = getattr(cfg, attr, None)
            if val is None:
                display = "[dim](not set)[/dim]"
            elif attr in sensitive:
                display = mask(str(val))
            else:
                display = str(val)
            table.add_row(f"  {attr}", display, env_var)

    console.print()
    console.print(table)
    console.print()
    console.print("[dim]Source: environment variables + .env file (prefix: TAILWIND_MCP_)[/dim]")
