"""MCP server over stdio.

The protocol layer only translates: tools/list comes from the registry and
tools/call goes through the dispatcher, which never raises. stdout belongs
to the protocol, so all logging goes to stderr.
"""

import logging
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from tailwind_mcp.callbacks import LoggingCallback
from tailwind_mcp.config import TailwindMCPConfig, config as default_config
from tailwind_mcp.llm import LLMClient
from tailwind_mcp.tools.dispatcher import ToolDispatcher
from tailwind_mcp.tools.registry import build_registry
from tailwind_mcp.types import ToolDefinition, ToolResponse

logger = logging.getLogger(__name__)

SERVER_NAME = "tailwind-mcp"


def to_mcp_tool(definition: ToolDefinition) -> types.Tool:
    return types.Tool(
        name=definition.name,
        description=definition.description,
        inputSchema=definition.input_schema,
    )


def to_mcp_content(response: ToolResponse) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=item.text) for item in response.content]


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Build a low-level MCP server whose handlers delegate to ``dispatcher``."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(d) for d in dispatcher.list_tools()]

    # Argument validation happens in the tools so that bad input gets the
    # same "Error: ..." text as every other failure.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        response = await dispatcher.call(name, arguments)
        return to_mcp_content(response)

    return server


def build_dispatcher(settings: TailwindMCPConfig = None) -> ToolDispatcher:
    """Provider, registry and dispatcher wired from settings."""
    settings = settings or default_config
    provider = LLMClient(settings=settings)
    if provider.is_available():
        logger.info("[Server] completion provider configured (%s)", settings.default_llm_model)
    else:
        logger.info("[Server] no GEMINI_API_KEY set, all tools use their manual engines")
    registry = build_registry(provider, settings)
    return ToolDispatcher(registry, callbacks=[LoggingCallback()])


async def run_stdio(settings: TailwindMCPConfig = None) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    dispatcher = build_dispatcher(settings)
    server = create_server(dispatcher)
    logger.info("[Server] %s running on stdio with %d tools", SERVER_NAME, len(dispatcher.registry))

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
