"""Immutable lookup table of the tools this server exposes."""

from types import MappingProxyType
from typing import Iterable

from tailwind_mcp.config import TailwindMCPConfig, config as default_config
from tailwind_mcp.exceptions import InvalidRequest
from tailwind_mcp.llm.client import CompletionProvider
from tailwind_mcp.tools.base import Tool
from tailwind_mcp.types import ToolDefinition


class ToolRegistry:
    """Name -> tool. Fixed at construction."""

    def __init__(self, tools: Iterable[Tool]):
        tools_by_name: dict[str, Tool] = {}
        for tool in tools:
            if tool.name in tools_by_name:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            tools_by_name[tool.name] = tool
        self._tools = MappingProxyType(tools_by_name)

    def get(self, name: str) -> Tool:
        """Look up a tool by name.

        Raises:
            InvalidRequest: if no tool has this name
        """
        tool = self._tools.get(name)
        if tool is None:
            raise InvalidRequest(f"Unknown tool: {name}", tool_name=name)
        return tool

    def list_tools(self) -> list[ToolDefinition]:
        """Descriptors of all registered tools, in registration order."""
        return [tool.definition for tool in self._tools.values()]

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_registry(provider: CompletionProvider, settings: TailwindMCPConfig = None) -> ToolRegistry:
    """Instantiate every built-in tool around one shared provider."""
    from tailwind_mcp.tools.builtin import DUAL_PATH_TOOLS, PlaywrightCapture, PreviewGenerator

    settings = settings or default_config
    capture = PlaywrightCapture(settings.preview_timeout_seconds) if settings.preview_screenshots else None
    tools: list[Tool] = [tool_cls(provider) for tool_cls in DUAL_PATH_TOOLS]
    tools.append(PreviewGenerator(capture=capture, timeout_seconds=settings.preview_timeout_seconds))
    return ToolRegistry(tools)
