"""Tool base classes, the registry and the dispatcher."""

from tailwind_mcp.tools.base import DualPathTool, Tool, ToolArgs
from tailwind_mcp.tools.dispatcher import ToolDispatcher
from tailwind_mcp.tools.registry import ToolRegistry, build_registry

__all__ = ["Tool", "ToolArgs", "DualPathTool", "ToolRegistry", "build_registry", "ToolDispatcher"]
