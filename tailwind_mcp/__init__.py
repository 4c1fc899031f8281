"""tailwind-mcp: Tailwind CSS tools over MCP.

Every tool asks a completion provider first and falls back to a
deterministic rule engine when the provider is missing, fails or answers
with something unusable.
"""

from tailwind_mcp.config import TailwindMCPConfig, config
from tailwind_mcp.exceptions import (
    InvalidRequest,
    ProviderError,
    TailwindMCPError,
    ToolError,
    UnknownTemplate,
)
from tailwind_mcp.llm import LLMClient
from tailwind_mcp.tools import ToolDispatcher, ToolRegistry, build_registry
from tailwind_mcp.types import ToolRequest, ToolResponse
from tailwind_mcp.version import __version__

__all__ = [
    "__version__",
    "config",
    "TailwindMCPConfig",
    "TailwindMCPError",
    "InvalidRequest",
    "ProviderError",
    "ToolError",
    "UnknownTemplate",
    "LLMClient",
    "ToolDispatcher",
    "ToolRegistry",
    "build_registry",
    "ToolRequest",
    "ToolResponse",
]
