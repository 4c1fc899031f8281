"""Callback hooks for tool dispatch events."""

from tailwind_mcp.callbacks.base import BaseCallback
from tailwind_mcp.callbacks.logging import LoggingCallback

__all__ = ["BaseCallback", "LoggingCallback"]
