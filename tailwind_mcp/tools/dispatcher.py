"""Routes tools/call requests to tools. Never raises past ``dispatch``.

Every failure (missing arguments, unknown tool, invalid arguments, handler
crash) becomes a ToolResponse whose text starts with "Error:" and whose
``is_error`` flag is set.
"""

import inspect
import logging
import time
from typing import Any, Callable, Optional

from pydantic import ValidationError

from tailwind_mcp.exceptions import InvalidRequest, TailwindMCPError
from tailwind_mcp.tools.registry import ToolRegistry
from tailwind_mcp.types import ToolDefinition, ToolRequest, ToolResponse

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Validate presence of arguments, route by name, contain every error."""

    def __init__(self, registry: ToolRegistry, callbacks: Optional[list[Callable[..., Any]]] = None):
        """
        Args:
            registry:  Immutable tool table.
            callbacks: Callables ``cb(event, data)``, sync or async, fired on
                       tool_called / tool_completed / tool_failed.
        """
        self.registry = registry
        self.callbacks = callbacks or []

    def list_tools(self) -> list[ToolDefinition]:
        return self.registry.list_tools()

    async def dispatch(self, request: ToolRequest) -> ToolResponse:
        name = request.tool_name
        started = time.monotonic()
        await self._fire_callbacks("tool_called", {
            "tool": name,
            "argument_keys": sorted(request.arguments or {}),
        })
        try:
            if request.arguments is None:
                raise InvalidRequest(f"No arguments provided for tool: {name}", tool_name=name)
            tool = self.registry.get(name)
            response = await tool.invoke(request.arguments)
        except TailwindMCPError as exc:
            logger.warning("[Dispatcher] %s failed: %s", name, exc.message)
            return await self._failed(name, exc, started)
        except Exception as exc:
            logger.exception("[Dispatcher] Unhandled error in %s", name)
            return await self._failed(name, exc, started)

        await self._fire_callbacks("tool_completed", {
            "tool": name,
            "duration_ms": round((time.monotonic() - started) * 1000, 1),
            "chars": len(response.text),
        })
        return response

    async def call(self, name: str, arguments: Optional[dict] = None) -> ToolResponse:
        try:
            request = ToolRequest(tool_name=name, arguments=arguments)
        except ValidationError:
            exc = InvalidRequest(f"Invalid arguments for {name}: arguments must be an object", tool_name=name)
            logger.warning("[Dispatcher] %s failed: %s", name, exc.message)
            return await self._failed(name, exc, time.monotonic())
        return await self.dispatch(request)

    async def _failed(self, name: str, exc: Exception, started: float) -> ToolResponse:
        message = str(exc) or type(exc).__name__
        await self._fire_callbacks("tool_failed", {
            "tool": name,
            "error_type": type(exc).__name__,
            "error": message,
            "duration_ms": round((time.monotonic() - started) * 1000, 1),
        })
        return ToolResponse.error(message)

    async def _fire_callbacks(self, event: str, data: dict) -> None:
        """Invoke all registered callbacks for a lifecycle event."""
        for cb in self.callbacks:
            try:
                result = cb(event, data)
                if inspect.isawaitable(result):
                    await result
            except Exception as cb_exc:
                logger.warning(f"[Dispatcher] Callback error on '{event}': {cb_exc}")
