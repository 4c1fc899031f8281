"""Callback hooks for tool dispatch lifecycle events.

The dispatcher accepts plain callables ``cb(event, data)``, sync or async.
Subclass ``BaseCallback`` to get named hooks instead:

    class CountingCallback(BaseCallback):
        async def on_tool_failed(self, tool_name, error_type, error, **kw):
            self.failures += 1

    dispatcher = ToolDispatcher(registry, callbacks=[CountingCallback()])
"""

from typing import Any


class BaseCallback:
    """No-op hooks. ``__call__`` routes dispatcher events to them."""

    async def __call__(self, event: str, data: dict) -> None:
        tool_name = data.get("tool", "")
        if event == "tool_called":
            await self.on_tool_called(tool_name, data.get("argument_keys", []))
        elif event == "tool_completed":
            await self.on_tool_completed(tool_name, data.get("duration_ms", 0.0), chars=data.get("chars", 0))
        elif event == "tool_failed":
            await self.on_tool_failed(
                tool_name,
                data.get("error_type", ""),
                data.get("error", ""),
                duration_ms=data.get("duration_ms", 0.0),
            )

    async def on_tool_called(self, tool_name: str, argument_keys: list[str], **kwargs: Any) -> None:
        pass

    async def on_tool_completed(self, tool_name: str, duration_ms: float, **kwargs: Any) -> None:
        pass

    async def on_tool_failed(self, tool_name: str, error_type: str, error: str, **kwargs: Any) -> None:
        pass
