"""Structured JSON logging callback for tool dispatch events."""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from tailwind_mcp.callbacks.base import BaseCallback

logger = logging.getLogger("tailwind_mcp.audit")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class LoggingCallback(BaseCallback):
    """Emits one JSON log line per dispatch event.

    Each line carries ``event``, ``ts`` (ISO-8601 UTC) and the tool name.
    Failures log at WARNING, everything else at INFO.
    Logger name: tailwind_mcp.audit

    Argument values are never logged, only their keys.
    """

    async def on_tool_called(self, tool_name: str, argument_keys: list[str], **kwargs: Any) -> None:
        logger.info(json.dumps({
            "event": "tool_called",
            "ts": _now(),
            "tool": tool_name,
            "argument_keys": list(argument_keys),
        }))

    async def on_tool_completed(self, tool_name: str, duration_ms: float, **kwargs: Any) -> None:
        logger.info(json.dumps({
            "event": "tool_completed",
            "ts": _now(),
            "tool": tool_name,
            "duration_ms": duration_ms,
            "chars": kwargs.get("chars", 0),
        }))

    async def on_tool_failed(self, tool_name: str, error_type: str, error: str, **kwargs: Any) -> None:
        logger.warning(json.dumps({
            "event": "tool_failed",
            "ts": _now(),
            "tool": tool_name,
            "error_type": error_type,
            "error": error[:200],
            "duration_ms": kwargs.get("duration_ms", 0.0),
        }))
