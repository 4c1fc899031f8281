"""Tests for tailwind_mcp/callbacks."""

import json
import logging

import pytest

from tailwind_mcp.callbacks import BaseCallback, LoggingCallback


class CountingCallback(BaseCallback):

    def __init__(self):
        self.called, self.completed, self.failed = [], [], []

    async def on_tool_called(self, tool_name, argument_keys, **kwargs):
        self.called.append((tool_name, argument_keys))

    async def on_tool_completed(self, tool_name, duration_ms, **kwargs):
        self.completed.append(tool_name)

    async def on_tool_failed(self, tool_name, error_type, error, **kwargs):
        self.failed.append((tool_name, error_type))


@pytest.mark.asyncio
class TestBaseCallback:

    async def test_routes_dispatcher_events(self, provider_factory, dispatcher_for):
        counter = CountingCallback()
        dispatcher = dispatcher_for(provider_factory(available=False), callbacks=[counter])
        await dispatcher.call("optimize_classes", {"html": "<p></p>"})
        await dispatcher.call("missing_tool", {})
        assert counter.called == [("optimize_classes", ["html"]), ("missing_tool", [])]
        assert counter.completed == ["optimize_classes"]
        assert counter.failed == [("missing_tool", "InvalidRequest")]

    async def test_unknown_event_is_ignored(self):
        await BaseCallback()("something_else", {})


@pytest.mark.asyncio
class TestLoggingCallback:

    async def test_emits_json_lines(self, caplog):
        cb = LoggingCallback()
        with caplog.at_level(logging.INFO, logger="tailwind_mcp.audit"):
            await cb("tool_called", {"tool": "create_theme", "argument_keys": ["brandColor"]})
            await cb("tool_failed", {"tool": "create_theme", "error_type": "ToolError", "error": "x" * 500})
        records = [json.loads(r.getMessage()) for r in caplog.records if r.name == "tailwind_mcp.audit"]
        assert [r["event"] for r in records] == ["tool_called", "tool_failed"]
        assert records[0]["argument_keys"] == ["brandColor"]
        assert records[0]["ts"].endswith("Z")
        assert len(records[1]["error"]) == 200
        assert caplog.records[-1].levelno == logging.WARNING
