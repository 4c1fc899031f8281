"""Tests for tailwind_mcp/tools/dispatcher.py and tools/registry.py."""

import pytest

from tailwind_mcp.exceptions import InvalidRequest
from tailwind_mcp.tools.base import Tool, ToolArgs
from tailwind_mcp.tools.builtin import PlaywrightCapture
from tailwind_mcp.tools.dispatcher import ToolDispatcher
from tailwind_mcp.tools.registry import ToolRegistry, build_registry
from tailwind_mcp.types import ToolRequest, ToolResponse


# ── Helpers ──────────────────────────────────────────────────────────────────

class EchoTool(Tool):
    name = "echo"
    description = "Echo the arguments back"

    async def run(self, args: ToolArgs) -> str:
        return "echo"


class ExplodingTool(Tool):
    """Fails outside the tool's own error wrapping."""
    name = "explode"
    description = "Always crashes"

    def __init__(self, exc: Exception):
        self.exc = exc

    async def invoke(self, arguments: dict) -> ToolResponse:
        raise self.exc


class BrokenRunTool(Tool):
    name = "broken"
    description = "Crashes inside run"
    failure_message = "Broken tool failed"

    async def run(self, args: ToolArgs) -> str:
        raise ValueError("bad state")


# ── Registry ─────────────────────────────────────────────────────────────────

class TestToolRegistry:

    def test_lookup(self):
        registry = ToolRegistry([EchoTool()])
        assert isinstance(registry.get("echo"), EchoTool)
        assert "echo" in registry
        assert len(registry) == 1
        assert registry.names == ["echo"]

    def test_unknown_name(self):
        with pytest.raises(InvalidRequest, match="Unknown tool: nope"):
            ToolRegistry([EchoTool()]).get("nope")

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate tool name: echo"):
            ToolRegistry([EchoTool(), EchoTool()])

    def test_build_registry_without_screenshots(self, settings, offline_provider):
        registry = build_registry(offline_provider, settings)
        assert len(registry) == 8
        assert registry.get("generate_preview").capture is None
        assert registry.get("generate_component").provider is offline_provider

    def test_build_registry_with_screenshots(self, settings, offline_provider):
        settings.preview_screenshots = True
        preview = build_registry(offline_provider, settings).get("generate_preview")
        assert isinstance(preview.capture, PlaywrightCapture)


# ── Error containment ────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestDispatch:

    async def test_unknown_tool_returns_error_response(self, dispatcher):
        response = await dispatcher.dispatch(ToolRequest(tool_name="does_not_exist", arguments={}))
        assert response.is_error
        assert response.text.startswith("Error:")
        assert response.text == "Error: Unknown tool: does_not_exist"

    async def test_missing_arguments(self, dispatcher):
        response = await dispatcher.dispatch(ToolRequest(tool_name="optimize_classes"))
        assert response.text == "Error: No arguments provided for tool: optimize_classes"

    async def test_missing_arguments_checked_before_name(self, dispatcher):
        response = await dispatcher.call("does_not_exist", None)
        assert response.text == "Error: No arguments provided for tool: does_not_exist"

    async def test_empty_arguments_reach_validation(self, dispatcher):
        response = await dispatcher.call("optimize_classes", {})
        assert response.text.startswith("Error: Invalid arguments for optimize_classes")

    async def test_non_object_arguments_are_contained(self, dispatcher):
        response = await dispatcher.call("optimize_classes", ["p-4"])
        assert response.is_error
        assert response.text == (
            "Error: Invalid arguments for optimize_classes: arguments must be an object"
        )

    async def test_success_is_not_an_error(self):
        dispatcher = ToolDispatcher(ToolRegistry([EchoTool()]))
        response = await dispatcher.call("echo", {})
        assert not response.is_error
        assert response.text == "echo"

    async def test_run_failure_carries_failure_message(self):
        dispatcher = ToolDispatcher(ToolRegistry([BrokenRunTool()]))
        response = await dispatcher.call("broken", {})
        assert response.text == "Error: Broken tool failed: bad state"

    async def test_unexpected_exception_is_contained(self):
        dispatcher = ToolDispatcher(ToolRegistry([ExplodingTool(RuntimeError("kaboom"))]))
        response = await dispatcher.call("explode", {})
        assert response.is_error
        assert response.text == "Error: kaboom"

    async def test_exception_without_message_uses_type_name(self):
        dispatcher = ToolDispatcher(ToolRegistry([ExplodingTool(KeyError())]))
        response = await dispatcher.call("explode", {})
        assert response.text == "Error: KeyError"


# ── Callbacks ────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestCallbacks:

    async def test_events_for_success(self):
        events = []
        dispatcher = ToolDispatcher(ToolRegistry([EchoTool()]), callbacks=[lambda e, d: events.append((e, d))])
        await dispatcher.call("echo", {"b": 1, "a": 2})
        assert [e for e, _ in events] == ["tool_called", "tool_completed"]
        assert events[0][1]["argument_keys"] == ["a", "b"]
        assert events[1][1]["tool"] == "echo"

    async def test_events_for_failure(self, dispatcher):
        events = []

        async def record(event, data):
            events.append((event, data))

        dispatcher.callbacks.append(record)
        await dispatcher.call("nope", {})
        assert [e for e, _ in events] == ["tool_called", "tool_failed"]
        assert events[1][1]["error_type"] == "InvalidRequest"
        assert events[1][1]["error"] == "Unknown tool: nope"

    async def test_failing_callback_does_not_break_dispatch(self):
        def boom(event, data):
            raise RuntimeError("callback down")

        dispatcher = ToolDispatcher(ToolRegistry([EchoTool()]), callbacks=[boom])
        response = await dispatcher.call("echo", {})
        assert response.text == "echo"
