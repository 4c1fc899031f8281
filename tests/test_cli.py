"""Tests for the typer CLI."""

import json
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from tailwind_mcp.cli.commands.config import mask
from tailwind_mcp.cli.main import app
from tailwind_mcp.version import __version__

runner = CliRunner()

# wide terminal, no credential, no browser
ENV = {"COLUMNS": "200", "GEMINI_API_KEY": "", "TAILWIND_MCP_PREVIEW_SCREENSHOTS": "false"}


class TestVersion:

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"tailwind-mcp v{__version__}" in result.output


class TestToolsCommand:

    def test_lists_every_tool(self):
        result = runner.invoke(app, ["tools"], env=ENV)
        assert result.exit_code == 0
        for name in ("generate_component", "optimize_classes", "create_layout", "generate_preview"):
            assert name in result.output


class TestConfigCommand:

    def test_masks_api_key(self):
        env = dict(ENV, GEMINI_API_KEY="abcdefghijklmnop")
        result = runner.invoke(app, ["config"], env=env)
        assert result.exit_code == 0
        assert "abcdefghijklmnop" not in result.output
        assert "gemini_api_key" in result.output

    def test_mask(self):
        assert mask("short") == "***"
        assert mask("abcdefghijkl") == "abcd…***"


class TestCallCommand:

    def test_runs_tool_locally(self):
        args = json.dumps({"html": '<div class="p-4 px-4 py-4 text-blue-500 text-blue-600">X</div>'})
        result = runner.invoke(app, ["call", "optimize_classes", "--args", args, "--raw"], env=ENV)
        assert result.exit_code == 0
        assert 'class="p-4 text-blue-600"' in result.output

    def test_unknown_tool_exits_nonzero(self):
        result = runner.invoke(app, ["call", "nope", "--args", "{}", "--raw"], env=ENV)
        assert result.exit_code == 1
        assert "Error: Unknown tool: nope" in result.output

    def test_invalid_json(self):
        result = runner.invoke(app, ["call", "optimize_classes", "--args", "{not json"], env=ENV)
        assert result.exit_code == 2

    def test_args_must_be_object(self):
        result = runner.invoke(app, ["call", "optimize_classes", "--args", "[1, 2]"], env=ENV)
        assert result.exit_code == 2


class TestServeCommand:

    def test_runs_stdio_server(self):
        with patch("tailwind_mcp.server.run_stdio", new=AsyncMock()) as run_stdio:
            result = runner.invoke(app, ["serve", "--log-level", "warning"], env=ENV)
        assert result.exit_code == 0
        run_stdio.assert_awaited_once()
