"""Tests for tailwind_mcp/config.py."""

from tailwind_mcp.config import TailwindMCPConfig


class TestConfig:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("TAILWIND_MCP_GEMINI_API_KEY", raising=False)
        cfg = TailwindMCPConfig(_env_file=None)
        assert cfg.gemini_api_key is None
        assert cfg.default_llm_model == "gemini/gemini-1.5-flash"
        assert cfg.llm_timeout_seconds == 30.0
        assert cfg.preview_screenshots is True

    def test_plain_gemini_key_env(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "from-env")
        assert TailwindMCPConfig(_env_file=None).gemini_api_key == "from-env"

    def test_prefixed_key_env(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("TAILWIND_MCP_GEMINI_API_KEY", "prefixed")
        assert TailwindMCPConfig(_env_file=None).gemini_api_key == "prefixed"

    def test_prefixed_fields(self, monkeypatch):
        monkeypatch.setenv("TAILWIND_MCP_LLM_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("TAILWIND_MCP_PREVIEW_SCREENSHOTS", "false")
        cfg = TailwindMCPConfig(_env_file=None)
        assert cfg.llm_timeout_seconds == 5.0
        assert cfg.preview_screenshots is False
