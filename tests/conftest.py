"""Test fixtures: test config, fake completion provider, registry and dispatcher.

All tests should use these fixtures for consistency. No test touches the
network or launches a browser.
"""

import pytest

from tailwind_mcp.config import TailwindMCPConfig
from tailwind_mcp.tools.builtin import DUAL_PATH_TOOLS, PreviewGenerator
from tailwind_mcp.tools.dispatcher import ToolDispatcher
from tailwind_mcp.tools.registry import ToolRegistry
from tailwind_mcp.types import CompletionErrorKind, CompletionResult


class FakeProvider:
    """Substitutable completion provider.

    available=False  -> tools must go straight to the manual engine
    text="..."       -> every attempt() returns this completion
    error=<kind>     -> every attempt() fails with that kind
    """

    def __init__(self, available: bool = True, text: str = "", error: CompletionErrorKind = None):
        self.available = available
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    def is_available(self) -> bool:
        return self.available

    async def complete(self, prompt, model=None) -> str:
        self.prompts.append(prompt)
        return self.text

    async def attempt(self, prompt, model=None) -> CompletionResult:
        self.prompts.append(prompt)
        if self.error is not None:
            return CompletionResult(error_kind=self.error, message=f"fake {self.error.value}")
        return CompletionResult(text=self.text)


def make_registry(provider) -> ToolRegistry:
    tools = [tool_cls(provider) for tool_cls in DUAL_PATH_TOOLS]
    tools.append(PreviewGenerator(capture=None))
    return ToolRegistry(tools)


@pytest.fixture(autouse=True)
def _no_credentials(monkeypatch):
    """A developer's real key must never reach a test."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("TAILWIND_MCP_GEMINI_API_KEY", raising=False)


@pytest.fixture
def settings():
    """Test configuration: no credential, no browser, short timeouts."""
    return TailwindMCPConfig(
        _env_file=None,
        gemini_api_key=None,
        default_llm_model="gemini/test-model",
        llm_timeout_seconds=0.5,
        preview_screenshots=False,
    )


@pytest.fixture
def offline_provider():
    return FakeProvider(available=False)


@pytest.fixture
def registry(offline_provider):
    return make_registry(offline_provider)


@pytest.fixture
def dispatcher(registry):
    return ToolDispatcher(registry)


@pytest.fixture
def sample_html():
    return (
        '<div class="p-4 px-4 py-4 text-blue-500 text-blue-600">'
        '<img src="hero.png">'
        '<button class="bg-blue-600 text-white">Go</button>'
        "</div>"
    )


@pytest.fixture
def provider_factory():
    """Build a FakeProvider: ``provider_factory(text=...)``, ``provider_factory(error=...)``."""
    return FakeProvider


@pytest.fixture
def dispatcher_for():
    """Dispatcher around a given provider: ``dispatcher_for(provider, callbacks=[...])``."""
    def build(provider, callbacks=None) -> ToolDispatcher:
        return ToolDispatcher(make_registry(provider), callbacks=callbacks)
    return build
