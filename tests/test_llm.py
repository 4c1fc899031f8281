"""Tests for tailwind_mcp/llm/client.py. litellm is always mocked."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from tailwind_mcp.config import TailwindMCPConfig
from tailwind_mcp.exceptions import ProviderError
from tailwind_mcp.llm.client import CompletionProvider, LLMClient
from tailwind_mcp.types import CompletionErrorKind


# ── Helpers ──────────────────────────────────────────────────────────────────

def _settings(**overrides) -> TailwindMCPConfig:
    values = {
        "_env_file": None,
        "gemini_api_key": "test-key-123456",
        "default_llm_model": "gemini/test-model",
        "llm_timeout_seconds": 0.5,
    }
    values.update(overrides)
    return TailwindMCPConfig(**values)


def _response(content):
    mock_response = MagicMock()
    mock_response.choices[0].message.content = content
    return mock_response


# ── Availability ─────────────────────────────────────────────────────────────

class TestAvailability:

    def test_available_with_key(self):
        assert LLMClient(settings=_settings()).is_available() is True

    def test_unavailable_without_key(self):
        assert LLMClient(settings=_settings(gemini_api_key=None)).is_available() is False

    def test_empty_key_is_unavailable(self):
        assert LLMClient(settings=_settings(gemini_api_key="")).is_available() is False

    def test_satisfies_provider_protocol(self):
        assert isinstance(LLMClient(settings=_settings()), CompletionProvider)

    def test_explicit_model_overrides_settings(self):
        client = LLMClient(settings=_settings(), model="gemini/other")
        assert client.model == "gemini/other"


# ── complete() ───────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestComplete:

    async def test_returns_content(self):
        client = LLMClient(settings=_settings())
        with patch("tailwind_mcp.llm.client.litellm.acompletion",
                   new=AsyncMock(return_value=_response("hello"))):
            assert await client.complete("prompt") == "hello"

    async def test_passes_model_key_and_single_user_message(self):
        client = LLMClient(settings=_settings())
        mock = AsyncMock(return_value=_response("ok"))
        with patch("tailwind_mcp.llm.client.litellm.acompletion", new=mock):
            await client.complete("make a button")
        kwargs = mock.call_args.kwargs
        assert kwargs["model"] == "gemini/test-model"
        assert kwargs["api_key"] == "test-key-123456"
        assert kwargs["messages"] == [{"role": "user", "content": "make a button"}]
        assert kwargs["num_retries"] == 0

    async def test_none_content_becomes_empty_string(self):
        client = LLMClient(settings=_settings())
        with patch("tailwind_mcp.llm.client.litellm.acompletion",
                   new=AsyncMock(return_value=_response(None))):
            assert await client.complete("prompt") == ""

    async def test_no_key_raises_unavailable_without_calling_litellm(self):
        client = LLMClient(settings=_settings(gemini_api_key=None))
        mock = AsyncMock()
        with patch("tailwind_mcp.llm.client.litellm.acompletion", new=mock):
            with pytest.raises(ProviderError) as exc_info:
                await client.complete("prompt")
        assert exc_info.value.kind == "unavailable"
        mock.assert_not_called()

    async def test_provider_exception_is_normalized(self):
        client = LLMClient(settings=_settings())
        with patch("tailwind_mcp.llm.client.litellm.acompletion",
                   new=AsyncMock(side_effect=RuntimeError("quota exceeded"))):
            with pytest.raises(ProviderError) as exc_info:
                await client.complete("prompt")
        assert exc_info.value.kind == "provider"
        assert "quota exceeded" in exc_info.value.message

    async def test_slow_provider_times_out(self):
        client = LLMClient(settings=_settings(llm_timeout_seconds=0.05))

        async def slow(**kwargs):
            await asyncio.sleep(5)

        with patch("tailwind_mcp.llm.client.litellm.acompletion", new=slow):
            with pytest.raises(ProviderError) as exc_info:
                await client.complete("prompt")
        assert exc_info.value.kind == "timeout"

    async def test_malformed_response_is_provider_error(self):
        client = LLMClient(settings=_settings())
        bad = MagicMock()
        bad.choices = []
        with patch("tailwind_mcp.llm.client.litellm.acompletion", new=AsyncMock(return_value=bad)):
            with pytest.raises(ProviderError) as exc_info:
                await client.complete("prompt")
        assert exc_info.value.kind == "provider"


# ── attempt() ────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestAttempt:

    async def test_success(self):
        client = LLMClient(settings=_settings())
        with patch("tailwind_mcp.llm.client.litellm.acompletion",
                   new=AsyncMock(return_value=_response("text"))):
            result = await client.attempt("prompt")
        assert result.ok
        assert result.text == "text"

    async def test_failure_returns_result_instead_of_raising(self):
        client = LLMClient(settings=_settings())
        with patch("tailwind_mcp.llm.client.litellm.acompletion",
                   new=AsyncMock(side_effect=ConnectionError("offline"))):
            result = await client.attempt("prompt")
        assert not result.ok
        assert result.error_kind == CompletionErrorKind.PROVIDER
        assert "offline" in result.message

    async def test_unavailable_kind(self):
        client = LLMClient(settings=_settings(gemini_api_key=None))
        result = await client.attempt("prompt")
        assert result.error_kind == CompletionErrorKind.UNAVAILABLE
