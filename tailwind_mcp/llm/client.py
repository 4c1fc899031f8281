"""Thin wrapper around litellm: the completion provider every tool consumes.

litellm handles Gemini, Anthropic, OpenAI, Ollama, and 100+ providers.
This wrapper adds: credential gating, a bounded timeout, error normalization.

Availability
────────────
``is_available()`` is a local check on the configured credential. It never
touches the network. When it returns False the tools skip straight to their
manual engines, which is a normal operating mode and not an error.

Failure model
─────────────
``complete()`` raises ProviderError on any failure, with ``kind`` set to
"unavailable", "timeout" or "provider". ``attempt()`` wraps the same call and
returns a CompletionResult instead of raising; the dual-path tools use it so a
provider failure turns into exactly one fallback. There are no retries.
"""

import asyncio
import logging
from typing import Optional, Protocol, runtime_checkable

import litellm

from tailwind_mcp.config import TailwindMCPConfig, config as default_config
from tailwind_mcp.exceptions import ProviderError
from tailwind_mcp.types import CompletionErrorKind, CompletionRequest, CompletionResult

logger = logging.getLogger(__name__)


@runtime_checkable
class CompletionProvider(Protocol):
    """What a tool needs from a text-generation backend."""

    def is_available(self) -> bool:
        ...

    async def complete(self, prompt: str, model: Optional[str] = None) -> str:
        ...

    async def attempt(self, prompt: str, model: Optional[str] = None) -> CompletionResult:
        ...


class LLMClient:
    """litellm-backed completion provider. Construct once, share across tools."""

    def __init__(self, settings: TailwindMCPConfig = None, model: str = None):
        """
        Args:
            settings: Resolved configuration. Defaults to the process-wide config.
            model:    Explicit litellm model string, e.g. "gemini/gemini-1.5-flash".
                      Overrides settings.default_llm_model.
        """
        self.settings = settings or default_config
        self.model = model or self.settings.default_llm_model
        litellm.drop_params = True  # ignore unsupported params per provider

    def is_available(self) -> bool:
        return bool(self.settings.gemini_api_key)

    async def complete(self, prompt: str, model: Optional[str] = None) -> str:
        """Call the LLM via litellm.acompletion() with a single user message.

        Returns:
            The completion text ('' when the provider returns no content).

        Raises:
            ProviderError: credential missing, timeout, or any provider error
        """
        request = CompletionRequest(prompt=prompt, model=model or self.model)
        if not self.is_available():
            raise ProviderError(
                "No completion provider credential configured",
                kind=CompletionErrorKind.UNAVAILABLE.value,
            )

        kwargs = {
            "model": request.model,
            "messages": [{"role": "user", "content": request.prompt}],
            "temperature": self.settings.llm_temperature,
            "max_tokens": self.settings.llm_max_tokens,
            "api_key": self.settings.gemini_api_key,
            "num_retries": 0,
        }
        timeout = self.settings.llm_timeout_seconds
        try:
            response = await asyncio.wait_for(litellm.acompletion(**kwargs), timeout=timeout)
        except asyncio.TimeoutError:
            raise ProviderError(
                f"LLM call timed out after {timeout}s",
                kind=CompletionErrorKind.TIMEOUT.value,
                details={"model": request.model},
            )
        except Exception as e:
            raise ProviderError(
                f"LLM call failed: {e}",
                kind=CompletionErrorKind.PROVIDER.value,
                details={"model": request.model},
            ) from e

        try:
            return response.choices[0].message.content or ""
        except (AttributeError, IndexError) as e:
            raise ProviderError(
                f"Malformed LLM response: {e}",
                kind=CompletionErrorKind.PROVIDER.value,
                details={"model": request.model},
            ) from e

    async def attempt(self, prompt: str, model: Optional[str] = None) -> CompletionResult:
        """Like complete(), but failures come back as a CompletionResult."""
        try:
            text = await self.complete(prompt, model=model)
        except ProviderError as e:
            logger.warning("[LLMClient] %s (%s)", e.message, e.kind)
            return CompletionResult(error_kind=CompletionErrorKind(e.kind), message=e.message)
        return CompletionResult(text=text)
