"""Application configuration. All env vars defined here with defaults."""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class TailwindMCPConfig(BaseSettings):
    # ── App ──
    app_name: str = "tailwind-mcp"
    debug: bool = False
    log_level: str = "INFO"

    # ── LLM (litellm) ──
    # Absent key is a supported mode: every tool runs its manual engine.
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("TAILWIND_MCP_GEMINI_API_KEY", "GEMINI_API_KEY", "gemini_api_key"),
    )
    default_llm_model: str = "gemini/gemini-1.5-flash"
    llm_max_tokens: int = 2048
    llm_temperature: float = 0.7
    llm_timeout_seconds: float = 30.0          # provider hang → fallback

    # ── Preview ──
    preview_screenshots: bool = True           # headless chromium via playwright
    preview_timeout_seconds: float = 15.0

    model_config = {
        "env_prefix": "TAILWIND_MCP_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }


config = TailwindMCPConfig()
