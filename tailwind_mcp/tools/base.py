"""Tool base classes.

Every tool is a ``Tool``: a name, a pydantic argument model (which doubles as
its advertised JSON schema) and ``invoke(arguments) -> ToolResponse``.

Tools backed by the completion provider subclass ``DualPathTool``:

    available? ──no──────────────────────────────┐
        │yes                                      │
    attempt(prompt) ──failed/timeout──────────────┤
        │ok                                       ▼
    from_completion(text) ──None (unusable)──▶ run_manual(args)
        │result                                   │
        └──────────────▶ format(args, result) ◀───┘

Both paths produce the same result record, so ``format`` is shared.
"""

import logging
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from tailwind_mcp.exceptions import InvalidRequest, ToolError
from tailwind_mcp.llm.client import CompletionProvider
from tailwind_mcp.llm.extract import extract_json
from tailwind_mcp.types import ToolDefinition, ToolResponse

logger = logging.getLogger(__name__)


class ToolArgs(BaseModel):
    """Base for tool argument models. Accepts camelCase (wire) and snake_case names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


def _strip_titles(node: Any) -> Any:
    if isinstance(node, dict):
        return {k: _strip_titles(v) for k, v in node.items() if not (k == "title" and isinstance(v, str))}
    if isinstance(node, list):
        return [_strip_titles(v) for v in node]
    return node


def schema_for(args_model: type[BaseModel]) -> dict:
    """JSON schema advertised on tools/list, generated from the argument model."""
    return _strip_titles(args_model.model_json_schema(by_alias=True))


def _summarize(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "arguments"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class Tool:
    """A named, schema-described operation exposed to MCP clients."""

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    args_model: ClassVar[type[ToolArgs]] = ToolArgs
    failure_message: ClassVar[str] = "Tool failed"

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            input_schema=schema_for(self.args_model),
        )

    def parse_args(self, arguments: dict) -> ToolArgs:
        try:
            return self.args_model.model_validate(arguments)
        except ValidationError as e:
            raise InvalidRequest(
                f"Invalid arguments for {self.name}: {_summarize(e)}", tool_name=self.name
            ) from e

    async def run(self, args: ToolArgs) -> str:
        raise NotImplementedError

    async def invoke(self, arguments: dict) -> ToolResponse:
        """Validate, run, wrap. Any failure past validation becomes a ToolError."""
        args = self.parse_args(arguments)
        try:
            text = await self.run(args)
        except Exception as exc:
            logger.error("[%s] %s: %s", self.name, self.failure_message, exc)
            raise ToolError(f"{self.failure_message}: {exc}", tool_name=self.name) from exc
        return ToolResponse.from_text(text)


class DualPathTool(Tool):
    """Completion provider first, manual rule engine as the silent fallback."""

    result_model: ClassVar[type[BaseModel]]

    def __init__(self, provider: CompletionProvider):
        self.provider = provider

    def build_prompt(self, args: ToolArgs) -> str:
        raise NotImplementedError

    def run_manual(self, args: ToolArgs) -> BaseModel:
        raise NotImplementedError

    def format(self, args: ToolArgs, result: BaseModel) -> str:
        raise NotImplementedError

    def result_from_json(self, args: ToolArgs, value: dict) -> BaseModel:
        """Build the result record from the extracted object. ValidationError means unusable."""
        return self.result_model.model_validate(value)

    def from_completion(self, args: ToolArgs, text: str) -> Optional[BaseModel]:
        """Turn completion text into a result record, or None to fall back."""
        extracted = extract_json(text)
        if not extracted.parsed:
            logger.info("[%s] extraction %s: %s", self.name, extracted.status.value, extracted.error)
            return None
        try:
            return self.result_from_json(args, extracted.value)
        except ValidationError as e:
            logger.info("[%s] completion JSON missing expected fields: %s", self.name, _summarize(e))
            return None

    async def produce(self, args: ToolArgs) -> BaseModel:
        """Run one of the two paths. Provider and extraction failures never propagate."""
        if not self.provider.is_available():
            logger.debug("[%s] no provider credential, using manual engine", self.name)
            return self.run_manual(args)

        completion = await self.provider.attempt(self.build_prompt(args))
        if not completion.ok:
            logger.info(
                "[%s] provider %s, falling back to manual engine",
                self.name, completion.error_kind.value if completion.error_kind else "failed",
            )
            return self.run_manual(args)

        result = self.from_completion(args, completion.text)
        if result is None:
            logger.info("[%s] completion unusable, falling back to manual engine", self.name)
            return self.run_manual(args)
        logger.info("[%s] using completion result", self.name)
        return result

    async def run(self, args: ToolArgs) -> str:
        return self.format(args, await self.produce(args))
