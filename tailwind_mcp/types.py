"""All shared types, enums, and result records. Everything imports from here."""

from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ── Enums ──────────────────────────────────────────────────────────────

class CompletionErrorKind(str, Enum):
    UNAVAILABLE = "unavailable"  # no credential configured
    TIMEOUT = "timeout"
    PROVIDER = "provider"        # network, auth, quota, malformed response

class ExtractionStatus(str, Enum):
    PARSED = "parsed"
    NOT_FOUND = "not_found"      # no `{` ... `}` span in the text
    PARSE_ERROR = "parse_error"  # span found but not a JSON object

class CheckStatus(str, Enum):
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"
    MISSING = "missing"


# ── Protocol Shapes ────────────────────────────────────────────────────

class ToolDefinition(BaseModel):
    """Descriptor advertised on tools/list."""
    name: str
    description: str
    input_schema: dict[str, Any] = Field(default_factory=dict)


class ToolRequest(BaseModel):
    tool_name: str
    arguments: Optional[dict[str, Any]] = None


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Result of one tools/call. Error responses carry text starting with 'Error:'."""
    content: list[TextContent]
    is_error: bool = False

    @classmethod
    def from_text(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, message: str) -> "ToolResponse":
        return cls(content=[TextContent(text=f"Error: {message}")], is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(c.text for c in self.content)


# ── Completion Provider ────────────────────────────────────────────────

class CompletionRequest(BaseModel):
    prompt: str
    model: Optional[str] = None


class CompletionResult(BaseModel):
    text: Optional[str] = None
    error_kind: Optional[CompletionErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error_kind is None and self.text is not None


class ExtractedStructure(BaseModel):
    status: ExtractionStatus
    value: Optional[dict[str, Any]] = None
    error: str = ""

    @property
    def parsed(self) -> bool:
        return self.status == ExtractionStatus.PARSED


# ── Result Records ─────────────────────────────────────────────────────
# Both execution paths build these. LLM JSON arrives in camelCase.

class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ComponentResult(_Record):
    code: str


class OptimizationResult(_Record):
    optimized_html: str
    removed_classes: list[str] = Field(default_factory=list)
    conflicts_resolved: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class ThemePalette(_Record):
    primary: dict[str, str]
    secondary: Optional[dict[str, str]] = None
    accent: Optional[dict[str, str]] = None
    neutral: Optional[dict[str, str]] = None


class Typography(_Record):
    font_family: dict[str, list[str]] = Field(default_factory=dict)
    font_size: dict[str, Any] = Field(default_factory=dict)  # name -> [size, {lineHeight}] or size


class ThemeConfig(_Record):
    colors: ThemePalette
    typography: Optional[Typography] = None
    spacing: Optional[dict[str, str]] = None
    border_radius: Optional[dict[str, str]] = None
    box_shadow: Optional[dict[str, str]] = None


class ThemeResult(_Record):
    theme_config: ThemeConfig
    design_system_notes: str = ""


class AnalysisCheck(_Record):
    label: str
    status: CheckStatus
    detail: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, v):
        # LLMs write "Good", "Needs Improvement", "needs-improvement"
        if isinstance(v, str):
            return v.strip().lower().replace(" ", "_").replace("-", "_")
        return v


class AnalysisSection(_Record):
    title: str
    checks: list[AnalysisCheck] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class AnalysisReport(_Record):
    overall_score: Optional[int] = Field(default=None, ge=0, le=100)
    score_is_heuristic: bool = False
    sections: list[AnalysisSection]
    general_recommendations: list[str] = Field(default_factory=list)


class Suggestion(_Record):
    title: str
    issue: str
    recommendation: str
    priority: str = "Medium"
    example: Optional[str] = None
    example_language: str = "html"


class SuggestionGroup(_Record):
    area: str
    suggestions: list[Suggestion] = Field(default_factory=list)


class SuggestionReport(_Record):
    groups: list[SuggestionGroup]


class ConvertedRule(_Record):
    selector: str
    classes: list[str] = Field(default_factory=list)


class ConversionResult(_Record):
    converted_code: str
    rules: list[ConvertedRule] = Field(default_factory=list)
    conversion_notes: list[str] = Field(default_factory=list)
    unconverted_styles: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class LayoutSpec(_Record):
    layout_type: str
    complexity: str
    structure: list[str] = Field(default_factory=list)
    grid_template: str = ""
    code: str


class PreviewResult(_Record):
    document: str
    screenshot: Optional[str] = None  # base64 PNG
    width: int
    height: int
    dark_mode: bool = False
    responsive: bool = False
