"""suggest_improvements: prioritized design improvement suggestions."""

from typing import Literal

from pydantic import Field

from tailwind_mcp.fallback.suggestions import FOCUS_AREAS, suggest_for_markup
from tailwind_mcp.llm import prompts
from tailwind_mcp.tools.base import DualPathTool, ToolArgs
from tailwind_mcp.types import SuggestionReport

FocusArea = Literal["accessibility", "performance", "ux", "aesthetics", "responsiveness"]

AREA_HEADINGS = {
    "accessibility": "Accessibility Improvements",
    "responsiveness": "Responsive Design Improvements",
    "performance": "Performance Optimizations",
    "aesthetics": "Visual Design Enhancements",
    "ux": "User Experience Improvements",
}

CLOSING = """## Implementation Priority

1. **High Priority**: Accessibility and core functionality issues
2. **Medium Priority**: User experience and responsive design
3. **Low Priority**: Visual enhancements and performance optimizations

## Next Steps

- Implement high-priority suggestions first
- Test changes across different devices and browsers
- Run accessibility audits using tools like axe or Lighthouse
- Consider user testing for UX improvements"""


class SuggestionArgs(ToolArgs):
    html: str = Field(description="HTML code to analyze")
    context: str = Field(default="", description="Context about the design goals")
    target_audience: str = Field(default="", description="Target audience for the design")
    focus_areas: list[FocusArea] = Field(
        default_factory=lambda: list(FOCUS_AREAS), description="Areas to focus improvements on"
    )


class SuggestionAdvisor(DualPathTool):
    name = "suggest_improvements"
    description = "Get prioritized suggestions for design improvements"
    args_model = SuggestionArgs
    result_model = SuggestionReport
    failure_message = "Failed to generate suggestions"

    def build_prompt(self, args: SuggestionArgs) -> str:
        return prompts.SUGGEST_IMPROVEMENTS.format(
            html=args.html,
            context_block=f"\nContext: {args.context}" if args.context else "",
            audience_block=f"\nTarget Audience: {args.target_audience}" if args.target_audience else "",
            focus_areas=", ".join(args.focus_areas),
        )

    def run_manual(self, args: SuggestionArgs) -> SuggestionReport:
        return suggest_for_markup(args.html, args.focus_areas)

    def format(self, args: SuggestionArgs, result: SuggestionReport) -> str:
        out = ["# Design Improvement Suggestions", ""]
        for group in result.groups:
            heading = AREA_HEADINGS.get(group.area, f"{group.area.capitalize()} Improvements")
            out += [f"## {heading}", ""]
            if not group.suggestions:
                out += ["No issues detected in this area.", ""]
            for s in group.suggestions:
                out += [
                    f"### {s.title}",
                    f"**Issue**: {s.issue}",
                    f"**Recommendation**: {s.recommendation}",
                    f"**Priority**: {s.priority}",
                    "",
                ]
                if s.example:
                    out += [f"```{s.example_language}", s.example, "```", ""]
        out.append(CLOSING)
        return "\n".join(out)
