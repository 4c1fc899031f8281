"""analyze_design: sectioned quality report for a markup fragment."""

from pydantic import Field

from tailwind_mcp.fallback.analysis import analyze_markup
from tailwind_mcp.llm import prompts
from tailwind_mcp.tools.base import DualPathTool, ToolArgs
from tailwind_mcp.types import AnalysisReport, CheckStatus

STATUS_ICONS = {
    CheckStatus.GOOD: "✅",
    CheckStatus.NEEDS_IMPROVEMENT: "⚠️",
    CheckStatus.MISSING: "❌",
}


class AnalyzeArgs(ToolArgs):
    html: str = Field(description="HTML code to analyze")
    css: str = Field(default="", description="Additional CSS code (optional)")
    context: str = Field(default="", description="Design context or purpose")
    check_accessibility: bool = Field(default=True, description="Check accessibility compliance")
    check_responsive: bool = Field(default=True, description="Check responsive design")
    check_performance: bool = Field(default=True, description="Check performance implications")


class DesignAnalyzer(DualPathTool):
    name = "analyze_design"
    description = "Analyze a design for accessibility, responsiveness and performance best practices"
    args_model = AnalyzeArgs
    result_model = AnalysisReport
    failure_message = "Failed to analyze design"

    def build_prompt(self, args: AnalyzeArgs) -> str:
        areas = [prompts.ANALYSIS_AREAS["structure"]]
        if args.check_accessibility:
            areas.append(prompts.ANALYSIS_AREAS["accessibility"])
        if args.check_responsive:
            areas.append(prompts.ANALYSIS_AREAS["responsive"])
        if args.check_performance:
            areas.append(prompts.ANALYSIS_AREAS["performance"])
        return prompts.ANALYZE_DESIGN.format(
            html=args.html,
            css_block=f"\nCSS:\n{args.css}\n" if args.css else "",
            context_block=f"\nContext: {args.context}\n" if args.context else "",
            areas="\n".join(areas),
        )

    def result_from_json(self, args: AnalyzeArgs, value: dict) -> AnalysisReport:
        # LLM scores are advisory; never marked heuristic
        report = AnalysisReport.model_validate(value)
        return report.model_copy(update={"score_is_heuristic": False})

    def run_manual(self, args: AnalyzeArgs) -> AnalysisReport:
        return analyze_markup(
            args.html,
            css=args.css,
            check_accessibility=args.check_accessibility,
            check_responsive=args.check_responsive,
            check_performance=args.check_performance,
        )

    def format(self, args: AnalyzeArgs, result: AnalysisReport) -> str:
        out = ["# Design Analysis Report", ""]
        if result.overall_score is not None:
            suffix = " (heuristic)" if result.score_is_heuristic else ""
            out += [f"**Overall Score:** {result.overall_score}/100{suffix}", ""]
        for section in result.sections:
            out += [f"## {section.title}", ""]
            for check in section.checks:
                out.append(f"- **{check.label}**: {STATUS_ICONS[check.status]} {check.detail}".rstrip())
            out.append("")
            for rec in section.recommendations:
                out += [f"**Recommendation**: {rec}", ""]
        out += ["## General Recommendations", ""]
        out += [f"- {rec}" for rec in result.general_recommendations] or ["- No general recommendations"]
        return "\n".join(out)
