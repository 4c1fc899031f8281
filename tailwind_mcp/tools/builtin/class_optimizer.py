"""optimize_classes: dedupe, de-conflict and annotate Tailwind class attributes."""

from pydantic import Field

from tailwind_mcp.fallback.classes import optimize_markup
from tailwind_mcp.llm import prompts
from tailwind_mcp.tools.base import DualPathTool, ToolArgs
from tailwind_mcp.types import OptimizationResult


class OptimizeArgs(ToolArgs):
    html: str = Field(description="HTML with Tailwind classes to optimize")
    remove_redundant: bool = Field(default=True, description="Remove redundant classes")
    merge_conflicts: bool = Field(default=True, description="Resolve conflicting classes")
    suggest_alternatives: bool = Field(default=True, description="Suggest better alternatives")


def _bullets(items: list[str], empty: str, code: bool = False) -> str:
    if not items:
        return empty
    if code:
        return "\n".join(f"- `{item}`" for item in items)
    return "\n".join(f"- {item}" for item in items)


class ClassOptimizer(DualPathTool):
    name = "optimize_classes"
    description = "Optimize and clean up Tailwind CSS classes"
    args_model = OptimizeArgs
    result_model = OptimizationResult
    failure_message = "Failed to optimize classes"

    def build_prompt(self, args: OptimizeArgs) -> str:
        operations = []
        if args.remove_redundant:
            operations.append("Remove redundant and duplicate classes")
        if args.merge_conflicts:
            operations.append("Resolve conflicting classes (keep the last declared)")
        if args.suggest_alternatives:
            operations.append("Suggest better class alternatives for performance and maintainability")
        return prompts.OPTIMIZE_CLASSES.format(
            html=args.html,
            operations="\n".join(f"{n}. {op}" for n, op in enumerate(operations, start=1)) or "- None",
        )

    def run_manual(self, args: OptimizeArgs) -> OptimizationResult:
        return optimize_markup(
            args.html,
            remove_redundant=args.remove_redundant,
            merge_conflicts=args.merge_conflicts,
            suggest_alternatives=args.suggest_alternatives,
        )

    def format(self, args: OptimizeArgs, result: OptimizationResult) -> str:
        return f"""# Tailwind CSS Class Optimization Results

## Optimized HTML
```html
{result.optimized_html}
```

## Changes Made

### Removed Classes
{_bullets(result.removed_classes, "No redundant classes found", code=True)}

### Conflicts Resolved
{_bullets(result.conflicts_resolved, "No conflicts found")}

### Improvements Made
{_bullets(result.improvements, "No specific improvements applied")}

### Suggestions
{_bullets(result.suggestions, "No additional suggestions")}"""
