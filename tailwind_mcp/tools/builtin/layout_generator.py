"""create_layout: responsive page layouts from a section list."""

from typing import Literal, Optional

from pydantic import Field

from tailwind_mcp.fallback.layouts import lookup_layout, render_layout
from tailwind_mcp.llm import prompts
from tailwind_mcp.llm.extract import strip_code_fences
from tailwind_mcp.tools.base import DualPathTool, ToolArgs
from tailwind_mcp.types import LayoutSpec

STATIC_NOTES = """## Responsive Breakpoints
- **Mobile**: Base styles (< 640px)
- **Tablet**: sm: prefix (≥ 640px)
- **Desktop**: md: prefix (≥ 768px)
- **Large**: lg: prefix (≥ 1024px)
- **Extra Large**: xl: prefix (≥ 1280px)

## Customization Tips
- Adjust color scheme by modifying color classes
- Change spacing with different padding/margin classes
- Modify typography with font size and weight classes
- Customize breakpoints for different responsive behavior

## Accessibility Features
- Semantic HTML structure
- Proper heading hierarchy
- ARIA labels where appropriate
- Keyboard navigation support

## Performance Considerations
- Minimal custom CSS required
- Efficient responsive design
- Fast rendering with Tailwind's utility-first approach"""


class LayoutArgs(ToolArgs):
    layout_type: Literal["dashboard", "landing", "blog", "ecommerce", "portfolio", "documentation"] = Field(
        alias="type", description="Layout type"
    )
    sections: list[str] = Field(description="Layout sections (header, sidebar, main, footer, etc.)")
    complexity: Literal["simple", "medium", "complex"] = Field(default="medium", description="Layout complexity")
    framework: Literal["html", "react", "vue", "svelte"] = Field(default="html", description="Target framework")


class LayoutGenerator(DualPathTool):
    name = "create_layout"
    description = "Generate responsive layouts with Tailwind CSS"
    args_model = LayoutArgs
    result_model = LayoutSpec
    failure_message = "Failed to create layout"

    def _spec(self, args: LayoutArgs, code: str) -> LayoutSpec:
        template = lookup_layout(args.layout_type, args.complexity, args.sections)
        return LayoutSpec(
            layout_type=args.layout_type,
            complexity=args.complexity,
            structure=list(template.structure),
            grid_template=template.grid_template,
            code=code,
        )

    def build_prompt(self, args: LayoutArgs) -> str:
        return prompts.CREATE_LAYOUT.format(
            layout_type=args.layout_type,
            complexity=args.complexity,
            sections=", ".join(args.sections),
            framework=args.framework,
            framework_hint=prompts.LAYOUT_FRAMEWORK_HINTS.get(args.framework, ""),
            focus_points=prompts.LAYOUT_FOCUS_POINTS.get(args.layout_type, "- Clean, modern design"),
        )

    def from_completion(self, args: LayoutArgs, text: str) -> Optional[LayoutSpec]:
        code = strip_code_fences(text)
        return self._spec(args, code) if code else None

    def run_manual(self, args: LayoutArgs) -> LayoutSpec:
        code = render_layout(args.layout_type, args.sections, args.complexity, args.framework)
        return self._spec(args, code)

    def format(self, args: LayoutArgs, result: LayoutSpec) -> str:
        grid = f"`{result.grid_template}`" if result.grid_template else "none (stacked sections)"
        return f"""# {args.layout_type.capitalize()} Layout - {args.complexity.capitalize()} Complexity

## Generated Layout
```{args.framework}
{result.code}
```

## Layout Features
- **Type**: {result.layout_type}
- **Complexity**: {result.complexity}
- **Framework**: {args.framework}
- **Sections**: {', '.join(args.sections)}
- **Structure**: {', '.join(result.structure)}
- **Grid Template**: {grid}

{STATIC_NOTES}"""
