"""create_theme: brand color -> palette, scales and tailwind.config.js."""

from typing import Literal

from pydantic import AliasChoices, Field

from tailwind_mcp.fallback.themes import build_theme, design_notes, tailwind_config_js
from tailwind_mcp.llm import prompts
from tailwind_mcp.tools.base import DualPathTool, ToolArgs
from tailwind_mcp.types import ThemeResult, Typography

USAGE_EXAMPLES = """## Usage Examples

### Primary Button
```html
<button class="bg-primary-600 hover:bg-primary-700 text-white px-6 py-3 rounded-md transition-colors">
  Primary Action
</button>
```

### Card Component
```html
<div class="bg-white border border-neutral-200 rounded-lg shadow-sm p-6">
  <h3 class="text-xl font-semibold text-neutral-900 mb-2">Card Title</h3>
  <p class="text-neutral-600">Card content goes here...</p>
</div>
```"""


class ThemeArgs(ToolArgs):
    brand_color: str = Field(description="Primary brand color (hex, rgb, or color name)")
    style: Literal["minimal", "modern", "classic", "bold", "elegant"] = Field(
        default="modern", description="Design style"
    )
    shade_count: int = Field(
        default=9, ge=5, le=11,
        validation_alias=AliasChoices("shadeCount", "colorCount", "shade_count"),
        description="Number of color shades to generate",
    )
    include_config: bool = Field(default=True, description="Generate tailwind.config.js")
    include_typography: bool = Field(
        default=True,
        validation_alias=AliasChoices("includeTypography", "typography", "include_typography"),
        description="Include typography scale",
    )
    include_spacing: bool = Field(
        default=True,
        validation_alias=AliasChoices("includeSpacing", "spacing", "include_spacing"),
        description="Include custom spacing scale",
    )


def format_palette(shades: dict[str, str]) -> str:
    return "\n".join(f"- **{shade}**: `{color}`" for shade, color in shades.items())


def format_typography(typography: Typography) -> str:
    lines = ["### Font Families"]
    for name, fonts in typography.font_family.items():
        lines.append(f"- **{name}**: {', '.join(fonts)}")
    lines += ["", "### Font Sizes"]
    for name, spec in typography.font_size.items():
        if isinstance(spec, (list, tuple)) and len(spec) == 2 and isinstance(spec[1], dict):
            lines.append(f"- **{name}**: {spec[0]} (line-height: {spec[1].get('lineHeight', 'normal')})")
        else:
            lines.append(f"- **{name}**: {spec}")
    return "\n".join(lines)


def format_spacing(spacing: dict[str, str]) -> str:
    return "\n".join(f"- **{name}**: `{value}`" for name, value in spacing.items())


class ThemeCreator(DualPathTool):
    name = "create_theme"
    description = "Generate a custom Tailwind theme with AI assistance, with a computed fallback palette"
    args_model = ThemeArgs
    result_model = ThemeResult
    failure_message = "Failed to create theme"

    def build_prompt(self, args: ThemeArgs) -> str:
        extras = []
        if args.include_typography:
            extras.append("Design a typography scale with font families, sizes, and line heights")
        if args.include_spacing:
            extras.append("Create a custom spacing scale that fits the design style")
        return prompts.CREATE_THEME.format(
            brand_color=args.brand_color,
            style=args.style,
            shade_count=args.shade_count,
            typography=str(args.include_typography).lower(),
            spacing=str(args.include_spacing).lower(),
            extra_requirements="".join(f"{n}. {line}\n" for n, line in enumerate(extras, start=4)),
        )

    def run_manual(self, args: ThemeArgs) -> ThemeResult:
        return ThemeResult(
            theme_config=build_theme(
                args.brand_color,
                style=args.style,
                shade_count=args.shade_count,
                typography=args.include_typography,
                spacing=args.include_spacing,
            ),
            design_system_notes=design_notes(args.brand_color, args.style),
        )

    def format(self, args: ThemeArgs, result: ThemeResult) -> str:
        theme = result.theme_config
        colors = theme.colors
        blocks = [
            f"# Custom Tailwind Theme - {args.style.capitalize()} Style",
            f"## Design System Overview\n{result.design_system_notes}",
            "## Color Palette",
            f"### Primary Colors\n{format_palette(colors.primary)}",
        ]
        if colors.secondary:
            blocks.append(f"### Secondary Colors\n{format_palette(colors.secondary)}")
        if colors.accent:
            blocks.append(f"### Accent Colors\n{format_palette(colors.accent)}")
        if colors.neutral:
            blocks.append(f"### Neutral Colors\n{format_palette(colors.neutral)}")
        if args.include_typography and theme.typography:
            blocks.append(f"## Typography Scale\n{format_typography(theme.typography)}")
        if args.include_spacing and theme.spacing:
            blocks.append(f"## Spacing Scale\n{format_spacing(theme.spacing)}")
        if args.include_config:
            blocks.append(f"## Tailwind Configuration\n```javascript\n{tailwind_config_js(theme)}\n```")
        blocks.append(USAGE_EXAMPLES)
        return "\n\n".join(blocks)
