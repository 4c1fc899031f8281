"""convert_to_tailwind: CSS, SCSS or inline styles -> utility classes."""

from typing import Literal

from pydantic import AliasChoices, Field

from tailwind_mcp.fallback.css import convert_css
from tailwind_mcp.llm import prompts
from tailwind_mcp.tools.base import DualPathTool, ToolArgs
from tailwind_mcp.types import ConversionResult

USAGE_TIPS = """## Usage Tips
- Test the converted code to ensure visual consistency
- Consider extracting repeated class patterns into components
- Add responsive variants as needed (sm:, md:, lg:, xl:)"""


class ConvertArgs(ToolArgs):
    code: str = Field(
        validation_alias=AliasChoices("code", "css"),
        description="CSS, SCSS, or HTML with styles to convert",
    )
    format: Literal["css", "scss", "html"] = Field(description="Input format")
    preserve_custom: bool = Field(default=False, description="Preserve custom properties that cannot be converted")
    optimize: bool = Field(default=True, description="Optimize the converted classes")


class CSSConverter(DualPathTool):
    name = "convert_to_tailwind"
    description = "Convert CSS/SCSS or inline styles to Tailwind classes"
    args_model = ConvertArgs
    result_model = ConversionResult
    failure_message = "Failed to convert CSS"

    def build_prompt(self, args: ConvertArgs) -> str:
        if args.preserve_custom:
            custom = "Preserve custom properties that cannot be converted as CSS custom properties"
        else:
            custom = "Note any styles that cannot be converted to Tailwind"
        return prompts.CONVERT_TO_TAILWIND.format(
            format_upper=args.format.upper(),
            code=args.code,
            custom_requirement=custom,
            optimize_requirement=(
                "Optimize the resulting classes for performance and readability"
                if args.optimize else "Keep one class per converted declaration"
            ),
        )

    def run_manual(self, args: ConvertArgs) -> ConversionResult:
        return convert_css(args.code, args.format, preserve_custom=args.preserve_custom, optimize=args.optimize)

    def format(self, args: ConvertArgs, result: ConversionResult) -> str:
        lang = "html" if args.format == "html" else "css"
        if result.conversion_notes:
            summary = "\n".join(f"- {note}" for note in result.conversion_notes)
        else:
            summary = "No specific conversion notes."
        blocks = [
            "# CSS to Tailwind Conversion",
            f"## Converted Code\n```{lang}\n{result.converted_code}\n```",
            f"## Conversion Summary\n{summary}",
        ]
        if result.unconverted_styles:
            listed = "\n".join(f"- `{style}`" for style in result.unconverted_styles)
            blocks.append(
                "## Unconverted Styles\n"
                "The following styles could not be converted to Tailwind classes:\n"
                f"{listed}\n\n"
                "Consider using CSS custom properties or Tailwind plugins for these styles."
            )
        if result.suggestions:
            blocks.append("## Suggestions\n" + "\n".join(f"- {s}" for s in result.suggestions))
        blocks.append(USAGE_TIPS)
        return "\n\n".join(blocks)
