"""generate_component: framework-ready Tailwind components."""

from typing import Literal, Optional

from pydantic import AliasChoices, Field

from tailwind_mcp.fallback.components import render_component
from tailwind_mcp.llm import prompts
from tailwind_mcp.llm.extract import strip_code_fences
from tailwind_mcp.tools.base import DualPathTool, ToolArgs
from tailwind_mcp.types import ComponentResult

ComponentType = Literal["button", "card", "form", "navigation", "modal", "table", "custom"]
Framework = Literal["html", "react", "vue", "svelte", "angular"]


class ComponentArgs(ToolArgs):
    description: str = Field(description="Description of the component to generate")
    component_type: ComponentType = Field(
        validation_alias=AliasChoices("type", "componentType", "component_type"),
        description="Type of component",
    )
    framework: Framework = Field(default="react", description="Target framework")
    variant: Literal["primary", "secondary", "outline", "ghost", "link"] = Field(
        default="primary", description="Component variant"
    )
    size: Literal["xs", "sm", "md", "lg", "xl"] = Field(default="md", description="Component size")
    theme: Literal["light", "dark", "auto"] = Field(default="light", description="Theme preference")
    responsive: bool = Field(default=True, description="Make component responsive")
    accessibility: bool = Field(default=True, description="Include accessibility features")


class ComponentGenerator(DualPathTool):
    name = "generate_component"
    description = "Generate Tailwind CSS components with AI assistance, with a template fallback"
    args_model = ComponentArgs
    result_model = ComponentResult
    failure_message = "Failed to generate component"

    def build_prompt(self, args: ComponentArgs) -> str:
        extras = []
        if args.accessibility:
            extras.append("Include ARIA attributes and accessibility features")
        if args.responsive:
            extras.append("Make it responsive with proper breakpoints")
        if args.theme == "dark":
            extras.append("Include dark mode classes")
        elif args.theme == "auto":
            extras.append("Include both light and dark mode support")
        extra_requirements = "".join(f"{n}. {line}\n" for n, line in enumerate(extras, start=4))
        return prompts.GENERATE_COMPONENT.format(
            component_type=args.component_type,
            description=args.description,
            framework=args.framework,
            variant=args.variant,
            size=args.size,
            theme=args.theme,
            responsive=str(args.responsive).lower(),
            accessibility=str(args.accessibility).lower(),
            extra_requirements=extra_requirements,
            framework_hint=prompts.FRAMEWORK_HINTS.get(args.framework, ""),
        )

    def from_completion(self, args: ComponentArgs, text: str) -> Optional[ComponentResult]:
        # raw markup, not JSON
        code = strip_code_fences(text)
        return ComponentResult(code=code) if code else None

    def run_manual(self, args: ComponentArgs) -> ComponentResult:
        return ComponentResult(code=render_component(
            args.component_type,
            framework=args.framework,
            variant=args.variant,
            size=args.size,
            theme=args.theme,
            responsive=args.responsive,
            accessibility=args.accessibility,
        ))

    def format(self, args: ComponentArgs, result: ComponentResult) -> str:
        return (
            f"# Generated {args.component_type} Component\n\n"
            f"**Framework:** {args.framework}\n"
            f"**Variant:** {args.variant}\n"
            f"**Size:** {args.size}\n\n"
            f"```{args.framework}\n{result.code}\n```"
        )
