"""Manual improvement suggestions: static (predicate, suggestion) rules per focus area."""

import re
from types import MappingProxyType
from typing import Callable

from tailwind_mcp.fallback.analysis import class_tokens
from tailwind_mcp.types import Suggestion, SuggestionGroup, SuggestionReport

FOCUS_AREAS = ("accessibility", "responsiveness", "performance", "aesthetics", "ux")

CLASS_COUNT_LIMIT = 30

Rule = tuple[Callable[[str], bool], Callable[[str], Suggestion]]


def _class_count(html: str) -> int:
    return sum(len(tokens) for tokens in class_tokens(html))


_COMPONENT_EXAMPLE = """// Create reusable component
const Button = ({ children, variant = "primary" }) => {
  const baseClasses = "px-4 py-2 rounded transition-colors";
  const variantClasses = variant === "primary" ? "bg-blue-500 text-white" : "bg-gray-200";
  return <button className={`${baseClasses} ${variantClasses}`}>{children}</button>;
};"""


RULES: MappingProxyType[str, tuple[Rule, ...]] = MappingProxyType({
    "accessibility": (
        (
            lambda html: "<main" not in html,
            lambda html: Suggestion(
                title="Add Main Landmark",
                issue="No main landmark found",
                recommendation="Wrap main content in `<main>` element",
                priority="High",
                example='<main class="...">\n  <!-- Main content -->\n</main>',
            ),
        ),
        (
            lambda html: "<img" in html and "alt=" not in html,
            lambda html: Suggestion(
                title="Add Image Alt Text",
                issue="Images without alt text found",
                recommendation="Add descriptive alt attributes",
                priority="High",
                example='<img src="..." alt="Descriptive text" class="...">',
            ),
        ),
        (
            lambda html: "aria-" not in html,
            lambda html: Suggestion(
                title="Enhance ARIA Support",
                issue="Limited ARIA attributes",
                recommendation="Add ARIA labels and roles where appropriate",
                priority="Medium",
            ),
        ),
    ),
    "responsiveness": (
        (
            lambda html: not re.search(r"(sm|md|lg|xl):", html),
            lambda html: Suggestion(
                title="Add Responsive Breakpoints",
                issue="No responsive classes detected",
                recommendation="Add breakpoint-specific classes",
                priority="High",
                example='<div class="text-sm md:text-base lg:text-lg">\n  Responsive text\n</div>',
            ),
        ),
        (
            lambda html: not re.search(r"flex|grid", html),
            lambda html: Suggestion(
                title="Implement Flexible Layouts",
                issue="Static layout detected",
                recommendation="Use Flexbox or Grid for flexible layouts",
                priority="Medium",
                example='<div class="flex flex-col md:flex-row gap-4">\n  <!-- Flexible layout -->\n</div>',
            ),
        ),
    ),
    "performance": (
        (
            lambda html: _class_count(html) > CLASS_COUNT_LIMIT,
            lambda html: Suggestion(
                title="Optimize Class Usage",
                issue=f"High class count detected ({_class_count(html)} classes)",
                recommendation="Extract common patterns into components",
                priority="Medium",
                example=_COMPONENT_EXAMPLE,
                example_language="javascript",
            ),
        ),
    ),
    "aesthetics": (
        (
            lambda html: "shadow" not in html,
            lambda html: Suggestion(
                title="Add Visual Depth",
                issue="No shadows or depth indicators",
                recommendation="Add subtle shadows for visual hierarchy",
                priority="Low",
                example='<div class="shadow-sm hover:shadow-md transition-shadow">\n  <!-- Card with subtle shadow -->\n</div>',
            ),
        ),
        (
            lambda html: "transition" not in html,
            lambda html: Suggestion(
                title="Add Smooth Interactions",
                issue="No transitions detected",
                recommendation="Add transitions for better user experience",
                priority="Medium",
                example='<button class="bg-blue-500 hover:bg-blue-600 transition-colors duration-200">\n  Interactive button\n</button>',
            ),
        ),
    ),
    "ux": (
        (
            lambda html: "<button" in html and "hover:" not in html,
            lambda html: Suggestion(
                title="Enhance Interactive States",
                issue="Buttons without hover states",
                recommendation="Add hover and focus states",
                priority="Medium",
                example=(
                    '<button class="bg-blue-500 hover:bg-blue-600 focus:ring-2 focus:ring-blue-300 focus:outline-none">\n'
                    "  Accessible button\n</button>"
                ),
            ),
        ),
        (
            lambda html: "focus:" not in html,
            lambda html: Suggestion(
                title="Improve Keyboard Navigation",
                issue="Limited focus states",
                recommendation="Add visible focus indicators",
                priority="High",
                example=(
                    '<a href="#" class="text-blue-600 hover:text-blue-800 focus:outline-none focus:ring-2 '
                    'focus:ring-blue-300 rounded">\n  Accessible link\n</a>'
                ),
            ),
        ),
    ),
})


def suggest_for_markup(html: str, focus_areas: list[str] = None) -> SuggestionReport:
    """Apply the rules for each requested area, in canonical area order."""
    wanted = set(FOCUS_AREAS if focus_areas is None else focus_areas)
    groups = []
    for area in FOCUS_AREAS:
        if area not in wanted:
            continue
        suggestions = [build(html) for predicate, build in RULES[area] if predicate(html)]
        groups.append(SuggestionGroup(area=area, suggestions=suggestions))
    return SuggestionReport(groups=groups)
