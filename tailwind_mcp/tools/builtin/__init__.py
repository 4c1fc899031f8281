"""Built-in tools. The set is closed: ``build_registry`` instantiates exactly these."""

from tailwind_mcp.tools.builtin.class_optimizer import ClassOptimizer
from tailwind_mcp.tools.builtin.component_generator import ComponentGenerator
from tailwind_mcp.tools.builtin.css_converter import CSSConverter
from tailwind_mcp.tools.builtin.design_analyzer import DesignAnalyzer
from tailwind_mcp.tools.builtin.layout_generator import LayoutGenerator
from tailwind_mcp.tools.builtin.preview_generator import PlaywrightCapture, PreviewGenerator
from tailwind_mcp.tools.builtin.suggestions import SuggestionAdvisor
from tailwind_mcp.tools.builtin.theme_creator import ThemeCreator

# tools/list order
DUAL_PATH_TOOLS = (
    ComponentGenerator,
    ClassOptimizer,
    ThemeCreator,
    DesignAnalyzer,
    CSSConverter,
    SuggestionAdvisor,
    LayoutGenerator,
)

__all__ = [
    "ClassOptimizer",
    "ComponentGenerator",
    "CSSConverter",
    "DesignAnalyzer",
    "LayoutGenerator",
    "PlaywrightCapture",
    "PreviewGenerator",
    "SuggestionAdvisor",
    "ThemeCreator",
    "DUAL_PATH_TOOLS",
]
