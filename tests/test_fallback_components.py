"""Tests for tailwind_mcp/fallback/components.py."""

import pytest

from tailwind_mcp.exceptions import UnknownTemplate
from tailwind_mcp.fallback.components import COMPONENT_TEMPLATES, class_string, get_template, render_component


class TestTemplates:

    @pytest.mark.parametrize("component_type", ["button", "card", "form", "navigation", "modal", "table"])
    def test_every_listed_type_has_a_template(self, component_type):
        assert get_template(component_type).tag

    def test_custom_has_no_template(self):
        with pytest.raises(UnknownTemplate) as exc_info:
            get_template("custom")
        assert exc_info.value.message == "Template not found for component type: custom"
        assert exc_info.value.key == "custom"

    def test_every_template_has_primary_variant(self):
        assert all("primary" in t.variants for t in COMPONENT_TEMPLATES.values())


class TestClassString:

    def test_button_primary_md(self):
        classes = class_string("button", "primary", "md")
        assert "bg-blue-600" in classes
        assert "h-10" in classes
        assert "sm:w-auto" in classes

    def test_unknown_variant_and_size_fall_back(self):
        assert class_string("button", "neon", "huge") == class_string("button", "primary", "md")

    def test_responsive_off(self):
        assert "sm:w-auto" not in class_string("button", responsive=False)

    @pytest.mark.parametrize("theme,expected", [("light", False), ("dark", True), ("auto", True)])
    def test_dark_classes(self, theme, expected):
        assert ("dark:" in class_string("card", theme=theme)) is expected

    def test_navigation_has_no_sizes(self):
        assert class_string("navigation", size="xl") == class_string("navigation", size="xs")


class TestRenderComponent:

    def test_react(self):
        code = render_component("button", framework="react")
        assert "export function Button" in code
        assert "className={`" in code
        assert 'aria-label="Button"' in code

    def test_react_rewrites_label_for(self):
        code = render_component("form", framework="react")
        assert "htmlFor=" in code
        assert ' for="' not in code

    def test_html(self):
        code = render_component("card", framework="html")
        assert code.startswith("<div\n")
        assert code.endswith("</div>")

    def test_vue(self):
        code = render_component("modal", framework="vue")
        assert "<slot>" in code
        assert "defineOptions({ name: 'Modal' })" in code

    def test_svelte(self):
        assert "export let className" in render_component("table", framework="svelte")

    def test_angular(self):
        code = render_component("navigation", framework="angular")
        assert "selector: 'app-navigation'" in code
        assert "export class NavigationComponent" in code

    def test_accessibility_off_drops_aria(self):
        assert "aria-label" not in render_component("button", framework="html", accessibility=False)

    def test_custom_raises(self):
        with pytest.raises(UnknownTemplate):
            render_component("custom")

    def test_unknown_framework_raises(self):
        with pytest.raises(UnknownTemplate):
            render_component("button", framework="solid")
