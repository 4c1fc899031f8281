"""Manual layout engine: (layout type x complexity) table plus per-section markup."""

import textwrap
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict


class LayoutTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    structure: tuple[str, ...]
    grid_template: str


LAYOUT_TEMPLATES = MappingProxyType({
    "dashboard": MappingProxyType({
        "simple": LayoutTemplate(
            structure=("header", "sidebar", "main"),
            grid_template="grid-rows-[auto_1fr] grid-cols-[250px_1fr]",
        ),
        "medium": LayoutTemplate(
            structure=("header", "sidebar", "main", "footer"),
            grid_template="grid-rows-[auto_1fr_auto] grid-cols-[250px_1fr]",
        ),
        "complex": LayoutTemplate(
            structure=("header", "sidebar", "main", "aside", "footer"),
            grid_template="grid-rows-[auto_1fr_auto] grid-cols-[250px_1fr_300px]",
        ),
    }),
    "landing": MappingProxyType({
        "simple": LayoutTemplate(
            structure=("header", "hero", "footer"),
            grid_template="grid-rows-[auto_1fr_auto]",
        ),
        "medium": LayoutTemplate(
            structure=("header", "hero", "features", "cta", "footer"),
            grid_template="grid-rows-[auto_auto_auto_auto_auto]",
        ),
        "complex": LayoutTemplate(
            structure=("header", "hero", "features", "testimonials", "pricing", "cta", "footer"),
            grid_template="grid-rows-[auto_auto_auto_auto_auto_auto_auto]",
        ),
    }),
})


def lookup_layout(layout_type: str, complexity: str, sections: list[str]) -> LayoutTemplate:
    """Table entry for the pair, or a generic one built from ``sections``."""
    by_complexity = LAYOUT_TEMPLATES.get(layout_type)
    if by_complexity is None or complexity not in by_complexity:
        return LayoutTemplate(structure=tuple(sections), grid_template="")
    return by_complexity[complexity]


def _title(name: str) -> str:
    return name[:1].upper() + name[1:]


def html_section(section: str, layout_type: str) -> str:
    title = _title(layout_type)
    if section == "header":
        return f"""<header class="bg-white shadow-sm border-b border-gray-200 px-6 py-4 col-span-full">
  <div class="flex items-center justify-between">
    <h1 class="text-xl font-semibold text-gray-900">{title}</h1>
    <nav class="hidden md:flex space-x-6" aria-label="Primary">
      <a href="#" class="text-gray-600 hover:text-gray-900">Home</a>
      <a href="#" class="text-gray-600 hover:text-gray-900">About</a>
      <a href="#" class="text-gray-600 hover:text-gray-900">Contact</a>
    </nav>
  </div>
</header>"""
    if section == "sidebar":
        return """<aside class="bg-white border-r border-gray-200 p-6">
  <nav class="space-y-2" aria-label="Sidebar">
    <a href="#" class="block px-3 py-2 text-gray-700 hover:bg-gray-100 rounded">Dashboard</a>
    <a href="#" class="block px-3 py-2 text-gray-700 hover:bg-gray-100 rounded">Analytics</a>
    <a href="#" class="block px-3 py-2 text-gray-700 hover:bg-gray-100 rounded">Settings</a>
  </nav>
</aside>"""
    if section == "main":
        cards = "\n".join(
            f"""      <div class="bg-white p-6 rounded-lg shadow">
        <h3 class="text-lg font-medium mb-2">Card {n}</h3>
        <p class="text-gray-600">Content goes here...</p>
      </div>"""
            for n in (1, 2, 3)
        )
        return f"""<main class="p-6 overflow-auto">
  <div class="max-w-7xl mx-auto">
    <h2 class="text-2xl font-bold text-gray-900 mb-6">Main Content</h2>
    <div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-6">
{cards}
    </div>
  </div>
</main>"""
    if section == "footer":
        return f"""<footer class="bg-gray-800 text-white p-6 col-span-full">
  <div class="max-w-7xl mx-auto text-center">
    <p>&copy; {title}. All rights reserved.</p>
  </div>
</footer>"""
    return f"""<section class="p-6">
  <h2 class="text-xl font-semibold mb-4">{_title(section)}</h2>
  <p class="text-gray-600">Content for {section} section...</p>
</section>"""


def _html_layout(layout_type: str, sections: list[str], template: LayoutTemplate) -> str:
    body = "\n".join(textwrap.indent(html_section(s, layout_type), "    ") for s in sections)
    grid = f" grid {template.grid_template}" if template.grid_template else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{_title(layout_type)} Layout</title>
  <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="min-h-screen bg-gray-50">
  <div class="min-h-screen{grid}">
{body}
  </div>
</body>
</html>"""


def _react_layout(layout_type: str, sections: list[str], template: LayoutTemplate) -> str:
    name = f"{_title(layout_type)}Layout"
    parts = []
    for section in sections:
        if section == "main":
            parts.append('<main className="p-6 overflow-auto">\n  {children}\n</main>')
        else:
            parts.append(html_section(section, layout_type).replace('class="', 'className="'))
    body = "\n".join(textwrap.indent(p, "      ") for p in parts)
    grid = f" grid {template.grid_template}" if template.grid_template else ""
    return f"""import React from 'react';

interface {name}Props {{
  children?: React.ReactNode;
}}

export function {name}({{ children }}: {name}Props) {{
  return (
    <div className="min-h-screen{grid}">
{body}
    </div>
  );
}}

export default {name};"""


def _vue_layout(layout_type: str, sections: list[str], template: LayoutTemplate) -> str:
    body = "\n".join(textwrap.indent(html_section(s, layout_type), "    ") for s in sections)
    grid = f" grid {template.grid_template}" if template.grid_template else ""
    return f"""<template>
  <div class="min-h-screen{grid}">
{body}
  </div>
</template>

<script setup lang="ts">
defineOptions({{ name: '{_title(layout_type)}Layout' }});
</script>"""


def _svelte_layout(layout_type: str, sections: list[str], template: LayoutTemplate) -> str:
    parts = []
    for section in sections:
        if section == "main":
            parts.append('<main class="p-6 overflow-auto">\n  <slot />\n</main>')
        else:
            parts.append(html_section(section, layout_type))
    body = "\n".join(textwrap.indent(p, "  ") for p in parts)
    grid = f" grid {template.grid_template}" if template.grid_template else ""
    return f"""<div class="min-h-screen{grid}">
{body}
</div>"""


LAYOUT_RENDERERS = MappingProxyType({
    "html": _html_layout,
    "react": _react_layout,
    "vue": _vue_layout,
    "svelte": _svelte_layout,
})


def render_layout(layout_type: str, sections: list[str], complexity: str, framework: str) -> str:
    """Layout code for the requested sections. Structure metadata comes from ``lookup_layout``."""
    template = lookup_layout(layout_type, complexity, sections)
    renderer = LAYOUT_RENDERERS.get(framework, _html_layout)
    return renderer(layout_type, sections, template)
