"""Manual component engine: per-type style tables plus framework wrappers.

``class_string`` picks base + variant + size classes from ``COMPONENT_TEMPLATES``;
``render_component`` wraps them in minimal markup for the target framework.
``custom`` has no table entry and always raises UnknownTemplate.
"""

import textwrap
from types import MappingProxyType
from typing import Callable

from pydantic import BaseModel, ConfigDict

from tailwind_mcp.exceptions import UnknownTemplate


class ComponentTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: str
    base: str
    variants: dict[str, str]
    sizes: dict[str, str] = {}
    responsive: str = ""
    dark: str = ""
    aria: str = ""
    inner: str = ""


COMPONENT_TEMPLATES = MappingProxyType({
    "button": ComponentTemplate(
        tag="button",
        base=(
            "inline-flex items-center justify-center font-medium transition-colors "
            "focus:outline-none focus:ring-2 focus:ring-offset-2 disabled:opacity-50 disabled:pointer-events-none"
        ),
        variants={
            "primary": "bg-blue-600 text-white hover:bg-blue-700 focus:ring-blue-500",
            "secondary": "bg-gray-200 text-gray-900 hover:bg-gray-300 focus:ring-gray-500",
            "outline": "border border-gray-300 bg-transparent text-gray-700 hover:bg-gray-50 focus:ring-gray-500",
            "ghost": "text-gray-700 hover:bg-gray-100 focus:ring-gray-500",
            "link": "text-blue-600 underline-offset-4 hover:underline focus:ring-blue-500",
        },
        sizes={
            "xs": "h-6 px-2 text-xs rounded",
            "sm": "h-8 px-3 text-sm rounded-md",
            "md": "h-10 px-4 text-sm rounded-md",
            "lg": "h-11 px-6 text-base rounded-md",
            "xl": "h-12 px-8 text-lg rounded-lg",
        },
        responsive="w-full sm:w-auto",
        dark="dark:focus:ring-offset-gray-900",
        aria='type="button" aria-label="Button"',
        inner="Button Text",
    ),
    "card": ComponentTemplate(
        tag="div",
        base="bg-white rounded-lg shadow border border-gray-200 overflow-hidden",
        variants={
            "primary": "shadow-md",
            "secondary": "shadow-sm",
            "outline": "border-2",
            "ghost": "shadow-none border-transparent",
            "link": "hover:shadow-lg transition-shadow cursor-pointer",
        },
        sizes={
            "xs": "max-w-xs",
            "sm": "max-w-sm",
            "md": "max-w-md",
            "lg": "max-w-lg",
            "xl": "max-w-xl",
        },
        responsive="w-full",
        dark="dark:bg-gray-800 dark:border-gray-700",
        aria='role="region" aria-label="Card"',
        inner=(
            '<div class="p-6">\n'
            '  <h3 class="text-lg font-semibold text-gray-900">Card Title</h3>\n'
            '  <p class="mt-2 text-gray-600">Card content goes here...</p>\n'
            "</div>"
        ),
    ),
    "form": ComponentTemplate(
        tag="form",
        base="space-y-4 bg-white p-6 rounded-lg",
        variants={
            "primary": "shadow-md",
            "secondary": "bg-gray-50",
            "outline": "border border-gray-300",
            "ghost": "bg-transparent",
            "link": "shadow-none",
        },
        sizes={
            "xs": "max-w-xs",
            "sm": "max-w-sm",
            "md": "max-w-md",
            "lg": "max-w-lg",
            "xl": "max-w-xl",
        },
        responsive="w-full sm:mx-auto",
        dark="dark:bg-gray-800",
        aria='aria-label="Form"',
        inner=(
            "<div>\n"
            '  <label for="email" class="block text-sm font-medium text-gray-700">Email</label>\n'
            '  <input id="email" type="email" class="mt-1 block w-full rounded-md border border-gray-300 px-3 py-2 '
            'focus:border-blue-500 focus:outline-none focus:ring-1 focus:ring-blue-500" />\n'
            "</div>\n"
            '<button type="submit" class="w-full rounded-md bg-blue-600 px-4 py-2 text-white hover:bg-blue-700">Submit</button>'
        ),
    ),
    "navigation": ComponentTemplate(
        tag="nav",
        base="flex items-center justify-between px-4 py-3",
        variants={
            "primary": "bg-blue-600 text-white",
            "secondary": "bg-gray-100 text-gray-900",
            "outline": "border-b border-gray-200 bg-white text-gray-700",
            "ghost": "bg-transparent text-gray-700",
            "link": "bg-white text-blue-600",
        },
        responsive="flex-col gap-2 sm:flex-row",
        dark="dark:bg-gray-900 dark:text-gray-100",
        aria='aria-label="Main navigation"',
        inner=(
            '<a href="#" class="text-lg font-semibold">Brand</a>\n'
            '<div class="flex space-x-4">\n'
            '  <a href="#" class="hover:underline">Home</a>\n'
            '  <a href="#" class="hover:underline">About</a>\n'
            '  <a href="#" class="hover:underline">Contact</a>\n'
            "</div>"
        ),
    ),
    "modal": ComponentTemplate(
        tag="div",
        base="relative w-full rounded-lg bg-white p-6 shadow-xl",
        variants={
            "primary": "border-t-4 border-blue-600",
            "secondary": "border-t-4 border-gray-400",
            "outline": "border border-gray-300",
            "ghost": "shadow-none",
            "link": "ring-1 ring-blue-100",
        },
        sizes={
            "xs": "max-w-xs",
            "sm": "max-w-sm",
            "md": "max-w-md",
            "lg": "max-w-lg",
            "xl": "max-w-2xl",
        },
        responsive="mx-4 sm:mx-auto",
        dark="dark:bg-gray-800 dark:text-white",
        aria='role="dialog" aria-modal="true" aria-labelledby="modal-title"',
        inner=(
            '<h2 id="modal-title" class="text-lg font-semibold text-gray-900">Modal Title</h2>\n'
            '<p class="mt-2 text-gray-600">Modal content goes here...</p>\n'
            '<div class="mt-6 flex justify-end gap-3">\n'
            '  <button type="button" class="rounded-md px-4 py-2 text-gray-700 hover:bg-gray-100">Cancel</button>\n'
            '  <button type="button" class="rounded-md bg-blue-600 px-4 py-2 text-white hover:bg-blue-700">Confirm</button>\n'
            "</div>"
        ),
    ),
    "table": ComponentTemplate(
        tag="table",
        base="min-w-full divide-y divide-gray-200 text-left",
        variants={
            "primary": "bg-white",
            "secondary": "bg-gray-50",
            "outline": "border border-gray-200",
            "ghost": "bg-transparent",
            "link": "bg-white text-blue-600",
        },
        sizes={
            "xs": "text-xs",
            "sm": "text-sm",
            "md": "text-sm",
            "lg": "text-base",
            "xl": "text-lg",
        },
        responsive="block overflow-x-auto md:table",
        dark="dark:bg-gray-900 dark:divide-gray-700",
        aria='aria-label="Data table"',
        inner=(
            '<thead class="bg-gray-50">\n'
            "  <tr>\n"
            '    <th scope="col" class="px-4 py-3 font-medium text-gray-700">Name</th>\n'
            '    <th scope="col" class="px-4 py-3 font-medium text-gray-700">Status</th>\n'
            "  </tr>\n"
            "</thead>\n"
            '<tbody class="divide-y divide-gray-100">\n'
            "  <tr>\n"
            '    <td class="px-4 py-3">Item</td>\n'
            '    <td class="px-4 py-3">Active</td>\n'
            "  </tr>\n"
            "</tbody>"
        ),
    ),
})


def get_template(component_type: str) -> ComponentTemplate:
    template = COMPONENT_TEMPLATES.get(component_type)
    if template is None:
        raise UnknownTemplate(
            f"Template not found for component type: {component_type}",
            template_kind="component",
            key=component_type,
        )
    return template


def class_string(
    component_type: str,
    variant: str = "primary",
    size: str = "md",
    responsive: bool = True,
    theme: str = "light",
) -> str:
    """Compose the utility classes for one component. Unknown variant/size keys use primary/md."""
    template = get_template(component_type)
    parts = [template.base, template.variants.get(variant, template.variants["primary"])]
    if template.sizes:
        parts.append(template.sizes.get(size, template.sizes["md"]))
    if responsive and template.responsive:
        parts.append(template.responsive)
    if theme in ("dark", "auto") and template.dark:
        parts.append(template.dark)
    return " ".join(p for p in parts if p)


def _component_name(component_type: str) -> str:
    return component_type[:1].upper() + component_type[1:]


def _attrs(aria: str, accessibility: bool) -> str:
    return f" {aria}" if accessibility and aria else ""


def _indent(text: str, spaces: int) -> str:
    return textwrap.indent(text, " " * spaces)


def _render_html(name, template, classes, aria):
    return f'<{template.tag}\n  class="{classes}"{aria}\n>\n{_indent(template.inner, 2)}\n</{template.tag}>'


def _render_react(name, template, classes, aria):
    inner = template.inner.replace('class="', 'className="').replace(' for="', ' htmlFor="')
    return (
        f"interface {name}Props {{\n"
        "  children?: React.ReactNode;\n"
        "  className?: string;\n"
        "}\n\n"
        f"export function {name}({{ children, className = '' }}: {name}Props) {{\n"
        "  return (\n"
        f"    <{template.tag}\n"
        f"      className={{`{classes} ${{className}}`}}{aria}\n"
        "    >\n"
        "      {children ?? (\n"
        "        <>\n"
        f"{_indent(inner, 10)}\n"
        "        </>\n"
        "      )}\n"
        f"    </{template.tag}>\n"
        "  );\n"
        "}"
    )


def _render_vue(name, template, classes, aria):
    return (
        "<template>\n"
        f'  <{template.tag} class="{classes}"{aria}>\n'
        "    <slot>\n"
        f"{_indent(template.inner, 6)}\n"
        "    </slot>\n"
        f"  </{template.tag}>\n"
        "</template>\n\n"
        '<script setup lang="ts">\n'
        f"defineOptions({{ name: '{name}' }});\n"
        "</script>"
    )


def _render_svelte(name, template, classes, aria):
    return (
        '<script lang="ts">\n'
        "  export let className = '';\n"
        "</script>\n\n"
        f'<{template.tag} class="{classes} {{className}}"{aria}>\n'
        "  <slot>\n"
        f"{_indent(template.inner, 4)}\n"
        "  </slot>\n"
        f"</{template.tag}>"
    )


def _render_angular(name, template, classes, aria):
    selector = name.lower()
    return (
        "import { Component } from '@angular/core';\n\n"
        "@Component({\n"
        f"  selector: 'app-{selector}',\n"
        "  standalone: true,\n"
        "  template: `\n"
        f'    <{template.tag} class="{classes}"{aria}>\n'
        "      <ng-content>\n"
        f"{_indent(template.inner, 8)}\n"
        "      </ng-content>\n"
        f"    </{template.tag}>\n"
        "  `,\n"
        "})\n"
        f"export class {name}Component {{}}"
    )


FRAMEWORK_RENDERERS: MappingProxyType[str, Callable[..., str]] = MappingProxyType({
    "html": _render_html,
    "react": _render_react,
    "vue": _render_vue,
    "svelte": _render_svelte,
    "angular": _render_angular,
})


def render_component(
    component_type: str,
    framework: str = "react",
    variant: str = "primary",
    size: str = "md",
    theme: str = "light",
    responsive: bool = True,
    accessibility: bool = True,
) -> str:
    """Produce component code from the static tables. Raises UnknownTemplate for ``custom``."""
    template = get_template(component_type)
    classes = class_string(component_type, variant, size, responsive, theme)
    renderer = FRAMEWORK_RENDERERS.get(framework)
    if renderer is None:
        raise UnknownTemplate(
            f"No renderer for framework: {framework}", template_kind="framework", key=framework
        )

    return renderer(
        _component_name(component_type),
        template,
        classes,
        _attrs(template.aria, accessibility),
    )
