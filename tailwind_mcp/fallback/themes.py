"""Manual theme engine: shade ramps, fixed scales, tailwind.config.js rendering."""

import colorsys
import json
import re
import textwrap
from types import MappingProxyType

from tailwind_mcp.types import ThemeConfig, ThemePalette, Typography

SHADE_LEVELS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# lightest and darkest lightness a generated ramp spans
LIGHTNESS_MAX = 0.95
LIGHTNESS_MIN = 0.15

NEUTRAL_SHADES = MappingProxyType({
    "50": "#f9fafb",
    "100": "#f3f4f6",
    "200": "#e5e7eb",
    "300": "#d1d5db",
    "400": "#9ca3af",
    "500": "#6b7280",
    "600": "#4b5563",
    "700": "#374151",
    "800": "#1f2937",
    "900": "#111827",
})

FONT_FAMILIES = MappingProxyType({
    "sans": ("Inter", "system-ui", "sans-serif"),
    "serif": ("Georgia", "Times", "serif"),
    "mono": ("Monaco", "Consolas", "monospace"),
})

FONT_SIZES = MappingProxyType({
    "xs": ("0.75rem", "1rem"),
    "sm": ("0.875rem", "1.25rem"),
    "base": ("1rem", "1.5rem"),
    "lg": ("1.125rem", "1.75rem"),
    "xl": ("1.25rem", "1.75rem"),
    "2xl": ("1.5rem", "2rem"),
    "3xl": ("1.875rem", "2.25rem"),
    "4xl": ("2.25rem", "2.5rem"),
})

SPACING_SCALE = MappingProxyType({
    "xs": "0.5rem",
    "sm": "0.75rem",
    "md": "1rem",
    "lg": "1.5rem",
    "xl": "2rem",
    "2xl": "3rem",
    "3xl": "4rem",
})

STYLE_RADII = MappingProxyType({
    "minimal": "0.125rem",
    "modern": "0.5rem",
    "classic": "0.25rem",
    "bold": "0.75rem",
    "elegant": "0.375rem",
})

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_RE = re.compile(r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*[\d.]+\s*)?\)$")


def parse_color(color: str):
    """Return (r, g, b) in 0..1 for #rgb, #rrggbb, rgb(); None for anything else."""
    value = color.strip()
    m = _HEX_RE.match(value)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return tuple(int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
    m = _RGB_RE.match(value)
    if m:
        channels = [min(int(c), 255) for c in m.groups()]
        return tuple(c / 255 for c in channels)
    return None


def adjust_color_brightness(color: str, intensity: float) -> str:
    """Set the HSL lightness of ``color`` along the ramp, keeping hue and saturation.

    ``intensity`` 1.0 is the lightest shade, 0.0 the darkest. Colors that do
    not parse (named colors, hsl(), CSS variables) are returned unchanged.
    """
    rgb = parse_color(color)
    if rgb is None:
        return color
    h, _l, s = colorsys.rgb_to_hls(*rgb)
    intensity = min(max(intensity, 0.0), 1.0)
    lightness = LIGHTNESS_MIN + (LIGHTNESS_MAX - LIGHTNESS_MIN) * intensity
    r, g, b = colorsys.hls_to_rgb(h, lightness, s)
    return "#{:02x}{:02x}{:02x}".format(*(round(c * 255) for c in (r, g, b)))


def generate_color_shades(base_color: str, count: int) -> dict[str, str]:
    levels = SHADE_LEVELS[:count]
    steps = max(len(levels) - 1, 1)
    return {
        str(level): adjust_color_brightness(base_color, 1 - index / steps)
        for index, level in enumerate(levels)
    }


def build_theme(
    brand_color: str,
    style: str = "modern",
    shade_count: int = 9,
    typography: bool = True,
    spacing: bool = True,
) -> ThemeConfig:
    """Deterministic theme for ``brand_color``. Typography and spacing are fixed scales."""
    radius = STYLE_RADII.get(style, STYLE_RADII["modern"])
    return ThemeConfig(
        colors=ThemePalette(
            primary=generate_color_shades(brand_color, shade_count),
            neutral=dict(NEUTRAL_SHADES),
        ),
        typography=Typography(
            font_family={name: list(fonts) for name, fonts in FONT_FAMILIES.items()},
            font_size={name: [size, {"lineHeight": lh}] for name, (size, lh) in FONT_SIZES.items()},
        ) if typography else None,
        spacing=dict(SPACING_SCALE) if spacing else None,
        border_radius={"DEFAULT": radius},
    )


def design_notes(brand_color: str, style: str) -> str:
    return f"Generated {style} theme based on {brand_color}"


def tailwind_config_js(theme: ThemeConfig) -> str:
    """Render ThemeConfig as a tailwind.config.js ``theme.extend`` block."""
    data = theme.model_dump(by_alias=True, exclude_none=True)
    extend = {"colors": data["colors"]}
    typography = data.get("typography")
    if typography:
        extend["fontFamily"] = typography.get("fontFamily", {})
        extend["fontSize"] = typography.get("fontSize", {})
    for key in ("spacing", "borderRadius", "boxShadow"):
        if data.get(key):
            extend[key] = data[key]

    body = textwrap.indent(json.dumps(extend, indent=2), "    ").lstrip()
    return (
        "/** @type {import('tailwindcss').Config} */\n"
        "module.exports = {\n"
        "  content: [\n"
        "    './src/**/*.{html,js,jsx,ts,tsx,vue,svelte}',\n"
        "  ],\n"
        "  theme: {\n"
        f"    extend: {body},\n"
        "  },\n"
        "  plugins: [],\n"
        "}"
    )
