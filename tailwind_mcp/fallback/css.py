"""Manual CSS-to-Tailwind engine.

Only six properties have converters. Every declaration that does not convert
is recorded as ``"prop: value"`` in ``unconverted_styles``. Nested SCSS is
flattened: each block is reported under its own selector, without the
parent selector prefix.
"""

import re
from types import MappingProxyType
from typing import Callable, Optional

from tailwind_mcp.types import ConversionResult, ConvertedRule

BLOCK_RE = re.compile(r"([^{}]+)\{([^{}]*)\}")
STYLE_ATTR_RE = re.compile(r'style="([^"]*)"')
COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
LENGTH_RE = re.compile(r"^(-?\d*\.?\d+)(px|rem)?$")
# stands in for an already converted block until the final pass
PLACEHOLDER_RE = re.compile(r"\x00\d+\x00")
SELECTOR_HEAD_RE = re.compile(r"^(.*(?:;|\x00\d+\x00))?(.*)$", re.DOTALL)

# rem -> spacing step. No rounding: anything else is unconvertible.
SPACING_STEPS = MappingProxyType({
    0.25: "1",
    0.5: "2",
    0.75: "3",
    1.0: "4",
    1.25: "5",
    1.5: "6",
    2.0: "8",
})

DISPLAY_CLASSES = MappingProxyType({
    "block": "block",
    "inline-block": "inline-block",
    "inline": "inline",
    "flex": "flex",
    "inline-flex": "inline-flex",
    "grid": "grid",
    "inline-grid": "inline-grid",
    "none": "hidden",
})

COLOR_NAMES = MappingProxyType({
    "#000000": "black",
    "#ffffff": "white",
    "#ef4444": "red-500",
    "#3b82f6": "blue-500",
    "#10b981": "green-500",
    "#f59e0b": "yellow-500",
    "black": "black",
    "white": "white",
})

FONT_WEIGHTS = MappingProxyType({
    "100": "font-thin",
    "200": "font-extralight",
    "300": "font-light",
    "400": "font-normal",
    "500": "font-medium",
    "600": "font-semibold",
    "700": "font-bold",
    "800": "font-extrabold",
    "900": "font-black",
    "normal": "font-normal",
    "bold": "font-bold",
})


def spacing_step(value: str) -> Optional[str]:
    """Map a single px/rem length to a spacing step ('16px' -> '4')."""
    m = LENGTH_RE.match(value.strip())
    if not m:
        return None
    number = float(m.group(1))
    rem = number if m.group(2) == "rem" else number / 16
    return SPACING_STEPS.get(rem)


def normalize_hex(value: str) -> str:
    value = value.strip().lower()
    if re.fullmatch(r"#[0-9a-f]{3}", value):
        return "#" + "".join(ch * 2 for ch in value[1:])
    return value


def _spacing(prefix: str) -> Callable[[str], Optional[str]]:
    def convert(value: str) -> Optional[str]:
        step = spacing_step(value)
        return f"{prefix}-{step}" if step else None
    return convert


def _color(prefix: str) -> Callable[[str], Optional[str]]:
    def convert(value: str) -> Optional[str]:
        name = COLOR_NAMES.get(normalize_hex(value))
        return f"{prefix}-{name}" if name else None
    return convert


CONVERTERS: MappingProxyType[str, Callable[[str], Optional[str]]] = MappingProxyType({
    "display": lambda value: DISPLAY_CLASSES.get(value.strip().lower()),
    "padding": _spacing("p"),
    "margin": _spacing("m"),
    "color": _color("text"),
    "background-color": _color("bg"),
    "font-weight": lambda value: FONT_WEIGHTS.get(value.strip().lower()),
})


def parse_declarations(body: str) -> list[tuple[str, str]]:
    """Split ``prop: value; ...`` into (prop, value) pairs, dropping empties."""
    pairs = []
    for chunk in body.split(";"):
        prop, sep, value = chunk.partition(":")
        prop, value = prop.strip().lower(), value.strip()
        if sep and prop and value:
            pairs.append((prop, value))
    return pairs


def convert_declaration(prop: str, value: str) -> Optional[str]:
    converter = CONVERTERS.get(prop)
    return converter(value) if converter else None


def _convert_block(declarations, optimize):
    classes, converted, leftovers = [], [], []
    for prop, value in declarations:
        cls = convert_declaration(prop, value)
        if cls:
            classes.append(cls)
            converted.append((prop, value, cls))
        else:
            leftovers.append((prop, value))
    if optimize:
        classes = list(dict.fromkeys(classes))
    return classes, converted, leftovers


def _convert_stylesheet(code: str, preserve_custom: bool, optimize: bool):
    """Convert innermost blocks first so nested SCSS parents keep their own declarations."""
    rules, notes, unconverted = [], [], []
    rendered: list[str] = []

    def rewrite(match: re.Match) -> str:
        raw_selector, body = match.group(1), match.group(2)
        # anything up to the last ';' or converted block belongs to the enclosing scope
        head_match = SELECTOR_HEAD_RE.match(raw_selector)
        head, tail = head_match.group(1) or "", head_match.group(2)
        selector = tail.strip()
        leading = tail[: len(tail) - len(tail.lstrip())]
        nested = [m.group(0) for m in PLACEHOLDER_RE.finditer(body)]
        declarations = parse_declarations(PLACEHOLDER_RE.sub("", body))
        classes, converted, leftovers = _convert_block(declarations, optimize)

        if declarations:
            rules.append(ConvertedRule(selector=selector, classes=classes))
        notes.extend(f"Converted {p}: {v} → {c}" for p, v, c in converted)
        unconverted.extend(f"{p}: {v}" for p, v in leftovers)

        if classes:
            out = f"{leading}/* {selector} */\n/* Use these Tailwind classes: {' '.join(classes)} */"
            if preserve_custom and leftovers:
                kept = "\n".join(f"  {p}: {v};" for p, v in leftovers)
                out += f"\n{selector} {{\n{kept}\n}}"
            out += "".join(f"\n{placeholder}" for placeholder in nested)
        else:
            out = match.group(0)[len(head):]
        rendered.append(out)
        return f"{head}\x00{len(rendered) - 1}\x00"

    text = COMMENT_RE.sub("", code)
    while True:
        replaced = BLOCK_RE.sub(rewrite, text)
        if replaced == text:
            break
        text = replaced
    # outer blocks were rendered last and may contain earlier placeholders
    for index in range(len(rendered) - 1, -1, -1):
        text = text.replace(f"\x00{index}\x00", rendered[index])
    return text, rules, notes, unconverted


def _convert_inline(code: str, preserve_custom: bool, optimize: bool):
    rules, notes, unconverted = [], [], []

    def rewrite(match: re.Match) -> str:
        classes, _converted, leftovers = _convert_block(parse_declarations(match.group(1)), optimize)
        rules.append(ConvertedRule(selector=f"inline style {len(rules) + 1}", classes=classes))
        unconverted.extend(f"{p}: {v}" for p, v in leftovers)
        if not classes:
            return match.group(0)
        notes.append(f"Converted inline styles to: {' '.join(classes)}")
        out = f'class="{" ".join(classes)}"'
        if preserve_custom and leftovers:
            out += ' style="' + "; ".join(f"{p}: {v}" for p, v in leftovers) + '"'
        return out

    converted_code = STYLE_ATTR_RE.sub(rewrite, code)
    return converted_code, rules, notes, unconverted


def convert_css(
    code: str,
    fmt: str = "css",
    preserve_custom: bool = False,
    optimize: bool = True,
) -> ConversionResult:
    """Convert stylesheet blocks (css/scss) or inline style attributes (html)."""
    if fmt == "html":
        converted_code, rules, notes, unconverted = _convert_inline(code, preserve_custom, optimize)
    else:
        converted_code, rules, notes, unconverted = _convert_stylesheet(code, preserve_custom, optimize)

    suggestions = []
    if unconverted:
        suggestions.append(
            "Use arbitrary values (e.g. `tracking-[2px]`) or a Tailwind plugin for unconverted styles"
        )
    if fmt == "scss":
        suggestions.append("Nested SCSS blocks were flattened; apply each class list to the element its full selector targets")
    return ConversionResult(
        converted_code=converted_code,
        rules=rules,
        conversion_notes=notes,
        unconverted_styles=unconverted,
        suggestions=suggestions,
    )
