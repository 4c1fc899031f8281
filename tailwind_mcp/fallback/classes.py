"""Manual class-optimization engine.

Per ``class="..."`` (or ``className="..."``) attribute, in order:
  1. deduplicate tokens, keeping the first occurrence
  2. drop axis spacing (px-/py-, mx-/my-) made redundant by a general p-N / m-N
  3. resolve conflicts inside a category, last occurrence wins
  4. annotate with suggestions (never mutates the markup)

Tokens carrying a variant prefix (``hover:``, ``md:``) never match a category,
so ``bg-white hover:bg-gray-50`` is not a conflict.
"""

import re
from types import MappingProxyType

from tailwind_mcp.types import OptimizationResult

CLASS_ATTR_RE = re.compile(r'(class(?:Name)?)="([^"]*)"')

# Within a prefix category only tokens sharing the same prefix conflict:
# mt-4 and mb-2 style different sides, mt-4 and mt-8 fight over one.
PREFIX_CATEGORIES = MappingProxyType({
    "margin": ("m-", "mx-", "my-", "mt-", "mr-", "mb-", "ml-"),
    "padding": ("p-", "px-", "py-", "pt-", "pr-", "pb-", "pl-"),
    "width": ("w-",),
    "height": ("h-",),
})

EXACT_CATEGORIES = MappingProxyType({
    "display": frozenset({"block", "inline-block", "inline", "flex", "inline-flex", "grid", "inline-grid", "hidden"}),
    "position": frozenset({"static", "fixed", "absolute", "relative", "sticky"}),
    "text-align": frozenset({"text-left", "text-center", "text-right", "text-justify"}),
    "font-size": frozenset({
        "text-xs", "text-sm", "text-base", "text-lg", "text-xl",
        "text-2xl", "text-3xl", "text-4xl", "text-5xl", "text-6xl",
    }),
    "font-weight": frozenset({
        "font-thin", "font-extralight", "font-light", "font-normal", "font-medium",
        "font-semibold", "font-bold", "font-extrabold", "font-black",
    }),
    "border-radius": frozenset({
        "rounded-none", "rounded-sm", "rounded", "rounded-md", "rounded-lg",
        "rounded-xl", "rounded-2xl", "rounded-3xl", "rounded-full",
    }),
})

_PALETTE = r"(?:[a-z]+-\d{2,3}|black|white|transparent|current|inherit)"
PATTERN_CATEGORIES = MappingProxyType({
    "text-color": re.compile(rf"^text-{_PALETTE}$"),
    "background-color": re.compile(rf"^bg-{_PALETTE}$"),
})

# general token pattern -> axis prefixes it supersedes
AXIS_REDUNDANCY = (
    (re.compile(r"^p-(?:\d+(?:\.\d+)?|px)$"), ("px-", "py-")),
    (re.compile(r"^m-(?:\d+(?:\.\d+)?|px|auto)$"), ("mx-", "my-")),
)


def conflict_key(token: str):
    """Return (category, prefix) for a token, or None if it belongs to no category."""
    for category, prefixes in PREFIX_CATEGORIES.items():
        for prefix in prefixes:
            if token.startswith(prefix):
                return category, prefix
    for category, members in EXACT_CATEGORIES.items():
        if token in members:
            return category, ""
    for category, pattern in PATTERN_CATEGORIES.items():
        if pattern.match(token):
            return category, ""
    return None


def dedupe(tokens: list[str]) -> tuple[list[str], list[str]]:
    """Keep first occurrences. Returns (kept, removed duplicates)."""
    seen: set[str] = set()
    kept, removed = [], []
    for token in tokens:
        if token in seen:
            removed.append(token)
        else:
            seen.add(token)
            kept.append(token)
    return kept, removed


def remove_redundant_spacing(tokens: list[str]) -> tuple[list[str], list[str]]:
    """Drop px-/py- when a general p-N is present, and mx-/my- for m-N."""
    doomed: set[str] = set()
    for general, axis_prefixes in AXIS_REDUNDANCY:
        if any(general.match(t) for t in tokens):
            doomed.update(t for t in tokens if t.startswith(axis_prefixes))
    kept = [t for t in tokens if t not in doomed]
    removed = [t for t in tokens if t in doomed]
    return kept, removed


def resolve_conflicts(tokens: list[str]) -> tuple[list[str], list[str]]:
    """Keep the last token of each conflicting group. Returns (kept, conflict notes)."""
    groups: dict[tuple[str, str], list[int]] = {}
    for index, token in enumerate(tokens):
        key = conflict_key(token)
        if key is not None:
            groups.setdefault(key, []).append(index)

    losers: set[int] = set()
    conflicts: list[str] = []
    for (category, _prefix), indices in groups.items():
        if len(indices) < 2:
            continue
        members = [tokens[i] for i in indices]
        conflicts.append(
            f"{category}: resolved conflict between {', '.join(members)} - kept {members[-1]}"
        )
        losers.update(indices[:-1])
    kept = [t for i, t in enumerate(tokens) if i not in losers]
    return kept, conflicts


def suggest(tokens: list[str]) -> list[str]:
    suggestions = []
    if "flex" in tokens and "flex-row" in tokens:
        suggestions.append("Remove `flex-row` as it's the default for flex containers")
    if sum(1 for t in tokens if t.startswith("border-")) > 3:
        suggestions.append("Consider using fewer border utilities or a custom border class")
    if sum(1 for t in tokens if t.startswith("text-")) > 2:
        suggestions.append("Consider consolidating text utilities into a custom text class")
    return suggestions


def optimize_markup(
    html: str,
    remove_redundant: bool = True,
    merge_conflicts: bool = True,
    suggest_alternatives: bool = True,
) -> OptimizationResult:
    """Run the manual optimizer over every class attribute in ``html``."""
    removed: list[str] = []
    conflicts: list[str] = []
    suggestions: list[str] = []
    improvements: list[str] = []

    def rewrite(match: re.Match) -> str:
        attr, content = match.group(1), match.group(2)
        original = content.split()
        tokens = list(original)

        if remove_redundant:
            tokens, dupes = dedupe(tokens)
            removed.extend(dupes)
            tokens, redundant = remove_redundant_spacing(tokens)
            removed.extend(redundant)

        if merge_conflicts:
            tokens, resolved = resolve_conflicts(tokens)
            conflicts.extend(resolved)

        if suggest_alternatives:
            for s in suggest(tokens):
                if s not in suggestions:
                    suggestions.append(s)

        if len(tokens) < len(original):
            improvements.append(
                f"Reduced `{attr}` from {len(original)} to {len(tokens)} utilities: `{' '.join(tokens)}`"
            )
        return f'{attr}="{" ".join(tokens)}"'

    optimized = CLASS_ATTR_RE.sub(rewrite, html)
    return OptimizationResult(
        optimized_html=optimized,
        removed_classes=removed,
        conflicts_resolved=conflicts,
        suggestions=suggestions,
        improvements=improvements,
    )
