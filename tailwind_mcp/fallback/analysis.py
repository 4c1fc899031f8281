"""Manual design analysis: boolean presence checks over the markup.

The overall score is synthesized from the checks (good=1, needs
improvement=0.5, missing=0) and flagged as heuristic. It is not comparable
with a score returned by the LLM path.
"""

import re

from tailwind_mcp.types import AnalysisCheck, AnalysisReport, AnalysisSection, CheckStatus

SEMANTIC_RE = re.compile(r"<(main|header|nav|section|article|aside|footer)\b")
HEADING_RE = re.compile(r"<h[1-6]\b")
IMG_RE = re.compile(r"<img\b")
INTERACTIVE_RE = re.compile(r"<(button|a)\b")
BREAKPOINT_RE = re.compile(r"\b(sm|md|lg|xl|2xl):")
FLEX_GRID_RE = re.compile(r"\b(flex|grid)\b")
RESPONSIVE_SPACING_RE = re.compile(r"\b(sm|md|lg|xl):[pm][xytrbl]?-")
CLASS_ATTR_RE = re.compile(r'class(?:Name)?="([^"]*)"')

CLASS_COUNT_LIMIT = 50

GENERAL_RECOMMENDATIONS = (
    "Use semantic HTML elements for better structure and accessibility",
    "Implement a consistent design system with defined spacing and colors",
    "Test on multiple devices and screen sizes",
    "Consider component extraction for reusable patterns",
    "Validate HTML and run accessibility audits",
)


def _check(label: str, ok: bool, good: str, bad: str, bad_status=CheckStatus.MISSING) -> AnalysisCheck:
    if ok:
        return AnalysisCheck(label=label, status=CheckStatus.GOOD, detail=good)
    return AnalysisCheck(label=label, status=bad_status, detail=bad)


def class_tokens(html: str) -> list[list[str]]:
    """Tokens of every class attribute, one list per attribute."""
    return [content.split() for content in CLASS_ATTR_RE.findall(html)]


def _structure(html: str) -> AnalysisSection:
    semantic = bool(SEMANTIC_RE.search(html))
    checks = [
        _check("Semantic HTML", semantic, "Semantic landmarks present", "Missing semantic elements"),
        _check("Heading Structure", bool(HEADING_RE.search(html)), "Present", "No headings found"),
        _check("Interactive Elements", bool(INTERACTIVE_RE.search(html)), "Present", "No interactive elements"),
    ]
    recs = []
    if not semantic:
        recs.append("Wrap content in semantic elements such as <header>, <main>, <nav> and <footer>.")
    return AnalysisSection(title="Structure Analysis", checks=checks, recommendations=recs)


def _accessibility(html: str) -> AnalysisSection:
    alt_ok = bool(re.search(r"\balt=", html)) if IMG_RE.search(html) else True
    checks = [
        _check("Image Alt Text", alt_ok, "Present", "Missing alt attributes"),
        _check(
            "ARIA Labels", "aria-label" in html, "Present", "Consider adding ARIA labels",
            CheckStatus.NEEDS_IMPROVEMENT,
        ),
        _check(
            "Semantic Roles", "role=" in html, "Present", "Consider adding ARIA roles",
            CheckStatus.NEEDS_IMPROVEMENT,
        ),
    ]
    recs = []
    if not alt_ok:
        recs.append("Add descriptive alt text to all images for screen readers.")
    return AnalysisSection(title="Accessibility Analysis", checks=checks, recommendations=recs)


def _responsive(html: str, css: str) -> AnalysisSection:
    breakpoints = bool(BREAKPOINT_RE.search(html)) or "@media" in css
    flexible = bool(FLEX_GRID_RE.search(html)) or bool(re.search(r"display:\s*(flex|grid)", css))
    checks = [
        _check("Responsive Classes", breakpoints, "Present", "No responsive breakpoints found"),
        _check(
            "Flexible Layouts", flexible, "Using Flexbox/Grid", "Consider flexible layouts",
            CheckStatus.NEEDS_IMPROVEMENT,
        ),
        _check(
            "Responsive Spacing", bool(RESPONSIVE_SPACING_RE.search(html)), "Present",
            "Consider responsive spacing", CheckStatus.NEEDS_IMPROVEMENT,
        ),
    ]
    recs = []
    if not breakpoints:
        recs.append("Add responsive breakpoint classes (sm:, md:, lg:, xl:) for better mobile experience.")
    return AnalysisSection(title="Responsive Design Analysis", checks=checks, recommendations=recs)


def _performance(html: str) -> AnalysisSection:
    attrs = class_tokens(html)
    total = sum(len(tokens) for tokens in attrs)
    duplicates = sorted({t for tokens in attrs for t in tokens if tokens.count(t) > 1})
    checks = [
        _check(
            "Class Count", total <= CLASS_COUNT_LIMIT, f"{total} classes total, reasonable",
            f"{total} classes total, consider optimization", CheckStatus.NEEDS_IMPROVEMENT,
        ),
        _check(
            "Duplicate Classes", not duplicates, "No obvious duplicates",
            f"Found duplicates: {', '.join(duplicates)}", CheckStatus.NEEDS_IMPROVEMENT,
        ),
    ]
    recs = []
    if total > CLASS_COUNT_LIMIT:
        recs.append("Consider extracting common class patterns into reusable components.")
    if duplicates:
        recs.append("Remove repeated utilities inside the same class attribute.")
    return AnalysisSection(title="Performance Analysis", checks=checks, recommendations=recs)


def heuristic_score(sections: list[AnalysisSection]) -> int:
    weights = {CheckStatus.GOOD: 1.0, CheckStatus.NEEDS_IMPROVEMENT: 0.5, CheckStatus.MISSING: 0.0}
    checks = [c for s in sections for c in s.checks]
    if not checks:
        return 0
    return round(100 * sum(weights[c.status] for c in checks) / len(checks))


def analyze_markup(
    html: str,
    css: str = "",
    check_accessibility: bool = True,
    check_responsive: bool = True,
    check_performance: bool = True,
) -> AnalysisReport:
    sections = [_structure(html)]
    if check_accessibility:
        sections.append(_accessibility(html))
    if check_responsive:
        sections.append(_responsive(html, css))
    if check_performance:
        sections.append(_performance(html))
    return AnalysisReport(
        overall_score=heuristic_score(sections),
        score_is_heuristic=True,
        sections=sections,
        general_recommendations=list(GENERAL_RECOMMENDATIONS),
    )
