"""Tests for tailwind_mcp/fallback/analysis.py and fallback/suggestions.py."""

from tailwind_mcp.fallback.analysis import GENERAL_RECOMMENDATIONS, analyze_markup, heuristic_score
from tailwind_mcp.fallback.suggestions import FOCUS_AREAS, suggest_for_markup
from tailwind_mcp.types import CheckStatus

GOOD_HTML = (
    '<main class="flex md:p-4"><h1>Title</h1><img src="a.png" alt="A">'
    '<button aria-label="Go" role="button">Go</button></main>'
)
POOR_HTML = '<div><img src="a.png"></div>'


def _checks(report) -> dict:
    return {c.label: c.status for s in report.sections for c in s.checks}


# ── analyze_markup ────────────────────────────────────────────────────────────

class TestAnalyzeMarkup:

    def test_section_titles(self):
        report = analyze_markup(GOOD_HTML)
        assert [s.title for s in report.sections] == [
            "Structure Analysis",
            "Accessibility Analysis",
            "Responsive Design Analysis",
            "Performance Analysis",
        ]

    def test_good_markup_scores_full(self):
        report = analyze_markup(GOOD_HTML)
        assert set(_checks(report).values()) == {CheckStatus.GOOD}
        assert report.overall_score == 100
        assert report.score_is_heuristic is True

    def test_poor_markup(self):
        report = analyze_markup(POOR_HTML)
        checks = _checks(report)
        assert checks["Semantic HTML"] == CheckStatus.MISSING
        assert checks["Image Alt Text"] == CheckStatus.MISSING
        assert checks["ARIA Labels"] == CheckStatus.NEEDS_IMPROVEMENT
        assert checks["Responsive Classes"] == CheckStatus.MISSING
        assert checks["Class Count"] == CheckStatus.GOOD
        # 4 points out of 11 checks
        assert report.overall_score == 36
        assert any("alt text" in r for s in report.sections for r in s.recommendations)

    def test_media_query_counts_as_responsive(self):
        report = analyze_markup("<div></div>", css="@media (min-width: 640px) { div { display: flex; } }")
        checks = _checks(report)
        assert checks["Responsive Classes"] == CheckStatus.GOOD
        assert checks["Flexible Layouts"] == CheckStatus.GOOD

    def test_duplicate_classes_detected(self):
        report = analyze_markup('<div class="p-4 p-4"></div>')
        performance = report.sections[-1]
        duplicate = next(c for c in performance.checks if c.label == "Duplicate Classes")
        assert duplicate.status == CheckStatus.NEEDS_IMPROVEMENT
        assert duplicate.detail == "Found duplicates: p-4"

    def test_disabled_checks_leave_only_structure(self):
        report = analyze_markup(
            GOOD_HTML, check_accessibility=False, check_responsive=False, check_performance=False
        )
        assert [s.title for s in report.sections] == ["Structure Analysis"]

    def test_general_recommendations(self):
        assert analyze_markup(POOR_HTML).general_recommendations == list(GENERAL_RECOMMENDATIONS)

    def test_empty_sections_score_zero(self):
        assert heuristic_score([]) == 0


# ── suggest_for_markup ────────────────────────────────────────────────────────

class TestSuggestForMarkup:

    def test_bare_markup_triggers_rules(self):
        report = suggest_for_markup("<div>x</div>")
        titles = {g.area: [s.title for s in g.suggestions] for g in report.groups}
        assert [g.area for g in report.groups] == list(FOCUS_AREAS)
        assert titles["accessibility"] == ["Add Main Landmark", "Enhance ARIA Support"]
        assert titles["responsiveness"] == ["Add Responsive Breakpoints", "Implement Flexible Layouts"]
        assert titles["performance"] == []
        assert titles["aesthetics"] == ["Add Visual Depth", "Add Smooth Interactions"]
        assert titles["ux"] == ["Improve Keyboard Navigation"]

    def test_areas_follow_canonical_order(self):
        report = suggest_for_markup("<div></div>", ["ux", "accessibility"])
        assert [g.area for g in report.groups] == ["accessibility", "ux"]

    def test_empty_focus_list_yields_no_groups(self):
        assert suggest_for_markup("<div>x</div>", []).groups == []

    def test_no_focus_list_covers_every_area(self):
        report = suggest_for_markup("<div>x</div>")
        assert [g.area for g in report.groups] == list(FOCUS_AREAS)

    def test_missing_alt_text(self):
        report = suggest_for_markup('<main><img src="x.png"></main>', ["accessibility"])
        assert "Add Image Alt Text" in [s.title for s in report.groups[0].suggestions]

    def test_high_class_count(self):
        html = '<div class="' + " ".join(f"c{n}" for n in range(31)) + '"></div>'
        group = suggest_for_markup(html, ["performance"]).groups[0]
        assert group.suggestions[0].title == "Optimize Class Usage"
        assert group.suggestions[0].example_language == "javascript"
        assert "31 classes" in group.suggestions[0].issue
