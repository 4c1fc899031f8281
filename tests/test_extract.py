"""Tests for tailwind_mcp/llm/extract.py: brace-span extraction and fence stripping."""

from tailwind_mcp.llm.extract import extract_json, strip_code_fences
from tailwind_mcp.types import ExtractionStatus


# ── extract_json ──────────────────────────────────────────────────────────────

class TestExtractJson:

    def test_plain_object(self):
        result = extract_json('{"code": "<div></div>"}')
        assert result.parsed
        assert result.value == {"code": "<div></div>"}

    def test_object_wrapped_in_prose_and_fences(self):
        text = 'Here you go:\n```json\n{"optimizedHtml": "<p></p>", "removedClasses": []}\n```\nEnjoy!'
        result = extract_json(text)
        assert result.status == ExtractionStatus.PARSED
        assert result.value["optimizedHtml"] == "<p></p>"

    def test_nested_braces_inside_span(self):
        result = extract_json('x {"a": {"b": {"c": 1}}} y')
        assert result.value == {"a": {"b": {"c": 1}}}

    def test_no_braces_is_not_found(self):
        result = extract_json("I could not produce JSON today.")
        assert result.status == ExtractionStatus.NOT_FOUND
        assert result.value is None

    def test_closing_before_opening_is_not_found(self):
        assert extract_json("} nothing {").status == ExtractionStatus.NOT_FOUND

    def test_only_opening_brace_is_not_found(self):
        assert extract_json('{"truncated": ').status == ExtractionStatus.NOT_FOUND

    def test_two_objects_span_fails_to_parse(self):
        """Leftmost { to rightmost } covers both objects and the text between."""
        result = extract_json('{"a": 1} and also {"b": 2}')
        assert result.status == ExtractionStatus.PARSE_ERROR
        assert result.error

    def test_trailing_stray_brace_fails_to_parse(self):
        assert extract_json('{"a": 1} }').status == ExtractionStatus.PARSE_ERROR

    def test_invalid_json_inside_braces(self):
        assert extract_json("{not: json}").status == ExtractionStatus.PARSE_ERROR

    def test_empty_text(self):
        assert extract_json("").status == ExtractionStatus.NOT_FOUND


# ── strip_code_fences ─────────────────────────────────────────────────────────

class TestStripCodeFences:

    def test_removes_language_fence(self):
        assert strip_code_fences("```jsx\n<Button />\n```") == "<Button />"

    def test_removes_hyphenated_language_fence(self):
        assert strip_code_fences("```vue-html\n<template></template>\n```") == "<template></template>"

    def test_removes_bare_fence(self):
        assert strip_code_fences("```\n<div></div>\n```\n") == "<div></div>"

    def test_leaves_unfenced_text(self):
        assert strip_code_fences("  <span>hi</span>  ") == "<span>hi</span>"

    def test_fence_only_is_empty(self):
        assert strip_code_fences("```html\n```") == ""
