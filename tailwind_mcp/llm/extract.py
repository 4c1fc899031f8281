"""Locate and parse the JSON object embedded in free-form completion text.

The span runs from the leftmost ``{`` to the rightmost ``}``. This is not a
balanced-brace scan: two separate objects, or a stray ``}`` after the object,
yield a span that fails to parse and the caller falls back. Callers must treat
NOT_FOUND and PARSE_ERROR identically; the distinction is for logs only.
"""

import json
import re

from tailwind_mcp.types import ExtractedStructure, ExtractionStatus

_FENCE_RE = re.compile(r"```[\w+-]*\n?")


def extract_json(text: str) -> ExtractedStructure:
    """Extract the first-to-last brace span of ``text`` as a JSON object."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return ExtractedStructure(status=ExtractionStatus.NOT_FOUND, error="No JSON object in response")

    try:
        value = json.loads(text[start:end + 1])
    except json.JSONDecodeError as e:
        return ExtractedStructure(status=ExtractionStatus.PARSE_ERROR, error=str(e))

    if not isinstance(value, dict):
        return ExtractedStructure(
            status=ExtractionStatus.PARSE_ERROR,
            error=f"Expected a JSON object, got {type(value).__name__}",
        )
    return ExtractedStructure(status=ExtractionStatus.PARSED, value=value)


def strip_code_fences(text: str) -> str:
    """Drop ```lang / ``` markers, keeping the code between them."""
    return _FENCE_RE.sub("", text).strip()
