"""generate_preview: full HTML document plus an optional headless-browser screenshot.

No completion provider involved. The screenshot is best effort: when capture
is disabled or fails, the response carries a note and the markup instead.
"""

import asyncio
import base64
import logging
from typing import Optional, Protocol

from pydantic import Field

from tailwind_mcp.tools.base import Tool, ToolArgs
from tailwind_mcp.types import PreviewResult

logger = logging.getLogger(__name__)

TAILWIND_CDN = "https://cdn.tailwindcss.com"

RESPONSIVE_NOTES = """## Responsive Breakpoints

- **Mobile**: 375px width
- **Tablet**: 768px width
- **Desktop**: 1024px width
- **Large**: 1280px width

*Note: Test your component at different screen sizes to ensure responsive behavior.*"""


class ScreenshotCapture(Protocol):
    async def capture(self, document: str, width: int, height: int) -> str:
        """Render ``document`` at width x height and return a base64 PNG."""
        ...


class PlaywrightCapture:
    """Headless Chromium via Playwright's async API."""

    def __init__(self, timeout_seconds: float = 15.0):
        self.timeout_seconds = timeout_seconds

    async def capture(self, document: str, width: int, height: int) -> str:
        from playwright.async_api import async_playwright

        async with async_playwright() as pw:
            browser = await pw.chromium.launch(headless=True)
            try:
                page = await browser.new_page(viewport={"width": width, "height": height})
                await page.set_content(document, wait_until="load", timeout=self.timeout_seconds * 1000)
                png = await page.screenshot(full_page=False, type="png")
            finally:
                await browser.close()
        return base64.b64encode(png).decode("ascii")


class PreviewArgs(ToolArgs):
    html: str = Field(description="HTML code to preview")
    width: int = Field(default=800, ge=1, le=4096, description="Preview width in pixels")
    height: int = Field(default=600, ge=1, le=4096, description="Preview height in pixels")
    dark_mode: bool = Field(default=False, description="Generate dark mode preview")
    responsive: bool = Field(default=False, description="Include responsive breakpoint guidance")


def build_document(html: str, dark_mode: bool = False) -> str:
    html_class = ' class="dark"' if dark_mode else ""
    dark_config = '\n  <script>tailwind.config = { darkMode: "class" }</script>' if dark_mode else ""
    body_class = "dark:bg-gray-900 dark:text-white" if dark_mode else "bg-white"
    return f"""<!DOCTYPE html>
<html lang="en"{html_class}>
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Tailwind Preview</title>
  <script src="{TAILWIND_CDN}"></script>{dark_config}
</head>
<body class="{body_class}">
  {html}
</body>
</html>"""


class PreviewGenerator(Tool):
    name = "generate_preview"
    description = "Generate a visual preview of Tailwind components"
    args_model = PreviewArgs
    failure_message = "Failed to generate preview"

    def __init__(self, capture: Optional[ScreenshotCapture] = None, timeout_seconds: float = 15.0):
        self.capture = capture
        self.timeout_seconds = timeout_seconds

    async def render(self, args: PreviewArgs) -> PreviewResult:
        document = build_document(args.html, args.dark_mode)
        screenshot = None
        if self.capture is not None:
            try:
                screenshot = await asyncio.wait_for(
                    self.capture.capture(document, args.width, args.height),
                    timeout=self.timeout_seconds,
                )
            except Exception as e:
                logger.warning("[%s] screenshot failed: %s", self.name, str(e) or type(e).__name__)
        return PreviewResult(
            document=document,
            screenshot=screenshot,
            width=args.width,
            height=args.height,
            dark_mode=args.dark_mode,
            responsive=args.responsive,
        )

    def format(self, args: PreviewArgs, result: PreviewResult) -> str:
        out = ["# Component Preview", ""]
        if result.screenshot:
            mode = "(Dark Mode)" if result.dark_mode else "(Light Mode)"
            out += [
                f"**Preview Generated**: {result.width}x{result.height}px {mode}",
                "",
                f"![Component Preview](data:image/png;base64,{result.screenshot})",
                "",
            ]
        else:
            out += ["**Note**: Preview screenshot could not be generated. Here's the rendered HTML:", ""]
        out += ["## HTML Code", "```html", args.html, "```"]
        if result.responsive:
            out += ["", RESPONSIVE_NOTES]
        return "\n".join(out)

    async def run(self, args: PreviewArgs) -> str:
        return self.format(args, await self.render(args))
