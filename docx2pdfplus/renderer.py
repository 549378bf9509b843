"""HTML to PDF rendering through a headless Chromium driven by Playwright."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from playwright.sync_api import sync_playwright

from .exceptions import RenderError
from .types import PageConfig
from .utils import PathLike, ensure_output_directory, time_block, to_path

LOGGER = logging.getLogger(__name__)

BROWSER_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")

# Extra room added below the measured header and above the footer, in CSS px.
HEADER_FOOTER_PADDING_PX = 36

HEADER_TEMPLATE = '<div style="width: 100%; padding: 0 1cm; font-size: 10px;"></div>'
FOOTER_TEMPLATE = (
    '<div style="width: 100%; padding: 0 1cm; font-size: 10px; text-align: center;"></div>'
)

_ELEMENT_HEIGHT_JS = """(selector) => {
    const element = document.querySelector(selector);
    return element ? element.offsetHeight : 0;
}"""


def _element_height(page: Any, selector: str) -> int:
    height = page.evaluate(_ELEMENT_HEIGHT_JS, selector)
    return int(height or 0)


def pdf_options(
    output_path: Path,
    page_config: PageConfig,
    preserve_headers: bool,
    header_height: int = 0,
    footer_height: int = 0,
) -> Dict[str, Any]:
    """Build the keyword arguments passed to ``Page.pdf``."""
    config = page_config.resolved()
    margin = config.margin.as_dict()
    options: Dict[str, Any] = {
        "path": str(output_path),
        "format": config.format,
        "print_background": True,
        "display_header_footer": preserve_headers,
    }
    if preserve_headers:
        margin["top"] = f"{header_height + HEADER_FOOTER_PADDING_PX}px"
        margin["bottom"] = f"{footer_height + HEADER_FOOTER_PADDING_PX}px"
        options["header_template"] = HEADER_TEMPLATE
        options["footer_template"] = FOOTER_TEMPLATE
    options["margin"] = margin
    return options


def render_pdf(
    html_path: PathLike,
    output_path: PathLike,
    page_config: PageConfig,
    preserve_headers: bool = True,
) -> Path:
    """Print the HTML document at ``html_path`` to a PDF at ``output_path``.

    A fresh browser is launched for every call and closed before returning.
    """
    source = to_path(html_path)
    destination = to_path(output_path)
    ensure_output_directory(destination)

    LOGGER.info("Rendering %s -> %s", source, destination)
    try:
        with time_block(LOGGER, "HTML to PDF rendering"):
            with sync_playwright() as playwright:
                browser = playwright.chromium.launch(headless=True, args=list(BROWSER_ARGS))
                try:
                    page = browser.new_page()
                    page.goto(source.as_uri(), wait_until="networkidle")

                    header_height = footer_height = 0
                    if preserve_headers:
                        header_height = _element_height(page, ".header")
                        footer_height = _element_height(page, ".footer")
                        LOGGER.debug(
                            "Measured header %dpx, footer %dpx", header_height, footer_height
                        )

                    page.pdf(
                        **pdf_options(
                            destination,
                            page_config,
                            preserve_headers,
                            header_height=header_height,
                            footer_height=footer_height,
                        )
                    )
                finally:
                    browser.close()
    except Exception as exc:
        raise RenderError(f"Failed to render PDF from {source}: {exc}") from exc

    LOGGER.info("Rendered PDF written to %s", destination)
    return destination
