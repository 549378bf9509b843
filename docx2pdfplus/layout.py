"""HTML document shell wrapped around the extracted DOCX content."""
from __future__ import annotations

import html
from string import Template

from .types import PageConfig

_CSS = Template(
    """
      body {
        font-family: 'Arial', 'Helvetica', sans-serif;
        line-height: 1.5;
        margin: 0;
        padding: 0;
        counter-reset: page;
      }
      @page {
        size: $page_size;
        margin: $page_margin;
      }
      .header, .footer {
        position: fixed;
        width: 100%;
        left: 0;
      }
      .header {
        top: 0;
      }
      .footer {
        bottom: 0;
      }
      table {
        width: 100%;
        border-collapse: collapse;
      }
      td, th {
        padding: 8px;
        border: 1px solid #ddd;
      }
      .pagebreak {
        page-break-before: always;
      }
      .text-center {
        text-align: center;
      }
      .text-right {
        text-align: right;
      }
      .text-left {
        text-align: left;
      }
      .text-justify {
        text-align: justify;
      }
      /* page numbers */
      .footer:after {
        content: counter(page);
        counter-increment: page;
      }
"""
)

_DOCUMENT = Template(
    """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <title>$title</title>
  <style>$css</style>
</head>
<body>
$body
</body>
</html>
"""
)

_HEADER_FOOTER_BODY = Template(
    """<div class="header"></div>
<div class="content">$content</div>
<div class="footer"></div>"""
)


def build_css(page_config: PageConfig) -> str:
    """Return the stylesheet for ``page_config``."""
    config = page_config.resolved()
    return _CSS.substitute(page_size=config.format, page_margin=config.margin.as_css())


def build_html_document(
    fragment: str,
    title: str,
    page_config: PageConfig,
    preserve_headers: bool = True,
) -> str:
    """Wrap an HTML fragment in a complete, printable HTML document.

    With ``preserve_headers`` the content is placed between empty fixed-position
    header and footer placeholders; the renderer measures them to size the
    printed margins.
    """
    if preserve_headers:
        body = _HEADER_FOOTER_BODY.substitute(content=fragment)
    else:
        body = fragment
    return _DOCUMENT.substitute(
        title=html.escape(title),
        css=build_css(page_config),
        body=body,
    )
