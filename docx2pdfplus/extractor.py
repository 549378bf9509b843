"""DOCX to HTML extraction backed by mammoth."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

import mammoth

from .exceptions import ExtractionError
from .types import Diagnostic, ExtractionResult
from .utils import PathLike, time_block, to_path

LOGGER = logging.getLogger(__name__)

DEFAULT_STYLE_MAP: Tuple[str, ...] = (
    "p[style-name='Heading 1'] => h1:fresh",
    "p[style-name='Heading 2'] => h2:fresh",
    "p[style-name='Heading 3'] => h3:fresh",
    "p[style-name='Title'] => h1.title:fresh",
    "r[style-name='Strong'] => strong",
    "p[style-name='Text Body'] => p:fresh",
    "p[style-name='List Paragraph'] => p.list-paragraph:fresh",
    "p[style-name='Header'] => div.header > p:fresh",
    "p[style-name='Footer'] => div.footer > p:fresh",
    "p[style-name='TOC Heading'] => h1.toc-heading:fresh",
    "p[style-name='TOC 1'] => p.toc-1:fresh",
    "p[style-name='TOC 2'] => p.toc-2:fresh",
    "r[style-name='Hyperlink'] => a",
)


def _diagnostics(messages: Iterable[object]) -> Tuple[Diagnostic, ...]:
    return tuple(
        Diagnostic(
            level=getattr(message, "type", "warning"),
            message=getattr(message, "message", str(message)),
        )
        for message in messages
    )


def extract_html(input_path: PathLike, style_map: Optional[Sequence[str]] = None) -> ExtractionResult:
    """Convert the DOCX at ``input_path`` to an HTML fragment."""
    path = to_path(input_path)
    rules = DEFAULT_STYLE_MAP if style_map is None else tuple(style_map)
    LOGGER.info("Extracting HTML from %s with %d style rules", path, len(rules))
    try:
        with time_block(LOGGER, "DOCX to HTML extraction"):
            with path.open("rb") as docx_file:
                result = mammoth.convert_to_html(docx_file, style_map="\n".join(rules))
    except Exception as exc:
        raise ExtractionError(f"Unable to extract HTML from {path}: {exc}") from exc

    messages = _diagnostics(result.messages)
    if messages:
        LOGGER.info("Mammoth conversion messages: %s", [m.message for m in messages])
    return ExtractionResult(html=result.value, messages=messages)


def extract_raw_text(input_path: PathLike) -> Tuple[str, Tuple[Diagnostic, ...]]:
    """Return the plain text of the DOCX at ``input_path`` and its diagnostics."""
    path: Path = to_path(input_path)
    LOGGER.debug("Extracting raw text from %s", path)
    try:
        with path.open("rb") as docx_file:
            result = mammoth.extract_raw_text(docx_file)
    except Exception as exc:
        raise ExtractionError(f"Unable to extract text from {path}: {exc}") from exc
    return result.value, _diagnostics(result.messages)
