"""Data structures shared by the docx2pdfplus pipeline."""
from __future__ import annotations

import re
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional, Sequence, Tuple

ReturnType = Literal["buffer", "file", "base64"]

RETURN_TYPES: frozenset[str] = frozenset({"buffer", "file", "base64"})

DEFAULT_PAGE_FORMAT = "A4"
DEFAULT_MARGIN = "1in"

_DOCX_SUFFIX = re.compile(r"\.docx$", re.IGNORECASE)


@dataclass(frozen=True)
class Margins:
    """Page margins as CSS lengths. Missing sides fall back to ``1in``."""

    top: Optional[str] = DEFAULT_MARGIN
    right: Optional[str] = DEFAULT_MARGIN
    bottom: Optional[str] = DEFAULT_MARGIN
    left: Optional[str] = DEFAULT_MARGIN

    def resolved(self) -> "Margins":
        return Margins(
            top=self.top or DEFAULT_MARGIN,
            right=self.right or DEFAULT_MARGIN,
            bottom=self.bottom or DEFAULT_MARGIN,
            left=self.left or DEFAULT_MARGIN,
        )

    def as_css(self) -> str:
        """Return the ``margin`` shorthand in top/right/bottom/left order."""
        margins = self.resolved()
        return f"{margins.top} {margins.right} {margins.bottom} {margins.left}"

    def as_dict(self) -> dict[str, str]:
        margins = self.resolved()
        return {
            "top": margins.top,
            "right": margins.right,
            "bottom": margins.bottom,
            "left": margins.left,
        }


@dataclass(frozen=True)
class PageConfig:
    """Paper format and margins forwarded to the layout and the renderer."""

    format: Optional[str] = DEFAULT_PAGE_FORMAT
    margin: Optional[Margins] = field(default_factory=Margins)

    def resolved(self) -> "PageConfig":
        margin = self.margin if self.margin is not None else Margins()
        return PageConfig(format=self.format or DEFAULT_PAGE_FORMAT, margin=margin.resolved())


@dataclass(frozen=True)
class FormatOptions:
    """Options controlling how the extracted HTML is laid out on the page.

    ``style_map`` replaces the built-in mammoth style rules when given.
    """

    page_config: PageConfig = field(default_factory=PageConfig)
    preserve_headers: bool = True
    style_map: Optional[Sequence[str]] = None


@dataclass(frozen=True)
class ConversionOptions:
    """Options selecting the output representation and location."""

    return_type: str = "buffer"
    output_dir: Optional[str | Path] = None


def pdf_filename(filename: str) -> str:
    """Map a DOCX file name to the name of the PDF it is rendered into."""
    name = Path(filename).name or "document"
    if _DOCX_SUFFIX.search(name):
        return _DOCX_SUFFIX.sub(".pdf", name)
    return f"{name}.pdf"


@dataclass(frozen=True)
class ConversionRequest:
    """A single conversion call. Created per call and never persisted."""

    buffer: bytes
    filename: str
    options: ConversionOptions = field(default_factory=ConversionOptions)
    format_options: FormatOptions = field(default_factory=FormatOptions)

    @property
    def return_type(self) -> str:
        return self.options.return_type

    @property
    def page_config(self) -> PageConfig:
        return self.format_options.page_config.resolved()

    @property
    def output_filename(self) -> str:
        return pdf_filename(self.filename)

    @property
    def output_dir(self) -> Path:
        if self.options.output_dir is None:
            return Path(tempfile.gettempdir())
        return Path(self.options.output_dir).expanduser().resolve()

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_filename


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal message reported by the DOCX to HTML conversion."""

    level: str
    message: str


@dataclass(frozen=True)
class ExtractionResult:
    """HTML produced from a DOCX document plus its diagnostics."""

    html: str
    messages: Tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class DocumentMetadataGuess:
    """Heuristic guess at how a document should be printed.

    The defaults double as the fallback returned when analysis fails.
    """

    suggested_format: str = DEFAULT_PAGE_FORMAT
    content_length: int = 0
    has_headers: bool = False
    has_footers: bool = False
    messages: Tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a conversion. Exactly one representation is populated."""

    filename: str
    buffer: Optional[bytes] = None
    base64: Optional[str] = None
